"""Game of the Amazons rules engine and alpha-beta player."""

from . import core, env, evaluation, features, search
from .core import Board, Move, Piece, Square, format_move, parse_move, parse_square
from .env import AmazonsEnv
from .evaluation import (
    AlphaBetaPolicy,
    EvaluationResult,
    GameRecord,
    Policy,
    RandomPolicy,
    evaluate_policies,
    play_game,
)
from .search import AlphaBetaSearch, SearchConfig, SearchResult

__all__ = [
    "core",
    "env",
    "evaluation",
    "features",
    "search",
    "Board",
    "Move",
    "Piece",
    "Square",
    "format_move",
    "parse_move",
    "parse_square",
    "AmazonsEnv",
    "AlphaBetaSearch",
    "SearchConfig",
    "SearchResult",
    "AlphaBetaPolicy",
    "EvaluationResult",
    "GameRecord",
    "Policy",
    "RandomPolicy",
    "evaluate_policies",
    "play_game",
]
