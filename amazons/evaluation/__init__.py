"""Policies and match evaluation for Amazons engines."""

from .match import (
    AlphaBetaPolicy,
    EvaluationResult,
    GameRecord,
    Policy,
    RandomPolicy,
    evaluate_policies,
    play_game,
)

__all__ = [
    "AlphaBetaPolicy",
    "EvaluationResult",
    "GameRecord",
    "Policy",
    "RandomPolicy",
    "evaluate_policies",
    "play_game",
]
