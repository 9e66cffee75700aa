from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import numpy as np

from amazons.core import Board, Move, Piece
from amazons.env import AmazonsEnv
from amazons.search import AlphaBetaSearch, SearchConfig

logger = logging.getLogger(__name__)


class Policy:
    """Policy interface choosing a move for the side to move."""

    def act(self, board: Board) -> Move:
        raise NotImplementedError


class RandomPolicy(Policy):
    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def act(self, board: Board) -> Move:
        moves = list(board.legal_moves())
        if not moves:
            raise RuntimeError("No legal move available.")
        return moves[int(self.rng.integers(len(moves)))]


class AlphaBetaPolicy(Policy):
    def __init__(self, config: Optional[SearchConfig] = None) -> None:
        self.search = AlphaBetaSearch(config)

    def act(self, board: Board) -> Move:
        return self.search.choose_move(board)


@dataclass
class GameRecord:
    moves: List[Move] = field(default_factory=list)
    winner: Optional[Piece] = None
    truncated: bool = False

    @property
    def length(self) -> int:
        return len(self.moves)


@dataclass
class EvaluationResult:
    games_played: int
    white_wins: int
    black_wins: int
    unfinished: int
    average_length: float

    def winrate_white(self) -> float:
        return self.white_wins / max(1, self.games_played)

    def winrate_black(self) -> float:
        return self.black_wins / max(1, self.games_played)


def play_game(
    policy_white: Policy,
    policy_black: Policy,
    *,
    max_ply: int = 200,
    env_factory: Optional[Callable[..., AmazonsEnv]] = None,
) -> GameRecord:
    env_factory = env_factory or AmazonsEnv
    env = env_factory(max_ply=max_ply)
    env.reset()
    record = GameRecord()

    terminated = truncated = False
    while not (terminated or truncated):
        board = env.board
        policy = policy_white if board.turn == Piece.WHITE else policy_black
        move = policy.act(board.copy())
        _, _, terminated, truncated, _ = env.step_move(move)
        record.moves.append(move)

    record.winner = env.board.winner
    record.truncated = truncated
    return record


def evaluate_policies(
    policy_white: Policy,
    policy_black: Policy,
    *,
    episodes: int,
    max_ply: int = 200,
    env_factory: Optional[Callable[..., AmazonsEnv]] = None,
) -> EvaluationResult:
    white_wins = 0
    black_wins = 0
    unfinished = 0
    total_ply = 0

    for episode in range(episodes):
        record = play_game(policy_white, policy_black, max_ply=max_ply, env_factory=env_factory)
        total_ply += record.length
        if record.winner == Piece.WHITE:
            white_wins += 1
        elif record.winner == Piece.BLACK:
            black_wins += 1
        else:
            unfinished += 1
        logger.info(
            "episode %d finished after %d moves, winner=%s",
            episode,
            record.length,
            record.winner.name if record.winner is not None else "none",
        )

    average_length = total_ply / max(1, episodes)
    return EvaluationResult(
        games_played=episodes,
        white_wins=white_wins,
        black_wins=black_wins,
        unfinished=unfinished,
        average_length=average_length,
    )
