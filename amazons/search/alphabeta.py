from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from amazons.core import Board, Move, Piece

logger = logging.getLogger(__name__)

# A position magnitude indicating a win (for WHITE if positive, BLACK if negative).
WINNING_VALUE = 2**31 - 2
# A magnitude greater than any score.
INFTY = 2**31 - 1


@dataclass
class SearchConfig:
    depth: int = 2
    # False reproduces the legacy bound folding, where every child tightens both alpha and
    # beta regardless of which side is searching.
    canonical_bounds: bool = True

    def max_depth(self, board: Board) -> int:
        return self.depth


@dataclass
class SearchResult:
    value: int
    move: Optional[Move] = None


def side_for_sense(sense: int) -> Piece:
    return Piece.WHITE if sense == 1 else Piece.BLACK


def mobility(board: Board, side: Piece) -> int:
    return board.count_legal_moves(side)


def static_score(board: Board) -> int:
    winner = board.winner
    if winner == Piece.WHITE:
        return WINNING_VALUE
    if winner == Piece.BLACK:
        return -WINNING_VALUE
    return mobility(board, Piece.WHITE) - mobility(board, Piece.BLACK)


class AlphaBetaSearch:
    """Fixed-depth minimax with alpha-beta pruning over mobility scores."""

    def __init__(self, config: Optional[SearchConfig] = None) -> None:
        self.config = config or SearchConfig()

    def choose_move(self, board: Board) -> Move:
        if board.winner is not None:
            raise RuntimeError("No legal move available: the game is over.")
        root = board.copy()
        sense = 1 if root.turn == Piece.WHITE else -1
        depth = max(1, self.config.max_depth(root))
        result = self.search(root, depth, sense, -INFTY, INFTY, save_move=True)
        if result.move is None:
            raise RuntimeError("No legal move available.")
        logger.debug(
            "%s chose %s (value=%d, depth=%d, ply=%d)",
            root.turn.name,
            result.move,
            result.value,
            depth,
            root.num_moves,
        )
        return result.move

    def search(
        self,
        board: Board,
        depth: int,
        sense: int,
        alpha: int,
        beta: int,
        *,
        save_move: bool = False,
    ) -> SearchResult:
        """Search ``board`` to ``depth`` plies for the side given by ``sense``.

        ``board`` itself is never mutated; moves are applied to a working copy and taken
        back with ``undo``. The returned move is only filled in when ``save_move`` is set.
        """
        if depth == 0 or board.winner is not None:
            return SearchResult(static_score(board))
        if self.config.canonical_bounds:
            return self._search_canonical(board, depth, sense, alpha, beta, save_move)
        return self._search_legacy(board, depth, sense, alpha, beta, save_move)

    def _search_canonical(
        self, board: Board, depth: int, sense: int, alpha: int, beta: int, save_move: bool
    ) -> SearchResult:
        best_value = -INFTY if sense == 1 else INFTY
        best_move: Optional[Move] = None
        work = board.copy()

        for move in board.legal_moves(side_for_sense(sense)):
            work.make_move(move)
            value = self.search(work, depth - 1, -sense, alpha, beta).value
            work = self._take_back(board, work)

            if sense == 1:
                if best_move is None or value > best_value:
                    best_value, best_move = value, move
                alpha = max(alpha, best_value)
            else:
                if best_move is None or value < best_value:
                    best_value, best_move = value, move
                beta = min(beta, best_value)
            if beta <= alpha:
                break

        if best_move is None:
            return SearchResult(static_score(board))
        return SearchResult(best_value, best_move if save_move else None)

    def _search_legacy(
        self, board: Board, depth: int, sense: int, alpha: int, beta: int, save_move: bool
    ) -> SearchResult:
        current: Optional[Move] = None
        work = board.copy()

        for move in board.legal_moves(side_for_sense(sense)):
            current = move
            work.make_move(move)
            value = self.search(work, depth - 1, -sense, alpha, beta).value
            work = self._take_back(board, work)

            beta = min(beta, value)
            alpha = max(alpha, value)
            if beta <= alpha:
                break

        if current is None:
            return SearchResult(static_score(board))
        value = alpha if sense == 1 else beta
        return SearchResult(value, current if save_move else None)

    @staticmethod
    def _take_back(origin: Board, work: Board) -> Board:
        # undo() is frozen on a finished game, so start again from the frame's position.
        if work.winner is not None:
            return origin.copy()
        work.undo()
        return work
