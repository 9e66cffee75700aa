from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .state import SIZE, Move, Piece, Square

BoardArray = NDArray[np.int8]

WHITE_START: Tuple[Tuple[int, int], ...] = ((0, 3), (3, 0), (6, 0), (9, 3))
BLACK_START: Tuple[Tuple[int, int], ...] = ((9, 6), (0, 6), (6, 9), (3, 9))

_EMPTY = int(Piece.EMPTY)


def _scan(cells: List[int], origin: Square, as_empty: Optional[Square]) -> Iterator[Square]:
    # Directions in fixed order, nearest square first, each ray stopping at the first obstruction.
    for ray in origin.rays:
        for target in ray:
            if cells[target.index] != _EMPTY and target is not as_empty:
                break
            yield target


def _generate_moves(cells: List[int], side: int) -> Iterator[Move]:
    for start in Square.all():
        if cells[start.index] != side:
            continue
        for destination in _scan(cells, start, None):
            for spear in _scan(cells, destination, start):
                yield Move(start, destination, spear)


class Board:
    """The state of an Amazons game.

    Cells live in a flat ``int8`` array indexed by ``Square.index`` (``col * SIZE + row``).
    The board is only mutated through :meth:`make_move` and :meth:`undo`; once a winner
    has been recorded both become no-ops.
    """

    def __init__(self, model: Optional["Board"] = None) -> None:
        if model is None:
            self.init()
        else:
            self._copy_from(model)

    def init(self) -> None:
        """Reset to the initial position."""
        self._cells: BoardArray = np.zeros(SIZE * SIZE, dtype=np.int8)
        for col, row in WHITE_START:
            self.put(Piece.WHITE, Square.sq(col, row))
        for col, row in BLACK_START:
            self.put(Piece.BLACK, Square.sq(col, row))
        self._turn = Piece.WHITE
        self._winner: Optional[Piece] = None
        self._move_count = 0
        self._history: List[Move] = []

    def copy(self) -> "Board":
        return Board(self)

    def _copy_from(self, model: "Board") -> None:
        self._cells = model._cells.copy()
        self._turn = model._turn
        self._winner = model._winner
        self._move_count = model._move_count
        self._history = list(model._history)

    @classmethod
    def empty(cls, turn: Piece = Piece.WHITE) -> "Board":
        """A board with no pieces, for building positions by hand."""
        board = cls()
        board._cells[:] = Piece.EMPTY
        board._turn = turn
        return board

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def turn(self) -> Piece:
        return self._turn

    @property
    def winner(self) -> Optional[Piece]:
        """The winning side, or None while the game is undecided."""
        return self._winner

    @property
    def is_terminal(self) -> bool:
        return self._winner is not None

    @property
    def num_moves(self) -> int:
        return self._move_count

    @property
    def history(self) -> Tuple[Move, ...]:
        return tuple(self._history)

    @property
    def grid(self) -> BoardArray:
        """Copy of the cells as a ``(SIZE, SIZE)`` array indexed ``[col, row]``."""
        return self._cells.reshape(SIZE, SIZE).copy()

    def get(self, square: Square) -> Piece:
        return Piece(int(self._cells[square.index]))

    def __getitem__(self, square: Square) -> Piece:
        return self.get(square)

    def put(self, piece: Piece, square: Square) -> None:
        self._cells[square.index] = piece

    def pieces(self, side: Piece) -> Iterator[Square]:
        for index in np.flatnonzero(self._cells == side):
            yield Square.from_index(int(index))

    def count(self, piece: Piece) -> int:
        return int(np.count_nonzero(self._cells == piece))

    # ------------------------------------------------------------------
    # Legality
    # ------------------------------------------------------------------
    def is_unblocked_move(
        self, from_square: Square, to_square: Optional[Square], as_empty: Optional[Square]
    ) -> bool:
        """True iff ``from_square``-``to_square`` is a queen move whose path is clear.

        Every square after ``from_square`` up to and including ``to_square`` must be empty,
        except ``as_empty`` (which may be None) is treated as empty whatever it holds.
        """
        if not from_square.is_queen_move(to_square):
            return False
        cells = self._cells
        for current in from_square.rays[from_square.direction(to_square)]:
            if cells[current.index] != _EMPTY and current is not as_empty:
                return False
            if current is to_square:
                return True
        return False

    def is_legal_start(self, from_square: Optional[Square]) -> bool:
        if from_square is None:
            return False
        return self.get(from_square) == self._turn

    def is_legal_piece_move(self, from_square: Optional[Square], to_square: Optional[Square]) -> bool:
        """True iff ``from_square``-``to_square`` is a valid first part of a move."""
        if not self.is_legal_start(from_square):
            return False
        return self.is_unblocked_move(from_square, to_square, None)

    def is_legal(self, move: Optional[Move]) -> bool:
        if move is None:
            return False
        if not self.is_legal_piece_move(move.from_square, move.to_square):
            return False
        return self.is_unblocked_move(move.to_square, move.spear, move.from_square)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def make_move(self, move: Move) -> None:
        """Apply ``move``, which is assumed legal. Does nothing once the game is over."""
        if self._winner is not None:
            return

        from_square, to_square, spear = move.as_tuple()
        cells = self._cells
        cells[to_square.index] = cells[from_square.index]
        cells[from_square.index] = Piece.EMPTY
        cells[spear.index] = Piece.SPEAR

        self._move_count += 1
        self._history.append(move)

        mover = self._turn
        opponent = mover.opponent()
        opponent_can_move = self.has_legal_move(opponent)
        if not opponent_can_move:
            if self.has_legal_move(mover):
                self._winner = mover
            else:
                self._winner = opponent

        self._turn = opponent

    def play(self, move: Move) -> None:
        """Checked variant of :meth:`make_move`."""
        if self._winner is not None:
            raise ValueError("Cannot play a move on a finished game.")
        if not self.is_legal(move):
            raise ValueError(f"Illegal move {move} for {self._turn.name}.")
        self.make_move(move)

    def undo(self) -> None:
        """Take back the last move. Does nothing on a finished game or an empty history."""
        if self._winner is not None or not self._history:
            return

        previous = self._history.pop()
        cells = self._cells
        piece = cells[previous.to_square.index]
        cells[previous.to_square.index] = Piece.EMPTY
        # The spear may sit on the origin square, so clear it before restoring the piece.
        cells[previous.spear.index] = Piece.EMPTY
        cells[previous.from_square.index] = piece

        self._move_count -= 1
        self._turn = self._turn.opponent()

    # ------------------------------------------------------------------
    # Move generation
    # ------------------------------------------------------------------
    def reachable_from(self, from_square: Square, as_empty: Optional[Square]) -> Iterator[Square]:
        """Yield the squares reachable by an unblocked queen move from ``from_square``.

        Ignores what stands on ``from_square`` and whether the game is over. ``as_empty``
        is treated as empty, which lets a piece throw its spear back through or onto the
        square it just left.
        """
        return _scan(self._cells.tolist(), from_square, as_empty)

    def legal_moves(self, side: Optional[Piece] = None) -> Iterator[Move]:
        """Lazily yield every legal move for ``side`` (the side to move by default).

        The sequence is independent of whose turn it is. The board must not be mutated
        while the generator is being consumed.
        """
        if side is None:
            side = self._turn
        return _generate_moves(self._cells.tolist(), int(side))

    def count_legal_moves(self, side: Piece) -> int:
        """Number of moves ``legal_moves(side)`` would yield, without building them."""
        cells = self._cells.tolist()
        side_value = int(side)
        total = 0
        for start in Square.all():
            if cells[start.index] != side_value:
                continue
            for destination in _scan(cells, start, None):
                for _ in _scan(cells, destination, start):
                    total += 1
        return total

    def has_legal_move(self, side: Piece) -> bool:
        return next(self.legal_moves(side), None) is not None

    # ------------------------------------------------------------------
    def __str__(self) -> str:
        lines = []
        for row in range(SIZE - 1, -1, -1):
            cells = " ".join(self.get(Square.sq(col, row)).symbol for col in range(SIZE))
            lines.append(f"  {cells}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        winner = self._winner.name if self._winner is not None else None
        return f"Board(turn={self._turn.name}, winner={winner}, moves={self._move_count})\n{self}"
