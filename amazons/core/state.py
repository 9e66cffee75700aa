from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Optional, Tuple

SIZE = 10

# N, NE, E, SE, S, SW, W, NW as (dcol, drow).
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
    (-1, 0),
    (-1, 1),
)


class Piece(IntEnum):
    EMPTY = 0
    WHITE = 1
    BLACK = 2
    SPEAR = 3

    def opponent(self) -> "Piece":
        if self == Piece.WHITE:
            return Piece.BLACK
        if self == Piece.BLACK:
            return Piece.WHITE
        return self

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {Piece.EMPTY: "-", Piece.WHITE: "W", Piece.BLACK: "B", Piece.SPEAR: "S"}


class Square:
    """A cell of the board.

    Squares are interned: ``Square(col, row)`` and ``Square.sq(col, row)`` return the
    same object for the same cell, so they can be compared by identity and used as dict
    keys cheaply.
    """

    __slots__ = ("col", "row", "index", "rays")

    _cache: Tuple["Square", ...] = ()

    def __new__(cls, col: int, row: int) -> "Square":
        if cls._cache:
            return cls.sq(col, row)
        square = super().__new__(cls)
        square.col = col
        square.row = row
        square.index = col * SIZE + row
        return square

    @staticmethod
    def exists(col: int, row: int) -> bool:
        return 0 <= col < SIZE and 0 <= row < SIZE

    @classmethod
    def sq(cls, col: int, row: int) -> "Square":
        if not cls.exists(col, row):
            raise ValueError(f"Square ({col}, {row}) is off the board.")
        return cls._cache[col * SIZE + row]

    @classmethod
    def from_index(cls, index: int) -> "Square":
        if not 0 <= index < SIZE * SIZE:
            raise ValueError("Square index out of range.")
        return cls._cache[index]

    @classmethod
    def all(cls) -> Iterator["Square"]:
        """Iterate every square in board order (column by column, bottom row first)."""
        return iter(cls._cache)

    def queen_move(self, direction: int, steps: int) -> Optional["Square"]:
        """Return the square ``steps`` away in ``direction``, or None if off the board."""
        dc, dr = DIRECTIONS[direction]
        col = self.col + dc * steps
        row = self.row + dr * steps
        if not self.exists(col, row):
            return None
        return Square._cache[col * SIZE + row]

    def is_queen_move(self, other: Optional["Square"]) -> bool:
        if other is None or other is self:
            return False
        dc = other.col - self.col
        dr = other.row - self.row
        return dc == 0 or dr == 0 or abs(dc) == abs(dr)

    def direction(self, other: "Square") -> int:
        """Return the direction index from self to ``other``, or -1 if not a queen move."""
        if not self.is_queen_move(other):
            return -1
        dc = other.col - self.col
        dr = other.row - self.row
        step = ((dc > 0) - (dc < 0), (dr > 0) - (dr < 0))
        return DIRECTIONS.index(step)

    def distance(self, other: "Square") -> int:
        return max(abs(other.col - self.col), abs(other.row - self.row))

    def as_tuple(self) -> Tuple[int, int]:
        return (self.col, self.row)

    def __reduce__(self):
        return (Square.sq, (self.col, self.row))

    def __repr__(self) -> str:
        return f"Square({self.col}, {self.row})"

    def __str__(self) -> str:
        return f"{chr(ord('a') + self.col)}{self.row + 1}"


Square._cache = tuple(Square(col, row) for col in range(SIZE) for row in range(SIZE))
for _square in Square._cache:
    # Squares along each direction, nearest first.
    _square.rays = tuple(
        tuple(
            target
            for target in (_square.queen_move(direction, steps) for steps in range(1, SIZE))
            if target is not None
        )
        for direction in range(len(DIRECTIONS))
    )
del _square


@dataclass(frozen=True)
class Move:
    from_square: Square
    to_square: Square
    spear: Square

    def __post_init__(self) -> None:
        if self.to_square is self.from_square:
            raise ValueError("A move must leave its starting square.")
        if self.spear is self.to_square:
            raise ValueError("A spear cannot land on the moved piece.")

    def as_tuple(self) -> Tuple[Square, Square, Square]:
        return (self.from_square, self.to_square, self.spear)

    def __str__(self) -> str:
        return f"{self.from_square}-{self.to_square}({self.spear})"
