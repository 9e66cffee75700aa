from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .state import DIRECTIONS, SIZE, Move, Square

MAX_DISTANCE = SIZE - 1
QUEEN_VECTORS = len(DIRECTIONS) * MAX_DISTANCE
ACTION_VECTOR_SIZE = SIZE * SIZE * QUEEN_VECTORS * QUEEN_VECTORS


@dataclass(frozen=True)
class ActionVector:
    origin: Tuple[int, int]
    move_direction: int
    move_distance: int
    spear_direction: int
    spear_distance: int

    def to_move(self) -> Move:
        origin = Square.sq(*self.origin)
        destination = origin.queen_move(self.move_direction, self.move_distance)
        if destination is None:
            raise ValueError("Action moves the piece off the board.")
        spear = destination.queen_move(self.spear_direction, self.spear_distance)
        if spear is None:
            raise ValueError("Action throws the spear off the board.")
        return Move(origin, destination, spear)

    @staticmethod
    def from_move(move: Move) -> "ActionVector":
        origin, destination, spear = move.as_tuple()
        move_direction = origin.direction(destination)
        if move_direction < 0:
            raise ValueError("Piece movement is not a queen move.")
        spear_direction = destination.direction(spear)
        if spear_direction < 0:
            raise ValueError("Spear throw is not a queen move.")
        return ActionVector(
            origin.as_tuple(),
            move_direction,
            origin.distance(destination),
            spear_direction,
            destination.distance(spear),
        )

    def to_index(self) -> int:
        col, row = self.origin
        base = col * SIZE + row
        base = base * QUEEN_VECTORS + self.move_direction * MAX_DISTANCE + (self.move_distance - 1)
        return base * QUEEN_VECTORS + self.spear_direction * MAX_DISTANCE + (self.spear_distance - 1)

    @staticmethod
    def from_index(index: int) -> "ActionVector":
        if not 0 <= index < ACTION_VECTOR_SIZE:
            raise ValueError("Action index out of range.")
        index, spear_part = divmod(index, QUEEN_VECTORS)
        origin_index, move_part = divmod(index, QUEEN_VECTORS)
        move_direction, move_distance = divmod(move_part, MAX_DISTANCE)
        spear_direction, spear_distance = divmod(spear_part, MAX_DISTANCE)
        return ActionVector(
            (origin_index // SIZE, origin_index % SIZE),
            move_direction,
            move_distance + 1,
            spear_direction,
            spear_distance + 1,
        )


def encode_action(move: Move) -> int:
    return ActionVector.from_move(move).to_index()


def decode_action(index: int) -> Move:
    return ActionVector.from_index(index).to_move()
