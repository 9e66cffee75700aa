"""Core game logic for the Game of the Amazons."""

from .state import DIRECTIONS, SIZE, Move, Piece, Square
from .board import BLACK_START, WHITE_START, Board
from .actions import (
    ACTION_VECTOR_SIZE,
    ActionVector,
    decode_action,
    encode_action,
)
from .notation import format_move, parse_move, parse_square

__all__ = [
    "Board",
    "Move",
    "Piece",
    "Square",
    "SIZE",
    "DIRECTIONS",
    "WHITE_START",
    "BLACK_START",
    "ActionVector",
    "ACTION_VECTOR_SIZE",
    "decode_action",
    "encode_action",
    "format_move",
    "parse_move",
    "parse_square",
]
