"""Text notation for squares and moves, e.g. ``d1-d7(g7)``."""

from __future__ import annotations

import re

from .state import SIZE, Move, Square

_SQUARE = r"([a-j])(10|[1-9])"
SQUARE_PATTERN = re.compile(rf"^{_SQUARE}$")
MOVE_PATTERN = re.compile(rf"^{_SQUARE}\s*-\s*{_SQUARE}\s*\(\s*{_SQUARE}\s*\)$")
SPACED_MOVE_PATTERN = re.compile(rf"^{_SQUARE}\s+{_SQUARE}\s+{_SQUARE}$")


def _square(col_text: str, row_text: str) -> Square:
    col = ord(col_text) - ord("a")
    row = int(row_text) - 1
    if not (0 <= col < SIZE and 0 <= row < SIZE):
        raise ValueError(f"Square {col_text}{row_text} is off the board.")
    return Square.sq(col, row)


def parse_square(text: str) -> Square:
    match = SQUARE_PATTERN.match(text.strip().lower())
    if match is None:
        raise ValueError(f"Malformed square: {text!r}")
    return _square(*match.groups())


def parse_move(text: str) -> Move:
    """Parse ``a4-a6(b5)`` or the spaced form ``a4 a6 b5``."""
    cleaned = text.strip().lower()
    match = MOVE_PATTERN.match(cleaned) or SPACED_MOVE_PATTERN.match(cleaned)
    if match is None:
        raise ValueError(f"Malformed move: {text!r}")
    parts = match.groups()
    origin = _square(parts[0], parts[1])
    destination = _square(parts[2], parts[3])
    spear = _square(parts[4], parts[5])
    return Move(origin, destination, spear)


def format_move(move: Move) -> str:
    return str(move)
