from typing import Iterable, Optional, Tuple

from amazons.core import SIZE, Board, Piece, Square

Cell = Tuple[int, int]


def region_board(
    open_cells: Iterable[Cell],
    *,
    white: Iterable[Cell] = (),
    black: Iterable[Cell] = (),
    turn: Piece = Piece.WHITE,
) -> Board:
    """Build a board where every cell outside ``open_cells`` and the pieces is a spear."""
    board = Board.empty(turn)
    keep = set(open_cells) | set(white) | set(black)
    for col in range(SIZE):
        for row in range(SIZE):
            if (col, row) not in keep:
                board.put(Piece.SPEAR, Square.sq(col, row))
    for col, row in white:
        board.put(Piece.WHITE, Square.sq(col, row))
    for col, row in black:
        board.put(Piece.BLACK, Square.sq(col, row))
    return board


def sq(col: int, row: int) -> Square:
    return Square.sq(col, row)


def corner_trap_board(turn: Optional[Piece] = None) -> Board:
    """Black cornered on a1 with b1 as its only exit; white on d2 can seal it."""
    return region_board(
        [(1, 0), (2, 0), (3, 0), (4, 1)],
        white=[(3, 1)],
        black=[(0, 0)],
        turn=turn or Piece.WHITE,
    )
