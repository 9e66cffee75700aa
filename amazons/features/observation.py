from __future__ import annotations

from typing import Tuple

import numpy as np

from amazons.core import SIZE, Board, Piece

BOARD_CHANNELS = 3  # white, black, spear
AUX_VECTOR_SIZE = 2  # side to move one-hot

_CHANNEL_PIECES = (Piece.WHITE, Piece.BLACK, Piece.SPEAR)


def build_board_tensor(board: Board) -> np.ndarray:
    """Return board tensor with shape (3, SIZE, SIZE) channel-first, indexed [channel, col, row]."""
    grid = board.grid
    tensor = np.zeros((BOARD_CHANNELS, SIZE, SIZE), dtype=np.float32)
    for channel, piece in enumerate(_CHANNEL_PIECES):
        tensor[channel] = grid == piece
    return tensor


def build_aux_vector(board: Board) -> np.ndarray:
    aux = np.zeros((AUX_VECTOR_SIZE,), dtype=np.float32)
    aux[0 if board.turn == Piece.WHITE else 1] = 1.0
    return aux


def board_to_numpy(board: Board) -> Tuple[np.ndarray, np.ndarray]:
    return build_board_tensor(board), build_aux_vector(board)
