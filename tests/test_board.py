import numpy as np
import pytest

from amazons.core import SIZE, Board, Move, Piece, Square

from conftest import corner_trap_board, region_board, sq


def test_initial_position() -> None:
    board = Board()
    assert board.count(Piece.WHITE) == 4
    assert board.count(Piece.BLACK) == 4
    assert board.count(Piece.SPEAR) == 0
    assert board.turn == Piece.WHITE
    assert board.winner is None
    assert board.num_moves == 0
    assert set(board.pieces(Piece.WHITE)) == {sq(0, 3), sq(3, 0), sq(6, 0), sq(9, 3)}
    assert set(board.pieces(Piece.BLACK)) == {sq(9, 6), sq(0, 6), sq(6, 9), sq(3, 9)}


def test_unblocked_move_on_initial_position() -> None:
    board = Board()
    assert not board.is_unblocked_move(sq(0, 3), sq(0, 9), None)
    assert board.is_unblocked_move(sq(0, 3), sq(0, 4), None)
    assert board.is_unblocked_move(sq(0, 3), sq(0, 5), None)
    assert not board.is_unblocked_move(sq(0, 3), sq(0, 6), None)
    assert not board.is_unblocked_move(sq(0, 3), sq(1, 5), None)
    assert not board.is_unblocked_move(sq(0, 3), sq(0, 3), None)


def test_treat_as_empty_lets_spear_return_to_origin() -> None:
    board = Board.empty()
    board.put(Piece.WHITE, sq(0, 0))
    # Piece travels a1-a3 and throws back onto a1 before the board is updated.
    assert not board.is_unblocked_move(sq(0, 2), sq(0, 0), None)
    assert board.is_unblocked_move(sq(0, 2), sq(0, 0), sq(0, 0))


def test_treat_as_empty_lets_spear_pass_over_origin() -> None:
    board = Board.empty()
    board.put(Piece.WHITE, sq(2, 2))
    assert not board.is_unblocked_move(sq(4, 4), sq(0, 0), None)
    assert board.is_unblocked_move(sq(4, 4), sq(0, 0), sq(2, 2))


def test_legality_checks_ownership_and_paths() -> None:
    board = Board()
    assert board.is_legal(Move(sq(3, 0), sq(3, 6), sq(6, 6)))
    assert board.is_legal(Move(sq(0, 3), sq(0, 4), sq(0, 3)))
    # Not white's piece.
    assert not board.is_legal(Move(sq(0, 6), sq(0, 5), sq(0, 4)))
    # Spear blocked by the piece on a7.
    assert not board.is_legal(Move(sq(0, 3), sq(0, 4), sq(0, 7)))
    # Not a queen move.
    assert not board.is_legal(Move(sq(0, 3), sq(1, 5), sq(1, 6)))
    assert not board.is_legal(None)
    assert not board.is_legal_start(None)
    assert board.is_legal_piece_move(sq(6, 0), sq(6, 8))


def test_make_move_updates_cells_turn_and_history() -> None:
    board = Board()
    move = Move(sq(3, 0), sq(3, 6), sq(6, 6))
    board.make_move(move)
    assert board.get(sq(3, 0)) == Piece.EMPTY
    assert board[sq(3, 6)] == Piece.WHITE
    assert board[sq(6, 6)] == Piece.SPEAR
    assert board.turn == Piece.BLACK
    assert board.num_moves == 1
    assert board.history == (move,)
    assert board.winner is None


def test_make_then_undo_restores_position() -> None:
    board = Board()
    board.make_move(Move(sq(3, 0), sq(3, 6), sq(6, 6)))
    before = board.grid
    turn = board.turn
    move = next(board.legal_moves())
    board.make_move(move)
    board.undo()
    assert np.array_equal(board.grid, before)
    assert board.turn == turn
    assert board.num_moves == 1
    assert board.winner is None
    assert len(board.history) == 1


def test_undo_after_spear_thrown_back_to_origin() -> None:
    board = Board()
    before = board.grid
    board.make_move(Move(sq(0, 3), sq(0, 4), sq(0, 3)))
    assert board[sq(0, 3)] == Piece.SPEAR
    board.undo()
    assert board[sq(0, 3)] == Piece.WHITE
    assert board[sq(0, 4)] == Piece.EMPTY
    assert board.count(Piece.WHITE) == 4
    assert np.array_equal(board.grid, before)


@pytest.mark.parametrize("turn", [Piece.WHITE, Piece.BLACK])
def test_every_legal_move_undoes_exactly(turn: Piece) -> None:
    board = region_board(
        [(col, row) for col in range(5) for row in range(5)],
        white=[(0, 0), (3, 2)],
        black=[(4, 4), (1, 3)],
        turn=turn,
    )
    board.put(Piece.SPEAR, sq(2, 2))
    before = board.grid
    moves = list(board.legal_moves())
    assert any(move.spear is move.from_square for move in moves)
    for move in moves:
        board.make_move(move)
        assert board.winner is None
        board.undo()
        assert np.array_equal(board.grid, before), str(move)
        assert board.turn == turn
        assert board.num_moves == 0
        assert board.winner is None


def test_every_opening_move_undoes_exactly() -> None:
    board = Board()
    before = board.grid
    for move in board.legal_moves():
        board.make_move(move)
        board.undo()
        assert np.array_equal(board.grid, before), str(move)
    assert board.turn == Piece.WHITE
    assert board.num_moves == 0
    assert board.history == ()


def test_move_rejects_spear_on_destination() -> None:
    with pytest.raises(ValueError):
        Move(sq(0, 3), sq(0, 4), sq(0, 4))


def test_undo_on_fresh_board_is_noop() -> None:
    board = Board()
    board.undo()
    assert board.num_moves == 0
    assert board.turn == Piece.WHITE


def test_copy_is_independent() -> None:
    board = Board()
    clone = board.copy()
    clone.make_move(Move(sq(3, 0), sq(3, 6), sq(6, 6)))
    assert board.get(sq(3, 0)) == Piece.WHITE
    assert board.num_moves == 0
    assert clone.num_moves == 1
    assert Board(clone).history == clone.history


def test_white_wins_when_black_is_sealed() -> None:
    board = corner_trap_board()
    assert board.has_legal_move(Piece.BLACK)
    board.make_move(Move(sq(3, 1), sq(2, 0), sq(1, 0)))
    assert board.winner == Piece.WHITE
    assert board.turn == Piece.BLACK
    assert not board.has_legal_move(Piece.BLACK)


def test_both_sides_stuck_gives_win_to_side_not_moving() -> None:
    board = region_board(
        [(9, 9)],
        white=[(9, 8)],
        black=[(0, 0)],
    )
    moves = list(board.legal_moves(Piece.WHITE))
    assert moves == [Move(sq(9, 8), sq(9, 9), sq(9, 8))]
    board.make_move(moves[0])
    assert not board.has_legal_move(Piece.WHITE)
    assert not board.has_legal_move(Piece.BLACK)
    assert board.winner == Piece.BLACK


def test_finished_game_is_frozen() -> None:
    board = corner_trap_board()
    board.make_move(Move(sq(3, 1), sq(2, 0), sq(1, 0)))
    grid = board.grid
    board.undo()
    board.make_move(Move(sq(2, 0), sq(3, 0), sq(4, 1)))
    assert np.array_equal(board.grid, grid)
    assert board.num_moves == 1
    assert board.winner == Piece.WHITE


def test_play_rejects_illegal_moves() -> None:
    board = Board()
    with pytest.raises(ValueError):
        board.play(Move(sq(0, 6), sq(0, 5), sq(0, 4)))
    board.play(Move(sq(0, 3), sq(0, 4), sq(0, 3)))
    assert board.turn == Piece.BLACK


def test_play_rejects_finished_game() -> None:
    board = corner_trap_board()
    board.play(Move(sq(3, 1), sq(2, 0), sq(1, 0)))
    with pytest.raises(ValueError):
        board.play(Move(sq(0, 0), sq(1, 1), sq(0, 0)))


def test_grid_is_indexed_by_column_then_row() -> None:
    grid = Board().grid
    assert grid.shape == (SIZE, SIZE)
    assert grid[0, 3] == Piece.WHITE
    assert grid[3, 9] == Piece.BLACK


def test_string_shows_top_row_first() -> None:
    lines = str(Board()).splitlines()
    assert len(lines) == SIZE
    assert lines[0].split() == ["-", "-", "-", "B", "-", "-", "B", "-", "-", "-"]
    assert lines[-1].split() == ["-", "-", "-", "W", "-", "-", "W", "-", "-", "-"]
