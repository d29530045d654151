from tetris_board import collide, empty_board, ghost_y, merge, sweep
from tetris_piece import Piece

VERTICAL_I = [[1], [1], [1], [1]]


def test_empty_board_shape():
    board = empty_board(10, 20)
    assert len(board) == 20
    assert all(len(row) == 10 for row in board)
    assert all(cell is None for row in board for cell in row)


def test_cells_above_board_are_free():
    board = empty_board(10, 20)
    assert not collide(board, Piece("I", VERTICAL_I, 0, -3))
    # Settled blocks don't reach above row 0
    board[0][0] = "L"
    assert collide(board, Piece("I", VERTICAL_I, 0, -3))
    assert not collide(board, Piece("I", VERTICAL_I, 0, -4))


def test_walls_and_floor():
    board = empty_board(10, 20)
    assert collide(board, Piece("I", [[1, 1, 1, 1]], -1, 0))
    assert collide(board, Piece("I", [[1, 1, 1, 1]], 7, 0))
    assert not collide(board, Piece("I", [[1, 1, 1, 1]], 6, 19))
    assert collide(board, Piece("I", VERTICAL_I, 0, 17))


def test_zero_cells_impose_nothing():
    board = empty_board(10, 20)
    board[0][0] = "Z"
    # Empty corner of the bounding box overlaps the settled block
    assert not collide(board, Piece("J", [[0, 1], [0, 1], [1, 1]], 0, 0))
    assert not collide(board, Piece("S", [[0, 1, 1], [1, 1, 0]], 0, 0))
    assert collide(board, Piece("Z", [[1, 1, 0], [0, 1, 1]], 0, 0))


def test_merge_writes_kind_and_drops_rows_above():
    board = empty_board(10, 20)
    written = merge(board, Piece("I", VERTICAL_I, 2, -2))
    assert written == 2
    assert board[0][2] == "I" and board[1][2] == "I"
    assert board[2][2] is None


def test_sweep_removes_full_rows_and_keeps_order():
    board = empty_board(10, 20)
    board[5] = ["T"] * 10
    board[7] = ["S"] * 10
    board[4][0] = "A"
    board[6][1] = "B"
    board[8][2] = "C"

    assert sweep(board) == 2

    assert len(board) == 20 and all(len(r) == 10 for r in board)
    assert board[0] == [None] * 10 and board[1] == [None] * 10
    assert board[6][0] == "A"
    assert board[7][1] == "B"
    assert board[8][2] == "C"
    assert not any(all(cell is not None for cell in row) for row in board)


def test_sweep_adjacent_rows_in_one_pass():
    board = empty_board(4, 6)
    for y in (2, 3, 4, 5):
        board[y] = ["O"] * 4
    board[1][3] = "J"
    assert sweep(board) == 4
    assert board[5][3] == "J"
    assert sum(cell is not None for row in board for cell in row) == 1


def test_ghost_y_lands_on_stack():
    board = empty_board(10, 20)
    board[15][4] = "Z"
    assert ghost_y(board, Piece("O", [[1, 1], [1, 1]], 4, 0)) == 13
    assert ghost_y(board, Piece("O", [[1, 1], [1, 1]], 0, 0)) == 18
