import pytest

from helpers import ScriptedRandom, filled_count, full_row
from tetris_board import (block_occupied, collide, fill_junk, landed_y, lock,
                          new_board, point_occupied)
from tetris_piece import Piece, PieceType
from tetris_rng import StageRandom


@pytest.mark.parametrize("x,y", [(-1, 0), (-24, 200), (240, 0), (300, 100), (0, 480), (120, 1000)])
def test_outside_walls_and_floor_is_occupied(x, y):
    assert point_occupied(new_board(), x, y)


@pytest.mark.parametrize("x", [0, 23, 120, 239])
def test_above_top_is_open(x):
    board = [full_row(PieceType.T) for _ in range(20)]
    assert not point_occupied(board, x, -1)
    assert not point_occupied(board, x, -100)


@pytest.mark.parametrize("x", [-1, 240])
def test_walls_extend_above_top(x):
    assert point_occupied(new_board(), x, -24)


def test_point_maps_to_cell():
    board = new_board()
    board[3][2] = PieceType.J
    assert point_occupied(board, 48, 72)
    assert point_occupied(board, 71, 95)
    assert not point_occupied(board, 72, 72)
    assert not point_occupied(board, 47, 95)


def test_block_corners_are_inset():
    board = new_board()
    board[5][5] = PieceType.S
    assert not block_occupied(board, 96, 120)
    assert block_occupied(board, 97, 120)
    assert not block_occupied(board, 120, 96)
    assert block_occupied(board, 120, 97)
    assert not block_occupied(board, 120, 144)


def test_collide_rounds_y_up():
    board = new_board()
    board[19] = full_row(PieceType.Z)
    o = Piece(PieceType.O, 0, 96, 408.0)
    assert not collide(board, o)
    o.y = 408.25
    assert collide(board, o)


@pytest.mark.parametrize("next_y,expected", [
    (0.25, 0),
    (432.25, 432),
    (448.0, 432),
    (456.0, 432),
    (457.0, 456),
    (-95.75, -96),
    (-47.75, -48),
])
def test_landed_y(next_y, expected):
    assert landed_y(next_y) == expected


def test_lock_writes_four_cells():
    board = new_board()
    lock(board, Piece(PieceType.O, 0, 0, 432))
    assert board[18][0] == board[18][1] == board[19][0] == board[19][1] == PieceType.O
    assert filled_count(board) == 4


def test_junk_zero_rows_empties_board():
    board = [full_row(PieceType.I) for _ in range(20)]
    fill_junk(board, 0, StageRandom(7))
    assert filled_count(board) == 0


def test_junk_rows_fill_from_the_bottom():
    board = new_board()
    # every draw lands on 0: piece I, and the knocked out column is 0
    fill_junk(board, 4, ScriptedRandom(ints=(0,)))
    for y in range(16):
        assert all(v is None for v in board[y])
    for y in range(16, 20):
        assert board[y][0] is None
        assert board[y][1:] == [PieceType.I] * 9


def test_junk_value_seven_is_a_hole():
    board = new_board()
    fill_junk(board, 1, ScriptedRandom(ints=(7,)))
    assert filled_count(board) == 0


def test_junk_draw_order():
    rng = ScriptedRandom(ints=(3,))
    fill_junk(new_board(), 2, rng)
    # two 10-wide rows of values, plus two hole columns on each of the 20 rows
    assert rng.int_calls.count(8) == 20
    assert rng.int_calls.count(10) == 40


def test_junk_is_deterministic_for_a_seed():
    a, b = new_board(), new_board()
    fill_junk(a, 8, StageRandom(1234))
    fill_junk(b, 8, StageRandom(1234))
    assert a == b
    for y in range(12, 20):
        assert any(v is None for v in a[y])


def test_junk_rejects_bad_row_count():
    with pytest.raises(ValueError):
        fill_junk(new_board(), 21, StageRandom(1))
