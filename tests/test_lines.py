import pytest

from helpers import ScriptedRandom, filled_count, full_row
from tetris_board import new_board
from tetris_lines import CAPTIONS, ClearResult, FlyingBlock, remove_complete_rows, update_flying
from tetris_piece import PieceType
from tetris_rng import StageRandom


def test_no_full_rows_is_a_no_op():
    board = new_board()
    board[19][:9] = [PieceType.L] * 9
    before = [row[:] for row in board]
    res = remove_complete_rows(board, 25, StageRandom(1))
    assert res.rows == 0 and res.blocks == [] and res.lines_remaining == 25
    assert res.caption == ""
    assert board == before


def test_single_row_clear():
    board = new_board()
    board[19] = full_row(PieceType.J)
    board[18][3] = PieceType.T
    board[0][9] = PieceType.O
    res = remove_complete_rows(board, 25, StageRandom(1))
    assert res.rows == 1
    assert res.lines_remaining == 24
    assert res.caption == "SINGLE!"
    assert res.caption_y == 19 * 24 - 12
    assert len(res.blocks) == 10
    assert [(b.x, b.y, b.t) for b in res.blocks] == [(x * 24, 456, PieceType.J) for x in range(10)]
    assert board[19][3] == PieceType.T
    assert board[1][9] == PieceType.O
    assert board[0] == [None] * 10
    assert filled_count(board) == 2


def test_rows_above_shift_by_cleared_rows_beneath():
    board = new_board()
    board[19] = full_row(PieceType.I)
    board[18][0] = PieceType.S
    board[17] = full_row(PieceType.Z)
    board[16][5] = PieceType.T
    board[10][2] = PieceType.L
    before = filled_count(board)
    res = remove_complete_rows(board, 25, StageRandom(3))
    assert res.rows == 2
    assert res.caption == "DOUBLE!!"
    assert filled_count(board) == before - 20
    assert board[19][0] == PieceType.S
    assert board[18][5] == PieceType.T
    assert board[12][2] == PieceType.L
    assert board[0] == board[1] == [None] * 10
    for row in board:
        assert any(v is None for v in row)


def test_stacked_rows_report_the_detection_index():
    board = new_board()
    for y in range(16, 20):
        board[y] = full_row(PieceType.I)
    res = remove_complete_rows(board, 25, StageRandom(3))
    assert res.rows == 4
    assert res.caption == "TETЯIS!!!!"
    # each of the four rows is found at index 19 after the one below is removed
    assert res.caption_y == 19 * 24 - 12
    assert all(b.y == 456 for b in res.blocks)
    assert filled_count(board) == 0


def test_lines_remaining_floors_at_zero():
    board = new_board()
    board[19] = full_row(PieceType.O)
    board[18] = full_row(PieceType.O)
    res = remove_complete_rows(board, 1, StageRandom(5))
    assert res.rows == 2
    assert res.lines_remaining == 0


def test_fragment_velocity_ranges():
    board = new_board()
    for y in range(17, 20):
        board[y] = full_row(PieceType.T)
    res = remove_complete_rows(board, 25, StageRandom(99))
    assert len(res.blocks) == 30
    for b in res.blocks:
        assert -2.5 <= b.vx <= 2.5
        assert -12.0 <= b.vy <= -10.0


def test_fragment_velocity_formula():
    board = new_board()
    board[19] = full_row(PieceType.T)
    res = remove_complete_rows(board, 25, ScriptedRandom(doubles=(0.0, 1.0 - 2 ** -15)))
    b = res.blocks[0]
    assert b.vx == pytest.approx(-2.5)
    assert b.vy == pytest.approx(-12.0, abs=1e-3)


def test_captions():
    assert CAPTIONS == ("SINGLE!", "DOUBLE!!", "TRIPLE!!!", "TETЯIS!!!!")
    assert ClearResult(rows=3).caption == "TRIPLE!!!"


def test_flying_block_ballistics():
    b = FlyingBlock(0.0, 0.0, 1.0, -10.0, PieceType.I)
    assert b.step()
    assert b.vy == pytest.approx(-9.8)
    assert (b.x, b.y) == (pytest.approx(1.0), pytest.approx(-9.8))


@pytest.mark.parametrize("x,y,vx", [(239.0, 0.0, 5.0), (-20.0, 0.0, -5.0), (0.0, 479.0, 0.0)])
def test_flying_block_leaves_screen(x, y, vx):
    blocks = [FlyingBlock(x, y, vx, 1.0, PieceType.I), FlyingBlock(100.0, 100.0, 0.0, 0.0, PieceType.O)]
    update_flying(blocks)
    assert len(blocks) == 1
    assert blocks[0].t == PieceType.O


def test_every_fragment_eventually_lands_off_screen():
    board = new_board()
    board[19] = full_row(PieceType.T)
    blocks = remove_complete_rows(board, 25, StageRandom(11)).blocks
    for _ in range(400):
        update_flying(blocks)
    assert blocks == []
