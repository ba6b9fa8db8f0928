import pytest

from tetris_piece import COLORS, SHAPES, Piece, rotate_cw


@pytest.mark.parametrize("t", sorted(SHAPES))
def test_four_rotations_return_original_shape(t):
    shape = SHAPES[t]
    out = shape
    for _ in range(4):
        out = rotate_cw(out)
    assert out == shape


def test_rotate_cw_turns_t_clockwise():
    assert rotate_cw([[0,1,0],[1,1,1]]) == [[1,0],[1,1],[1,0]]


def test_rotated_piece_keeps_color_and_leaves_input_untouched():
    p = Piece.spawn("L", 10)
    before = [r[:] for r in p.shape]
    r = p.rotated()
    assert p.shape == before
    assert r.color == p.color == COLORS["L"]
    assert (r.x, r.y) == (p.x, p.y)
    assert r.shape == [[1,0],[1,0],[1,1]]


def test_spawn_is_centered_on_top_row():
    assert (Piece.spawn("I", 10).x, Piece.spawn("I", 10).y) == (3, 0)
    assert Piece.spawn("O", 10).x == 4
    assert Piece.spawn("T", 10).x == 4


def test_cells_are_absolute():
    p = Piece.spawn("O", 10).moved(-4, 18)
    assert sorted(p.cells()) == [(0, 18), (0, 19), (1, 18), (1, 19)]
