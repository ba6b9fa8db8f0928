import random

from tetris_piece import COLORS, SHAPES
from tetris_rng import PieceGenerator


def test_same_seed_same_sequence():
    a = PieceGenerator(10, seed=42)
    b = PieceGenerator(10, seed=42)
    assert [a.next_type() for _ in range(50)] == [b.next_type() for _ in range(50)]


def test_injected_rng_is_used():
    g = PieceGenerator(10, rng=random.Random(7))
    expected = random.Random(7)
    letters = list(SHAPES)
    assert [g.next_type() for _ in range(20)] == [expected.choice(letters) for _ in range(20)]


def test_pieces_cover_all_tetrominoes_with_fixed_colors():
    g = PieceGenerator(10, seed=1)
    seen = set()
    for _ in range(700):
        p = g.next_piece()
        assert p.color == COLORS[p.t]
        assert p.y == 0
        seen.add(p.t)
    assert seen == set(SHAPES)
