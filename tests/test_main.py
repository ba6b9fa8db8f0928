import pytest

from main import parse_args
from tetris_layout import compute_dims


def test_parse_args_defaults_and_seed():
    args = parse_args(["--seed", "9"])
    assert args.seed == 9
    assert (args.rows, args.cols) == (20, 10)
    assert args.log_level == "INFO"


def test_parse_args_rejects_small_board():
    with pytest.raises(SystemExit):
        parse_args(["--rows", "2"])


def test_layout_fits_board_and_panel():
    d = compute_dims(20, 10)
    assert d.board_w == 10 * d.cell
    assert d.board_h == 20 * d.cell
    assert d.panel_x == d.board_x + d.board_w + d.margin
    assert d.total_w == d.panel_x + d.panel_w + d.margin
