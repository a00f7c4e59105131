import io

from conftest import BLUE, CLEAR, GREEN, RED, make_grid
from pixansi.colour import background, foreground, reset
from pixansi.halfblock import LOWER_HALF, UPPER_HALF, cell_at, encode_pair, encode_row


def test_cell_at_opaque():
    grid = make_grid([[RED]])
    assert cell_at(grid, 0, 0) == (255, 0, 0)


def test_cell_at_transparent_is_absent():
    grid = make_grid([[(255, 0, 0, 200)]])
    assert cell_at(grid, 0, 0) is None


def test_cell_at_out_of_bounds_is_absent():
    grid = make_grid([[RED]])
    assert cell_at(grid, 0, 1) is None
    assert cell_at(grid, 1, 0) is None


def test_both_present():
    grid = make_grid([[RED], [BLUE]])
    assert encode_row(grid, 0) == foreground(255, 0, 0) + background(0, 0, 255) + "▀" + reset()


def test_odd_height_has_no_background():
    grid = make_grid([[GREEN]])
    assert encode_row(grid, 0) == foreground(0, 255, 0) + "▀" + reset()


def test_top_transparent_bottom_opaque():
    grid = make_grid([[CLEAR], [BLUE]])
    assert encode_row(grid, 0) == foreground(0, 0, 255) + "▄" + reset()


def test_top_opaque_bottom_transparent():
    grid = make_grid([[RED], [CLEAR]])
    assert encode_row(grid, 0) == foreground(255, 0, 0) + "▀" + reset()


def test_both_absent_is_space():
    grid = make_grid([[CLEAR], [(9, 9, 9, 1)]])
    assert encode_row(grid, 0) == " "
    assert encode_pair(None, None) == " "


def test_half_block_characters():
    assert UPPER_HALF == "▀"
    assert LOWER_HALF == "▄"


def test_row_pairs_second_output_row():
    grid = make_grid([[CLEAR, CLEAR], [CLEAR, CLEAR], [RED, CLEAR], [GREEN, BLUE]])
    expected = (
        foreground(255, 0, 0) + background(0, 255, 0) + UPPER_HALF + reset()
        + foreground(0, 0, 255) + LOWER_HALF + reset()
    )
    assert encode_row(grid, 1) == expected
    assert encode_row(grid, 0) == "  "


def test_encode_row_writes_to_stream():
    grid = make_grid([[RED, CLEAR], [BLUE, GREEN]])
    out = io.StringIO()
    assert encode_row(grid, 0, out) is None
    assert out.getvalue() == encode_row(grid, 0)
