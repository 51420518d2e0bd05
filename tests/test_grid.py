import pytest

from blockfall.block import Block
from blockfall.grid import HEIGHT, WIDTH, Grid


def _o_block_at(dx, dy):
    block = Block(1)
    block.move(dx, dy)
    return block


def _fill_bottom_two_rows(grid):
    # O cells sit at x 4..5 at spawn; shift to cover 0..9 on the bottom rows.
    for k in range(5):
        grid.place(_o_block_at(-4 + 2 * k, HEIGHT - 2))


def test_new_grid_is_empty():
    grid = Grid()
    assert list(grid.occupied()) == []
    assert grid.cell(0, 0) == 0


def test_place_records_colour():
    grid = Grid()
    block = Block(4)
    grid.place(block)
    for x, y in block.cells():
        assert grid.cell(y, x) == block.color_id
    assert len(list(grid.occupied())) == 4


def test_collides_with_settled_block():
    grid = Grid()
    block = Block(2)
    assert not grid.collides(block)
    grid.place(block)
    assert grid.collides(block.copy())


def test_collides_with_walls_and_floor():
    grid = Grid()
    left = Block(0)
    left.move(-4, 0)
    assert grid.collides(left)
    right = Block(0)
    right.move(WIDTH, 0)
    assert grid.collides(right)
    low = Block(0)
    low.move(0, HEIGHT)
    assert grid.collides(low)


def test_cells_above_top_are_free():
    grid = Grid()
    block = Block(0)
    block.move(0, -1)
    assert not grid.collides(block)


def test_clear_full_rows():
    grid = Grid()
    _fill_bottom_two_rows(grid)
    assert grid.clear_lines() == 2
    assert list(grid.occupied()) == []


def test_partial_row_is_kept():
    grid = Grid()
    for k in range(4):
        grid.place(_o_block_at(-4 + 2 * k, HEIGHT - 2))
    before = list(grid.occupied())
    assert grid.clear_lines() == 0
    assert list(grid.occupied()) == before


def test_rows_above_shift_down():
    grid = Grid()
    _fill_bottom_two_rows(grid)
    top = _o_block_at(0, HEIGHT - 4)
    grid.place(top)
    grid.clear_lines()
    expected = top.copy()
    expected.move(0, 2)
    assert sorted((c, r) for r, c, _ in grid.occupied()) == sorted(expected.cells())


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (HEIGHT, 0), (0, WIDTH)])
def test_cell_out_of_range(row, col):
    with pytest.raises(IndexError):
        Grid().cell(row, col)