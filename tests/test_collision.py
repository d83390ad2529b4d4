import numpy as np

from tetris_rl.game import BASE_SHAPES, GameGrid, TetrominoType, is_colliding, rotate_clockwise


I_FLAT = BASE_SHAPES[TetrominoType.I]
O = BASE_SHAPES[TetrominoType.O]


def test_side_walls_collide_at_any_row():
    grid = GameGrid(10, 20)
    for y in (-3, 0, 10, 18):
        assert is_colliding(grid, O, -1, y)
        assert is_colliding(grid, O, 9, y)
        assert is_colliding(grid, I_FLAT, 7, y)
    assert not is_colliding(grid, I_FLAT, 6, 0)


def test_floor_collides():
    grid = GameGrid(10, 20)
    assert not is_colliding(grid, O, 4, 18)
    assert is_colliding(grid, O, 4, 19)
    vertical = rotate_clockwise(I_FLAT)
    assert not is_colliding(grid, vertical, 0, 16)
    assert is_colliding(grid, vertical, 0, 17)


def test_cells_above_grid_skip_occupancy():
    cells = np.ones((20, 10), dtype=np.int8)
    grid = GameGrid.with_cells(cells)
    # entirely above the grid: only walls matter
    assert not is_colliding(grid, O, 4, -2)
    assert is_colliding(grid, O, 4, -1)
    assert is_colliding(grid, O, -1, -2)


def test_occupied_cell_collides():
    cells = np.zeros((20, 10), dtype=np.int8)
    cells[10, 5] = 3
    grid = GameGrid.with_cells(cells)
    assert is_colliding(grid, O, 4, 9)
    assert not is_colliding(grid, O, 6, 9)
    # the empty corner of the T can sit over a filled cell
    assert not is_colliding(grid, BASE_SHAPES[TetrominoType.T], 5, 10)
