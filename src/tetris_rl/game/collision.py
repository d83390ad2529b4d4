from __future__ import annotations

from .grid import GameGrid
from .pieces import Shape


def is_colliding(grid: GameGrid, shape: Shape, x: int, y: int) -> bool:
    """True if `shape` placed with its top-left corner at (x, y) is illegal.

    Walls and floor apply to every filled cell. Cells above the top edge
    (negative rows) skip the occupancy test so pieces can spawn partly
    hidden.
    """
    h, w = shape.shape
    for dy in range(h):
        for dx in range(w):
            if not shape[dy, dx]:
                continue
            col = x + dx
            row = y + dy
            if row >= grid.height or col < 0 or col >= grid.width:
                return True
            if row >= 0 and grid.read_cell(row, col) != 0:
                return True
    return False
