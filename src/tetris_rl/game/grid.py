from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from .pieces import Piece


OUT_OF_BOUNDS = -1


class GameGrid:
    """Fixed-size playfield of locked cells.

    The grid uses 0 for empty cells and positive integers for filled cells.
    Integer values correspond to tetromino indices for optional coloring.
    Instances are values: the backing array is read-only and every operation
    that changes cells returns a new grid.
    """

    def __init__(self, width: int, height: int, cells: Optional[np.ndarray] = None) -> None:
        self.width = int(width)
        self.height = int(height)
        if cells is None:
            arr = np.zeros((self.height, self.width), dtype=np.int8)
        else:
            arr = np.array(cells, dtype=np.int8)
            if arr.shape != (self.height, self.width):
                raise ValueError(
                    f"grid cells must have shape {(self.height, self.width)}, got {arr.shape}"
                )
        self.grid = arr
        self.grid.setflags(write=False)

    @classmethod
    def with_cells(cls, cells: np.ndarray) -> "GameGrid":
        arr = np.asarray(cells)
        if arr.ndim != 2 or 0 in arr.shape:
            raise ValueError(f"grid cells must be a non-empty 2D array, got shape {arr.shape}")
        height, width = arr.shape
        return cls(width, height, arr)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def read_cell(self, row: int, col: int) -> int:
        if not self.is_inside(col, row):
            return OUT_OF_BOUNDS
        return int(self.grid[row, col])

    def merge(self, piece: Piece, x: int, y: int) -> "GameGrid":
        """Return a copy with the piece's filled cells written in.

        Cells that land outside the grid (including rows above it) are dropped.
        """
        merged = self.grid.copy()
        value = piece.value
        for cx, cy in piece.cells_at(x, y):
            if self.is_inside(cx, cy):
                merged[cy, cx] = value
        return GameGrid(self.width, self.height, merged)

    def clear_full_rows(self) -> Tuple["GameGrid", int]:
        full_rows = np.where(np.all(self.grid != 0, axis=1))[0]
        if full_rows.size == 0:
            return self, 0
        num = int(full_rows.size)
        # Remove full rows and add empty rows at the top
        kept = np.delete(self.grid, full_rows, axis=0)
        new_rows = np.zeros((num, self.width), dtype=np.int8)
        return GameGrid(self.width, self.height, np.vstack((new_rows, kept))), num

    def get_max_height(self) -> int:
        # y=0 is top; find first non-empty from top
        non_empty_rows = np.where(np.any(self.grid != 0, axis=1))[0]
        if non_empty_rows.size == 0:
            return 0
        top_index = int(non_empty_rows[0])
        return self.height - top_index

    def count_holes(self) -> int:
        holes = 0
        for x in range(self.width):
            column = self.grid[:, x]
            seen_block = False
            for cell in column:
                if cell != 0:
                    seen_block = True
                elif seen_block:
                    holes += 1
        return holes

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameGrid):
            return NotImplemented
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash((self.grid.shape, self.grid.tobytes()))

    def __repr__(self) -> str:
        return f"GameGrid(width={self.width}, height={self.height}, filled={int(np.count_nonzero(self.grid))})"
