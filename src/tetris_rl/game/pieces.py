from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Tuple

import numpy as np


class TetrominoType(IntEnum):
    NONE = 0  # placeholder before the first draw
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


Shape = np.ndarray


def _frozen(rows: List[List[int]]) -> Shape:
    arr = np.array(rows, dtype=np.int8)
    arr.setflags(write=False)
    return arr


BASE_SHAPES = {
    TetrominoType.NONE: _frozen([[0]]),
    TetrominoType.I: _frozen([[1, 1, 1, 1]]),
    TetrominoType.O: _frozen([[1, 1], [1, 1]]),
    TetrominoType.T: _frozen([[0, 1, 0], [1, 1, 1]]),
    TetrominoType.S: _frozen([[0, 1, 1], [1, 1, 0]]),
    TetrominoType.Z: _frozen([[1, 1, 0], [0, 1, 1]]),
    TetrominoType.J: _frozen([[1, 0, 0], [1, 1, 1]]),
    TetrominoType.L: _frozen([[0, 0, 1], [1, 1, 1]]),
}

STANDARD_TYPES: Tuple[TetrominoType, ...] = tuple(t for t in TetrominoType if t != TetrominoType.NONE)


def choose_random_type(rng: random.Random) -> TetrominoType:
    """Uniform draw with replacement over the seven playable shapes."""
    return rng.choice(STANDARD_TYPES)


def rotate_clockwise(shape: Shape) -> Shape:
    """Rotate a shape matrix 90 degrees clockwise.

    An (R, C) matrix becomes (C, R); output row i is input column i read
    bottom to top.
    """
    rotated = np.rot90(shape, 1, axes=(1, 0)).copy()
    rotated.setflags(write=False)
    return rotated


@dataclass(frozen=True, eq=False)
class Piece:
    kind: TetrominoType
    shape: Shape

    @classmethod
    def of(cls, kind: TetrominoType) -> "Piece":
        return cls(kind, BASE_SHAPES[kind])

    @classmethod
    def random(cls, rng: random.Random) -> "Piece":
        return cls.of(choose_random_type(rng))

    @property
    def value(self) -> int:
        # Cell value written into the grid for each filled shape cell.
        return int(self.kind)

    def rotated(self) -> "Piece":
        return Piece(self.kind, rotate_clockwise(self.shape))

    def cells_at(self, origin_x: int, origin_y: int) -> List[Tuple[int, int]]:
        h, w = self.shape.shape
        cells: List[Tuple[int, int]] = []
        for dy in range(h):
            for dx in range(w):
                if self.shape[dy, dx]:
                    cells.append((origin_x + dx, origin_y + dy))
        return cells

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return self.kind == other.kind and np.array_equal(self.shape, other.shape)

    def __hash__(self) -> int:
        return hash((self.kind, self.shape.shape, self.shape.tobytes()))
