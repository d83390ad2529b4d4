from __future__ import annotations

from dataclasses import replace

import numpy as np
import pytest

from tetris_rl.game import GameConfig, GameGrid, Piece, TetrisGame, TetrominoType


def stage(game: TetrisGame, piece: Piece | TetrominoType, x: int, y: int, cells: np.ndarray | None = None) -> None:
    """Put a known piece (and optionally a known grid) into a running game."""
    if isinstance(piece, TetrominoType):
        piece = Piece.of(piece)
    state = replace(game.state, piece=piece, x=x, y=y)
    if cells is not None:
        state = replace(state, grid=GameGrid.with_cells(cells))
    game._state = state


@pytest.fixture
def game() -> TetrisGame:
    return TetrisGame(GameConfig(random_seed=1234))
