"""Game module for Tetris RL.

Exports the core game engine and supporting classes:
- GameGrid: Grid representation, merging and row clearing
- is_colliding: Placement legality check
- Piece: Tetromino shape matrix with clockwise rotation
- TetrominoType: Enum of available piece types
- TetrisGame: Command surface and state machine
"""

from .collision import is_colliding
from .core import Action, GameConfig, GameSnapshot, GameState, GameStatus, TetrisGame
from .grid import OUT_OF_BOUNDS, GameGrid
from .pieces import BASE_SHAPES, STANDARD_TYPES, Piece, TetrominoType, choose_random_type, rotate_clockwise

__all__ = [
    "GameGrid",
    "OUT_OF_BOUNDS",
    "is_colliding",
    "Piece",
    "TetrominoType",
    "BASE_SHAPES",
    "STANDARD_TYPES",
    "choose_random_type",
    "rotate_clockwise",
    "TetrisGame",
    "GameConfig",
    "GameState",
    "GameSnapshot",
    "GameStatus",
    "Action",
]
