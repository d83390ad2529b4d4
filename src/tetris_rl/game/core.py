from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Callable, Dict, Optional

import numpy as np

from .collision import is_colliding
from .grid import GameGrid
from .pieces import Piece, TetrominoType

logger = logging.getLogger(__name__)


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE = 2
    SOFT_DROP = 3
    NONE = 4
    PAUSE = 5
    RESTART = 6


class GameStatus(IntEnum):
    RUNNING = 0
    PAUSED = 1
    GAME_OVER = 2


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    random_seed: Optional[int] = None
    spawn_y: int = 0
    tick_ms: int = 500

    def __post_init__(self) -> None:
        if self.width < 6:
            raise ValueError(f"width must be at least 6 columns, got {self.width}")
        if self.height < 1:
            raise ValueError(f"height must be positive, got {self.height}")
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")


@dataclass(frozen=True)
class GameState:
    grid: GameGrid
    piece: Piece
    x: int
    y: int
    status: GameStatus = GameStatus.RUNNING
    lines_cleared_total: int = 0
    last_lines_cleared: int = 0
    pieces_locked: int = 0


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view handed to renderers: locked cells with the falling piece drawn in."""

    board: np.ndarray
    status: GameStatus
    piece_kind: TetrominoType
    x: int
    y: int
    lines_cleared_total: int
    last_lines_cleared: int


class TetrisGame:
    """Falling-block game driven by discrete calls from a host.

    The host owns timing and input; it calls `tick()` for gravity and the
    move/rotate commands for player input, one call at a time. Every
    command returns True when it changed the state and False when it was
    rejected. Each accepted command swaps in a whole new `GameState`.
    """

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self.rng = random.Random(self.config.random_seed)
        self._state = self._initial_state()
        self._dispatch: Dict[Action, Callable[[], bool]] = {
            Action.LEFT: self.move_left,
            Action.RIGHT: self.move_right,
            Action.ROTATE: self.rotate,
            Action.SOFT_DROP: self.soft_drop,
            Action.NONE: lambda: False,
            Action.PAUSE: self.toggle_pause,
            Action.RESTART: self._restart_action,
        }

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def status(self) -> GameStatus:
        return self._state.status

    @property
    def game_over(self) -> bool:
        return self._state.status == GameStatus.GAME_OVER

    @property
    def spawn_x(self) -> int:
        return self.config.width // 2 - 1

    def _initial_state(self) -> GameState:
        return GameState(
            grid=GameGrid(self.config.width, self.config.height),
            piece=Piece.random(self.rng),
            x=self.spawn_x,
            y=self.config.spawn_y,
        )

    # ---------- Commands ----------
    def restart(self, seed: Optional[int] = None) -> bool:
        if seed is not None:
            self.rng.seed(seed)
        self._state = self._initial_state()
        logger.info("Game restarted with %s", self._state.piece.kind.name)
        return True

    def _restart_action(self) -> bool:
        return self.restart()

    def toggle_pause(self) -> bool:
        current = self._state.status
        if current == GameStatus.GAME_OVER:
            return False
        status = GameStatus.PAUSED if current == GameStatus.RUNNING else GameStatus.RUNNING
        self._state = replace(self._state, status=status)
        logger.info("Game %s", "paused" if status == GameStatus.PAUSED else "resumed")
        return True

    def _shift(self, dx: int) -> bool:
        s = self._state
        if s.status != GameStatus.RUNNING:
            return False
        new_x = s.x + dx
        if is_colliding(s.grid, s.piece.shape, new_x, s.y):
            return False
        self._state = replace(s, x=new_x)
        return True

    def move_left(self) -> bool:
        return self._shift(-1)

    def move_right(self) -> bool:
        return self._shift(1)

    def rotate(self) -> bool:
        s = self._state
        if s.status != GameStatus.RUNNING:
            return False
        rotated = s.piece.rotated()
        if is_colliding(s.grid, rotated.shape, s.x, s.y):
            return False
        self._state = replace(s, piece=rotated)
        return True

    def tick(self) -> bool:
        """Advance the falling piece one row, locking it if it cannot move.

        A piece that cannot leave the spawn row ends the game. The piece
        drawn after a lock is not tested at spawn; a blocked spawn shows up
        as game over on the following tick.
        """
        s = self._state
        if s.status != GameStatus.RUNNING:
            return False
        if not is_colliding(s.grid, s.piece.shape, s.x, s.y + 1):
            self._state = replace(s, y=s.y + 1)
            return True
        if s.y == self.config.spawn_y:
            self._state = replace(s, status=GameStatus.GAME_OVER)
            logger.info(
                "Game over: %s blocked at spawn after %d pieces, %d lines",
                s.piece.kind.name,
                s.pieces_locked,
                s.lines_cleared_total,
            )
            return True
        self._state = self._lock(s)
        return True

    def soft_drop(self) -> bool:
        return self.tick()

    def _lock(self, s: GameState) -> GameState:
        grid, cleared = s.grid.merge(s.piece, s.x, s.y).clear_full_rows()
        logger.debug("Locked %s at (%d, %d)", s.piece.kind.name, s.x, s.y)
        if cleared:
            logger.debug("Cleared %d row(s)", cleared)
        return GameState(
            grid=grid,
            piece=Piece.random(self.rng),
            x=self.spawn_x,
            y=self.config.spawn_y,
            status=GameStatus.RUNNING,
            lines_cleared_total=s.lines_cleared_total + cleared,
            last_lines_cleared=cleared,
            pieces_locked=s.pieces_locked + 1,
        )

    def step(self, action: Action | int) -> bool:
        return self._dispatch[Action(action)]()

    # ---------- Views ----------
    def snapshot(self) -> GameSnapshot:
        s = self._state
        board = s.grid.merge(s.piece, s.x, s.y).clone_state()
        return GameSnapshot(
            board=board,
            status=s.status,
            piece_kind=s.piece.kind,
            x=s.x,
            y=s.y,
            lines_cleared_total=s.lines_cleared_total,
            last_lines_cleared=s.last_lines_cleared,
        )
