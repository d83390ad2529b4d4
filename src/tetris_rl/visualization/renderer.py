from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pygame

from tetris_rl.game import GameSnapshot, GameStatus


def _color_for_value(v: int) -> Tuple[int, int, int]:
    palette = {
        0: (20, 20, 26),
        1: (0, 240, 240),  # I
        2: (240, 240, 0),  # O
        3: (160, 0, 240),  # T
        4: (0, 240, 0),    # S
        5: (240, 0, 0),    # Z
        6: (0, 0, 240),    # J
        7: (240, 160, 0),  # L
    }
    return palette.get(abs(v), (200, 200, 200))


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self._font: Optional[pygame.font.Font] = None

    def window_size(self, width: int, height: int) -> Tuple[int, int]:
        return width * self.cell_size + self.margin * 2, height * self.cell_size + self.margin * 2

    def _grid_surface(self, board: np.ndarray) -> pygame.Surface:
        h, w = board.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                color = _color_for_value(int(board[y, x]))
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, color, rect)
        return surf

    def _banner(self, snapshot: GameSnapshot) -> str:
        if snapshot.status == GameStatus.GAME_OVER:
            return "Game Over - R to restart, ESC to quit"
        if snapshot.status == GameStatus.PAUSED:
            return "Paused - P to resume"
        return f"Lines: {snapshot.lines_cleared_total}"

    def draw(self, screen: pygame.Surface, snapshot: GameSnapshot) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 24)
        screen.fill((10, 10, 14))
        screen.blit(self._grid_surface(snapshot.board), (self.margin, self.margin))
        text = self._font.render(self._banner(snapshot), True, (255, 255, 255))
        screen.blit(text, (self.margin, 2))
        pygame.display.flip()
