from __future__ import annotations

import argparse
import logging
from typing import Dict, Optional, Sequence

import pygame

from tetris_rl.game import Action, GameConfig, GameStatus, TetrisGame
from .renderer import Renderer


KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_UP: Action.ROTATE,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_p: Action.PAUSE,
    pygame.K_r: Action.RESTART,
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Tetris with the keyboard")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--tick-ms", type=int, default=GameConfig.tick_ms, help="Gravity period in milliseconds")
    p.add_argument("--cell-size", type=int, default=28)
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def run(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    game = TetrisGame(GameConfig(random_seed=args.seed, tick_ms=args.tick_ms))
    renderer = Renderer(cell_size=args.cell_size)

    pygame.init()
    try:
        clock = pygame.time.Clock()
        screen = pygame.display.set_mode(renderer.window_size(game.config.width, game.config.height))
        pygame.display.set_caption("Tetris - Human Play")

        last_fall = pygame.time.get_ticks()

        running = True
        while running:
            # Input handling
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        action = KEY_TO_ACTION.get(event.key)
                        if action is not None:
                            game.step(action)
                            if action == Action.RESTART:
                                last_fall = pygame.time.get_ticks()

            # Gravity
            now = pygame.time.get_ticks()
            if game.status != GameStatus.RUNNING:
                last_fall = now
            elif now - last_fall >= game.config.tick_ms:
                game.tick()
                last_fall = now

            renderer.draw(screen, game.snapshot())
            clock.tick(60)
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
