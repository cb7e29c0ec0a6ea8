"""The terminal game loop."""

from __future__ import annotations

import argparse
import random
import time

from .constants import (
    ENEMY_SPAWN_BULK_SIZE,
    ENEMY_SPAWN_INTERVAL,
    FRAME_DURATION,
    GRID_HEIGHT,
    GRID_WIDTH,
)
from .game import GAME_OVER_MESSAGE, Game
from .keyboard import InputEvent, KeyReader
from .logger import Logger
from .screen import move_cursor_to_end


def handle_event(game: Game, event: InputEvent) -> None:
    """Apply a key press to the game."""
    if event is InputEvent.KEY_A:
        game.tower.auto_fire = not game.tower.auto_fire
    elif event is InputEvent.SPACE:
        if not game.tower.auto_fire:
            game.fire_at_enemy()
    elif event is InputEvent.ESCAPE:
        game.game_over = True


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Defend the tower from waves of enemies.")
    parser.add_argument("--log", default="log.txt", help="file to write the log to")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    return parser.parse_args(argv)


def _play_wave(game: Game, wave: int, keys: KeyReader, logger: Logger) -> None:
    start = time.monotonic()
    last_update = start - FRAME_DURATION
    last_spawn = start - ENEMY_SPAWN_INTERVAL
    to_spawn = wave * ENEMY_SPAWN_BULK_SIZE

    game.reset()
    game.spawn_tower()

    while True:
        now = time.monotonic()
        if to_spawn > 0 and now - last_spawn >= ENEMY_SPAWN_INTERVAL:
            game.spawn_enemies(ENEMY_SPAWN_BULK_SIZE)
            to_spawn -= ENEMY_SPAWN_BULK_SIZE
            last_spawn = now
            logger.log(f"Spawned {ENEMY_SPAWN_BULK_SIZE} enemies")

        if now - last_update >= FRAME_DURATION:
            game.display_message = f"Wave {wave}"
            if game.has_enemy_reached_tower():
                game.display_message = GAME_OVER_MESSAGE
                game.game_over = True
            game.update()
            game.render()
            last_update = now

        handle_event(game, keys.read_event(0.01))
        time.sleep(0.01)

        if game.game_over or (game.active_enemies_count() == 0 and to_spawn <= 0):
            return


def main(argv: list[str] | None = None) -> int:
    """Run the game until the tower falls or the player presses Escape."""
    args = _parse_args(argv)
    rng = random.Random(args.seed)

    with Logger(args.log) as logger, KeyReader() as keys:
        logger.log("Starting game...")
        game = Game(GRID_WIDTH, GRID_HEIGHT, rng=rng)
        wave = 1

        while not game.game_over:
            _play_wave(game, wave, keys, logger)
            if not game.game_over:
                wave += 1
                game.tower.auto_fire = True
                game.display_message = "New wave coming..."
                game.render()
                time.sleep(1)
            logger.log(game.display_message)

        move_cursor_to_end()
        logger.log("Exiting game...")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())