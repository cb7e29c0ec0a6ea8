"""Game state: the tower, enemies, bullets and explosions, and drawing them."""

from __future__ import annotations

import random
import sys
import time
from collections.abc import Callable
from typing import TextIO

from .constants import (
    ENEMY_MAX_SPEED,
    ENEMY_SPAWN_BULK_SIZE,
    MINIMUM_ENEMY_POOL_SIZE,
    RATE_OF_FIRE,
)
from .entities import Bullet, Explosion
from .geometry import Vector2D
from .grid import Grid, GridCell
from .pooler import Pooler
from .screen import render_text
from .texture import BLANK, Color, Texture
from .tower import Tower

ACTIVE_ENEMIES_TEXT = "Active enemies: "
POOL_USAGE_TEXT = "Enemies pool usage: "
GAME_OVER_MESSAGE = "Game Over! An enemy has reached the tower."

# Symbols an enemy may walk onto.
_WALKABLE = {"T", "*"}


class Game:
    """The whole state of one game and the rules that advance it."""

    def __init__(
        self,
        width: int,
        height: int,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
        out: TextIO | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.out = out
        self.grid = Grid(width, height)
        self.prev_grid: list[list[Texture]] = [[BLANK] * width for _ in range(height)]
        self.tower = Tower(width // 2, height // 2, RATE_OF_FIRE, clock=clock)
        self.bullets: list[Bullet] = []
        self.explosions: list[Explosion] = []
        self.display_message = ""
        self.prev_message = ""
        self.enemy_pool = Pooler(MINIMUM_ENEMY_POOL_SIZE)
        self.game_over = False
        self._active_enemies_count = 0
        self._prev_active_enemies_count: int | None = None
        self._pool_usage = 0
        self._prev_pool_usage = 0

    def active_enemies_count(self) -> int:
        """Number of active enemies seen at the start of the last update."""
        return self._active_enemies_count

    def spawn_tower(self) -> None:
        """Place the tower at random, at least five cells from every edge."""
        min_distance = 5
        max_x = self.width - min_distance - 1
        max_y = self.height - min_distance - 1
        self.tower.position = Vector2D(
            self.rng.randint(min_distance, max_x),
            self.rng.randint(min_distance, max_y),
        )

    def spawn_enemies(self, count: int) -> None:
        """Spawn enemies on random border cells, all heading for the tower."""
        for _ in range(count):
            border = self.rng.randrange(4)
            velocity = self.rng.randrange(ENEMY_MAX_SPEED) + 1
            if border == 0:
                position = Vector2D(self.rng.randrange(self.width), 0)
            elif border == 1:
                position = Vector2D(self.rng.randrange(self.width), self.height - 1)
            elif border == 2:
                position = Vector2D(0, self.rng.randrange(self.height))
            else:
                position = Vector2D(self.width - 1, self.rng.randrange(self.height))
            enemy = self.enemy_pool.spawn_enemy(position)
            enemy.target = self.tower.position
            enemy.velocity = velocity

    def has_enemy_reached_tower(self) -> bool:
        """True if an enemy stands on the tower; that enemy is removed."""
        for enemy in self.enemy_pool.active_enemies():
            if enemy.position == self.tower.position:
                self.enemy_pool.despawn_enemy(enemy)
                self.explosions.append(Explosion(self.tower.position, Color.LIME))
                return True
        return False

    def _in_bounds(self, pos: Vector2D) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def _check_collisions(self) -> None:
        survivors = []
        for bullet in self.bullets:
            pos = bullet.position
            if not self._in_bounds(pos):
                continue
            hit = next(
                (e for e in self.enemy_pool.active_enemies() if e.position == pos), None
            )
            if hit is None:
                survivors.append(bullet)
                continue
            self.enemy_pool.despawn_enemy(hit)
            self.explosions.append(Explosion(hit.position))
        self.bullets = survivors

    def _update_explosions(self) -> None:
        for explosion in self.explosions:
            explosion.update()
        self.explosions = [e for e in self.explosions if not e.finished()]

    def _update_grid(self) -> None:
        self.grid.clear()
        for bullet in self.bullets:
            self.grid.draw(GridCell(bullet.position, bullet.texture))
        for enemy in self.enemy_pool.active_enemies():
            self.grid.draw(GridCell(enemy.position, enemy.texture))
        self.grid.draw(GridCell(self.tower.position, self.tower.texture))
        for explosion in self.explosions:
            self.grid.draw(GridCell(explosion.position, explosion.texture))

    def update(self) -> None:
        """Advance the game by one frame."""
        active = self.enemy_pool.active_enemies()
        self._active_enemies_count = len(active)

        for enemy in active:
            ahead = self.grid.cell_at(enemy.next_position())
            if ahead.texture.symbol in _WALKABLE:
                enemy.update()

        for bullet in self.bullets:
            bullet.update()

        self._check_collisions()
        self._update_explosions()
        self._update_grid()

        if self.tower.auto_fire:
            self.fire_at_enemy()

    def fire_at_enemy(self) -> None:
        """Let the tower shoot, automatically or on demand."""
        enemies = self.enemy_pool.active_enemies()
        if self.tower.auto_fire:
            self.tower.update(enemies, self.bullets)
        else:
            self.tower.manual_fire(enemies, self.bullets)

    def render(self) -> None:
        """Draw what changed since the last frame, plus the status panel."""
        for y, row in enumerate(self.grid.rows()):
            prev_row = self.prev_grid[y]
            for x, cell in enumerate(row):
                if cell.texture.symbol != prev_row[x].symbol:
                    render_text(x, y, cell.texture.representation(), self.out)
                    prev_row[x] = cell.texture

        panel = self.width + 1
        status = "Auto-fire: ON " if self.tower.auto_fire else "Auto-fire: OFF "
        render_text(panel, 0, status, self.out)

        if self._prev_active_enemies_count != self._active_enemies_count:
            render_text(panel + len(ACTIVE_ENEMIES_TEXT), 2, " " * 6, self.out)
            render_text(
                panel, 2, f"{ACTIVE_ENEMIES_TEXT}{self._active_enemies_count} ", self.out
            )
            self._prev_active_enemies_count = self._active_enemies_count

        self._pool_usage = self.enemy_pool.pool_size()
        if self._prev_pool_usage != self._pool_usage:
            render_text(self.width + 22, 4, " " * (self._prev_pool_usage + 1), self.out)
            bar = "[" + "=" * self._pool_usage + "]"
            render_text(panel, 4, POOL_USAGE_TEXT + bar, self.out)
            render_text(
                panel + len(POOL_USAGE_TEXT) + ENEMY_SPAWN_BULK_SIZE // 2, 5, "^", self.out
            )
            self._prev_pool_usage = self._pool_usage

        if self.display_message != self.prev_message:
            padding = (self.width - len(self.display_message)) // 2
            render_text(max(0, padding), self.height + 1, self.display_message, self.out)
            self.prev_message = self.display_message

        (self.out if self.out is not None else sys.stdout).flush()

    def reset(self) -> None:
        """Clear the field for a new wave and redraw the empty grid."""
        self.grid.clear()
        self.grid.render(self.out)
        self.enemy_pool.clear()
        self.bullets.clear()
        self.explosions.clear()
        self._pool_usage = 0
        self._prev_pool_usage = 0
        self._prev_active_enemies_count = None