"""The player's tower, which shoots at approaching enemies."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from .constants import ENEMY_RANGE
from .entities import Bullet, Enemy
from .geometry import Vector2D
from .texture import Color, Texture


def distance(a: Vector2D, b: Vector2D) -> int:
    """Number of grid steps between two cells, diagonal moves allowed."""
    return max(abs(a.x - b.x), abs(a.y - b.y))


def find_closest_enemy(enemies: Iterable[Enemy], origin: Vector2D) -> Enemy | None:
    """The first enemy nearest to origin, or None if there are none."""
    return min(enemies, key=lambda e: distance(e.position, origin), default=None)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass
class Tower:
    """A tower at a position firing at most once per rate_of_fire milliseconds."""

    x: int
    y: int
    rate_of_fire: int
    clock: Callable[[], float] = time.monotonic
    position: Vector2D = field(init=False)
    last_fire_time: float = field(init=False)
    auto_fire: bool = field(init=False, default=True)
    texture: Texture = field(init=False, default=Texture("T", Color.GREEN))

    def __post_init__(self) -> None:
        self.position = Vector2D(self.x, self.y)
        self.last_fire_time = self.clock()

    def update(self, enemies: Iterable[Enemy], bullets: list[Bullet]) -> None:
        """Fire automatically if auto-fire is on."""
        if self.auto_fire:
            self._fire_at_enemy(enemies, bullets)

    def manual_fire(self, enemies: Iterable[Enemy], bullets: list[Bullet]) -> None:
        self._fire_at_enemy(enemies, bullets)

    def _fire_at_enemy(self, enemies: Iterable[Enemy], bullets: list[Bullet]) -> None:
        now = self.clock()
        elapsed_ms = int((now - self.last_fire_time) * 1000)
        if elapsed_ms < self.rate_of_fire:
            return
        target = find_closest_enemy(enemies, self.position)
        if target is None:
            return
        if self.auto_fire and distance(target.position, self.position) > ENEMY_RANGE:
            return
        self._fire_bullet_at(target, bullets)
        self.last_fire_time = now

    def _fire_bullet_at(self, enemy: Enemy, bullets: list[Bullet]) -> None:
        direction = Vector2D(
            _sign(enemy.position.x - self.position.x),
            _sign(enemy.position.y - self.position.y),
        )
        bullets.append(Bullet(self.position, direction))