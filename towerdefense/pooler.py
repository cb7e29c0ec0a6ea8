"""A reusable pool of enemies."""

from __future__ import annotations

from .entities import Enemy
from .geometry import Vector2D


class Pooler:
    """Keeps enemy objects around for reuse instead of creating new ones."""

    def __init__(self, minimum_pool_size: int) -> None:
        self.minimum_pool_size = minimum_pool_size
        self._enemies: list[Enemy] = [Enemy() for _ in range(minimum_pool_size)]

    def pool_size(self) -> int:
        """Number of enemy objects held, active or idle."""
        return len(self._enemies)

    def spawn_enemy(self, position: Vector2D) -> Enemy:
        """Activate an idle enemy at position, growing the pool if none is idle."""
        enemy = next((e for e in self._enemies if not e.active), None)
        if enemy is None:
            enemy = Enemy()
            self._enemies.append(enemy)
        enemy.frame_counter = 0
        enemy.activate(position)
        return enemy

    def despawn_enemy(self, enemy: Enemy) -> None:
        """Return an enemy to the pool."""
        if not any(e is enemy for e in self._enemies):
            raise ValueError("enemy does not belong to this pool")
        enemy.deactivate()

    def active_enemies(self) -> list[Enemy]:
        return [e for e in self._enemies if e.active]

    def clear(self) -> None:
        """Deactivate every enemy and shrink the pool back to its minimum size."""
        for enemy in self._enemies:
            enemy.deactivate()
        del self._enemies[self.minimum_pool_size:]