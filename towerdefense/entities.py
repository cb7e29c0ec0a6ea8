"""Moving and transient things on the grid: bullets, enemies, explosions."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import FRAMERATE
from .geometry import Vector2D
from .texture import Color, Texture


@dataclass
class Bullet:
    """A bullet travelling one step of its direction per frame."""

    position: Vector2D
    direction: Vector2D
    texture: Texture = field(default=Texture("o", Color.BLUE))

    def update(self) -> None:
        self.position = self.position + self.direction


def _step(value: int, goal: int) -> int:
    if value < goal:
        return value + 1
    if value > goal:
        return value - 1
    return value


@dataclass(eq=False)
class Enemy:
    """An enemy walking towards its target at a given speed."""

    position: Vector2D = field(default_factory=Vector2D)
    target: Vector2D = field(default_factory=Vector2D)
    velocity: float = 0.0
    active: bool = False
    frame_counter: int = 0
    texture: Texture = field(default=Texture("@", Color.RED))

    def activate(self, spawn_position: Vector2D) -> None:
        self.position = spawn_position
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def update(self) -> None:
        """Advance one frame, stepping once every FRAMERATE / velocity frames."""
        self.frame_counter += 1
        # A zero velocity means the enemy never moves.
        if self.velocity and self.frame_counter >= FRAMERATE / self.velocity:
            self.position = self.next_position()
            self.frame_counter = 0

    def next_position(self) -> Vector2D:
        """The cell one step closer to the target on each axis."""
        return Vector2D(
            _step(self.position.x, self.target.x),
            _step(self.position.y, self.target.y),
        )


@dataclass
class Explosion:
    """A short-lived mark left where something blew up."""

    position: Vector2D
    color: Color = Color.YELLOW
    frames_remaining: int = 5
    texture: Texture = field(init=False)

    def __post_init__(self) -> None:
        self.texture = Texture("X", self.color)

    def update(self) -> None:
        if self.frames_remaining > 0:
            self.frames_remaining -= 1

    def finished(self) -> bool:
        return self.frames_remaining <= 0