"""Shared game data: constants, small value types and collision testing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

PLAYER_SPRITE = "player_a_01.png"
PLAYER_SIZE = (144.0, 75.0)
PLAYER_LASER_SPRITE = "laser_a_01.png"
PLAYER_LASER_SIZE = (9.0, 54.0)

ENEMY_SPRITE = "enemy_a_01.png"
ENEMY_SIZE = (144.0, 75.0)
ENEMY_LASER_SPRITE = "laser_b_01.png"
ENEMY_LASER_SIZE = (17.0, 55.0)
MAX_ENEMY = 8
EXPLOSION_SHEET = "explo_a_sheet.png"
EXPLOSION_LEN = 16

SPRITE_SCALE = 1.2

BASE_SPEED = 500.0
PLAYER_RESPAWN_DELAY = 2.0
FORMATION_MEMBERS_MAX = 2

EXPLOSION_FRAME_SECONDS = 0.05

Pair = Tuple[float, float]


@dataclass
class Velocity:
    """Direction of travel, in units of BASE_SPEED per second."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class SpriteSize:
    """Unscaled size of a sprite in pixels."""

    w: float
    h: float

    @classmethod
    def from_tuple(cls, size: Sequence[float]) -> "SpriteSize":
        w, h = size
        return cls(float(w), float(h))

    def __iter__(self):
        yield self.w
        yield self.h


@dataclass(frozen=True)
class WinSize:
    """Size of the play area."""

    w: float
    h: float


@dataclass
class ExplosionTimer:
    """Repeating timer that paces the frames of an explosion animation."""

    duration: float = EXPLOSION_FRAME_SECONDS
    elapsed: float = 0.0

    def tick(self, delta: float) -> bool:
        """Advance by ``delta`` seconds; return True if the timer completed a period."""
        if self.duration <= 0:
            return True
        self.elapsed += delta
        if self.elapsed >= self.duration:
            self.elapsed %= self.duration
            return True
        return False


@dataclass
class PlayerState:
    """Whether the player is alive and when it was last shot (-1 if never)."""

    on: bool = False
    last_shot: float = -1.0

    def shot(self, time: float) -> None:
        self.on = False
        self.last_shot = time

    def spawned(self) -> None:
        self.on = True
        self.last_shot = -1.0


def _bounds(pos: Sequence[float], size: Sequence[float], scale: Sequence[float]):
    x, y = pos[0], pos[1]
    w, h = size
    sx, sy = scale[0], scale[1]
    hw, hh = w * sx / 2.0, h * sy / 2.0
    return x - hw, y - hh, x + hw, y + hh


def intersects(pos_a, size_a, scale_a, pos_b, size_b, scale_b) -> bool:
    """Return True if two centred, scaled axis-aligned boxes touch or overlap."""
    a_min_x, a_min_y, a_max_x, a_max_y = _bounds(pos_a, size_a, scale_a)
    b_min_x, b_min_y, b_max_x, b_max_y = _bounds(pos_b, size_b, scale_b)
    return (
        a_min_x <= b_max_x
        and a_max_x >= b_min_x
        and a_min_y <= b_max_y
        and a_max_y >= b_min_y
    )