"""Enemy flight formations: elliptical orbits shared by small groups."""

from __future__ import annotations

import copy
import math
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from .components import BASE_SPEED, FORMATION_MEMBERS_MAX, WinSize

Pair = Tuple[float, float]


@dataclass
class Formation:
    """Orbit of one enemy around a pivot, entered from a start point."""

    start: Pair
    radius: Pair
    pivot: Pair
    speed: float
    angle: float

    def step(self, x: float, y: float, delta: float) -> Pair:
        """Move from (x, y) toward the orbit for a frame of ``delta`` seconds.

        Enemies move at half time rate; the angle advances only once the
        enemy is on or near the ellipse.
        """
        delta = delta / 2.0
        max_distance = delta * self.speed
        direction = 1.0 if self.start[0] < 0.0 else -1.0
        x_pivot, y_pivot = self.pivot
        x_radius, y_radius = self.radius

        angle = self.angle + direction * self.speed * delta / (
            min(x_radius, y_radius) * math.pi / 2.0
        )

        x_dst = x_radius * math.cos(angle) + x_pivot
        y_dst = y_radius * math.sin(angle) + y_pivot

        dx = x - x_dst
        dy = y - y_dst
        distance = math.hypot(dx, dy)
        ratio = 0.0 if distance == 0.0 else max_distance / distance

        new_x = x - dx * ratio
        new_x = max(new_x, x_dst) if dx > 0.0 else min(new_x, x_dst)
        new_y = y - dy * ratio
        new_y = max(new_y, y_dst) if dy > 0.0 else min(new_y, y_dst)

        if distance < max_distance * self.speed / 20.0:
            self.angle = angle

        return new_x, new_y


def _uniform(rng: random.Random, low: float, high: float) -> float:
    if not low < high:
        raise ValueError(f"empty range {low}..{high}")
    return rng.uniform(low, high)


class FormationMaker:
    """Hands out formations, reusing each template for a few enemies."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.current_template: Optional[Formation] = None
        self.current_members = 0

    def make(self, win_size: WinSize) -> Formation:
        if self.current_template is not None and self.current_members < FORMATION_MEMBERS_MAX:
            self.current_members += 1
            return copy.copy(self.current_template)

        rng = self.rng
        w_span = win_size.w - 200.0
        h_span = win_size.h - 100.0
        x = w_span if rng.random() < 0.3 else -w_span
        y = _uniform(rng, -h_span, h_span)

        w_span = win_size.w / 3.0
        h_span = win_size.h / 2.0 - 50.0
        pivot = (_uniform(rng, -w_span, w_span), _uniform(rng, 0.0, h_span))
        radius = (_uniform(rng, 120.0, 150.0), 100.0)
        angle = math.atan2(y - pivot[1], x - pivot[0])

        formation = Formation(
            start=(x, y), radius=radius, pivot=pivot, speed=BASE_SPEED, angle=angle
        )
        self.current_template = copy.copy(formation)
        self.current_members = 1
        return formation