"""Pointer gesture tracking and shot classification.

The tracker follows a single press from pointer-down to pointer-up and builds
charge while held. On release the gesture is classified by
:func:`classify_gesture`, a pure function of the drag vector, the press
duration and the accumulated charge, and :func:`apply_gesture` turns the
result into a kick on the ball.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from striker.constants import (
    CHARGE_PER_TICK,
    COLORS,
    CURVE_FACTOR,
    CURVE_STYLE,
    DIP_FORCE_Y,
    HOLD_LAUNCH_FACTOR,
    MAX_POWER,
    SWIPE_THRESHOLD,
    TAP_FORCE_Y,
    TAP_MAX_DURATION_MS,
)
from striker.particles import spawn_particles
from striker.world import World


class GestureKind(Enum):
    TAP = "TAP"
    HOLD = "HOLD"
    CURVE = "CURVE"
    DIP = "DIP"
    # Upward swipe: recognised as a swipe but kicks nothing.
    NONE = "NONE"


@dataclass(frozen=True)
class Gesture:
    """Outcome of one press/release cycle.

    Attributes:
        kind: Shot category.
        dx, dy: Drag vector from press to release, in pixels.
        duration_ms: Time the pointer was held down.
        power: Launch power for ``HOLD`` shots (charge clamped to the max),
            ``0.0`` for everything else.
    """

    kind: GestureKind
    dx: float
    dy: float
    duration_ms: float
    power: float = 0.0

    @property
    def distance(self) -> float:
        return math.hypot(self.dx, self.dy)


def classify_gesture(dx: float, dy: float, duration_ms: float, charge: float) -> Gesture:
    """Map a drag vector, press duration and charge to exactly one shot."""

    if math.hypot(dx, dy) > SWIPE_THRESHOLD:
        if abs(dx) > abs(dy):
            kind = GestureKind.CURVE
        elif dy > 0:
            kind = GestureKind.DIP
        else:
            kind = GestureKind.NONE
        return Gesture(kind, dx, dy, duration_ms)

    if duration_ms < TAP_MAX_DURATION_MS:
        return Gesture(GestureKind.TAP, dx, dy, duration_ms)

    return Gesture(GestureKind.HOLD, dx, dy, duration_ms, power=min(charge, MAX_POWER))


def apply_gesture(world: World, gesture: Gesture) -> None:
    """Kick the ball according to ``gesture``."""

    ball = world.ball
    if gesture.kind is GestureKind.CURVE:
        ball.vx += gesture.dx * CURVE_FACTOR
        world.stats.style_points += CURVE_STYLE
        world.notify_stats()
    elif gesture.kind is GestureKind.DIP:
        ball.vy += DIP_FORCE_Y
    elif gesture.kind is GestureKind.TAP:
        ball.vy = TAP_FORCE_Y
        spawn_particles(world, ball.x, ball.y + ball.radius, 5, COLORS["spark"])
    elif gesture.kind is GestureKind.HOLD:
        ball.vx = gesture.power * HOLD_LAUNCH_FACTOR
        ball.vy = -gesture.power * HOLD_LAUNCH_FACTOR
        spawn_particles(world, ball.x, ball.y, 15, COLORS["power"])


@dataclass
class GestureTracker:
    """Follows one pointer press and accumulates charge while it is held."""

    pressed: bool = False
    start_x: float = 0.0
    start_y: float = 0.0
    current_x: float = 0.0
    current_y: float = 0.0
    start_time_ms: float = 0.0
    charge: float = 0.0

    def press(self, x: float, y: float, timestamp_ms: float) -> None:
        self.pressed = True
        self.start_x = self.current_x = x
        self.start_y = self.current_y = y
        self.start_time_ms = timestamp_ms
        self.charge = 0.0

    def move(self, x: float, y: float) -> None:
        if not self.pressed:
            return
        self.current_x = x
        self.current_y = y

    def charge_tick(self) -> None:
        """Build power for one tick. Only clamped when the shot is released."""

        if self.pressed:
            self.charge += CHARGE_PER_TICK

    def release(self, timestamp_ms: float) -> Optional[Gesture]:
        """Finish the press and classify it, or ``None`` if nothing was pressed."""

        if not self.pressed:
            return None
        self.pressed = False
        dx = self.current_x - self.start_x
        dy = self.current_y - self.start_y
        return classify_gesture(dx, dy, timestamp_ms - self.start_time_ms, self.charge)

    def cancel(self) -> None:
        self.pressed = False
        self.charge = 0.0
