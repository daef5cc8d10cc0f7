"""Plain records describing everything that lives on the pitch.

These dataclasses carry no behaviour; the physics, gesture and scoring modules
mutate them in place. The enumerations only steer cosmetic choices in the
renderer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class GameState(Enum):
    MENU = "MENU"
    PLAYING = "PLAYING"
    GAME_OVER = "GAME_OVER"


class BallType(Enum):
    PLASTIC = "PLASTIC"
    RUBBER = "RUBBER"
    LEATHER = "LEATHER"
    TAPE = "TAPE"


class ObstacleType(Enum):
    RICKSHAW = "RICKSHAW"
    COW = "COW"
    FAN = "FAN"
    POLE = "POLE"


@dataclass
class Ball:
    """The football. ``is_airborne`` is recomputed on every tick."""

    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    radius: float = 15.0
    rotation: float = 0.0
    type: BallType = BallType.PLASTIC
    is_airborne: bool = True


@dataclass
class Goal:
    """Vertical goal line; ``width`` is the depth of the scoring band."""

    x: float
    y: float
    width: float
    height: float
    moving: bool = False
    speed_y: float = 2.0

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2


@dataclass
class Obstacle:
    id: str
    x: float
    y: float
    width: float
    height: float
    type: ObstacleType
    speed_x: float = 0.0
    active: bool = True


@dataclass
class Particle:
    """Cosmetic spark; ``life`` fades from 1.0 toward zero."""

    x: float
    y: float
    vx: float
    vy: float
    life: float
    color: str
    size: float


@dataclass
class Stats:
    score: int = 0
    high_score: int = 0
    combo: int = 0
    style_points: int = 0
