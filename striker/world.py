"""The single simulation context handed to every step function.

``World`` owns the ball, goal, obstacles, particles and stats. Physics,
gesture and scoring functions receive it explicitly instead of reaching for
module globals, and callers serialise those calls onto one thread (the pygame
loop), so no locking is needed.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from typing import List, Optional, Protocol

from striker.constants import GOAL_WIDTH, GROUND_HEIGHT, SCREEN_HEIGHT, SCREEN_WIDTH
from striker.entities import Ball, GameState, Goal, Obstacle, Particle, Stats


class GameListener(Protocol):
    """Presentation-side observer of stat changes and the end of a life."""

    def on_stats_changed(self, stats: Stats) -> None:  # pragma: no cover - protocol definition
        ...

    def on_game_over(self, stats: Stats) -> None:  # pragma: no cover - protocol definition
        ...


def _default_ball() -> Ball:
    return Ball(x=SCREEN_WIDTH * 0.2, y=SCREEN_HEIGHT * 0.5, radius=SCREEN_WIDTH * 0.04)


def _default_goal() -> Goal:
    return Goal(x=SCREEN_WIDTH * 0.85, y=SCREEN_HEIGHT * 0.4, width=GOAL_WIDTH, height=SCREEN_HEIGHT * 0.2)


@dataclass
class World:
    """Mutable game state for one window.

    Attributes:
        width, height: Playfield size in pixels.
        state: Where the game sits in the MENU/PLAYING/GAME_OVER machine.
        game_over_triggered: Latch that makes goal and game-over handling
            fire at most once per life. Cleared by every level init.
        listener: Optional observer notified after every stats change.
        rng: Random source for particle bursts; tests seed it.
    """

    width: float = SCREEN_WIDTH
    height: float = SCREEN_HEIGHT
    ball: Ball = field(default_factory=_default_ball)
    goal: Goal = field(default_factory=_default_goal)
    obstacles: List[Obstacle] = field(default_factory=list)
    particles: List[Particle] = field(default_factory=list)
    stats: Stats = field(default_factory=Stats)
    state: GameState = GameState.MENU
    game_over_triggered: bool = False
    listener: Optional[GameListener] = None
    rng: random.Random = field(default_factory=random.Random)

    @property
    def ground_y(self) -> float:
        return self.height - GROUND_HEIGHT

    def snapshot(self) -> Stats:
        """Copy of the stats so listeners cannot mutate the live record."""

        return replace(self.stats)

    def notify_stats(self) -> None:
        if self.listener is not None:
            self.listener.on_stats_changed(self.snapshot())
