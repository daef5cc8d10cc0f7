"""Goal detection outcomes, level progression and the game-over transition.

The state machine is ``MENU -> PLAYING -> GAME_OVER``. Scoring a goal keeps the
game in ``PLAYING`` and re-initialises the level; ``GAME_OVER`` only returns to
``PLAYING`` through :func:`restart`. A single latch on the world guards both
goal and game-over handling so neither can fire twice in one life.
"""

from __future__ import annotations

import logging
from typing import List

from striker.constants import (
    COLORS,
    GOAL_BASE_SPEED,
    GOAL_MOVING_AFTER,
    GOAL_SPEED_PER_POINT,
    GOAL_WIDTH,
    PERFECT_GOAL_DISTANCE,
    PERFECT_GOAL_POINTS,
    PERFECT_GOAL_STYLE,
    POLE_AFTER,
)
from striker.entities import Ball, BallType, GameState, Goal, Obstacle, ObstacleType
from striker.particles import spawn_particles
from striker.world import World

logger = logging.getLogger(__name__)


def _build_obstacles(world: World) -> List[Obstacle]:
    obstacles: List[Obstacle] = []
    if world.stats.score > POLE_AFTER:
        obstacles.append(
            Obstacle(
                id="pole1",
                x=world.width * 0.5,
                y=world.height - 100,
                width=10,
                height=100,
                type=ObstacleType.POLE,
            )
        )
    return obstacles


def init_level(world: World) -> None:
    """Place a fresh ball, goal and obstacle set derived from the current score."""

    world.game_over_triggered = False
    score = world.stats.score
    world.ball = Ball(
        x=world.width * 0.2,
        y=world.height * 0.5,
        radius=world.width * 0.04,
        type=BallType.PLASTIC,
    )
    world.goal = Goal(
        x=world.width * 0.85,
        y=world.height * 0.4,
        width=GOAL_WIDTH,
        height=world.height * 0.2,
        moving=score > GOAL_MOVING_AFTER,
        speed_y=GOAL_BASE_SPEED + score * GOAL_SPEED_PER_POINT,
    )
    world.obstacles = _build_obstacles(world)


def start_game(world: World) -> None:
    """Enter ``PLAYING`` with zeroed stats and a brand new level."""

    world.state = GameState.PLAYING
    world.stats.score = 0
    world.stats.combo = 0
    world.stats.style_points = 0
    world.particles = []
    init_level(world)
    logger.debug("Game started (%sx%s)", world.width, world.height)
    world.notify_stats()


def restart(world: World) -> bool:
    """Start over after a game over. Returns ``False`` from any other state."""

    if world.state is not GameState.GAME_OVER:
        logger.debug("Ignoring restart while %s", world.state.value)
        return False
    start_game(world)
    return True


def is_perfect(world: World) -> bool:
    return abs(world.ball.y - world.goal.center_y) < PERFECT_GOAL_DISTANCE


def handle_goal(world: World) -> None:
    """Award points for a goal and set up the next shot."""

    if world.game_over_triggered:
        return

    points = 1
    if is_perfect(world):
        points = PERFECT_GOAL_POINTS
        world.stats.style_points += PERFECT_GOAL_STYLE
        spawn_particles(world, world.ball.x, world.ball.y, 20, COLORS["neon"])

    world.stats.score += points
    world.stats.combo += 1
    logger.debug("Goal for %d (score=%d, combo=%d)", points, world.stats.score, world.stats.combo)
    world.notify_stats()
    init_level(world)


def handle_obstacle_hit(world: World) -> None:
    world.stats.combo = 0
    world.notify_stats()


def handle_game_over(world: World) -> None:
    """Report the final stats once, then zero them for the next life.

    ``high_score`` is left untouched; comparing against and persisting the best
    score is the presentation layer's job.
    """

    if world.game_over_triggered:
        return
    world.game_over_triggered = True
    world.state = GameState.GAME_OVER

    final = world.snapshot()
    logger.info("Game over: score=%d style=%d", final.score, final.style_points)
    if world.listener is not None:
        world.listener.on_game_over(final)

    world.stats.score = 0
    world.stats.combo = 0
    world.stats.style_points = 0
