"""Fixed-step ball physics and collision handling.

One call to :func:`step` advances the world by exactly one tick, regardless of
how long the frame took on the wall clock. Checks run in a fixed order every
tick and all of them apply, so a ball that crosses the goal while touching an
obstacle both scores and breaks the combo.
"""

from __future__ import annotations

from striker import scoring
from striker.constants import (
    AIR_RESISTANCE,
    BOUNCE_DAMPING,
    COLORS,
    DUST_SPEED_THRESHOLD,
    GOAL_MARGIN,
    GRAVITY,
    GROUND_FRICTION,
    OBSTACLE_BOUNCE,
    SPIN_FACTOR,
)
from striker.entities import Ball, Goal, Obstacle
from striker.particles import spawn_particles, update_particles
from striker.world import World


def integrate_ball(ball: Ball) -> None:
    """Apply gravity and drag, then move and spin the ball."""

    ball.vy += GRAVITY
    ball.vx *= AIR_RESISTANCE
    ball.vy *= AIR_RESISTANCE
    ball.x += ball.vx
    ball.y += ball.vy
    ball.rotation += ball.vx * SPIN_FACTOR


def advance_goal(goal: Goal, height: float) -> None:
    """Slide a moving goal and bounce it inside ``[margin, height - margin - goal.height]``."""

    if not goal.moving:
        return
    goal.y += goal.speed_y
    top = GOAL_MARGIN
    bottom = height - GOAL_MARGIN - goal.height
    if goal.y < top:
        goal.y = top
        goal.speed_y = abs(goal.speed_y)
    elif goal.y > bottom:
        goal.y = bottom
        goal.speed_y = -abs(goal.speed_y)


def collide_bounds(world: World) -> None:
    """Ground, ceiling and left-wall bounces. The right edge is open."""

    ball = world.ball
    ground = world.ground_y
    if ball.y + ball.radius > ground:
        ball.y = ground - ball.radius
        ball.vy *= -BOUNCE_DAMPING
        ball.vx *= GROUND_FRICTION
        ball.is_airborne = False
        if abs(ball.vy) > DUST_SPEED_THRESHOLD:
            spawn_particles(world, ball.x, ball.y + ball.radius, 5, COLORS["ground"])
    elif ball.y - ball.radius < 0:
        ball.y = ball.radius
        ball.vy *= -BOUNCE_DAMPING
    else:
        ball.is_airborne = True

    if ball.x - ball.radius < 0:
        ball.x = ball.radius
        ball.vx *= -BOUNCE_DAMPING


def is_off_screen(ball: Ball, width: float) -> bool:
    return ball.x - ball.radius > width


def in_goal(ball: Ball, goal: Goal) -> bool:
    """Ball centre inside the half-open box ``[x, x+w) x [y, y+h)``."""

    return goal.x <= ball.x < goal.x + goal.width and goal.y <= ball.y < goal.y + goal.height


def hits_obstacle(ball: Ball, obstacle: Obstacle) -> bool:
    return (
        ball.x + ball.radius > obstacle.x
        and ball.x - ball.radius < obstacle.x + obstacle.width
        and ball.y + ball.radius > obstacle.y
        and ball.y - ball.radius < obstacle.y + obstacle.height
    )


def step(world: World) -> None:
    """Advance the simulation by one tick."""

    ball = world.ball
    integrate_ball(ball)
    advance_goal(world.goal, world.height)
    collide_bounds(world)

    if is_off_screen(ball, world.width):
        scoring.handle_game_over(world)
        return

    if in_goal(ball, world.goal):
        # Re-initialises the level; the obstacle pass below checks the new
        # obstacle list against this tick's ball.
        scoring.handle_goal(world)

    for obstacle in world.obstacles:
        if obstacle.active and hits_obstacle(ball, obstacle):
            ball.vx *= OBSTACLE_BOUNCE
            spawn_particles(world, ball.x, ball.y, 3, COLORS["spark"])
            scoring.handle_obstacle_hit(world)

    update_particles(world)
