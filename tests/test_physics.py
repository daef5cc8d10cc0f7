import math

from striker import physics, scoring
from striker.entities import Ball, GameState, Goal, Obstacle, ObstacleType, Particle
from striker.particles import update_particles


def test_free_flight_applies_gravity_then_drag(world) -> None:
    world.ball = Ball(x=200, y=100, vx=2.0, vy=1.0, radius=10)
    physics.step(world)
    assert math.isclose(world.ball.vy, (1.0 + 0.5) * 0.985)
    assert math.isclose(world.ball.vx, 2.0 * 0.985)
    assert math.isclose(world.ball.y, 100 + (1.0 + 0.5) * 0.985)
    assert math.isclose(world.ball.rotation, 2.0 * 0.985 * 0.1)
    assert world.ball.is_airborne is True


def test_vy_keeps_growing_while_falling(world) -> None:
    world.ball = Ball(x=200, y=40, radius=10)
    previous = world.ball.vy
    for _ in range(20):
        physics.step(world)
        assert world.ball.vy > previous
        previous = world.ball.vy


def test_ground_bounce_damps_and_clamps(world) -> None:
    world.ball = Ball(x=200, y=569, vx=4.0, vy=10.0, radius=10)
    physics.step(world)
    incoming = (10.0 + 0.5) * 0.985
    assert math.isclose(world.ball.vy, -0.7 * incoming)
    assert math.isclose(world.ball.vx, 4.0 * 0.985 * 0.8)
    assert world.ball.y + world.ball.radius == world.ground_y
    assert world.ball.is_airborne is False
    # Hard landing kicks up dust.
    assert len(world.particles) == 5


def test_soft_landing_makes_no_dust(world) -> None:
    world.ball = Ball(x=200, y=569.5, vy=1.0, radius=10)
    physics.step(world)
    assert world.ball.is_airborne is False
    assert world.particles == []


def test_ceiling_bounce(world) -> None:
    world.ball = Ball(x=200, y=12, vy=-5.0, radius=10)
    physics.step(world)
    assert world.ball.y == 10
    assert math.isclose(world.ball.vy, 0.7 * 4.5 * 0.985)


def test_ceiling_bounce_keeps_airborne_flag(world) -> None:
    world.ball = Ball(x=200, y=12, vy=-5.0, radius=10, is_airborne=False)
    physics.step(world)
    assert world.ball.y == 10
    assert world.ball.is_airborne is False


def test_left_wall_bounce(world) -> None:
    world.ball = Ball(x=11, y=200, vx=-5.0, radius=10)
    physics.step(world)
    assert world.ball.x == 10
    assert math.isclose(world.ball.vx, 0.7 * 5.0 * 0.985)


def test_goal_box_is_half_open() -> None:
    goal = Goal(x=100, y=100, width=15, height=50)
    assert physics.in_goal(Ball(x=100, y=100), goal)
    assert physics.in_goal(Ball(x=114, y=149), goal)
    assert not physics.in_goal(Ball(x=99, y=120), goal)
    assert not physics.in_goal(Ball(x=115, y=120), goal)
    assert not physics.in_goal(Ball(x=107, y=99), goal)
    assert not physics.in_goal(Ball(x=107, y=150), goal)


def test_moving_goal_reflects_inside_band(world) -> None:
    goal = Goal(x=680, y=51, width=15, height=120, moving=True, speed_y=-3.0)
    physics.advance_goal(goal, world.height)
    assert goal.y == 50
    assert goal.speed_y == 3.0

    goal.y = world.height - 50 - goal.height - 1
    physics.advance_goal(goal, world.height)
    assert goal.y == world.height - 50 - goal.height
    assert goal.speed_y == -3.0


def test_static_goal_does_not_move(world) -> None:
    goal = Goal(x=680, y=240, width=15, height=120, moving=False, speed_y=2.0)
    physics.advance_goal(goal, world.height)
    assert goal.y == 240


def test_leaving_right_edge_ends_the_game(world, listener) -> None:
    scoring.start_game(world)
    world.ball.x = world.width + world.ball.radius + 5
    physics.step(world)
    assert world.state is GameState.GAME_OVER
    assert len(listener.game_overs) == 1


def test_scoring_through_step(world, listener) -> None:
    scoring.start_game(world)
    goal = world.goal
    world.ball.x = goal.x + 1
    world.ball.y = goal.y + 5
    world.ball.vx = 0.0
    world.ball.vy = 0.0
    physics.step(world)
    assert world.stats.score == 1
    assert world.stats.combo == 1
    # The level was re-initialised with a fresh ball at the spawn point.
    assert world.ball.x == world.width * 0.2


def test_obstacle_hit_bounces_and_breaks_combo(world, listener) -> None:
    scoring.start_game(world)
    world.stats.score = 3
    scoring.init_level(world)
    pole = world.obstacles[0]
    world.stats.combo = 4
    world.ball.x = pole.x - 5
    world.ball.y = pole.y + 20
    world.ball.vx = 2.0
    world.ball.vy = 0.0

    physics.step(world)

    assert world.stats.combo == 0
    assert math.isclose(world.ball.vx, 2.0 * 0.985 * -1.2)
    assert listener.stats[-1].combo == 0
    assert len(world.particles) == 3
    # Obstacles survive collisions.
    assert world.obstacles == [pole]


def test_obstacle_pass_after_goal_uses_rebuilt_level(world) -> None:
    scoring.start_game(world)
    goal = world.goal
    world.stats.combo = 2
    world.obstacles = [
        Obstacle(id="cow", x=goal.x - 20, y=goal.y, width=40, height=40, type=ObstacleType.COW)
    ]
    world.ball.x = goal.x + 1
    world.ball.y = goal.y + 5
    world.ball.vx = 0.0
    world.ball.vy = 0.0

    physics.step(world)

    assert world.stats.score == 1
    # The goal rebuilt the level without the cow, so the combo survives.
    assert world.stats.combo == 3
    assert world.obstacles == []


def test_inactive_obstacle_is_ignored(world) -> None:
    world.ball = Ball(x=100, y=100, radius=10)
    world.obstacles = [
        Obstacle(id="fan", x=95, y=95, width=20, height=20, type=ObstacleType.FAN, active=False)
    ]
    world.stats.combo = 3
    physics.step(world)
    assert world.stats.combo == 3


def test_particles_decay_and_expire(world) -> None:
    world.particles = [
        Particle(x=0, y=0, vx=1, vy=2, life=0.05, color="#fff", size=2),
        Particle(x=0, y=0, vx=1, vy=2, life=0.5, color="#fff", size=2),
    ]
    update_particles(world)
    assert len(world.particles) == 1
    survivor = world.particles[0]
    assert (survivor.x, survivor.y) == (1, 2)
    assert math.isclose(survivor.life, 0.45)


def test_particles_expire_after_about_twenty_ticks(world) -> None:
    world.particles = [Particle(x=0, y=0, vx=0, vy=0, life=1.0, color="#fff", size=2)]
    for _ in range(21):
        update_particles(world)
    assert world.particles == []


def test_free_fall_settles_on_the_ground(world) -> None:
    scoring.start_game(world)
    # 0.7 damping needs well over 100 ticks to stop a drop from mid-screen.
    for _ in range(300):
        physics.step(world)
    ball = world.ball
    assert world.state is GameState.PLAYING
    assert ball.is_airborne is False
    assert abs(ball.vy) < 0.5
    assert math.isclose(ball.y + ball.radius, world.ground_y)
