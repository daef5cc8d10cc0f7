from striker.control_types import PointerEvent, PointerKind
from striker.entities import GameState
from striker.gesture import GestureKind
from striker.loop import GameLoop


def test_nothing_runs_before_start(world) -> None:
    loop = GameLoop(world)
    loop.pointer_down(10, 10, timestamp_ms=0)
    assert loop.tracker.pressed is False
    assert loop.tick() is False
    assert world.state is GameState.MENU


def test_start_then_tick(world, listener) -> None:
    loop = GameLoop(world)
    loop.start()
    assert loop.running is True
    assert world.state is GameState.PLAYING
    y = world.ball.y
    assert loop.tick() is True
    assert world.ball.y > y
    assert listener.stats[-1].score == 0


def test_tap_through_pointer_events(world) -> None:
    loop = GameLoop(world)
    loop.start()
    assert loop.handle(PointerEvent(PointerKind.DOWN, 200, 200, 1000)) is None
    assert loop.charge == 0
    gesture = loop.handle(PointerEvent(PointerKind.UP, 200, 200, 1100))
    assert gesture is not None and gesture.kind is GestureKind.TAP
    assert world.ball.vy == -12
    assert loop.charge is None


def test_charge_builds_once_per_tick(world) -> None:
    loop = GameLoop(world)
    loop.start()
    loop.pointer_down(200, 200, timestamp_ms=0)
    for _ in range(40):
        loop.tick()
    assert loop.charge == 20
    gesture = loop.pointer_up(timestamp_ms=400)
    assert gesture is not None and gesture.kind is GestureKind.HOLD
    assert (world.ball.vx, world.ball.vy) == (16, -16)


def test_moves_only_matter_on_release(world) -> None:
    loop = GameLoop(world)
    loop.start()
    vx, vy = world.ball.vx, world.ball.vy
    loop.pointer_down(100, 100, timestamp_ms=0)
    loop.pointer_move(160, 110)
    assert (world.ball.vx, world.ball.vy) == (vx, vy)
    gesture = loop.pointer_up(timestamp_ms=90)
    assert gesture is not None and gesture.kind is GestureKind.CURVE
    assert world.ball.vx == vx + 60 * 0.15


def test_game_over_stops_the_loop(world, listener) -> None:
    loop = GameLoop(world)
    loop.start()
    loop.pointer_down(0, 0, timestamp_ms=0)
    world.ball.x = world.width + world.ball.radius + 1
    assert loop.tick() is True
    assert world.state is GameState.GAME_OVER
    assert loop.running is False
    assert loop.tracker.pressed is False
    assert loop.tick() is False
    assert len(listener.game_overs) == 1


def test_stop_is_deterministic(world) -> None:
    loop = GameLoop(world)
    loop.start()
    loop.pointer_down(0, 0, timestamp_ms=0)
    loop.stop()
    assert loop.tick() is False
    assert loop.tracker.pressed is False
    assert loop.pointer_up(timestamp_ms=50) is None


def test_restart_reinitialises_after_game_over(world) -> None:
    loop = GameLoop(world)
    assert loop.restart() is False
    loop.start()
    assert loop.restart() is False

    world.ball.x = world.width + world.ball.radius + 1
    loop.tick()
    assert loop.restart() is True
    assert loop.running is True
    assert world.state is GameState.PLAYING
    assert world.ball.x == world.width * 0.2
