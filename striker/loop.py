"""Game loop driver tying pointer gestures to the fixed-step simulation.

The host (``striker.game``) calls :meth:`GameLoop.tick` once per displayed
frame and forwards every pointer event. Both happen on the pygame thread, so
input handling and the physics step never overlap.
"""

from __future__ import annotations

import logging
from typing import Optional

from striker import physics, scoring
from striker.control_types import PointerEvent, PointerKind
from striker.entities import GameState
from striker.gesture import Gesture, GestureTracker, apply_gesture
from striker.world import World

logger = logging.getLogger(__name__)


class GameLoop:
    """Owns the start/stop lifecycle and routes input into the world."""

    def __init__(self, world: World) -> None:
        self.world = world
        self.tracker = GestureTracker()
        # True while ticks should be scheduled; cleared on stop or game over.
        self.running = False

    @property
    def playing(self) -> bool:
        return self.running and self.world.state is GameState.PLAYING

    def start(self) -> None:
        """MENU -> PLAYING: fresh stats and level, then begin ticking."""

        self.tracker.cancel()
        scoring.start_game(self.world)
        self.running = True

    def restart(self) -> bool:
        """GAME_OVER -> PLAYING. Ignored from any other state."""

        self.tracker.cancel()
        if not scoring.restart(self.world):
            return False
        self.running = True
        return True

    def stop(self) -> None:
        """Stop scheduling ticks and drop any half-finished gesture."""

        self.running = False
        self.tracker.cancel()

    def pointer_down(self, x: float, y: float, timestamp_ms: float) -> None:
        if not self.playing:
            return
        self.tracker.press(x, y, timestamp_ms)

    def pointer_move(self, x: float, y: float) -> None:
        if not self.playing:
            return
        self.tracker.move(x, y)

    def pointer_up(self, timestamp_ms: float) -> Optional[Gesture]:
        """Classify the finished press and kick the ball. Returns the gesture."""

        if not self.playing:
            return None
        gesture = self.tracker.release(timestamp_ms)
        if gesture is None:
            return None
        logger.debug("Gesture %s dx=%.1f dy=%.1f %.0fms", gesture.kind.value, gesture.dx, gesture.dy, gesture.duration_ms)
        apply_gesture(self.world, gesture)
        return gesture

    def handle(self, event: PointerEvent) -> Optional[Gesture]:
        if event.kind is PointerKind.DOWN:
            self.pointer_down(event.x, event.y, event.timestamp_ms)
        elif event.kind is PointerKind.MOVE:
            self.pointer_move(event.x, event.y)
        else:
            return self.pointer_up(event.timestamp_ms)
        return None

    def tick(self) -> bool:
        """Run one simulation step. Returns ``False`` when nothing was advanced."""

        if not self.playing:
            return False
        self.tracker.charge_tick()
        physics.step(self.world)
        if self.world.state is not GameState.PLAYING:
            self.stop()
        return True

    @property
    def charge(self) -> Optional[float]:
        """Current charge while a press is held, for the power meter."""

        return self.tracker.charge if self.tracker.pressed else None
