"""Typed pointer input shared between the pygame event pump and the game loop.

Mouse, touch and keyboard input all arrive as pygame events in different
coordinate spaces. This module folds them into a single ``PointerEvent`` in
window pixels so the gesture tracker never has to know which device produced
a press.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import pygame


class PointerKind(Enum):
    DOWN = "DOWN"
    MOVE = "MOVE"
    UP = "UP"


@dataclass
class PointerEvent:
    """One normalized pointer sample.

    Attributes:
        kind: Press, drag or release.
        x, y: Position in window pixels. Releases carry the last known
            position but the tracker ignores it.
        timestamp_ms: Milliseconds from the host clock when the event was
            read; used to time taps against holds.
    """

    kind: PointerKind
    x: float
    y: float
    timestamp_ms: float


def translate_event(
    event: pygame.event.Event,
    window_size: Tuple[int, int],
    now_ms: float,
) -> Optional[PointerEvent]:
    """Convert a pygame event into a ``PointerEvent`` or ``None`` if irrelevant.

    Finger events report ``x``/``y`` in ``[0, 1]`` and are scaled to the window.
    SDL also synthesizes mouse events from touches; those are flagged with
    ``touch=True`` and dropped so a single tap is not seen twice. The space bar
    acts as a press/release at the window centre for keyboard-only play.
    """

    width, height = window_size
    if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEMOTION):
        if getattr(event, "touch", False):
            return None
        x, y = event.pos
        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button != 1:
                return None
            return PointerEvent(PointerKind.DOWN, float(x), float(y), now_ms)
        if event.type == pygame.MOUSEBUTTONUP:
            if event.button != 1:
                return None
            return PointerEvent(PointerKind.UP, float(x), float(y), now_ms)
        return PointerEvent(PointerKind.MOVE, float(x), float(y), now_ms)

    if event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION, pygame.FINGERUP):
        x = event.x * width
        y = event.y * height
        kind = {
            pygame.FINGERDOWN: PointerKind.DOWN,
            pygame.FINGERMOTION: PointerKind.MOVE,
            pygame.FINGERUP: PointerKind.UP,
        }[event.type]
        return PointerEvent(kind, x, y, now_ms)

    if event.type in (pygame.KEYDOWN, pygame.KEYUP) and event.key == pygame.K_SPACE:
        kind = PointerKind.DOWN if event.type == pygame.KEYDOWN else PointerKind.UP
        return PointerEvent(kind, width / 2, height / 2, now_ms)

    return None
