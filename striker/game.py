"""Pygame host for Street Striker.

This module owns the window, the event pump and the presentation state (HUD
stats, high score, commentary). The simulation itself lives in ``World`` and
is driven through ``GameLoop``; ``Game`` only observes it as a
``GameListener`` and draws the result.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import replace
from pathlib import Path
from typing import Dict, Optional

import numpy as np
import pygame

from striker.commentary import CommentaryFetcher
from striker.constants import CHEERS, FPS, SCREEN_HEIGHT, SCREEN_WIDTH
from striker.control_types import PointerKind, translate_event
from striker.entities import GameState, Stats
from striker.gesture import GestureKind
from striker.loop import GameLoop
from striker.renderer import Renderer
from striker.settings import Settings
from striker.storage import STATE_PATH, load_state, persist_state
from striker.world import World

logger = logging.getLogger(__name__)

CHEER_FRAMES = 45
HOW_TO_PLAY = [
    "Tap to LIFT",
    "Hold & Release to SHOOT",
    "Swipe L/R to CURVE",
    "Swipe Down to DIP",
]


class Game:
    """Window, input pump and presentation layer around one ``World``."""

    def __init__(
        self,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        fps: int = FPS,
        state_path: Path = STATE_PATH,
        commentary_enabled: bool = True,
        config: Optional[Settings] = None,
    ) -> None:
        pygame.init()
        pygame.display.set_caption("Desi Street Striker")
        self.screen = pygame.display.set_mode((width, height))
        self.clock = pygame.time.Clock()
        self.fps = fps
        self.renderer = Renderer(self.screen)

        self.world = World(width=width, height=height, listener=self)
        self.loop = GameLoop(self.world)

        self.state_path = state_path
        self.persisted_state = load_state(state_path)
        self.world.stats.high_score = self.persisted_state.best_score

        self.commentary_enabled = commentary_enabled
        self.config = config
        self.commentary: Optional[CommentaryFetcher] = None
        self.hud_stats = Stats(high_score=self.persisted_state.best_score)
        self.final_stats: Optional[Stats] = None
        self.new_best = False
        self.cheer: Optional[str] = None
        self.cheer_frames = 0

        self.sounds: Dict[str, pygame.mixer.Sound] = {}
        try:
            pygame.mixer.init(frequency=22050, size=-16, channels=1)
            self.sounds = {
                "kick": self._generate_tone(440, 0.07),
                "goal": self._generate_tone(880, 0.18),
                "thud": self._generate_tone(200, 0.09),
                "game_over": self._generate_tone(160, 0.35),
            }
        except pygame.error:
            # Audio can fail in headless environments; gameplay continues without sound.
            logger.info("Audio unavailable; playing without sound")
            self.sounds = {}

    def _generate_tone(self, frequency: float, duration: float) -> pygame.mixer.Sound:
        """Create a short sine beep without external assets."""

        sample_rate = 22050
        t = np.linspace(0, duration, int(sample_rate * duration), False)
        tone = 0.4 * np.sin(2 * math.pi * frequency * t)
        # Fade out to prevent clicks.
        tone *= np.linspace(1, 0.2, tone.size)
        audio = np.int16(tone * 32767)
        return pygame.mixer.Sound(buffer=audio.tobytes())

    def _play_sound(self, key: str) -> None:
        sound = self.sounds.get(key)
        if sound:
            sound.play()

    # GameListener

    def on_stats_changed(self, stats: Stats) -> None:
        previous = self.hud_stats
        if stats.score > previous.score:
            self.cheer = random.choice(CHEERS)
            self.cheer_frames = CHEER_FRAMES
            self._play_sound("goal")
        elif stats.combo < previous.combo and stats.score == previous.score:
            self._play_sound("thud")
        self.hud_stats = replace(stats, high_score=self.persisted_state.best_score)

    def on_game_over(self, stats: Stats) -> None:
        self.new_best = stats.score > self.persisted_state.best_score
        self.persisted_state = persist_state(
            best_score=stats.score,
            last_score=stats.score,
            path=self.state_path,
        )
        self.world.stats.high_score = self.persisted_state.best_score
        self.final_stats = replace(stats, high_score=self.persisted_state.best_score)
        self.commentary = CommentaryFetcher(
            stats.score,
            stats.style_points,
            config=self.config,
            enabled=self.commentary_enabled,
        )
        self.cheer = None
        self._play_sound("game_over")

    # Lifecycle

    def _begin(self) -> None:
        self.final_stats = None
        self.hud_stats = Stats(high_score=self.persisted_state.best_score)
        self.commentary = None
        self.new_best = False
        self.cheer = None
        if self.world.state is GameState.GAME_OVER:
            self.loop.restart()
        else:
            self.loop.start()

    def _handle_event(self, event: pygame.event.Event) -> None:
        pointer = translate_event(event, self.screen.get_size(), pygame.time.get_ticks())
        if pointer is None:
            return
        if self.world.state is not GameState.PLAYING:
            # Any press on the menu or game-over screen starts a new game.
            if pointer.kind is PointerKind.DOWN:
                self._begin()
            return
        gesture = self.loop.handle(pointer)
        if gesture is not None and gesture.kind is not GestureKind.NONE:
            self._play_sound("kick")

    def _draw(self) -> None:
        state = self.world.state
        if state is GameState.MENU:
            self.renderer.draw_menu(self.persisted_state.best_score, HOW_TO_PLAY)
            return

        self.renderer.draw_world(self.world, self.loop.charge)
        if state is GameState.PLAYING:
            self.renderer.draw_hud(self.hud_stats, self.cheer if self.cheer_frames > 0 else None)
        elif self.final_stats is not None:
            commentary = self.commentary.result if self.commentary else None
            self.renderer.draw_game_over(self.final_stats, commentary, self.new_best)

    def run(self) -> None:
        """Main loop: one simulation tick per displayed frame."""

        running = True
        while running:
            self.clock.tick(self.fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    self._handle_event(event)

            self.loop.tick()
            if self.cheer_frames > 0:
                self.cheer_frames -= 1

            self._draw()
            pygame.display.flip()

        self.loop.stop()
        pygame.quit()
