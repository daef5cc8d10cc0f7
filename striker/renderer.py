"""Pygame drawing for the pitch, HUD, menu and game-over screens.

Rendering is a pure projection of ``World`` plus a few presentation-only
values (HUD stats, commentary text); nothing here mutates the simulation.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

import numpy as np
import pygame

from striker.constants import COLORS, GROUND_HEIGHT, MAX_POWER
from striker.entities import Stats
from striker.world import World

ORANGE = (251, 146, 60)
CYAN = (103, 232, 249)
YELLOW = (250, 204, 21)
RED = (239, 68, 68)
GREEN = (134, 239, 172)
GREY = (180, 180, 180)


def _rgb(name: str) -> Tuple[int, int, int]:
    color = pygame.Color(COLORS[name])
    return color.r, color.g, color.b


class Renderer:
    """Draws frames onto ``screen``; background and fonts are built once."""

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.width, self.height = screen.get_size()
        self.font = pygame.font.SysFont("montserrat", 22)
        self.small_font = pygame.font.SysFont("montserrat", 16)
        self.hud_font = pygame.font.SysFont("montserrat", 44, bold=True)
        self.big_font = pygame.font.SysFont("montserrat", 72, bold=True)
        self.background = self._build_background()

    def _build_background(self) -> pygame.Surface:
        """Sunset sky gradient, a building silhouette and the back wall."""

        surface = pygame.Surface((self.width, self.height))
        top = np.array(_rgb("sky_start"), dtype=float)
        bottom = np.array(_rgb("sky_end"), dtype=float)
        for y in range(self.height):
            t = y / max(1, self.height - 1)
            color = (top * (1 - t) + bottom * t).astype(int)
            pygame.draw.line(surface, color.tolist(), (0, y), (self.width, y))

        silhouette = pygame.Surface((100, 150), pygame.SRCALPHA)
        silhouette.fill((0, 0, 0, 26))
        surface.blit(silhouette, (50, self.height - 150))
        pygame.draw.rect(surface, _rgb("wall"), pygame.Rect(0, self.height - 100, self.width, 80))
        pygame.draw.rect(surface, _rgb("ground"), pygame.Rect(0, self.height - GROUND_HEIGHT, self.width, GROUND_HEIGHT))
        pygame.draw.line(
            surface,
            _rgb("ground_accent"),
            (0, self.height - GROUND_HEIGHT),
            (self.width, self.height - GROUND_HEIGHT),
            2,
        )
        return surface

    def _text(self, font: pygame.font.Font, text: str, color, center: Tuple[float, float]) -> None:
        """Render centred text with a soft shadow for readability."""

        shadow = font.render(text, True, (0, 0, 0))
        main = font.render(text, True, color)
        rect = main.get_rect(center=(int(center[0]), int(center[1])))
        self.screen.blit(shadow, rect.move(2, 2))
        self.screen.blit(main, rect)

    def _panel(self, rect: pygame.Rect, alpha: int = 130) -> None:
        panel = pygame.Surface(rect.size, pygame.SRCALPHA)
        pygame.draw.rect(panel, (0, 0, 0, alpha), panel.get_rect(), border_radius=12)
        self.screen.blit(panel, rect.topleft)

    def draw_world(self, world: World, charge: Optional[float] = None) -> None:
        self.screen.blit(self.background, (0, 0))

        goal = world.goal
        pygame.draw.line(self.screen, (255, 255, 255), (goal.x, goal.y), (goal.x, goal.y + goal.height), 4)
        net = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        for i in range(0, int(goal.height), 10):
            pygame.draw.line(net, (255, 255, 255, 77), (goal.x, goal.y + i), (goal.x + 20, goal.y + i + 5))
        self.screen.blit(net, (0, 0))

        for obstacle in world.obstacles:
            if obstacle.active:
                pygame.draw.rect(
                    self.screen,
                    (68, 68, 68),
                    pygame.Rect(int(obstacle.x), int(obstacle.y), int(obstacle.width), int(obstacle.height)),
                )

        self._draw_ball(world)
        self._draw_particles(world)
        if charge is not None:
            self._draw_power_meter(world, charge)

    def _draw_ball(self, world: World) -> None:
        ball = world.ball
        center = (int(ball.x), int(ball.y))
        radius = max(1, int(ball.radius))
        pygame.draw.circle(self.screen, _rgb("ball_base"), center, radius)
        pygame.draw.circle(self.screen, (0, 0, 0), center, radius, 2)
        # Two crossed seams make the spin visible.
        for angle in (ball.rotation, ball.rotation + math.pi / 2):
            dx = math.cos(angle) * ball.radius
            dy = math.sin(angle) * ball.radius
            pygame.draw.line(
                self.screen,
                _rgb("ball_patch"),
                (ball.x - dx, ball.y - dy),
                (ball.x + dx, ball.y + dy),
                2,
            )

    def _draw_particles(self, world: World) -> None:
        if not world.particles:
            return
        layer = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        for particle in world.particles:
            color = pygame.Color(particle.color)
            color.a = max(0, min(255, int(255 * particle.life)))
            pygame.draw.circle(layer, color, (int(particle.x), int(particle.y)), max(1, int(particle.size)))
        self.screen.blit(layer, (0, 0))

    def _draw_power_meter(self, world: World, charge: float) -> None:
        ball = world.ball
        percent = min(charge / MAX_POWER, 1.0)
        color = (int(255 * percent), int(255 * (1 - percent)), 0)
        left = int(ball.x - 20)
        top = int(ball.y - ball.radius - 15)
        pygame.draw.rect(self.screen, color, pygame.Rect(left, top, int(40 * percent), 5))
        pygame.draw.rect(self.screen, (255, 255, 255), pygame.Rect(left, top, 40, 5), 1)

    def draw_hud(self, stats: Stats, cheer: Optional[str] = None) -> None:
        self._panel(pygame.Rect(16, 16, 110, 80))
        self._text(self.hud_font, str(stats.score), ORANGE, (71, 46))
        self._text(self.small_font, "GOALS", GREY, (71, 80))
        if stats.combo > 1:
            self._panel(pygame.Rect(16, 104, 130, 30), alpha=180)
            self._text(self.font, f"{stats.combo}x COMBO!", YELLOW, (81, 119))

        self._panel(pygame.Rect(self.width - 126, 16, 110, 40))
        self._text(self.font, f"STYLE {stats.style_points}", CYAN, (self.width - 71, 36))

        if cheer:
            self._text(self.big_font, cheer, (255, 255, 255), (self.width / 2, self.height * 0.2))

    def draw_menu(self, high_score: int, tips: Sequence[str]) -> None:
        self.screen.blit(self.background, (0, 0))
        self._panel(pygame.Rect(0, 0, self.width, self.height), alpha=150)
        cx = self.width / 2
        self._text(self.big_font, "DESI STREET", YELLOW, (cx, self.height * 0.22))
        self._text(self.hud_font, "STRIKER", (255, 255, 255), (cx, self.height * 0.22 + 60))
        self._text(self.font, "Click, tap or press Space to PLAY", ORANGE, (cx, self.height * 0.45))
        for i, tip in enumerate(tips):
            self._text(self.small_font, tip, GREY, (cx, self.height * 0.55 + i * 24))
        self._text(self.small_font, f"High Score: {high_score}", GREY, (cx, self.height - 30))

    def draw_game_over(self, stats: Stats, commentary: Optional[str], new_best: bool) -> None:
        self._panel(pygame.Rect(0, 0, self.width, self.height), alpha=200)
        cx = self.width / 2
        self._text(self.big_font, "GAME OVER", RED, (cx, self.height * 0.25))
        self._text(self.font, f"SCORE  {stats.score}", (255, 255, 255), (cx - 90, self.height * 0.42))
        self._text(self.font, f"STYLE  {stats.style_points}", YELLOW, (cx + 90, self.height * 0.42))
        best_label = "NEW HIGH SCORE!" if new_best else f"High Score: {stats.high_score}"
        self._text(self.small_font, best_label, ORANGE if new_best else GREY, (cx, self.height * 0.49))
        if commentary is None:
            self._text(self.small_font, "Asking the third umpire...", GREY, (cx, self.height * 0.58))
        else:
            self._text(self.font, f'"{commentary}"', GREEN, (cx, self.height * 0.58))
        self._text(self.font, "Click, tap or press Space to RETRY", ORANGE, (cx, self.height * 0.72))
