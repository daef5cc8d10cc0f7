"""Cosmetic particle bursts used for dust, sparks and goal celebrations."""

from __future__ import annotations

from typing import List

from striker.constants import PARTICLE_DECAY, PARTICLE_SPREAD
from striker.entities import Particle
from striker.world import World


def spawn_particles(world: World, x: float, y: float, count: int, color: str) -> None:
    """Emit ``count`` sparks at ``(x, y)`` with a small random spread."""

    rng = world.rng
    for _ in range(count):
        world.particles.append(
            Particle(
                x=x,
                y=y,
                vx=(rng.random() - 0.5) * PARTICLE_SPREAD,
                vy=(rng.random() - 0.5) * PARTICLE_SPREAD,
                life=1.0,
                color=color,
                size=rng.random() * 3 + 1,
            )
        )


def update_particles(world: World) -> None:
    """Advance and decay particles, keeping only the ones still alive."""

    alive: List[Particle] = []
    for particle in world.particles:
        particle.x += particle.vx
        particle.y += particle.vy
        particle.life -= PARTICLE_DECAY
        if particle.life <= 0:
            continue
        alive.append(particle)
    world.particles = alive
