"""Tuning values shared by the simulation and the pygame front end.

Everything here is measured in screen pixels and ticks: the simulation uses a
fixed step of one tick per displayed frame, so velocities are pixels per tick.
"""

from __future__ import annotations

# Default window size; the simulation accepts any size at runtime.
SCREEN_WIDTH = 960
SCREEN_HEIGHT = 640
FPS = 60

# Ball physics.
GRAVITY = 0.5
AIR_RESISTANCE = 0.985
GROUND_FRICTION = 0.8
BOUNCE_DAMPING = 0.7
OBSTACLE_BOUNCE = -1.2
SPIN_FACTOR = 0.1
GROUND_HEIGHT = 20
DUST_SPEED_THRESHOLD = 2.0

# Goal layout and difficulty scaling.
GOAL_MARGIN = 50
GOAL_WIDTH = 15
GOAL_BASE_SPEED = 2.0
GOAL_SPEED_PER_POINT = 0.1
GOAL_MOVING_AFTER = 5
POLE_AFTER = 2
PERFECT_GOAL_DISTANCE = 15
PERFECT_GOAL_POINTS = 3
PERFECT_GOAL_STYLE = 10

# Gestures.
TAP_FORCE_Y = -12.0
TAP_MAX_DURATION_MS = 200
SWIPE_THRESHOLD = 30.0
CURVE_FACTOR = 0.15
CURVE_STYLE = 5
DIP_FORCE_Y = 10.0
CHARGE_PER_TICK = 0.5
MAX_POWER = 25.0
HOLD_LAUNCH_FACTOR = 0.8

# Particles.
PARTICLE_DECAY = 0.05
PARTICLE_SPREAD = 5.0

# Indian street palette.
COLORS = {
    "sky_start": "#FF7E5F",
    "sky_end": "#FEB47B",
    "ground": "#8B4513",
    "ground_accent": "#A0522D",
    "wall": "#D2B48C",
    "ball_base": "#FFFFFF",
    "ball_patch": "#000000",
    "neon": "#00FF00",
    "text": "#FFFFFF",
    "spark": "#FFFFFF",
    "power": "orange",
}

# Short cheers flashed on the HUD after a goal.
CHEERS = [
    "OOO Bhai!",
    "Kya baat hai!",
    "Classic Shot!",
    "Jalwa hai!",
    "Superb!",
    "Makhhan!",
]
