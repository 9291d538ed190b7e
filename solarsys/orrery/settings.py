# orrery/settings.py
from __future__ import annotations

# Window / render
SCREEN_WIDTH: int = 1280
SCREEN_HEIGHT: int = 720
SCREEN_SIZE: tuple[int, int] = (SCREEN_WIDTH, SCREEN_HEIGHT)
WINDOW_TITLE: str = "Orrery - Solar System + Ship"
TARGET_FPS: int = 0          # frame limiter for pygame.time.Clock.tick (0 = uncapped)

# Timestep (fixed update loop)
FIXED_DT: float = 1.0 / 60.0
MAX_STEPS: int = 5
DT_CLAMP: float = 0.25

# Colors
BG_COLOR: tuple[int, int, int] = (0, 0, 0)
ORBIT_GUIDE_RGBA: tuple[int, int, int, int] = (90, 90, 120, 120)

# Named colors used by the bodies table
COLORS: dict[str, tuple[int, int, int]] = {
    "yellow": (255, 255, 0),
    "blue": (0, 0, 255),
    "grey": (128, 128, 128),
    "red": (255, 0, 0),
}

# Bodies (per-frame orbit speeds at 60 Hz, converted to rad/s by the builder)
# (name, parent, radius_px, color, orbit_radius_px, orbit_speed_per_frame, initial_angle)
BODIES: list[tuple[str, str | None, float, str, float, float, float]] = [
    ("sun",   None,    50.0, "yellow",   0.0, 0.0,   0.0),
    ("earth", "sun",   20.0, "blue",   200.0, 0.01,  0.0),
    ("moon",  "earth",  5.0, "grey",    40.0, 0.05,  0.0),
    ("mars",  "sun",   15.0, "red",    300.0, 0.008, 0.0),
]
FRAMES_PER_SECOND_REF: float = 60.0

# Ship
SHIP_SIZE: float = 14.0              # nose-to-centre length (px)
SHIP_SPEED: float = 240.0            # px/sec
SHIP_TURN_SPEED: float = 3.5         # rad/sec
SHIP_COLOR: tuple[int, int, int] = (230, 230, 240)
SHIP_FLAME_COLOR: tuple[int, int, int] = (255, 140, 30)
SHIP_START: tuple[float, float] = (SCREEN_WIDTH * 0.15, SCREEN_HEIGHT * 0.8)
SHIP_START_ANGLE: float = 0.0

# Controls (pygame key constant names)
CONTROLS: dict[str, tuple[str, ...]] = {
    "thrust":  ("K_UP", "K_w"),
    "reverse": ("K_DOWN", "K_s"),
    "left":    ("K_LEFT", "K_a"),
    "right":   ("K_RIGHT", "K_d"),
}

# HUD / labels
HUD_BG_RGBA: tuple[int, int, int, int] = (0, 0, 0, 150)
HUD_TEXT_RGB: tuple[int, int, int] = (240, 240, 240)
HUD_FONT_SIZE: int = 20
FPS_SMOOTHING: float = 0.9          # weight kept from the previous FPS reading
