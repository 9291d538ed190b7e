# orrery/entities/ship.py
from __future__ import annotations
import math
from dataclasses import dataclass, field
from orrery import settings
from orrery.core.canvas import Canvas
from orrery.core.keys import KeyState
from orrery.world.orbit import TAU

@dataclass(slots=True)
class Ship:
    x: float = settings.SHIP_START[0]
    y: float = settings.SHIP_START[1]
    angle: float = settings.SHIP_START_ANGLE     # radians, 0 = facing +x
    width: int = settings.SCREEN_WIDTH
    height: int = settings.SCREEN_HEIGHT
    size: float = settings.SHIP_SIZE
    speed: float = settings.SHIP_SPEED           # px/sec
    turn_speed: float = settings.SHIP_TURN_SPEED # rad/sec

    thrusting: bool = field(default=False, init=False)
    _prev: tuple[float, float, float] = field(default=(0.0, 0.0, 0.0), init=False)
    _turned: float = field(default=0.0, init=False)      # signed turn of the last update

    def __post_init__(self) -> None:
        self._clamp()
        self._prev = (self.x, self.y, self.angle)

    # -------- simulation --------
    def update(self, dt: float, keys: KeyState) -> None:
        self._prev = (self.x, self.y, self.angle)

        turn = keys.axis("left", "right")
        self._turned = turn * self.turn_speed * dt
        if turn:
            self.angle = (self.angle + self._turned) % TAU

        move = keys.axis("reverse", "thrust")
        self.thrusting = move > 0
        if move:
            step = move * self.speed * dt
            self.x += math.cos(self.angle) * step
            self.y += math.sin(self.angle) * step
            self._clamp()

    def resize(self, width: int, height: int) -> None:
        self.width, self.height = width, height
        self._clamp()

    def _clamp(self) -> None:
        self.x = min(max(0.0, self.x), float(self.width))
        self.y = min(max(0.0, self.y), float(self.height))

    # -------- rendering helpers --------
    def render_pose(self, alpha: float = 1.0) -> tuple[float, float, float]:
        px, py, pa = self._prev
        return (
            px + (self.x - px) * alpha,
            py + (self.y - py) * alpha,
            pa + self._turned * alpha,
        )

    def hull(self) -> list[tuple[float, float]]:
        s = self.size
        return [(s, 0.0), (-0.7 * s, -0.6 * s), (-0.4 * s, 0.0), (-0.7 * s, 0.6 * s)]

    def flame(self) -> list[tuple[float, float]]:
        s = self.size
        return [(-0.45 * s, -0.25 * s), (-1.2 * s, 0.0), (-0.45 * s, 0.25 * s)]

    def draw(self, canvas: Canvas, alpha: float = 1.0) -> None:
        x, y, a = self.render_pose(alpha)
        with canvas.saved():
            canvas.translate(x, y)
            canvas.rotate(a)
            if self.thrusting:
                canvas.fill_polygon(self.flame(), settings.SHIP_FLAME_COLOR)
            canvas.fill_polygon(self.hull(), settings.SHIP_COLOR)
