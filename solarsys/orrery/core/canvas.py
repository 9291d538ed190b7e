# orrery/core/canvas.py
"""Immediate-mode drawing with a canvas-style transform stack.

pygame draws in raw surface pixels, so this module keeps the current affine
transform itself. ``save()``/``restore()`` push and pop it, which lets nested
scene nodes compose rotate + translate without leaking into their siblings::

    canvas.save()
    canvas.rotate(angle)
    canvas.translate(orbit_radius, 0)
    canvas.fill_circle(0, 0, radius, color)
    canvas.restore()
"""
from __future__ import annotations
import math
import pygame
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

Color = Sequence[int]
Point = tuple[float, float]


class CanvasStateError(RuntimeError):
    """restore() called without a matching save()."""


@dataclass(frozen=True, slots=True)
class Affine:
    """2x3 affine matrix laid out like a 2D canvas transform:

        | a  c  e |
        | b  d  f |
    """
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def identity(cls) -> Affine:
        return cls()

    # Each op is applied in the current local space (post-multiplied)
    def translated(self, tx: float, ty: float) -> Affine:
        return Affine(
            self.a, self.b, self.c, self.d,
            self.a * tx + self.c * ty + self.e,
            self.b * tx + self.d * ty + self.f,
        )

    def rotated(self, theta: float) -> Affine:
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        return Affine(
            self.a * cos_t + self.c * sin_t,
            self.b * cos_t + self.d * sin_t,
            self.c * cos_t - self.a * sin_t,
            self.d * cos_t - self.b * sin_t,
            self.e, self.f,
        )

    def apply(self, x: float, y: float) -> Point:
        return (self.a * x + self.c * y + self.e, self.b * x + self.d * y + self.f)

    @property
    def linear_scale(self) -> float:
        # uniform scale factor for radii/line widths
        return math.sqrt(abs(self.a * self.d - self.b * self.c))


class Canvas:
    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.transform = Affine.identity()
        self._stack: list[Affine] = []

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    @property
    def depth(self) -> int:
        return len(self._stack)

    # ---- state ----
    def save(self) -> None:
        self._stack.append(self.transform)

    def restore(self) -> None:
        if not self._stack:
            raise CanvasStateError("restore() without matching save()")
        self.transform = self._stack.pop()

    @contextmanager
    def saved(self) -> Iterator[Canvas]:
        self.save()
        try:
            yield self
        finally:
            self.restore()

    def translate(self, x: float, y: float) -> None:
        self.transform = self.transform.translated(x, y)

    def rotate(self, theta: float) -> None:
        self.transform = self.transform.rotated(theta)

    # ---- drawing ----
    def clear(self, color: Color) -> None:
        self.surface.fill(color)

    def fill_circle(self, x: float, y: float, radius: float, color: Color) -> None:
        cx, cy = self.transform.apply(x, y)
        r = max(1, round(radius * self.transform.linear_scale))
        pygame.draw.circle(self.surface, color, (round(cx), round(cy)), r)

    def stroke_circle(self, x: float, y: float, radius: float, color: Color, width: int = 1) -> None:
        cx, cy = self.transform.apply(x, y)
        r = round(radius * self.transform.linear_scale)
        if r <= 0:
            return
        if len(color) == 4:
            # translucent: draw on a local overlay and blit it
            size = 2 * (r + width)
            overlay = pygame.Surface((size, size), pygame.SRCALPHA)
            pygame.draw.circle(overlay, color, (r + width, r + width), r, width=width)
            self.surface.blit(overlay, (round(cx) - r - width, round(cy) - r - width))
        else:
            pygame.draw.circle(self.surface, color, (round(cx), round(cy)), r, width=width)

    def fill_polygon(self, points: Iterable[Point], color: Color) -> None:
        pts = [self.transform.apply(x, y) for x, y in points]
        if len(pts) < 3:
            return
        pygame.draw.polygon(self.surface, color, pts)
