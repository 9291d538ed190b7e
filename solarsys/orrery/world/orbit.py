# orrery/world/orbit.py
from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Iterator, Optional
from orrery.core.canvas import Canvas, Color

TAU = 2.0 * math.pi


@dataclass(eq=False)
class CelestialBody:
    """A node of the orbit tree.

    The body sits ``orbit_radius`` px from its parent's centre, at ``angle``
    radians, turning at ``orbit_speed`` rad/sec. Children are placed in this
    body's local frame, so a moon follows its planet around the sun.
    """
    name: str
    radius: float
    color: Color
    orbit_radius: float = 0.0
    orbit_speed: float = 0.0
    angle: float = 0.0
    children: list[CelestialBody] = field(default_factory=list)
    parent: Optional[CelestialBody] = field(default=None, repr=False)
    # angle before the last update and the signed turn it applied
    _prev_angle: float = field(default=0.0, init=False, repr=False)
    _turned: float = field(default=0.0, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.radius < 0 or self.orbit_radius < 0:
            raise ValueError(f"{self.name}: radius and orbit_radius must be >= 0")
        self.angle %= TAU
        self._prev_angle = self.angle

    # ---- tree ----
    def add_child(self, body: CelestialBody) -> CelestialBody:
        if body.parent is not None:
            raise ValueError(f"{body.name} already orbits {body.parent.name}")
        if body is self or any(node is body for node in self.ancestors()):
            raise ValueError(f"{body.name} cannot orbit its own descendant")
        body.parent = self
        self.children.append(body)
        return body

    def ancestors(self) -> Iterator[CelestialBody]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def walk(self) -> Iterator[CelestialBody]:
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, name: str) -> Optional[CelestialBody]:
        return next((b for b in self.walk() if b.name == name), None)

    # ---- simulation ----
    def update(self, dt: float) -> None:
        self._prev_angle = self.angle
        self._turned = self.orbit_speed * dt
        self.angle = (self.angle + self._turned) % TAU
        for child in self.children:
            child.update(dt)

    def render_angle(self, alpha: float = 1.0) -> float:
        # may leave [0, TAU); only used for drawing
        return self._prev_angle + self._turned * alpha

    # ---- render ----
    def draw(self, canvas: Canvas, alpha: float = 1.0, *, guide_color: Color | None = None) -> None:
        canvas.save()
        canvas.rotate(self.render_angle(alpha))
        canvas.translate(self.orbit_radius, 0.0)
        canvas.fill_circle(0.0, 0.0, self.radius, self.color)
        for child in self.children:
            if guide_color is not None and child.orbit_radius > 0:
                canvas.stroke_circle(0.0, 0.0, child.orbit_radius, guide_color)
            child.draw(canvas, alpha, guide_color=guide_color)
        canvas.restore()
