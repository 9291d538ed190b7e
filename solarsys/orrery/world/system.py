# orrery/world/system.py
from __future__ import annotations
from typing import Iterable, Optional
from orrery import settings
from orrery.world.orbit import CelestialBody

BodyRow = tuple[str, Optional[str], float, str, float, float, float]


def _color(name: str) -> tuple[int, int, int]:
    try:
        return settings.COLORS[name]
    except KeyError:
        raise ValueError(f"unknown color {name!r}") from None


def build_solar_system(
    rows: Iterable[BodyRow] | None = None,
    *,
    frames_per_second: float = settings.FRAMES_PER_SECOND_REF,
) -> CelestialBody:
    """Build the orbit tree from a bodies table and return its root.

    Orbit speeds in the table are per reference frame; they are stored per
    second so any fixed step reproduces the same motion.
    Parents must be listed before their children.
    """
    rows = list(settings.BODIES if rows is None else rows)
    root: CelestialBody | None = None
    by_name: dict[str, CelestialBody] = {}

    for name, parent, radius, color, orbit_radius, speed_per_frame, initial_angle in rows:
        if name in by_name:
            raise ValueError(f"duplicate body {name!r}")
        body = CelestialBody(
            name=name,
            radius=radius,
            color=_color(color),
            orbit_radius=orbit_radius,
            orbit_speed=speed_per_frame * frames_per_second,
            angle=initial_angle,
        )
        if parent is None:
            if root is not None:
                raise ValueError(f"second root body {name!r} (root is {root.name!r})")
            root = body
        else:
            if parent not in by_name:
                raise ValueError(f"{name!r} orbits unknown body {parent!r}")
            by_name[parent].add_child(body)
        by_name[name] = body

    if root is None:
        raise ValueError("bodies table has no root body")
    return root
