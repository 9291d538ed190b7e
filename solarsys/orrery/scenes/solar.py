# orrery/scenes/solar.py
from __future__ import annotations
import logging
import pygame
from dataclasses import dataclass, field

from orrery import settings
from orrery.core.canvas import Canvas
from orrery.core.fps import FpsCounter
from orrery.core.keys import KeyState
from orrery.entities.ship import Ship
from orrery.world.orbit import CelestialBody
from orrery.world.system import build_solar_system

log = logging.getLogger(__name__)


@dataclass
class SolarScene:
    """
    Solar system layer:
    - Orbit tree (sun/earth/moon/mars) drawn from the screen centre
    - Player ship flown with arrows/WASD, kept on screen
    - P pause, R reset, O orbit guides, H/F1 HUD, Esc quit
    """
    screen: pygame.Surface
    show_hud: bool = True
    show_orbits: bool = False
    paused: bool = False

    root: CelestialBody = field(init=False)
    ship: Ship = field(init=False)
    keys: KeyState = field(default_factory=KeyState, init=False)
    fps: FpsCounter = field(default_factory=FpsCounter, init=False)

    sim_time: float = field(default=0.0, init=False)
    _last_steps: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self._canvas = Canvas(self.screen)
        self._font = pygame.font.Font(None, settings.HUD_FONT_SIZE)
        self.reset()

    def reset(self) -> None:
        self.root = build_solar_system()
        sw, sh = self.screen.get_size()
        self.ship = Ship(
            x=sw * settings.SHIP_START[0] / settings.SCREEN_WIDTH,
            y=sh * settings.SHIP_START[1] / settings.SCREEN_HEIGHT,
            width=sw,
            height=sh,
        )
        self.sim_time = 0.0

    # ---- Input ----
    def handle_event(self, event: pygame.event.Event) -> None:
        self.keys.handle_event(event)
        if event.type == pygame.VIDEORESIZE:
            self.ship.resize(event.w, event.h)
            return
        if event.type != pygame.KEYDOWN:
            return

        if event.key == pygame.K_ESCAPE:
            pygame.event.post(pygame.event.Event(pygame.QUIT))
        elif event.key == pygame.K_p:
            self.paused = not self.paused
            log.info("%s at t=%.2fs", "paused" if self.paused else "resumed", self.sim_time)
        elif event.key == pygame.K_r:
            self.reset()
            log.info("scene reset")
        elif event.key == pygame.K_o:
            self.show_orbits = not self.show_orbits
        elif event.key in (pygame.K_h, pygame.K_F1):
            self.show_hud = not self.show_hud

    # ---- Fixed update ----
    def update(self, dt: float) -> None:
        if self.paused:
            return
        self.root.update(dt)
        self.ship.update(dt, self.keys)
        self.sim_time += dt

    def record_frame(self, steps: int, elapsed: float) -> None:
        self._last_steps = steps
        self.fps.record(elapsed)

    # ---- Render ----
    def draw(self, surface: pygame.Surface, alpha: float) -> None:
        if surface is not self._canvas.surface:
            self._canvas = Canvas(surface)
        canvas = self._canvas
        # frozen state has nothing to interpolate towards
        alpha = 1.0 if self.paused else alpha

        canvas.clear(settings.BG_COLOR)
        canvas.save()
        canvas.translate(canvas.width / 2, canvas.height / 2)
        guide = settings.ORBIT_GUIDE_RGBA if self.show_orbits else None
        self.root.draw(canvas, alpha, guide_color=guide)
        canvas.restore()

        self.ship.draw(canvas, alpha)

        if self.show_hud:
            self._draw_hud(surface)

    # ---- HUD ----
    def hud_text(self) -> str:
        pieces = [
            f"FPS: {self.fps.fps:.0f}",
            f"Steps: {self._last_steps}",
            f"t = {self.sim_time:.1f}s",
        ]
        if self.paused:
            pieces.append("PAUSED (P)")
        return "  |  ".join(pieces)

    def _draw_hud(self, surface: pygame.Surface) -> None:
        pad = 8
        surf_text = self._font.render(self.hud_text(), True, settings.HUD_TEXT_RGB)
        w, h = surf_text.get_size()
        pill = pygame.Surface((w + pad * 2, h + pad * 2), pygame.SRCALPHA)
        pill.fill(settings.HUD_BG_RGBA)
        pill.blit(surf_text, (pad, pad))
        surface.blit(pill, (10, 10))
