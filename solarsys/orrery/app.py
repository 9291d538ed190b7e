# orrery/app.py
from __future__ import annotations
import argparse
import logging
import math
from dataclasses import dataclass
from typing import Sequence

import pygame
from orrery import settings
from orrery.core.clock import FixedClock
from orrery.scenes.solar import SolarScene

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunOptions:
    width: int = settings.SCREEN_WIDTH
    height: int = settings.SCREEN_HEIGHT
    fps: int = settings.TARGET_FPS
    step_hz: float = 1.0 / settings.FIXED_DT
    max_steps: int = settings.MAX_STEPS
    show_hud: bool = True
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"window size must be positive, got {self.width}x{self.height}")
        if self.fps < 0:
            raise ValueError(f"fps must be >= 0, got {self.fps}")
        if not math.isfinite(self.step_hz) or self.step_hz <= 0:
            raise ValueError(f"step rate must be positive, got {self.step_hz}")
        if self.max_steps < 1:
            raise ValueError(f"max steps must be >= 1, got {self.max_steps}")

    @property
    def step(self) -> float:
        return 1.0 / self.step_hz


def parse_args(argv: Sequence[str] | None = None) -> RunOptions:
    p = argparse.ArgumentParser(prog="orrery", description="Fixed-timestep solar system with a player ship")
    p.add_argument("--width", type=int, default=settings.SCREEN_WIDTH, help="Window width (px)")
    p.add_argument("--height", type=int, default=settings.SCREEN_HEIGHT, help="Window height (px)")
    p.add_argument("--fps", type=int, default=settings.TARGET_FPS, help="Frame limiter, 0 = uncapped")
    p.add_argument("--step-hz", type=float, default=1.0 / settings.FIXED_DT, help="Fixed simulation rate (steps/sec)")
    p.add_argument("--max-steps", type=int, default=settings.MAX_STEPS, help="Simulation steps allowed per frame")
    p.add_argument("--no-hud", action="store_true", help="Start with the HUD hidden")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging (reports dropped steps)")
    args = p.parse_args(argv)
    try:
        return RunOptions(
            width=args.width,
            height=args.height,
            fps=args.fps,
            step_hz=args.step_hz,
            max_steps=args.max_steps,
            show_hud=not args.no_hud,
            verbose=args.verbose,
        )
    except ValueError as exc:
        p.error(str(exc))


def main(argv: Sequence[str] | None = None) -> int:
    opts = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if opts.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    try:
        pygame.display.set_caption(settings.WINDOW_TITLE)
        screen = pygame.display.set_mode((opts.width, opts.height), pygame.RESIZABLE)
        clock = FixedClock(step=opts.step, max_steps=opts.max_steps)
        scene = SolarScene(screen, show_hud=opts.show_hud)
        log.info("window %dx%d, step %.4fs, max %d steps/frame, fps cap %s",
                 opts.width, opts.height, opts.step, opts.max_steps, opts.fps or "off")

        frames = total_steps = 0
        clock.reset()
        running = True
        while running:
            # -- Input --
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                else:
                    scene.handle_event(event)

            # -- Fixed updates --
            steps, alpha = clock.tick(opts.fps)
            for _ in range(steps):
                scene.update(clock.step)
            scene.record_frame(steps, clock.frame_time)

            # -- Render (interpolated) --
            scene.draw(screen, alpha)
            pygame.display.flip()

            frames += 1
            total_steps += steps

        log.info("exit after %d frames, %d steps, %.3fs of simulation dropped",
                 frames, total_steps, clock.dropped)
    finally:
        pygame.quit()
    return 0
