# orrery/core/clock.py
from __future__ import annotations
import logging
import math
import pygame
from dataclasses import dataclass, field
from orrery.settings import FIXED_DT, MAX_STEPS, DT_CLAMP

log = logging.getLogger(__name__)

@dataclass
class FixedClock:
    """Fixed timestep accumulator clock.
    tick() -> (steps, alpha), where:
    - steps: how many fixed updates to run this frame (0..max_steps)
    - alpha: interpolation factor [0,1) for rendering between states

    When a frame still owes whole steps after max_steps have run, the backlog
    is dropped (only the sub-step remainder is kept) and added to `dropped`.
    """
    step: float = FIXED_DT
    max_steps: int = MAX_STEPS
    dt_clamp: float = DT_CLAMP
    accumulator: float = 0.0
    dropped: float = 0.0
    last_elapsed: float = field(default=0.0, init=False)
    frame_time: float = field(default=0.0, init=False)   # unclamped, for FPS readouts

    def __post_init__(self) -> None:
        if not math.isfinite(self.step) or self.step <= 0:
            raise ValueError(f"step must be positive, got {self.step!r}")
        if self.max_steps < 1:
            raise ValueError(f"max_steps must be >= 1, got {self.max_steps!r}")
        self._clock = pygame.time.Clock()

    def advance(self, elapsed: float) -> tuple[int, float]:
        # Negative deltas (clock skew) count as nothing; huge ones are clamped
        dt = min(max(0.0, elapsed), self.dt_clamp)
        self.last_elapsed = dt
        self.accumulator += dt

        steps = 0
        while self.accumulator >= self.step and steps < self.max_steps:
            self.accumulator -= self.step
            steps += 1

        if self.accumulator >= self.step:
            # runaway: simulation can't keep up, forget the backlog
            backlog = self.accumulator - (self.accumulator % self.step)
            self.accumulator -= backlog
            self.dropped += backlog
            log.debug("step cap hit (%d steps), dropped %.4fs of simulation time", steps, backlog)

        alpha = self.accumulator / self.step
        return steps, alpha

    def tick(self, fps: int = 0) -> tuple[int, float]:
        # Real elapsed time since last tick, in seconds
        self.frame_time = self._clock.tick(fps) / 1000.0
        return self.advance(self.frame_time)

    def reset(self) -> None:
        self.accumulator = 0.0
        self._clock.tick()
