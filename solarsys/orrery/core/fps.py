# orrery/core/fps.py
from __future__ import annotations
from dataclasses import dataclass
from orrery.settings import FPS_SMOOTHING

@dataclass(slots=True)
class FpsCounter:
    """Exponentially smoothed frames-per-second reading for the HUD."""
    smoothing: float = FPS_SMOOTHING
    fps: float = 0.0
    frames: int = 0

    def __post_init__(self) -> None:
        if not 0.0 <= self.smoothing < 1.0:
            raise ValueError(f"smoothing must be in [0, 1), got {self.smoothing!r}")

    def record(self, frame_seconds: float) -> float:
        if frame_seconds <= 0.0:
            return self.fps
        instant = 1.0 / frame_seconds
        if self.frames == 0:
            self.fps = instant
        else:
            self.fps = self.fps * self.smoothing + instant * (1.0 - self.smoothing)
        self.frames += 1
        return self.fps
