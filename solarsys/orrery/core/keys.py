# orrery/core/keys.py
from __future__ import annotations
import pygame
from dataclasses import dataclass, field
from orrery import settings


def resolve_controls(controls: dict[str, tuple[str, ...]]) -> dict[str, frozenset[int]]:
    """Map control names to pygame key codes ("K_UP" -> pygame.K_UP)."""
    return {name: frozenset(getattr(pygame, k) for k in keys) for name, keys in controls.items()}


@dataclass(slots=True)
class KeyState:
    """Held keys, fed from KEYDOWN/KEYUP events (see settings.CONTROLS)."""
    controls: dict[str, frozenset[int]] = field(default_factory=lambda: resolve_controls(settings.CONTROLS))
    held: set[int] = field(default_factory=set)

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.KEYDOWN:
            self.held.add(event.key)
            return True
        if event.type == pygame.KEYUP:
            self.held.discard(event.key)
            return True
        if event.type == pygame.WINDOWFOCUSLOST:
            # KEYUPs are lost while unfocused
            self.clear()
        return False

    def control(self, name: str) -> bool:
        return not self.held.isdisjoint(self.controls.get(name, ()))

    def axis(self, neg: str, pos: str) -> int:
        return int(self.control(pos)) - int(self.control(neg))

    def clear(self) -> None:
        self.held.clear()
