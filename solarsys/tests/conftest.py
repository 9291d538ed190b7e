import os

# Headless SDL: no window, no audio device
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from orrery.core.keys import KeyState


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def surface():
    return pygame.Surface((200, 100))


def key_event(kind, key):
    return pygame.event.Event(kind, key=key, mod=0, unicode="", scancode=0)


@pytest.fixture
def press():
    """press(*codes) -> KeyState holding those keys."""
    def _press(*codes, state=None):
        state = KeyState() if state is None else state
        for code in codes:
            state.handle_event(key_event(pygame.KEYDOWN, code))
        return state
    return _press
