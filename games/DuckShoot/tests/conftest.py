"""
Pytest fixtures for Duck Shoot game tests.

pygame runs headless: the dummy video and audio drivers are selected
before any test creates a window or touches the mixer.
"""
import os
import random

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pygame
import pytest

from duckshoot.events import EventBus
from duckshoot.logging import disable_logging, reset_logging
from duckshoot.scheduler import Scheduler
from models import Resolution


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep game logs out of test output."""
    disable_logging()
    yield
    reset_logging()


@pytest.fixture
def scheduler():
    return Scheduler()


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def rng():
    """Seeded random source for reproducible draws."""
    return random.Random(1234)


@pytest.fixture
def viewport():
    return Resolution(width=800, height=600)


@pytest.fixture
def record(bus):
    """Collect every event published on the bus, in order."""
    from duckshoot.events import GameEvent

    events = []
    bus.subscribe(GameEvent, events.append)
    return events


@pytest.fixture
def pygame_init():
    """Initialize pygame for testing."""
    pygame.init()
    yield
    pygame.quit()
