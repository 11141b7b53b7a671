"""Shared pytest fixtures for the core scheduler, events and logging tests."""
import pytest

from duckshoot.events import EventBus
from duckshoot.logging import reset_logging
from duckshoot.scheduler import Scheduler


@pytest.fixture
def scheduler():
    """Fresh scheduler at t=0."""
    return Scheduler()


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo logging configuration changes made by a test."""
    yield
    reset_logging()
