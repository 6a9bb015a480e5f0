"""
conftest.py
-----------
Shared pytest configuration and fixtures for SNOboard tests.

Contains:
- Headless SDL drivers so pygame never opens a real window or audio device
- Common fixtures for configs, states and inputs
- A recording presentation sink
"""

import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from snoboard.core.runtime.game_settings import LoggerConfig  # noqa: E402
from snoboard.core.runtime.simulation_config import SimulationConfig  # noqa: E402
from snoboard.core.runtime.simulation_state import SimulationState  # noqa: E402
from snoboard.core.services.input_manager import InputSnapshot  # noqa: E402
from snoboard.entities.entity_types import ObstacleKind  # noqa: E402
from snoboard.entities.obstacle import Obstacle  # noqa: E402


# ===========================================================
# Logger isolation
# ===========================================================

@pytest.fixture(autouse=True)
def restore_logger_config():
    """Undo any DebugLogger.configure() done by a test."""
    level = LoggerConfig.LOG_LEVEL
    categories = dict(LoggerConfig.CATEGORIES)
    enabled = LoggerConfig.ENABLE_LOGGING
    yield
    LoggerConfig.LOG_LEVEL = level
    LoggerConfig.CATEGORIES.clear()
    LoggerConfig.CATEGORIES.update(categories)
    LoggerConfig.ENABLE_LOGGING = enabled


# ===========================================================
# Simulation fixtures
# ===========================================================

@pytest.fixture
def sim_config():
    """Default 1024x768 configuration."""
    return SimulationConfig()


@pytest.fixture
def quiet_config():
    """Configuration whose spawn interval is long enough that nothing spawns."""
    return SimulationConfig(initial_difficulty=1000.0)


@pytest.fixture
def state(sim_config):
    return SimulationState(sim_config)


@pytest.fixture
def quiet_state(quiet_config):
    return SimulationState(quiet_config)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def no_input():
    return InputSnapshot()


@pytest.fixture
def make_inputs():
    """Factory for InputSnapshot with keyword flags."""
    def _make(left=False, right=False, jump=False, confirm=False):
        return InputSnapshot(left=left, right=right, jump=jump, confirm=confirm)
    return _make


@pytest.fixture
def make_obstacle():
    """Factory for obstacles; AERIAL server racks by default."""
    def _make(x, y, kind=ObstacleKind.AERIAL, size=(64, 128)):
        return Obstacle(pygame.Vector2(x, y), kind, size)
    return _make


# ===========================================================
# Presentation fakes
# ===========================================================

class RecordingSink:
    """Presentation sink that records every call in order."""

    def __init__(self):
        self.calls = []

    def clear(self, color):
        self.calls.append(("clear", color))

    def draw_sprite(self, handle, position):
        self.calls.append(("sprite", handle, tuple(position)))

    def draw_text(self, text, position, scale=1):
        self.calls.append(("text", text, tuple(position), scale))

    def present(self):
        self.calls.append(("present",))

    def kinds(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def recording_sink():
    return RecordingSink()


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: exercises real pygame subsystems")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Tag everything that is not an integration test as a unit test."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
