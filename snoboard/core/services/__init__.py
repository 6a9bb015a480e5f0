"""
Core services exports.

Provides configuration loading, the event system, input and timing.
"""

from snoboard.core.services.config_manager import load_config
from snoboard.core.services.event_manager import (
    EventManager,
    BaseEvent,
    PlayerCrashedEvent,
    PlayerRespawnedEvent,
    ObstacleSpawnedEvent,
)
from snoboard.core.services.frame_clock import FrameClock
from snoboard.core.services.input_manager import InputManager, InputSnapshot

__all__ = [
    # Config
    'load_config',
    # Events
    'EventManager',
    'BaseEvent',
    'PlayerCrashedEvent',
    'PlayerRespawnedEvent',
    'ObstacleSpawnedEvent',
    # Services
    'FrameClock',
    'InputManager',
    'InputSnapshot',
]
