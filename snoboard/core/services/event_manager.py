"""
event_manager.py
----------------
Gameplay notifications between the simulation and its listeners.

The simulation step announces crashes, respawns and spawns here and never
learns who reacts (today: the death stinger in GameLoop). Callbacks run
synchronously inside step(), so they must return quickly.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type

from snoboard.core.debug.debug_logger import DebugLogger
from snoboard.entities.entity_types import ObstacleKind


# ===========================================================
# Events
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    pass


@dataclass(frozen=True)
class PlayerCrashedEvent(BaseEvent):
    """The player hit an obstacle this frame."""
    position: tuple
    score: float


@dataclass(frozen=True)
class PlayerRespawnedEvent(BaseEvent):
    """The player confirmed a restart after a crash."""


@dataclass(frozen=True)
class ObstacleSpawnedEvent(BaseEvent):
    position: tuple
    kind: ObstacleKind


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Type-keyed publish/subscribe hub."""

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """Register `callback(event)` for `event_type`. Registering twice is a no-op."""
        listeners = self._subscribers.setdefault(event_type, [])
        if callback not in listeners:
            listeners.append(callback)
            DebugLogger.trace(f"{_name(callback)} listens for {event_type.__name__}",
                              category="system")

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        listeners = self._subscribers.get(event_type, [])
        if callback in listeners:
            listeners.remove(callback)

    def dispatch(self, event: BaseEvent) -> None:
        """
        Call every listener of type(event) in subscription order.

        A listener that raises is logged and skipped; the rest still run.
        """
        for callback in tuple(self._subscribers.get(type(event), ())):
            try:
                callback(event)
            except Exception as e:
                DebugLogger.warn(f"{_name(callback)} failed on {type(event).__name__}: {e}")

    def clear_all(self) -> None:
        self._subscribers.clear()

    def get_subscriber_count(self, event_type: Type[BaseEvent] = None) -> int:
        if event_type is not None:
            return len(self._subscribers.get(event_type, ()))
        return sum(len(listeners) for listeners in self._subscribers.values())


def _name(callback) -> str:
    return getattr(callback, "__name__", repr(callback))
