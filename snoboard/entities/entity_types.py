"""Entity types."""

from enum import Enum


class ObstacleKind(Enum):
    """
    Collision archetype of an obstacle.

    GROUND obstacles can be cleared by jumping; AERIAL ones cannot.
    """
    GROUND = "ground"   # hard drive
    AERIAL = "aerial"   # server rack


class VisualState(Enum):
    """Active player sprite, derived every frame from input and flags."""
    FORWARD = "forward"
    LEFT = "left"
    RIGHT = "right"
    JUMP = "jump"
    JUMP_LEFT = "jumpleft"
    JUMP_RIGHT = "jumpright"
    WIPEOUT = "wipeout"
