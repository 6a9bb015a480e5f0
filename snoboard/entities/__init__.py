"""
snoboard/entities/__init__.py
-----------------------------
Entity module exports.

Exports:
    Player        - The snowboarder
    Obstacle      - Stationary hazard on the slope
    ObstacleKind  - GROUND (jumpable) or AERIAL
    VisualState   - Active player sprite selector
"""

from snoboard.entities.entity_types import ObstacleKind, VisualState
from snoboard.entities.obstacle import Obstacle
from snoboard.entities.player import Player

__all__ = [
    'Player',
    'Obstacle',
    'ObstacleKind',
    'VisualState',
]
