"""
obstacle.py
-----------
A stationary hazard on the slope.
"""

import pygame

from snoboard.entities.entity_types import ObstacleKind


class Obstacle:
    """Position, kind and collision size of one obstacle. Obstacles never move."""

    __slots__ = ("position", "kind", "width", "height")

    def __init__(self, position, kind: ObstacleKind, size):
        self.position = pygame.Vector2(position)
        self.kind = kind
        self.width, self.height = size

    @property
    def half_size(self):
        return self.width / 2, self.height / 2

    @property
    def jumpable(self) -> bool:
        return self.kind is ObstacleKind.GROUND

    def __repr__(self):
        return f"Obstacle({self.kind.name}, pos=({self.position.x:.1f}, {self.position.y:.1f}))"
