"""
player.py
---------
Defines the snowboarder controlled by the player.

Coordinate System
-----------------
Center-based, Y grows in the direction of travel (down the slope and down
the screen). Descent velocity is therefore (0, +speed).
"""

import pygame

from snoboard.entities.entity_types import VisualState


class Player:
    """Position, velocity and jump/alive flags of the snowboarder."""

    __slots__ = (
        "position", "velocity", "visual_state",
        "alive", "jumping", "time_since_jump",
        "width", "height",
    )

    def __init__(self, position, speed, size=(64, 64)):
        """
        Args:
            position: Spawn center (usually the viewport center).
            speed: Base descent speed in units/second.
            size: (width, height) collision extents.
        """
        self.width, self.height = size
        self.reset(position, speed)

    def reset(self, position, speed):
        """Put the player back at `position`, alive and descending."""
        self.position = pygame.Vector2(position)
        self.velocity = pygame.Vector2(0, speed)
        self.visual_state = VisualState.FORWARD
        self.alive = True
        self.jumping = False
        self.time_since_jump = 0.0

    @property
    def half_size(self):
        return self.width / 2, self.height / 2

    def __repr__(self):
        return (f"Player(pos=({self.position.x:.1f}, {self.position.y:.1f}), "
                f"state={self.visual_state.name}, alive={self.alive}, jumping={self.jumping})")
