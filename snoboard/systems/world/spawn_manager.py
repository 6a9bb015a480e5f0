"""
spawn_manager.py
----------------
Obstacle spawning policy and the difficulty ramp.

Responsibilities
----------------
- Decide when the next obstacle is due (spawn timer vs. current difficulty).
- Place new obstacles ahead of the player with a random lateral offset.
- Pick the obstacle kind with a fair coin.
- Shrink the spawn interval after each spawn, down to a floor.
"""

import random

import pygame

from snoboard.core.debug.debug_logger import DebugLogger
from snoboard.entities.entity_types import ObstacleKind
from snoboard.entities.obstacle import Obstacle


class SpawnManager:
    """Creates obstacles according to the configured cadence and placement."""

    def __init__(self, config):
        """
        Args:
            config: SimulationConfig providing window width, spawn offset,
                obstacle sizes and the difficulty ramp.
        """
        self.config = config

    # ===========================================================
    # Cadence
    # ===========================================================

    @staticmethod
    def should_spawn(time_since_last: float, difficulty: float) -> bool:
        """An obstacle is due once the timer strictly exceeds the interval."""
        return time_since_last > difficulty

    def next_difficulty(self, difficulty: float) -> float:
        """Spawn interval after one more spawn, never below the floor."""
        difficulty -= self.config.difficulty_decay
        if difficulty < self.config.difficulty_floor:
            difficulty = self.config.difficulty_floor
        return difficulty

    # ===========================================================
    # Placement
    # ===========================================================

    def spawn(self, player_position, rng=None) -> Obstacle:
        """
        Create one obstacle ahead of the player.

        Args:
            player_position: Current player center.
            rng: random.Random used for offset and kind; module random if None.

        Returns:
            Obstacle: The new obstacle (not yet added to any pool).
        """
        rng = rng or random
        width = int(self.config.window_width)

        offset_x = rng.randrange(-width, width)
        kind = ObstacleKind.AERIAL if rng.randrange(2) == 0 else ObstacleKind.GROUND

        position = pygame.Vector2(player_position) + pygame.Vector2(offset_x, self.config.spawn_offset)
        obstacle = Obstacle(position, kind, self.config.obstacle_size(kind))

        DebugLogger.trace(f"Spawned {obstacle}", category="spawn")
        return obstacle
