"""
simulation_state.py
-------------------
Everything the simulation step reads and writes, owned by the loop driver.
"""

import pygame

from snoboard.core.runtime.simulation_config import SimulationConfig
from snoboard.entities.player import Player
from snoboard.systems.world.obstacle_pool import ObstaclePool
from snoboard.systems.world.spawn_manager import SpawnManager


class SimulationState:
    """Player, obstacles, difficulty and death flag for one session."""

    def __init__(self, config: SimulationConfig = None):
        self.config = config or SimulationConfig()

        center = self.config.viewport_center
        self.start_y = center.y
        self.player = Player(center, self.config.speed, self.config.player_size)
        self.obstacles = ObstaclePool()
        self.spawner = SpawnManager(self.config)

        self.difficulty = self.config.initial_difficulty
        self.time_since_last_obstacle = 0.0
        self.dead = False

        self.camera_position = pygame.Vector2(0, 0)
        self.update_camera()

    # ===========================================================
    # Derived Values
    # ===========================================================

    @property
    def score(self) -> float:
        """Distance travelled past the starting line, scaled; never negative."""
        distance = self.player.position.y - self.start_y
        if distance <= 0:
            return 0.0
        return distance / self.config.score_divisor

    def update_camera(self):
        """Center the view on the player, leading it by the configured offset."""
        self.camera_position = (self.player.position
                                - self.config.viewport_center
                                + pygame.Vector2(0, self.config.camera_lead))
        return self.camera_position

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def respawn(self):
        """Restore the start-of-session state in place."""
        center = self.config.viewport_center
        self.player.reset(center, self.config.speed)
        self.obstacles.clear()
        self.difficulty = self.config.initial_difficulty
        self.time_since_last_obstacle = 0.0
        self.dead = False
        self.update_camera()

    def __repr__(self):
        return (f"SimulationState({self.player!r}, obstacles={len(self.obstacles)}, "
                f"difficulty={self.difficulty:.2f}, dead={self.dead}, score={self.score:.0f})")
