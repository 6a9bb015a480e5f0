"""
World system exports.

Provides the obstacle pool and the spawning policy.
"""

from snoboard.systems.world.obstacle_pool import ObstaclePool
from snoboard.systems.world.spawn_manager import SpawnManager

__all__ = [
    'ObstaclePool',
    'SpawnManager',
]
