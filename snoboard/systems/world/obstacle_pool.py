"""
obstacle_pool.py
----------------
Ordered container for the obstacles currently on the slope.

Obstacles are appended in spawn order, and since they all spawn a fixed
distance ahead of a player who only ever moves forward, spawn order is
also position order. Recycling therefore only ever trims the front of the
sequence.
"""

from snoboard.core.debug.debug_logger import DebugLogger


class ObstaclePool:
    """Spawn-ordered sequence of live obstacles."""

    def __init__(self, obstacles=None):
        self._obstacles = list(obstacles) if obstacles else []

    # ===========================================================
    # Container Protocol
    # ===========================================================

    def __iter__(self):
        return iter(self._obstacles)

    def __len__(self):
        return len(self._obstacles)

    def __getitem__(self, index):
        return self._obstacles[index]

    def __eq__(self, other):
        if isinstance(other, ObstaclePool):
            return self._obstacles == other._obstacles
        if isinstance(other, list):
            return self._obstacles == other
        return NotImplemented

    def __repr__(self):
        return f"ObstaclePool({self._obstacles!r})"

    # ===========================================================
    # Mutation
    # ===========================================================

    def append(self, obstacle):
        self._obstacles.append(obstacle)

    def clear(self):
        self._obstacles.clear()

    def snapshot(self):
        """Return a shallow copy of the current sequence."""
        return list(self._obstacles)

    def recycle(self, player_y: float, distance: float) -> int:
        """
        Drop every obstacle up to and including the last one that is more
        than `distance` behind the player.

        A single forward scan finds the last such index; the pool is then
        cut to the suffix after it. This is a prefix trim, not a filter:
        it relies on the pool being in spawn order.

        Args:
            player_y: Current player position along the direction of travel.
            distance: Recycle threshold behind the player.

        Returns:
            int: Number of obstacles removed.
        """
        cutoff = player_y - distance
        last_index = -1
        for i, obstacle in enumerate(self._obstacles):
            if obstacle.position.y < cutoff:
                last_index = i

        removed = last_index + 1
        if removed:
            del self._obstacles[:removed]
            DebugLogger.trace(f"Recycled {removed} obstacles, {len(self._obstacles)} live",
                              category="spawn")
        return removed
