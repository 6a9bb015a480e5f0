"""
collision_hitbox.py
-------------------
Axis-aligned collision boxes and the overlap test used between the player
and obstacles.

Boxes are described by their center and half-extents. Two boxes intersect
when the distance between their centers is strictly smaller than the sum
of their half-extents on both axes, so boxes that only share an edge do
not collide and the test is symmetric in its arguments.
"""

from typing import NamedTuple


class Hitbox(NamedTuple):
    """Center-based axis-aligned bounding box."""
    x: float
    y: float
    half_width: float
    half_height: float

    @classmethod
    def from_entity(cls, entity) -> "Hitbox":
        """Build a box from anything exposing `position` and `half_size`."""
        half_width, half_height = entity.half_size
        return cls(entity.position.x, entity.position.y, half_width, half_height)


def intersects(a: Hitbox, b: Hitbox) -> bool:
    """Return True if the two boxes overlap."""
    return (abs(a.x - b.x) < a.half_width + b.half_width and
            abs(a.y - b.y) < a.half_height + b.half_height)


def entities_collide(first, second) -> bool:
    """Overlap test between two entities' current positions."""
    return intersects(Hitbox.from_entity(first), Hitbox.from_entity(second))
