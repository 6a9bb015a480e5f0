"""
Runtime configuration exports.

Provides game-wide default constants. All exports are lightweight class
constants with no initialization overhead.
"""

from snoboard.core.runtime.game_settings import (
    Display,
    Timing,
    Player,
    Obstacles,
    Difficulty,
    Camera,
    Scoring,
    Assets,
    Audio,
)

__all__ = [
    # Display & Timing
    'Display',
    'Timing',
    # Gameplay
    'Player',
    'Obstacles',
    'Difficulty',
    'Camera',
    'Scoring',
    # Resources
    'Assets',
    'Audio',
]
