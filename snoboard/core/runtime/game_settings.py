"""
game_settings.py
----------------
Centralized default constants for all game systems.

These are the values the game ships with. Any of them can be overridden
from a YAML/JSON file (see config_manager and SimulationConfig).
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 1024
    HEIGHT: int = 768
    FPS: int = 60
    VSYNC: bool = True
    CAPTION: str = "SNOboard"
    BACKGROUND_COLOR: tuple = (138, 43, 226)  # blueviolet


# ===========================================================
# Timing
# ===========================================================

class Timing:
    """Frame timing."""
    MAX_FRAME_TIME: float = 0.1


# ===========================================================
# Player Defaults
# ===========================================================

class Player:
    """Snowboarder movement configuration."""
    SPEED: float = 300.0
    JUMP_SPEED: float = 500.0
    JUMP_DURATION: float = 0.9
    SIZE: tuple = (64, 64)


# ===========================================================
# Obstacles
# ===========================================================

class Obstacles:
    """Obstacle placement and recycling."""
    RECYCLE_DISTANCE: float = 400.0
    SPAWN_OFFSET: float = 700.0
    GROUND_SIZE: tuple = (48, 48)    # hard drive
    AERIAL_SIZE: tuple = (64, 128)   # server rack


# ===========================================================
# Difficulty Ramp
# ===========================================================

class Difficulty:
    """Spawn interval (seconds) and its linear decay."""
    INITIAL: float = 1.0
    DECAY: float = 0.01
    FLOOR: float = 0.25


# ===========================================================
# Camera & Scoring
# ===========================================================

class Camera:
    """Extra vertical lead so more of the slope ahead is on screen."""
    LEAD: float = 200.0


class Scoring:
    DIVISOR: float = 2.0
    TEXT_POSITION: tuple = (750, 43)
    TEXT_SCALE: int = 2
    BANNER_TEXT: str = "DEAD!!!!"
    BANNER_SCALE: int = 4
    TEXT_COLOR: tuple = (0, 0, 0)


# ===========================================================
# Assets
# ===========================================================

class Assets:
    """Asset locations, relative to the working directory."""
    GRAPHICS_DIR: str = "graphics"
    AUDIO_DIR: str = "audio"

    SPRITES = (
        "forward", "left", "right",
        "jump", "jumpleft", "jumpright",
        "wipeout", "harddrive", "serverrack",
    )


class Audio:
    """Music and sound effect configuration."""
    ENABLED: bool = True
    BACKGROUND_TRACK: str = "danger_zone.mp3"
    DEATH_TRACK: str = "dead.mp3"
    MUSIC_VOLUME: float = 1.0
    EFFECT_VOLUME: float = 1.0


# ===========================================================
# Logger Configuration (Textual / Console Logging)
# ===========================================================

class LoggerConfig:
    """
    Controls which subsystems emit log messages and at what verbosity level.
    Used by DebugLogger to decide what to print.
    """

    # Master Control
    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE

    CATEGORIES = {
        # Core Systems
        "system": True,      # Boot, config, and lifecycle events
        "loading": True,     # Config and asset loading
        "display": True,
        "input": False,

        # Gameplay Systems
        "simulation": True,  # Crash / respawn transitions
        "spawn": False,      # Obstacle creation and recycling
        "collision": False,

        # Output
        "render": False,
        "audio": True,
        "timing": False,     # Slow frame warnings
    }

    # Output Style
    SHOW_TIMESTAMP = True
    SHOW_LEVEL = True
