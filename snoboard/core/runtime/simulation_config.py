"""
simulation_config.py
--------------------
Immutable parameter set for the simulation.

Defaults come from game_settings; a merged config dict (see
config_manager.load_config) overrides any of them by section/key.
"""

from dataclasses import dataclass, replace

import pygame

from snoboard.core.errors import ConfigError
from snoboard.core.runtime.game_settings import (
    Display, Player, Obstacles, Difficulty, Camera, Scoring, Audio, Assets,
    LoggerConfig, Timing,
)
from snoboard.entities.entity_types import ObstacleKind


def default_config_dict():
    """Return the full default config tree, section by section."""
    return {
        "display": {
            "width": Display.WIDTH,
            "height": Display.HEIGHT,
            "fps": Display.FPS,
            "vsync": Display.VSYNC,
            "caption": Display.CAPTION,
            "background_color": list(Display.BACKGROUND_COLOR),
            "max_frame_time": Timing.MAX_FRAME_TIME,
        },
        "player": {
            "speed": Player.SPEED,
            "jump_speed": Player.JUMP_SPEED,
            "jump_duration": Player.JUMP_DURATION,
            "size": list(Player.SIZE),
        },
        "obstacles": {
            "recycle_distance": Obstacles.RECYCLE_DISTANCE,
            "spawn_offset": Obstacles.SPAWN_OFFSET,
            "ground_size": list(Obstacles.GROUND_SIZE),
            "aerial_size": list(Obstacles.AERIAL_SIZE),
        },
        "difficulty": {
            "initial": Difficulty.INITIAL,
            "decay": Difficulty.DECAY,
            "floor": Difficulty.FLOOR,
        },
        "camera": {
            "lead": Camera.LEAD,
        },
        "scoring": {
            "divisor": Scoring.DIVISOR,
        },
        "audio": {
            "enabled": Audio.ENABLED,
            "background_track": Audio.BACKGROUND_TRACK,
            "death_track": Audio.DEATH_TRACK,
            "music_volume": Audio.MUSIC_VOLUME,
            "effect_volume": Audio.EFFECT_VOLUME,
        },
        "assets": {
            "graphics_dir": Assets.GRAPHICS_DIR,
            "audio_dir": Assets.AUDIO_DIR,
        },
        "logging": {
            "level": LoggerConfig.LOG_LEVEL,
            "categories": {},
        },
    }


@dataclass(frozen=True)
class SimulationConfig:
    """Every numeric constant the simulation step depends on."""

    window_width: float = Display.WIDTH
    window_height: float = Display.HEIGHT

    speed: float = Player.SPEED
    jump_speed: float = Player.JUMP_SPEED
    jump_duration: float = Player.JUMP_DURATION
    player_size: tuple = Player.SIZE

    recycle_distance: float = Obstacles.RECYCLE_DISTANCE
    spawn_offset: float = Obstacles.SPAWN_OFFSET
    ground_size: tuple = Obstacles.GROUND_SIZE
    aerial_size: tuple = Obstacles.AERIAL_SIZE

    initial_difficulty: float = Difficulty.INITIAL
    difficulty_decay: float = Difficulty.DECAY
    difficulty_floor: float = Difficulty.FLOOR

    camera_lead: float = Camera.LEAD
    score_divisor: float = Scoring.DIVISOR

    def __post_init__(self):
        self.validate()

    # ===========================================================
    # Construction
    # ===========================================================

    @classmethod
    def from_dict(cls, cfg: dict) -> "SimulationConfig":
        """Build from a merged config tree. Missing sections fall back to defaults."""
        display = cfg.get("display", {})
        player = cfg.get("player", {})
        obstacles = cfg.get("obstacles", {})
        difficulty = cfg.get("difficulty", {})
        camera = cfg.get("camera", {})
        scoring = cfg.get("scoring", {})

        try:
            return cls(
                window_width=float(display.get("width", Display.WIDTH)),
                window_height=float(display.get("height", Display.HEIGHT)),
                speed=float(player.get("speed", Player.SPEED)),
                jump_speed=float(player.get("jump_speed", Player.JUMP_SPEED)),
                jump_duration=float(player.get("jump_duration", Player.JUMP_DURATION)),
                player_size=_size(player.get("size", Player.SIZE)),
                recycle_distance=float(obstacles.get("recycle_distance", Obstacles.RECYCLE_DISTANCE)),
                spawn_offset=float(obstacles.get("spawn_offset", Obstacles.SPAWN_OFFSET)),
                ground_size=_size(obstacles.get("ground_size", Obstacles.GROUND_SIZE)),
                aerial_size=_size(obstacles.get("aerial_size", Obstacles.AERIAL_SIZE)),
                initial_difficulty=float(difficulty.get("initial", Difficulty.INITIAL)),
                difficulty_decay=float(difficulty.get("decay", Difficulty.DECAY)),
                difficulty_floor=float(difficulty.get("floor", Difficulty.FLOOR)),
                camera_lead=float(camera.get("lead", Camera.LEAD)),
                score_divisor=float(scoring.get("divisor", Scoring.DIVISOR)),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid simulation config: {e}") from e

    def with_sprite_sizes(self, player_size=None, ground_size=None, aerial_size=None):
        """Return a copy whose collision extents match the loaded sprites."""
        return replace(
            self,
            player_size=_size(player_size) if player_size else self.player_size,
            ground_size=_size(ground_size) if ground_size else self.ground_size,
            aerial_size=_size(aerial_size) if aerial_size else self.aerial_size,
        )

    # ===========================================================
    # Validation
    # ===========================================================

    def validate(self):
        """Raise ConfigError if any parameter is outside its usable range."""
        positive = {
            "display.width": self.window_width,
            "display.height": self.window_height,
            "player.speed": self.speed,
            "player.jump_speed": self.jump_speed,
            "player.jump_duration": self.jump_duration,
            "obstacles.recycle_distance": self.recycle_distance,
            "obstacles.spawn_offset": self.spawn_offset,
            "difficulty.initial": self.initial_difficulty,
            "difficulty.floor": self.difficulty_floor,
            "scoring.divisor": self.score_divisor,
        }
        for name, value in positive.items():
            if value <= 0:
                raise ConfigError(f"{name} must be positive, got {value}")

        if self.difficulty_decay < 0:
            raise ConfigError(f"difficulty.decay must not be negative, got {self.difficulty_decay}")
        if self.difficulty_floor > self.initial_difficulty:
            raise ConfigError(
                f"difficulty.floor ({self.difficulty_floor}) exceeds "
                f"difficulty.initial ({self.initial_difficulty})"
            )

        for name, size in (("player.size", self.player_size),
                           ("obstacles.ground_size", self.ground_size),
                           ("obstacles.aerial_size", self.aerial_size)):
            if len(size) != 2 or size[0] <= 0 or size[1] <= 0:
                raise ConfigError(f"{name} must be two positive numbers, got {size}")

    # ===========================================================
    # Derived Values
    # ===========================================================

    @property
    def viewport_center(self) -> pygame.Vector2:
        return pygame.Vector2(self.window_width / 2, self.window_height / 2)

    def obstacle_size(self, kind: ObstacleKind) -> tuple:
        if kind is ObstacleKind.AERIAL:
            return self.aerial_size
        return self.ground_size


def _size(value):
    """Coerce a two-element sequence to a (width, height) float tuple."""
    width, height = value
    return float(width), float(height)
