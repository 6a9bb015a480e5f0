"""
game_loop.py
------------
Defines the GameLoop class responsible for orchestrating the runtime cycle.

Responsibilities
----------------
- Initialize pygame, the window, sprites and audio (all failures are fatal)
- Own the SimulationState and feed it one step per frame
- Maintain the frame cycle (events -> input -> step -> render)
- Forward gameplay events to the sound manager
"""

import random
import time

import pygame

from snoboard.audio.sound_manager import SoundManager
from snoboard.core.debug.debug_logger import DebugLogger
from snoboard.core.errors import StartupError
from snoboard.core.runtime import simulation
from snoboard.core.runtime.game_settings import Assets
from snoboard.core.runtime.simulation_config import SimulationConfig
from snoboard.core.runtime.simulation_state import SimulationState
from snoboard.core.services.event_manager import EventManager, PlayerCrashedEvent
from snoboard.core.services.frame_clock import FrameClock
from snoboard.core.services.input_manager import InputManager, QUIT
from snoboard.graphics.draw_manager import DrawManager
from snoboard.graphics.frame_renderer import FrameRenderer
from snoboard.entities.entity_types import VisualState


class GameLoop:
    """Core runtime controller that manages the game's main loop."""

    def __init__(self, settings: dict, seed=None):
        """
        Initialize pygame and all foundational systems.

        Args:
            settings: Merged config tree (see simulation_config.default_config_dict).
            seed: Seed for obstacle placement; random if None.

        Raises:
            StartupError, AssetLoadError, ConfigError: startup cannot continue.
        """
        DebugLogger.section("Initializing GameLoop")
        self.settings = settings
        display_cfg = settings["display"]
        audio_cfg = settings["audio"]
        assets_cfg = settings["assets"]

        # -------------------------------------------------------
        # Window
        # -------------------------------------------------------
        pygame.init()
        pygame.font.init()
        vsync = bool(display_cfg["vsync"])
        try:
            # vsync is only honoured for SCALED or OPENGL windows
            self.window = pygame.display.set_mode(
                (int(display_cfg["width"]), int(display_cfg["height"])),
                pygame.SCALED if vsync else 0,
                vsync=int(vsync),
            )
        except pygame.error as e:
            raise StartupError(f"Display unavailable: {e}") from e
        pygame.display.set_caption(display_cfg["caption"])
        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {display_cfg['width']}x{display_cfg['height']}")

        # -------------------------------------------------------
        # Sprites
        # -------------------------------------------------------
        self.draw_manager = DrawManager(self.window, assets_cfg["graphics_dir"])
        sprites = self.draw_manager.load_sprites(Assets.SPRITES)
        DebugLogger.init_sub(f"Loaded {len(sprites)} sprites")

        config = SimulationConfig.from_dict(settings).with_sprite_sizes(
            player_size=sprites[VisualState.FORWARD.value].get_size(),
            ground_size=sprites["harddrive"].get_size(),
            aerial_size=sprites["serverrack"].get_size(),
        )

        # -------------------------------------------------------
        # Simulation & Services
        # -------------------------------------------------------
        self.state = SimulationState(config)
        self.rng = random.Random(seed)
        self.events = EventManager()
        self.input_manager = InputManager()
        self.clock = FrameClock(
            fps=int(display_cfg["fps"]),
            max_frame_time=display_cfg.get("max_frame_time"),
        )
        self.renderer = FrameRenderer(self.draw_manager, sprites, display_cfg["background_color"])

        # -------------------------------------------------------
        # Audio
        # -------------------------------------------------------
        self.sound = SoundManager(
            assets_cfg["audio_dir"],
            music_volume=audio_cfg["music_volume"],
            effect_volume=audio_cfg["effect_volume"],
            enabled=audio_cfg["enabled"],
        )
        self.death_track = audio_cfg["death_track"]
        if self.sound.enabled:
            self.sound.load_effect(self.death_track)
            self.sound.play_looped(audio_cfg["background_track"])
        self.events.subscribe(PlayerCrashedEvent, self._on_player_crashed)

        self._slow_frame_ms = 1000.0 / max(int(display_cfg["fps"]), 1) * 2
        self._last_perf_warn_time = 0.0
        self.running = True
        DebugLogger.init_entry("GameLoop Runtime")

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================

    def run(self):
        """Run frames until the window is closed or quit is pressed."""
        DebugLogger.section("Game Loop")
        self.clock.reset()

        try:
            while self.running:
                dt = self.clock.tick()
                self._handle_events()
                if not self.running:
                    break
                self.run_frame(dt)
        finally:
            self.sound.stop()
            pygame.quit()
            DebugLogger.system("Pygame terminated")

    def run_frame(self, dt):
        """Sample input, advance the simulation and draw one frame."""
        start = time.perf_counter()

        self.input_manager.update()
        if self.input_manager.is_held(QUIT):
            DebugLogger.action("Quit key pressed")
            self.running = False
            return

        simulation.step(self.state, dt, self.input_manager.snapshot(), self.rng, self.events)
        self.renderer.render(self.state)

        self._warn_if_slow((time.perf_counter() - start) * 1000)

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                break
            self.sound.handle_event(event)

    def _on_player_crashed(self, event):
        if self.sound.enabled:
            self.sound.play_once(self.death_track)

    # ===========================================================
    # Diagnostics
    # ===========================================================

    def _warn_if_slow(self, frame_time_ms):
        if frame_time_ms <= self._slow_frame_ms:
            return
        now = time.perf_counter()
        if now - self._last_perf_warn_time > 1.0:  # Throttle to 1/sec
            self._last_perf_warn_time = now
            DebugLogger.warn(f"Slow frame: {frame_time_ms:.2f} ms", category="timing")
