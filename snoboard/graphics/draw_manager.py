"""
draw_manager.py
---------------
pygame-backed asset provider and presentation sink.

Responsibilities:
- Load sprites from the graphics directory (missing files are fatal)
- Clear, blit centered sprites, render scaled text and flip the display
"""

import os

import pygame

from snoboard.core.debug.debug_logger import DebugLogger
from snoboard.core.errors import AssetLoadError
from snoboard.core.runtime.game_settings import Scoring


class DrawManager:
    """Draws onto the display surface in screen coordinates."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, surface, graphics_dir, font=None):
        """
        Args:
            surface: Target pygame.Surface (normally the display surface).
            graphics_dir: Directory holding <name>.png sprites.
            font: pygame.font.Font for HUD text; the default font if None.
        """
        self.surface = surface
        self.graphics_dir = graphics_dir
        self.images = {}
        self.font = font or pygame.font.Font(None, 16)
        self.text_color = Scoring.TEXT_COLOR

        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Asset Loading
    # ===========================================================

    def load_sprite(self, name):
        """
        Load and cache graphics/<name>.png.

        Raises:
            AssetLoadError: The file is missing or not a readable image.
        """
        if name in self.images:
            return self.images[name]

        path = os.path.join(self.graphics_dir, f"{name}.png")
        try:
            image = pygame.image.load(path).convert_alpha()
        except (FileNotFoundError, pygame.error) as e:
            DebugLogger.fail(f"Missing sprite '{name}' at {path}", category="loading")
            raise AssetLoadError(path, e) from e

        self.images[name] = image
        DebugLogger.trace(f"Loaded sprite '{name}' {image.get_size()}", category="loading")
        return image

    def load_sprites(self, names):
        """Load every named sprite. Returns {name: surface}."""
        return {name: self.load_sprite(name) for name in names}

    @staticmethod
    def sprite_size(image):
        return image.get_size()

    # ===========================================================
    # Presentation
    # ===========================================================

    def clear(self, color):
        self.surface.fill(color)

    def draw_sprite(self, image, position):
        """Blit `image` centered on `position`."""
        rect = image.get_rect(center=(round(position[0]), round(position[1])))
        self.surface.blit(image, rect)

    def draw_text(self, text, position, scale=1):
        """Render `text` with its top-left corner at `position`, scaled by an integer factor."""
        rendered = self.font.render(text, True, self.text_color)
        if scale != 1:
            width, height = rendered.get_size()
            rendered = pygame.transform.scale(rendered, (width * scale, height * scale))
        self.surface.blit(rendered, (round(position[0]), round(position[1])))

    def present(self):
        pygame.display.flip()
