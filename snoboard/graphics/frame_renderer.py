"""
frame_renderer.py
-----------------
Turns a SimulationState into the ordered draw calls for one frame.

Per frame the sink receives exactly:
    clear -> every obstacle in pool order -> player -> [death banner]
          -> score text -> present

All positions handed to the sink are screen-space (world minus camera).
"""

from snoboard.core.runtime.game_settings import Display, Scoring
from snoboard.entities.entity_types import ObstacleKind

OBSTACLE_SPRITES = {
    ObstacleKind.GROUND: "harddrive",
    ObstacleKind.AERIAL: "serverrack",
}


class FrameRenderer:
    """Issues draw calls against a presentation sink."""

    def __init__(self, sink, sprites, background_color=Display.BACKGROUND_COLOR):
        """
        Args:
            sink: Object with clear/draw_sprite/draw_text/present.
            sprites: {sprite name: handle} as returned by the asset provider.
            background_color: RGB clear colour.
        """
        self.sink = sink
        self.sprites = sprites
        self.background_color = tuple(background_color)

    def render(self, state):
        camera = state.camera_position
        sink = self.sink

        sink.clear(self.background_color)

        for obstacle in state.obstacles:
            handle = self.sprites[OBSTACLE_SPRITES[obstacle.kind]]
            sink.draw_sprite(handle, obstacle.position - camera)

        player = state.player
        player_screen = player.position - camera
        sink.draw_sprite(self.sprites[player.visual_state.value], player_screen)

        if state.dead:
            sink.draw_text(Scoring.BANNER_TEXT, player_screen, Scoring.BANNER_SCALE)

        sink.draw_text(self.score_text(state), Scoring.TEXT_POSITION, Scoring.TEXT_SCALE)
        sink.present()

    @staticmethod
    def score_text(state) -> str:
        return f"Score: {state.score:.0f}"
