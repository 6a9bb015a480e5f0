"""
sound_manager.py
----------------
Background music and one-shot sound effects on pygame.mixer.

Music loops through pygame.mixer.music. One-shot effects play on a mixer
channel and return a SoundCompletion: callers either let the game loop
resolve it (the channel's end event is forwarded to handle_event) or
block on SoundCompletion.wait(). Nothing here runs on another thread.
"""

import os

import pygame

from snoboard.core.debug.debug_logger import DebugLogger
from snoboard.core.errors import AssetLoadError, StartupError

SOUND_END_EVENT = pygame.USEREVENT + 1


# ===========================================================
# Completion Handle
# ===========================================================

class SoundCompletion:
    """One-shot completion signal for a playing effect."""

    def __init__(self, channel=None, on_complete=None):
        self.channel = channel
        self._on_complete = on_complete
        self._done = False
        if channel is None:
            self._finish()

    def done(self) -> bool:
        return self._done

    def poll(self) -> bool:
        """Resolve the completion if the channel has gone quiet. Returns done()."""
        if not self._done and not self.channel.get_busy():
            self._finish()
        return self._done

    def wait(self, poll_interval_ms: int = 10):
        """Block the calling thread until playback ends."""
        while not self.poll():
            pygame.time.wait(poll_interval_ms)

    def _finish(self):
        self._done = True
        callback, self._on_complete = self._on_complete, None
        if callback is not None:
            callback()


# ===========================================================
# Sound Manager
# ===========================================================

class SoundManager:
    """Loads tracks from the audio directory and plays them."""

    def __init__(self, audio_dir, music_volume=1.0, effect_volume=1.0, enabled=True):
        """
        Args:
            audio_dir: Directory holding the music and effect files.
            music_volume: Looping music volume, 0.0 - 1.0.
            effect_volume: One-shot effect volume, 0.0 - 1.0.
            enabled: False turns every call into a no-op (muted session).

        Raises:
            StartupError: The audio device could not be opened.
        """
        self.audio_dir = audio_dir
        self.music_volume = self.clamp_volume(music_volume)
        self.effect_volume = self.clamp_volume(effect_volume)
        self.enabled = enabled

        self.effects = {}
        self.current_music = None
        self._pending = []

        if not enabled:
            DebugLogger.init_entry("SoundManager", "MUTED")
            return

        try:
            pygame.mixer.init()
        except pygame.error as e:
            raise StartupError(f"Audio device unavailable: {e}") from e
        DebugLogger.init_entry("SoundManager")

    @staticmethod
    def clamp_volume(volume) -> float:
        return min(max(float(volume), 0.0), 1.0)

    def _path(self, track):
        return os.path.join(self.audio_dir, track)

    # ===========================================================
    # Music
    # ===========================================================

    def play_looped(self, track, volume=None):
        """Loop `track` as background music until stop() is called."""
        if not self.enabled:
            return
        if self.current_music == track:
            return

        path = self._path(track)
        try:
            pygame.mixer.music.load(path)
        except (FileNotFoundError, pygame.error) as e:
            raise AssetLoadError(path, e) from e

        volume = self.music_volume if volume is None else self.clamp_volume(volume)
        pygame.mixer.music.set_volume(volume)
        pygame.mixer.music.play(loops=-1)
        self.current_music = track
        DebugLogger.action(f"Looping '{track}' at volume {volume:.2f}", category="audio")

    def stop(self):
        if not self.enabled:
            return
        pygame.mixer.music.stop()
        pygame.mixer.stop()
        self.current_music = None
        for completion in self._pending:
            completion._finish()
        self._pending.clear()

    # ===========================================================
    # Effects
    # ===========================================================

    def load_effect(self, track):
        """Decode and cache a one-shot effect."""
        if track in self.effects:
            return self.effects[track]

        path = self._path(track)
        try:
            sound = pygame.mixer.Sound(path)
        except (FileNotFoundError, pygame.error) as e:
            raise AssetLoadError(path, e) from e

        sound.set_volume(self.effect_volume)
        self.effects[track] = sound
        return sound

    def play_once(self, track, on_complete=None) -> SoundCompletion:
        """
        Start a one-shot effect.

        Args:
            track: Effect file name in the audio directory.
            on_complete: Called once when playback ends.

        Returns:
            SoundCompletion: Resolved via handle_event()/poll(), or wait() to block.
        """
        if not self.enabled:
            return SoundCompletion(None, on_complete)

        channel = self.load_effect(track).play()
        if channel is None:
            DebugLogger.warn(f"No free channel for '{track}'", category="audio")
            return SoundCompletion(None, on_complete)

        channel.set_endevent(SOUND_END_EVENT)
        completion = SoundCompletion(channel, on_complete)
        self._pending.append(completion)
        DebugLogger.action(f"Playing '{track}'", category="audio")
        return completion

    def handle_event(self, event) -> bool:
        """Resolve finished effects on a channel end event. Returns True if consumed."""
        if event.type != SOUND_END_EVENT:
            return False
        self._pending = [c for c in self._pending if not c.poll()]
        return True
