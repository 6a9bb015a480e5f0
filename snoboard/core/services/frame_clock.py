"""
frame_clock.py
--------------
Monotonic frame timing.

The clock measures real elapsed time between frames; pygame's Clock is
only used to cap the frame rate.
"""

import time

import pygame


class FrameClock:
    """Supplies the frame delta in seconds."""

    def __init__(self, fps: int = 0, max_frame_time: float = None, time_source=time.perf_counter):
        """
        Args:
            fps: Frame-rate cap passed to pygame's Clock; 0 disables the cap.
            max_frame_time: Upper bound on a single delta, or None for no clamp.
            time_source: Monotonic callable returning seconds.
        """
        self.fps = fps
        self.max_frame_time = max_frame_time
        self._time_source = time_source
        self._limiter = pygame.time.Clock() if fps else None
        self._last_frame = self.now()

    def now(self) -> float:
        return self._time_source()

    def elapsed_since(self, timestamp: float) -> float:
        return max(0.0, self._time_source() - timestamp)

    def reset(self):
        """Restart delta measurement (e.g. after a long blocking call)."""
        self._last_frame = self.now()

    def tick(self) -> float:
        """
        Wait for the frame cap, then return seconds since the previous tick.

        Returns:
            float: Frame delta, clamped to max_frame_time when set.
        """
        if self._limiter is not None:
            self._limiter.tick(self.fps)

        dt = self.elapsed_since(self._last_frame)
        self._last_frame = self.now()

        if self.max_frame_time is not None and dt > self.max_frame_time:
            dt = self.max_frame_time
        return dt
