"""
input_manager.py
----------------
Keyboard input sampled once per frame into an immutable snapshot.

Provides:
- Action-based queries over configurable key bindings
- InputSnapshot, the per-frame view handed to the simulation
"""

from dataclasses import dataclass

import pygame

from snoboard.core.debug.debug_logger import DebugLogger


# ===========================================================
# Actions
# ===========================================================

MOVE_LEFT = "move_left"
MOVE_RIGHT = "move_right"
JUMP = "jump"
CONFIRM = "confirm"
QUIT = "quit"

GAMEPLAY_ACTIONS = (MOVE_LEFT, MOVE_RIGHT, JUMP, CONFIRM)


def default_key_bindings():
    """Default bindings. Built lazily so pygame constants resolve at call time."""
    return {
        MOVE_LEFT: [pygame.K_LEFT, pygame.K_a],
        MOVE_RIGHT: [pygame.K_RIGHT, pygame.K_d],
        JUMP: [pygame.K_SPACE],
        CONFIRM: [pygame.K_RETURN, pygame.K_KP_ENTER],
        QUIT: [pygame.K_ESCAPE],
    }


# ===========================================================
# Snapshot
# ===========================================================

@dataclass(frozen=True)
class InputSnapshot:
    """Held state of every gameplay action for one frame."""
    left: bool = False
    right: bool = False
    jump: bool = False
    confirm: bool = False


class InputManager:
    """
    Keyboard-backed input source.

    Usage:
        input_manager.update()
        inputs = input_manager.snapshot()
        if input_manager.is_held("quit"):
            ...
    """

    def __init__(self, key_bindings=None):
        """
        Args:
            key_bindings: {action: [key codes]}; defaults to default_key_bindings().
        """
        self.key_bindings = key_bindings or default_key_bindings()
        self._held = {action: False for action in self.key_bindings}

        missing = [a for a in GAMEPLAY_ACTIONS if a not in self.key_bindings]
        if missing:
            DebugLogger.warn(f"No key bound for actions: {missing}", category="input")

        DebugLogger.init_entry("InputManager")

    # ===========================================================
    # Sampling
    # ===========================================================

    def update(self, keys=None):
        """
        Sample the keyboard.

        Args:
            keys: Optional key-state sequence (as from pygame.key.get_pressed()).
        """
        if keys is None:
            keys = pygame.key.get_pressed()

        for action, codes in self.key_bindings.items():
            held = any(keys[code] for code in codes)
            if held != self._held.get(action, False):
                DebugLogger.trace(f"{action} {'down' if held else 'up'}", category="input")
            self._held[action] = held

    # ===========================================================
    # Queries
    # ===========================================================

    def is_held(self, action: str) -> bool:
        return self._held.get(action, False)

    def snapshot(self) -> InputSnapshot:
        return InputSnapshot(
            left=self.is_held(MOVE_LEFT),
            right=self.is_held(MOVE_RIGHT),
            jump=self.is_held(JUMP),
            confirm=self.is_held(CONFIRM),
        )
