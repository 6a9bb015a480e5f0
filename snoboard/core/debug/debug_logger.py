"""
debug_logger.py
---------------
Console logger for SNOboard.

Every line is filtered twice: by category (LoggerConfig.CATEGORIES, so
noisy per-frame traces such as spawn or collision stay off unless asked
for) and by level (NONE < ERROR < WARN < INFO < VERBOSE).

The CLI and the `logging:` section of the YAML config adjust both at
startup through DebugLogger.configure().

Line format:
    [12:00:01.250] [GameLoop][STATE] Wipeout at score 412
"""

import sys
from datetime import datetime

from snoboard.core.runtime.game_settings import LoggerConfig


# ===========================================================
# ANSI Colors
# ===========================================================

class Colors:
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"


LEVEL_VALUES = {"NONE": 0, "ERROR": 1, "WARN": 2, "INFO": 3, "VERBOSE": 4}

# tag -> (color, minimum level)
TAGS = {
    "SYSTEM": (Colors.MAGENTA, "INFO"),
    "STATE": (Colors.CYAN, "INFO"),
    "ACTION": (Colors.GREEN, "INFO"),
    "TRACE": (Colors.BLUE, "VERBOSE"),
    "WARN": (Colors.YELLOW, "WARN"),
    "FAIL": (Colors.RED, "ERROR"),
}

STATUS_COLORS = {
    "OK": Colors.GREEN,
    "MUTED": Colors.YELLOW,
    "FAIL": Colors.RED,
}


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static, category-filtered console logger."""

    LINE_LENGTH = 59
    STATUS_COLUMN = 30

    @staticmethod
    def configure(level: str = None, categories: dict = None, enabled: bool = None):
        """
        Adjust filtering at startup.

        Args:
            level: One of NONE, ERROR, WARN, INFO, VERBOSE (any case).
            categories: Partial {category: bool} map merged over the defaults.
            enabled: Master switch.

        Raises:
            ValueError: Unknown level name.
        """
        if level is not None:
            level = level.upper()
            if level not in LEVEL_VALUES:
                raise ValueError(f"Unknown log level: {level}")
            LoggerConfig.LOG_LEVEL = level
        if categories:
            LoggerConfig.CATEGORIES.update(categories)
        if enabled is not None:
            LoggerConfig.ENABLE_LOGGING = bool(enabled)

    @staticmethod
    def enabled_for(category: str, level: str) -> bool:
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        if not LoggerConfig.CATEGORIES.get(category, False):
            return False
        return LEVEL_VALUES[level] <= LEVEL_VALUES.get(LoggerConfig.LOG_LEVEL, 3)

    # ===========================================================
    # Tagged Lines
    # ===========================================================

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._emit("SYSTEM", msg, category)

    @staticmethod
    def state(msg: str, category: str = "system"):
        """Gameplay or lifecycle transition (crash, respawn, shutdown)."""
        DebugLogger._emit("STATE", msg, category)

    @staticmethod
    def action(msg: str, category: str = "system"):
        DebugLogger._emit("ACTION", msg, category)

    @staticmethod
    def trace(msg: str, category: str = "simulation"):
        """Per-frame detail; only printed at VERBOSE."""
        DebugLogger._emit("TRACE", msg, category)

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._emit("WARN", msg, category)

    @staticmethod
    def fail(msg: str, category: str = "system"):
        DebugLogger._emit("FAIL", msg, category)

    @staticmethod
    def _emit(tag: str, message: str, category: str):
        color, level = TAGS[tag]
        if not DebugLogger.enabled_for(category, level):
            return

        parts = []
        if LoggerConfig.SHOW_TIMESTAMP:
            parts.append(f"[{datetime.now().strftime('%H:%M:%S.%f')[:-3]}] ")
        parts.append(f"[{DebugLogger._caller_name()}]")
        if LoggerConfig.SHOW_LEVEL:
            parts.append(f"[{tag}]")
        print(f"{color}{''.join(parts)} {message}{Colors.RESET}")

    @staticmethod
    def _caller_name() -> str:
        """Class of the calling method, else the calling module in PascalCase."""
        # 0: _caller_name, 1: _emit, 2: public method, 3: caller
        try:
            frame = sys._getframe(3)
        except ValueError:
            return "Unknown"

        owner = frame.f_locals.get("self")
        if owner is not None:
            return type(owner).__name__
        owner = frame.f_locals.get("cls")
        if isinstance(owner, type):
            return owner.__name__

        module = frame.f_globals.get("__name__", "unknown").rsplit(".", 1)[-1]
        return "".join(part.capitalize() for part in module.split("_"))

    # ===========================================================
    # Startup Report
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Banner separating startup, the game loop and shutdown."""
        if not LoggerConfig.ENABLE_LOGGING or LoggerConfig.LOG_LEVEL == "NONE":
            return
        line = "─" * DebugLogger.LINE_LENGTH
        print(f"\n{Colors.WHITE}{line}\n{f'[{title}]'.center(DebugLogger.LINE_LENGTH)}{Colors.RESET}\n")

    @staticmethod
    def init_entry(module: str, status: str = "OK"):
        """
        One dotted line of the startup report:

            > SoundManager                .................. [MUTED]
        """
        if not DebugLogger.enabled_for("system", "INFO"):
            return
        print(DebugLogger.format_entry(module, status))

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        if not DebugLogger.enabled_for("system", "INFO"):
            return
        print(f"{' ' * (level * 4)}• {Colors.WHITE}{detail}{Colors.RESET}")

    @staticmethod
    def format_entry(module: str, status: str) -> str:
        label = f"> {module}"
        badge = f"[{status}]"
        pad = max(DebugLogger.STATUS_COLUMN - len(label), 1)
        dots = max(DebugLogger.LINE_LENGTH - len(label) - pad - 1 - len(badge), 1)
        color = STATUS_COLORS.get(status.upper(), Colors.WHITE)
        return f"{Colors.WHITE}{label}{' ' * pad}{'.' * dots} {color}{badge}{Colors.RESET}"
