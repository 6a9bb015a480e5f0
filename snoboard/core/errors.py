"""
errors.py
---------
Startup failures. The running simulation has no recoverable error states;
everything that can go wrong does so before the first frame.
"""


class SnoboardError(Exception):
    """Base class for all fatal game errors."""


class ConfigError(SnoboardError):
    """A configuration file is missing, unreadable, or holds invalid values."""


class AssetLoadError(SnoboardError):
    """A sprite or audio asset could not be loaded."""

    def __init__(self, path, reason=None):
        self.path = path
        message = f"Missing or unreadable asset: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class StartupError(SnoboardError):
    """The display or audio device could not be initialized."""
