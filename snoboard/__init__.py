"""SNOboard: a snowboarding endless runner built on pygame."""

__version__ = "0.1.0"
