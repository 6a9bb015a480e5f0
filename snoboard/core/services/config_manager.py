"""
config_manager.py
-----------------
Loads a settings file and layers it over the built-in defaults.

- .yaml / .yml are read with PyYAML (safe loader), anything else as JSON
- No filename means the packaged snoboard/config/game.yaml
- Nested sections merge key by key; '_notes' keys are comments and dropped
- strict=True turns a missing or malformed file into ConfigError, otherwise
  the defaults are used and a warning is logged
"""

import json
import os

import yaml

from snoboard.core.debug.debug_logger import DebugLogger
from snoboard.core.errors import ConfigError

PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
DEFAULT_CONFIG_PATH = os.path.join(PACKAGE_ROOT, "config", "game.yaml")

NOTES_KEY = "_notes"


def load_config(filename=None, default_dict=None, strict=False):
    """
    Args:
        filename: Path to a .yaml/.yml/.json file, or None for the packaged default.
        default_dict: Values used for every key the file does not set.
        strict: Raise instead of falling back when the file cannot be read.

    Returns:
        dict: A new merged dict; default_dict is left untouched.

    Raises:
        ConfigError: Top level is not a mapping, or (strict) unreadable file.
    """
    defaults = default_dict or {}
    path = filename or DEFAULT_CONFIG_PATH

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = _parser_for(path)(f)
    except (OSError, ValueError, yaml.YAMLError) as e:
        if strict:
            raise ConfigError(f"Config not loaded: {path}: {e}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return merge_config(defaults, {})

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Top level of {path} must be a mapping, got {type(data).__name__}")

    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return merge_config(defaults, data)


def merge_config(default, override):
    """Recursive merge of `override` over `default`, skipping '_notes'."""
    merged = {k: merge_config(v, {}) if isinstance(v, dict) else v
              for k, v in default.items() if k != NOTES_KEY}
    for key, value in override.items():
        if key == NOTES_KEY:
            continue
        base = merged.get(key)
        if isinstance(value, dict) and isinstance(base, dict):
            merged[key] = merge_config(base, value)
        else:
            merged[key] = value
    return merged


def _parser_for(path):
    if path.lower().endswith((".yaml", ".yml")):
        return yaml.safe_load
    return json.load
