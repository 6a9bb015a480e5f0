"""
main.py
-------
Command line entry point.

Usage:
    snoboard                          # Play with the packaged defaults
    snoboard --config my_game.yaml    # Override any setting
    snoboard --seed 42 --mute         # Reproducible obstacles, no audio
"""

import argparse
import sys

from snoboard.core.debug.debug_logger import DebugLogger
from snoboard.core.errors import ConfigError, SnoboardError
from snoboard.core.runtime.game_loop import GameLoop
from snoboard.core.runtime.simulation_config import default_config_dict
from snoboard.core.services.config_manager import load_config


def build_parser():
    parser = argparse.ArgumentParser(prog="snoboard", description="Snowboard down an endless slope.")
    parser.add_argument("--config", help="YAML or JSON file overriding the default settings")
    parser.add_argument("--seed", type=int, help="Seed for obstacle placement")
    parser.add_argument("--mute", action="store_true", help="Disable music and sound effects")
    parser.add_argument("--log-level", choices=["NONE", "ERROR", "WARN", "INFO", "VERBOSE"],
                        help="Console log verbosity")
    parser.add_argument("--no-camera-lead", action="store_true",
                        help="Keep the player centred instead of looking ahead")
    return parser


def load_settings(args):
    """Merge the config file and CLI flags over the defaults."""
    # An explicitly named file must exist; the packaged default may be absent.
    settings = load_config(args.config, default_config_dict(), strict=bool(args.config))

    if args.mute:
        settings["audio"]["enabled"] = False
    if args.no_camera_lead:
        settings["camera"]["lead"] = 0.0

    logging_cfg = settings.get("logging", {})
    try:
        DebugLogger.configure(
            level=args.log_level or logging_cfg.get("level"),
            categories=logging_cfg.get("categories"),
        )
    except ValueError as e:
        raise ConfigError(str(e)) from e
    return settings


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args)
        GameLoop(settings, seed=args.seed).run()
    except SnoboardError as e:
        DebugLogger.fail(str(e))
        print(f"snoboard: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
