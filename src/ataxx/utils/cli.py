"""CLI options for selecting players, search depth, and config paths."""

import argparse

from ..config import LOG_LEVELS, MODES, Settings


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Ataxx with an alpha-beta AI")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument(
        "--mode",
        choices=MODES,
        help="pvp: two humans, pve: Red human vs Blue AI, eve: AI vs AI",
    )
    parser.add_argument("--depth", type=int, help="Search depth for AI")
    parser.add_argument("--seed", type=int, help="AI random seed")
    parser.add_argument("--gui", action="store_true", default=None, help="Enable pygame window")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Logging level")
    return parser.parse_args(argv)


def apply_overrides(settings: Settings, args) -> Settings:
    """Return SETTINGS with every flag given on the command line applied."""
    overrides = {
        'mode': args.mode,
        'search_depth': args.depth,
        'seed': args.seed,
        'gui': args.gui,
        'log_level': args.log_level,
    }
    for name, value in overrides.items():
        if value is not None:
            setattr(settings, name, value)
    settings.validate()
    return settings
