"""Game settings loaded from YAML (config/settings.yaml)."""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union

import yaml

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

MODES = ('pvp', 'pve', 'eve')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class Settings:
    """Tunable options; every field can be overridden on the command line."""
    search_depth: int = 4
    seed: Optional[int] = None
    mode: str = 'pve'
    gui: bool = False
    log_level: str = 'INFO'

    def validate(self):
        """Raise ConfigurationError on out-of-range values."""
        if not isinstance(self.search_depth, int) or self.search_depth < 1:
            raise ConfigurationError(
                "search_depth must be a positive integer",
                context={'search_depth': self.search_depth}
            )
        if self.seed is not None and not isinstance(self.seed, int):
            raise ConfigurationError("seed must be an integer", context={'seed': self.seed})
        if self.mode not in MODES:
            raise ConfigurationError(f"mode must be one of {', '.join(MODES)}",
                                     context={'mode': self.mode})
        if not isinstance(self.gui, bool):
            raise ConfigurationError("gui must be true or false", context={'gui': self.gui})
        if str(self.log_level).upper() not in LOG_LEVELS:
            raise ConfigurationError("unknown log level", context={'log_level': self.log_level})


def load_settings(path: Union[str, Path]) -> Settings:
    """
    Read settings from a YAML file.

    A missing file gives the defaults. Unknown keys or bad values raise
    ConfigurationError.
    """
    path = Path(path)
    if not path.exists():
        logger.debug(f"No settings file at {path}, using defaults")
        return Settings()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"cannot read settings: {exc}", context={'path': str(path)}) from exc

    if not isinstance(data, dict):
        raise ConfigurationError("settings file must hold a mapping", context={'path': str(path)})

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"unknown settings: {', '.join(unknown)}",
                                 context={'path': str(path)})

    settings = Settings(**data)
    settings.validate()
    return settings
