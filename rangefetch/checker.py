"""Finding, creating and reading the configuration file."""

import json
from pathlib import Path
from typing import Optional

from .config import Config
from .installer import Installer
from .paths import config_path


class ConfigError(Exception):
    """The configuration file cannot be found, opened or parsed."""


def _resolve(path: Optional[Path]) -> Path:
    if path is not None:
        return Path(path)
    try:
        return config_path()
    except RuntimeError as error:
        raise ConfigError(str(error)) from error


def config_exists(path: Optional[Path] = None) -> bool:
    """Tell whether a non-empty configuration file is in place."""
    try:
        target = _resolve(path)
        return target.stat().st_size != 0
    except (OSError, ConfigError):
        return False


def find_config(path: Optional[Path] = None, installer=None) -> Path:
    """Return the configuration path, running setup first if it is missing."""
    target = _resolve(path)
    if not config_exists(target):
        (installer if installer is not None else Installer(target)).start()
    return target


def load_config(path: Optional[Path] = None, installer=None) -> Config:
    """Read the configuration, running setup first if it is missing."""
    target = find_config(path, installer)
    try:
        with target.open(encoding="utf-8") as handle:
            text = handle.read()
    except OSError as error:
        raise ConfigError(
            "Unable to open config.json. Please make sure the file exists and is readable."
        ) from error
    try:
        return Config.from_dict(json.loads(text))
    except ValueError as error:
        raise ConfigError(f"Failed to parse config.json: {error}") from error