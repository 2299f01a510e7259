"""Location of the configuration file on each operating system."""

import os
import platform
from pathlib import Path
from typing import Mapping, Optional

APP_NAME = "rangefetch"
CONFIG_FILE = "config.json"


def config_path(
    system: Optional[str] = None,
    home: Optional[os.PathLike] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    """Return where config.json lives for the given system.

    Raises RuntimeError when the home or application data directory is unknown.
    """
    system = (system or platform.system()).lower()
    environ = os.environ if environ is None else environ
    home_dir = Path(home) if home is not None else Path.home()

    if system == "linux":
        return home_dir / ".config" / APP_NAME / CONFIG_FILE
    if system == "windows":
        app_data = environ.get("APPDATA", "")
        if not app_data:
            raise RuntimeError("APPDATA is not set")
        return Path(app_data) / APP_NAME / CONFIG_FILE
    if system == "darwin":
        return home_dir / "Library" / "Application Support" / APP_NAME / CONFIG_FILE
    if system == "android":
        return home_dir / APP_NAME / CONFIG_FILE
    return home_dir / ".rangefetch_config.json"