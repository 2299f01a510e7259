"""First-run setup that writes the configuration file."""

import json
import logging
import sys
import time
from collections import deque
from pathlib import Path
from typing import Deque, Optional, TextIO

from .config import Config, DisplaySettings, ThemeSettings
from .paths import config_path

logger = logging.getLogger(__name__)

WELCOME = "Hey user, welcome to Rangefetch — where the magic (and code) happens!"
PROMPT = "Would you like to install manually or automatically? (M/A)"


def default_config() -> Config:
    """Return the configuration written by an automatic install."""
    return Config(
        display=DisplaySettings(),
        theme=ThemeSettings(
            color_output="Blue",
            font_style="Default",
            use_differentimg=False,
            image_source="",
        ),
    )


def _resolve(path: Optional[Path]) -> Path:
    return Path(path) if path is not None else config_path()


def auto_install(path: Optional[Path] = None) -> Path:
    """Write the default configuration and return where it was written.

    Raises OSError when the directory or file cannot be written.
    """
    target = _resolve(path)
    target.parent.mkdir(mode=0o755, parents=True, exist_ok=True)
    target.write_text(json.dumps(default_config().to_dict(), indent=4), encoding="utf-8")
    return target


def manual_install(path: Optional[Path] = None) -> Path:
    """Leave the configuration to the user and return where it is expected."""
    return _resolve(path)


class Installer:
    """Interactive setup asking whether to install manually or automatically."""

    error_delay = 1.0

    def __init__(
        self,
        path: Optional[Path] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.path = Path(path) if path is not None else None
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.welcome_shown = False
        self._pending: Deque[str] = deque()

    def _next_token(self) -> str:
        while not self._pending:
            line = self.stdin.readline()
            if not line:
                raise EOFError("unexpected end of input")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def start(self) -> None:
        """Greet the user once, read a choice and act on it."""
        if not self.welcome_shown:
            print(WELCOME, file=self.stdout)
            print(PROMPT, file=self.stdout)
            self.welcome_shown = True

        try:
            choice = self._next_token()
        except (EOFError, OSError) as error:
            logger.error("Oops! An error occurred during setup.")
            time.sleep(self.error_delay)
            logger.error("%s", error)
            return

        self.install_mode(choice)

    def install_mode(self, choice: str) -> None:
        """Run the install chosen by 'a' or 'm'; ask again on anything else."""
        mode = choice.lower()
        if mode == "a":
            try:
                written = auto_install(self.path)
            except RuntimeError as error:
                print(f"Error getting configuration path: {error}", file=self.stdout)
                return
            except OSError as error:
                print(f"Error writing file: {error}", file=self.stdout)
                return
            print(f"Configuration successfully written to '{written}'!", file=self.stdout)
        elif mode == "m":
            manual_install(self.path)
        else:
            logger.error("Error: Invalid choice '%s'. Please try again.", choice)
            self.start()