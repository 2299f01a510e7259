"""How long the system has been running."""

import platform
import subprocess
from typing import Optional

NOT_AVAILABLE = "N/A"
UNSUPPORTED = "Unsupported OS"
NOT_FOUND = "Uptime info not found"
_MARKERS = ("Statistics since", "İstatistikler")


def _run(*args: str) -> Optional[str]:
    try:
        result = subprocess.run(
            list(args), capture_output=True, text=True, errors="replace", check=True
        )
    except (OSError, subprocess.SubprocessError):
        return None
    return result.stdout


def parse_net_stats(output: str) -> str:
    """Return the 'statistics since' line of `net stats srv` output."""
    for line in output.split("\n"):
        if any(marker in line for marker in _MARKERS):
            return line.strip()
    return NOT_FOUND


def uptime(system: Optional[str] = None) -> str:
    """Return a human readable uptime for the given system."""
    system = (system or platform.system()).lower()
    if system in ("linux", "darwin"):
        out = _run("uptime", "-p")
        return NOT_AVAILABLE if out is None else out.strip()
    if system == "windows":
        out = _run("cmd", "/C", "net stats srv")
        return NOT_AVAILABLE if out is None else parse_net_stats(out)
    return UNSUPPORTED