"""The system report: banner on the left, details on the right."""

import platform
import socket
from itertools import zip_longest
from pathlib import Path
from typing import List, Optional, Sequence

from .checker import load_config
from .config import Config
from .cpu import formatted_cpu_info
from .gpu import formatted_gpu_info
from .memory import memory_info
from .network import local_ip, public_ip
from .uptime import uptime

OS_RELEASE = Path("/etc/os-release")
ASSETS_DIR = Path("assets")
BANNER_WIDTH = 35
SPACE_BETWEEN = 3
MAX_TOTAL_WIDTH = 96

_COLORS = {
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
    "reset": "\033[0m",
}


def linux_distro(os_release: Optional[str] = None) -> str:
    """Return the ID from os-release contents, reading the system file if none given."""
    if os_release is None:
        try:
            os_release = OS_RELEASE.read_text(errors="replace")
        except OSError:
            return "Linux"
    for line in os_release.split("\n"):
        if line.startswith("ID="):
            return line.removeprefix("ID=").strip('"')
    return "Linux"


def os_name(system: Optional[str] = None) -> str:
    """Return the name used to pick a banner: the distribution on Linux."""
    system = (system or platform.system()).lower()
    if system == "linux":
        return linux_distro()
    return system


def apply_color(text: str, color: str) -> str:
    """Wrap text in the ANSI code for a colour name, resetting afterwards."""
    code = _COLORS.get(color, _COLORS["reset"])
    return f"{code}{text}{_COLORS['reset']}"


def load_banner(
    color: str, assets_dir: Optional[Path] = None, name: Optional[str] = None
) -> str:
    """Return the coloured banner for the system, or the default banner."""
    assets = Path(assets_dir) if assets_dir is not None else ASSETS_DIR
    name = name if name is not None else os_name()
    for candidate in (assets / f"{name}.txt", assets / "default.txt"):
        try:
            return apply_color(candidate.read_text(errors="replace"), color)
        except OSError:
            continue
    return f"[no banner found for {name}]"


def _fit(line: str, width: int) -> str:
    encoded = line.encode("utf-8")
    if len(encoded) <= width:
        return line
    return encoded[: width - 3].decode("utf-8", errors="ignore") + "..."


def layout(banner: str, info_lines: Sequence[str]) -> str:
    """Place the banner and the info lines side by side."""
    available = MAX_TOTAL_WIDTH - BANNER_WIDTH - SPACE_BETWEEN
    gap = " " * SPACE_BETWEEN
    rows = zip_longest(banner.split("\n"), info_lines, fillvalue="")
    return "".join(
        f"{left:<{BANNER_WIDTH}}{gap}{_fit(right, available)}\n" for left, right in rows
    )


def collect_info_lines() -> List[str]:
    """Gather the report lines for this machine."""
    lines = [f"OS: {os_name()}"]
    try:
        lines.append(f"Hostname: {socket.gethostname()}")
    except OSError:
        pass
    lines += [
        f"Cpu: {formatted_cpu_info()}",
        f"Local IP: {local_ip()}",
        f"Public IP: {public_ip()}",
        f"Memory: {memory_info()}",
    ]
    lines += formatted_gpu_info().strip().split("\n")
    lines.append(f"Uptime: {uptime()}")
    return lines


def system_info(config: Optional[Config] = None, assets_dir: Optional[Path] = None) -> str:
    """Return the full report, loading the configuration if none is given."""
    config = config if config is not None else load_config()
    banner = load_banner(config.theme.color_output, assets_dir)
    return layout(banner, collect_info_lines())