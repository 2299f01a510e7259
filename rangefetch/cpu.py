"""Processor model and clock speed."""

import os
import platform
import re
import subprocess
from pathlib import Path
from typing import Optional

NOT_AVAILABLE = "N/A"
UNSUPPORTED = "Unsupported OS"
CPUINFO_PATH = Path("/proc/cpuinfo")

_REMOVALS = (" with radeon graphics", " radeon graphics", " with")
_WHITESPACE = re.compile(r"\s+")
_WORD = re.compile(r"[^\W\d_]+(?:['\u2019.:][^\W\d_]+)*")


def _run(*args: str) -> Optional[str]:
    try:
        result = subprocess.run(
            list(args), capture_output=True, text=True, errors="replace", check=True
        )
    except (OSError, subprocess.SubprocessError):
        return None
    return result.stdout


def _system(system: Optional[str]) -> str:
    return (system or platform.system()).lower()


def clean_cpu_model(raw: str) -> str:
    """Drop marketing suffixes, collapse spaces and title-case the model name."""
    cleaned = raw.lower()
    for phrase in _REMOVALS:
        cleaned = cleaned.replace(phrase, "")
    cleaned = _WHITESPACE.sub(" ", cleaned).strip()
    return _WORD.sub(lambda m: m.group()[0].title() + m.group()[1:], cleaned)


def format_ghz(value: float) -> str:
    """Format a frequency in GHz with two decimals."""
    return f"{value:.2f} GHz"


def model_from_cpuinfo(text: str) -> str:
    """Return the cleaned model name from /proc/cpuinfo contents."""
    for line in text.splitlines():
        if "model name" in line:
            _, sep, value = line.partition(":")
            if sep:
                return clean_cpu_model(value)
    return NOT_AVAILABLE


def speed_from_cpuinfo(text: str) -> str:
    """Return the first 'cpu MHz' value of /proc/cpuinfo in GHz."""
    for line in text.splitlines():
        if "cpu MHz" in line:
            _, sep, value = line.partition(":")
            if sep:
                try:
                    mhz = float(value.strip())
                except ValueError:
                    return NOT_AVAILABLE
                return format_ghz(mhz / 1000.0)
    return NOT_AVAILABLE


def _read_cpuinfo() -> Optional[str]:
    try:
        return CPUINFO_PATH.read_text(errors="replace")
    except OSError:
        return None


def cpu_model(system: Optional[str] = None) -> str:
    """Return the processor model name, or N/A."""
    system = _system(system)
    if system == "linux":
        text = _read_cpuinfo()
        return NOT_AVAILABLE if text is None else model_from_cpuinfo(text)
    if system == "windows":
        out = _run("wmic", "cpu", "get", "Name")
        if out is None:
            return NOT_AVAILABLE
        lines = out.split("\n")
        return clean_cpu_model(lines[1]) if len(lines) > 1 else NOT_AVAILABLE
    if system == "darwin":
        out = _run("sysctl", "-n", "machdep.cpu.brand_string")
        return NOT_AVAILABLE if out is None else clean_cpu_model(out)
    return NOT_AVAILABLE


def cpu_speed(system: Optional[str] = None) -> str:
    """Return the processor clock speed in GHz, or N/A."""
    system = _system(system)
    if system == "linux":
        text = _read_cpuinfo()
        return NOT_AVAILABLE if text is None else speed_from_cpuinfo(text)
    if system == "windows":
        out = _run("wmic", "cpu", "get", "CurrentClockSpeed")
        if out is None:
            return NOT_AVAILABLE
        lines = out.split("\n")
        if len(lines) <= 1:
            return NOT_AVAILABLE
        try:
            mhz = float(lines[1].strip())
        except ValueError:
            return NOT_AVAILABLE
        return format_ghz(mhz / 1000.0)
    if system == "darwin":
        out = _run("sysctl", "-n", "hw.cpufrequency")
        if out is None:
            return NOT_AVAILABLE
        try:
            hz = int(out.strip())
        except ValueError:
            return NOT_AVAILABLE
        return format_ghz(hz / 1e9)
    return NOT_AVAILABLE


def formatted_cpu_info(system: Optional[str] = None) -> str:
    """Return 'model (cores) @ speed' for the processor."""
    system = _system(system)
    if system not in ("linux", "windows", "darwin"):
        return UNSUPPORTED
    cores = os.cpu_count() or 1
    return f"{cpu_model(system)} ({cores}) @ {cpu_speed(system)}"