"""Used and total physical memory."""

import platform
import subprocess
from typing import Optional

NOT_AVAILABLE = "N/A"
UNSUPPORTED = "Unsupported OS"
PAGE_SIZE = 4096.0

_USED_PAGE_KINDS = ("Pages active", "Pages wired down", "Pages speculative")


def _run(*args: str) -> Optional[str]:
    try:
        result = subprocess.run(
            list(args), capture_output=True, text=True, errors="replace", check=True
        )
    except (OSError, subprocess.SubprocessError):
        return None
    return result.stdout


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def format_memory(num_bytes: float) -> str:
    """Format a byte count in GiB with one decimal."""
    return f"{num_bytes / (1024 ** 3):.1f} GB"


def _usage(used: float, total: float) -> str:
    return f"{format_memory(used)} / {format_memory(total)}"


def parse_free(output: str) -> str:
    """Read used and total memory from the output of `free -b`."""
    lines = output.split("\n")
    if len(lines) < 2:
        return NOT_AVAILABLE
    fields = lines[1].split()
    if len(fields) < 3:
        return NOT_AVAILABLE
    return _usage(_to_float(fields[2]), _to_float(fields[1]))


def parse_vm_stat(output: str, total: float) -> str:
    """Sum the used pages reported by vm_stat against the given total bytes."""
    used_pages = 0.0
    for line in output.split("\n"):
        if any(kind in line for kind in _USED_PAGE_KINDS):
            parts = line.split()
            if len(parts) >= 3:
                used_pages += _to_float(parts[2].removesuffix("."))
    return _usage(used_pages * PAGE_SIZE, total)


def parse_wmic_memory(output: str) -> str:
    """Read total and free memory in KB from wmic /Value output."""
    total_kb = free_kb = 0.0
    for line in output.split("\n"):
        if line.startswith("TotalVisibleMemorySize="):
            total_kb = _to_float(line.removeprefix("TotalVisibleMemorySize="))
        elif line.startswith("FreePhysicalMemory="):
            free_kb = _to_float(line.removeprefix("FreePhysicalMemory="))
    return _usage((total_kb - free_kb) * 1024, total_kb * 1024)


def memory_info(system: Optional[str] = None) -> str:
    """Return 'used / total' memory for the given system."""
    system = (system or platform.system()).lower()
    if system == "linux":
        out = _run("free", "-b")
        return NOT_AVAILABLE if out is None else parse_free(out)
    if system == "darwin":
        total_out = _run("sysctl", "-n", "hw.memsize")
        if total_out is None:
            return NOT_AVAILABLE
        vm_stat = _run("vm_stat")
        if vm_stat is None:
            return NOT_AVAILABLE
        return parse_vm_stat(vm_stat, _to_float(total_out.strip()))
    if system == "windows":
        out = _run("wmic", "OS", "get", "TotalVisibleMemorySize,FreePhysicalMemory", "/Value")
        return NOT_AVAILABLE if out is None else parse_wmic_memory(out)
    return UNSUPPORTED