"""Graphics adapter names."""

import platform
import subprocess
from typing import Iterable, Optional

NOT_AVAILABLE = "N/A"
NO_GPU = "No GPU found"
UNSUPPORTED = "Unsupported OS"


def _run(*args: str) -> Optional[str]:
    try:
        result = subprocess.run(
            list(args), capture_output=True, text=True, errors="replace", check=True
        )
    except (OSError, subprocess.SubprocessError):
        return None
    return result.stdout


def _brand(description: str) -> str:
    if "NVIDIA" in description:
        return "NVIDIA"
    if "Intel" in description:
        return "Intel"
    if any(name in description for name in ("AMD", "ATI", "Advanced Micro Devices")):
        return "AMD"
    return "Unknown"


def _extract_model(description: str, brand: str) -> str:
    index = description.find(brand)
    model = description[index + len(brand):] if index != -1 else description
    model = model.strip()

    start = model.find("[")
    if start != -1:
        end = model.find("]", start)
        if end != -1:
            return model[start + 1:end].strip()
    start = model.find("(")
    if start != -1 and model.find(")", start) != -1:
        return model[:start].strip()
    return model


def _numbered(entries: Iterable[str], prefix: str) -> str:
    return "".join(f"{prefix}{i}: {entry}\n" for i, entry in enumerate(entries))


def parse_lspci(output: str) -> str:
    """Describe the display controllers listed by lspci."""
    gpus = []
    for line in output.split("\n"):
        lower = line.lower()
        if "vga compatible controller" not in lower and "3d controller" not in lower:
            continue
        parts = line.split(":", 2)
        if len(parts) < 3:
            continue
        address = parts[0].strip()
        description = parts[2].strip()
        brand = _brand(description)
        gpus.append(f"{address} : {brand} : {_extract_model(description, brand)}")
    return _numbered(gpus, "GPU ") if gpus else NO_GPU


def parse_wmic_gpu(output: str) -> str:
    """Describe the video controllers listed by wmic."""
    names = [
        line
        for line in (raw.strip() for raw in output.split("\n"))
        if line and "name" not in line.lower()
    ]
    return _numbered(names, "") if names else NO_GPU


def parse_system_profiler(output: str) -> str:
    """Describe the chipsets listed by system_profiler."""
    gpus = [
        line.removeprefix("Chipset Model: ")
        for line in (raw.strip() for raw in output.split("\n"))
        if line.startswith("Chipset Model:")
    ]
    return _numbered(gpus, "GPU ") if gpus else NO_GPU


def gpu_info_linux() -> str:
    out = _run("lspci")
    return NOT_AVAILABLE if out is None else parse_lspci(out)


def gpu_info_windows() -> str:
    out = _run("wmic", "path", "win32_VideoController", "get", "name")
    return NOT_AVAILABLE if out is None else parse_wmic_gpu(out)


def gpu_info_mac() -> str:
    out = _run("system_profiler", "SPDisplaysDataType")
    return NOT_AVAILABLE if out is None else parse_system_profiler(out)


def formatted_gpu_info(system: Optional[str] = None) -> str:
    """Return one line per graphics adapter for the given system."""
    system = (system or platform.system()).lower()
    if system == "linux":
        return gpu_info_linux()
    if system == "windows":
        return gpu_info_windows()
    if system == "darwin":
        return gpu_info_mac()
    return UNSUPPORTED