import os
import subprocess

import pytest

from rangefetch.cpu import (
    clean_cpu_model,
    cpu_model,
    cpu_speed,
    format_ghz,
    formatted_cpu_info,
    model_from_cpuinfo,
    speed_from_cpuinfo,
)


def _fake_run(outputs):
    def run(args, **kwargs):
        key = tuple(args)
        if key not in outputs:
            raise FileNotFoundError(args[0])
        return subprocess.CompletedProcess(args, 0, stdout=outputs[key], stderr="")

    return run


CPUINFO = (
    "processor\t: 0\n"
    "vendor_id\t: AuthenticAMD\n"
    "model name\t: AMD Ryzen 7 5800H with Radeon Graphics\n"
    "cpu MHz\t\t: 3600.000\n"
    "processor\t: 1\n"
    "model name\t: Something Else\n"
    "cpu MHz\t\t: 1200.000\n"
)


def test_clean_cpu_model_removes_suffix_and_titles():
    assert clean_cpu_model("  AMD Ryzen 7 5800H with Radeon Graphics  ") == "Amd Ryzen 7 5800H"


def test_clean_cpu_model_collapses_whitespace():
    result = clean_cpu_model("Intel(R)   Core(TM)\ti5  CPU\r\n")
    assert "  " not in result
    assert result == result.strip()
    assert result.startswith("Intel(R) Core(")


def test_clean_cpu_model_is_idempotent():
    once = clean_cpu_model("AMD Ryzen 5 PRO 4650U with Radeon Graphics")
    assert clean_cpu_model(once) == once


def test_format_ghz():
    assert format_ghz(3.6) == "3.60 GHz"


def test_model_from_cpuinfo_takes_first_entry():
    assert model_from_cpuinfo(CPUINFO) == clean_cpu_model(" AMD Ryzen 7 5800H with Radeon Graphics")


def test_model_from_cpuinfo_missing():
    assert model_from_cpuinfo("processor\t: 0\n") == "N/A"


def test_speed_from_cpuinfo_takes_first_entry():
    assert speed_from_cpuinfo(CPUINFO) == format_ghz(3.6)


def test_speed_from_cpuinfo_invalid_number():
    assert speed_from_cpuinfo("cpu MHz\t: fast\n") == "N/A"


def test_speed_from_cpuinfo_missing():
    assert speed_from_cpuinfo("") == "N/A"


def test_windows_model_uses_second_line(monkeypatch):
    monkeypatch.setattr(
        subprocess,
        "run",
        _fake_run({("wmic", "cpu", "get", "Name"): "Name  \r\nIntel Core I5 CPU  \r\n\r\n"}),
    )
    assert cpu_model("windows") == clean_cpu_model("Intel Core I5 CPU  \r")


def test_windows_speed(monkeypatch):
    monkeypatch.setattr(
        subprocess,
        "run",
        _fake_run({("wmic", "cpu", "get", "CurrentClockSpeed"): "CurrentClockSpeed\r\n3600\r\n"}),
    )
    assert cpu_speed("windows") == format_ghz(3.6)


def test_missing_command_gives_not_available(monkeypatch):
    monkeypatch.setattr(subprocess, "run", _fake_run({}))
    assert cpu_model("darwin") == "N/A"
    assert cpu_speed("windows") == "N/A"


def test_darwin_bad_frequency(monkeypatch):
    monkeypatch.setattr(
        subprocess, "run", _fake_run({("sysctl", "-n", "hw.cpufrequency"): "unknown\n"})
    )
    assert cpu_speed("darwin") == "N/A"


def test_formatted_darwin(monkeypatch):
    monkeypatch.setattr(
        subprocess,
        "run",
        _fake_run(
            {
                ("sysctl", "-n", "machdep.cpu.brand_string"): "Apple M1\n",
                ("sysctl", "-n", "hw.cpufrequency"): "3200000000\n",
            }
        ),
    )
    assert formatted_cpu_info("darwin") == f"Apple M1 ({os.cpu_count()}) @ 3.20 GHz"


@pytest.mark.parametrize("system", ["freebsd", "plan9"])
def test_formatted_unsupported(system):
    assert formatted_cpu_info(system) == "Unsupported OS"