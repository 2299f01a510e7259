import platform
import socket
import subprocess
import urllib.request

import psutil
import pytest

from rangefetch.config import Config, ThemeSettings
from rangefetch.info import (
    apply_color,
    collect_info_lines,
    layout,
    linux_distro,
    load_banner,
    os_name,
    system_info,
)


@pytest.fixture
def offline(monkeypatch):
    def fail_run(*args, **kwargs):
        raise OSError("no commands")

    def fail_urlopen(*args, **kwargs):
        raise OSError("no network")

    monkeypatch.setattr(subprocess, "run", fail_run)
    monkeypatch.setattr(urllib.request, "urlopen", fail_urlopen)
    monkeypatch.setattr(psutil, "net_if_addrs", lambda: {})
    monkeypatch.setattr(socket, "gethostname", lambda: "testhost")
    monkeypatch.setattr(platform, "system", lambda: "Linux")


def test_linux_distro_plain():
    assert linux_distro('NAME="Ubuntu"\nVERSION_ID="22.04"\nID=ubuntu\n') == "ubuntu"


def test_linux_distro_quoted():
    assert linux_distro('ID="fedora"\n') == "fedora"


def test_linux_distro_missing_id():
    assert linux_distro('NAME="Something"\n') == "Linux"


@pytest.mark.parametrize(
    "system, expected",
    [("Windows", "windows"), ("Darwin", "darwin"), ("FreeBSD", "freebsd")],
)
def test_os_name(system, expected):
    assert os_name(system) == expected


def test_apply_color_known():
    assert apply_color("x", "red") == "\033[31mx\033[0m"


def test_apply_color_unknown_is_case_sensitive():
    assert apply_color("x", "Blue") == "\033[0mx\033[0m"


def test_load_banner_by_name(tmp_path):
    (tmp_path / "arch.txt").write_text("ARCH")
    (tmp_path / "default.txt").write_text("DEFAULT")
    assert load_banner("green", tmp_path, "arch") == apply_color("ARCH", "green")


def test_load_banner_falls_back(tmp_path):
    (tmp_path / "default.txt").write_text("DEFAULT")
    assert load_banner("cyan", tmp_path, "arch") == apply_color("DEFAULT", "cyan")


def test_load_banner_missing(tmp_path):
    assert load_banner("cyan", tmp_path, "arch") == "[no banner found for arch]"


def test_layout_columns():
    result = layout("ab", ["OS: x", "Cpu: y"])
    rows = result.split("\n")
    assert rows[-1] == ""
    assert rows[0] == "ab".ljust(35) + "   OS: x"
    assert rows[1] == " " * 38 + "Cpu: y"


def test_layout_banner_longer_than_info():
    rows = layout("a\nb\nc", ["OS: x"]).split("\n")[:-1]
    assert len(rows) == 3
    assert all(len(row) >= 38 for row in rows)
    assert rows[2].strip() == "c"


def test_layout_truncates_long_lines():
    long_line = "Cpu: " + "z" * 100
    row = layout("", [long_line]).split("\n")[0]
    info = row[38:]
    assert len(info) == 58
    assert info.endswith("...")
    assert long_line.startswith(info[:-3])


def test_collect_info_lines_offline(offline):
    lines = collect_info_lines()
    assert lines[0].startswith("OS: ")
    assert lines[1] == "Hostname: testhost"
    assert "Local IP: N/A" in lines
    assert "Public IP: N/A" in lines
    assert "Memory: N/A" in lines
    assert lines[-2] == "N/A"
    assert lines[-1] == "Uptime: N/A"


def test_system_info_offline(offline, tmp_path):
    (tmp_path / "default.txt").write_text("BANNER")
    config = Config(theme=ThemeSettings(color_output="red"))
    report = system_info(config, tmp_path)
    assert report.startswith("\033[31mBANNER\033[0m")
    assert report.endswith("Uptime: N/A\n")
    assert "Hostname: testhost" in report