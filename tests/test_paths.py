from __future__ import annotations

from pathlib import Path

import pytest

from kira.errors import ConfigError
from kira.paths import BACKLIGHT_ROOT, list_backlight_devices, resolve_backlight_dir


def test_default_device_is_intel_backlight() -> None:
    assert resolve_backlight_dir() == BACKLIGHT_ROOT / "intel_backlight"


def test_device_name_is_joined_to_root() -> None:
    assert resolve_backlight_dir("acpi_video0") == Path("/sys/class/backlight/acpi_video0")


def test_absolute_device_dir_is_kept(tmp_path: Path) -> None:
    assert resolve_backlight_dir(str(tmp_path)) == tmp_path


@pytest.mark.parametrize("device", ["", ".", "..", "a/b", "../acpi_video0"])
def test_invalid_device_names(device: str) -> None:
    with pytest.raises(ConfigError):
        resolve_backlight_dir(device)


def test_list_backlight_devices(tmp_path: Path) -> None:
    (tmp_path / "intel_backlight").mkdir()
    (tmp_path / "acpi_video0").mkdir()
    assert list_backlight_devices(tmp_path) == ["acpi_video0", "intel_backlight"]
    assert list_backlight_devices(tmp_path / "missing") == []
