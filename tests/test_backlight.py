from __future__ import annotations

from pathlib import Path

import pytest

from kira.errors import DeviceIoError, ParseError
from kira.system.backlight import Backlight
from kira.target import VALUE_LIMIT


def _sysfs(tmp_path: Path, brightness: str = "40\n", maximum: str = "4438\n") -> Path:
    (tmp_path / "brightness").write_text(brightness, encoding="utf-8")
    (tmp_path / "max_brightness").write_text(maximum, encoding="utf-8")
    return tmp_path


def test_backlight_reads_sysfs(tmp_path: Path) -> None:
    bl = Backlight(_sysfs(tmp_path))
    assert bl.read_max() == 4438
    assert bl.read_current() == 40


def test_backlight_write_is_synced_before_returning(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    bl = Backlight(_sysfs(tmp_path))
    synced: list[str] = []

    def fsync(fd: int) -> None:
        # The value must already be flushed to the file when fsync runs.
        synced.append((tmp_path / "brightness").read_text(encoding="utf-8"))

    monkeypatch.setattr("kira.system.backlight.os.fsync", fsync)
    bl.write(5)
    bl.write(6)
    assert synced == ["5", "6"]


def test_backlight_fsync_failure_is_device_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    bl = Backlight(_sysfs(tmp_path))

    def fsync(fd: int) -> None:
        raise OSError(5, "Input/output error")

    monkeypatch.setattr("kira.system.backlight.os.fsync", fsync)
    with pytest.raises(DeviceIoError) as exc:
        bl.write(5)
    assert isinstance(exc.value.__cause__, OSError)


def test_backlight_writes_sysfs(tmp_path: Path) -> None:
    bl = Backlight(_sysfs(tmp_path))
    bl.write(123)
    assert (tmp_path / "brightness").read_text(encoding="utf-8") == "123"
    bl.write(7)
    assert (tmp_path / "brightness").read_text(encoding="utf-8") == "7"
    assert bl.read_current() == 7


@pytest.mark.parametrize("text", ["", "abc", "-1", "12.5", str(VALUE_LIMIT + 1)])
def test_backlight_rejects_bad_values(tmp_path: Path, text: str) -> None:
    bl = Backlight(_sysfs(tmp_path, maximum=text))
    with pytest.raises(ParseError):
        bl.read_max()


def test_backlight_missing_device(tmp_path: Path) -> None:
    bl = Backlight(tmp_path / "missing")
    with pytest.raises(DeviceIoError) as exc:
        bl.read_current()
    assert isinstance(exc.value.__cause__, OSError)

    with pytest.raises(DeviceIoError):
        bl.write(1)
