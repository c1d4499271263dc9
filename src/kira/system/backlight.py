from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from kira.errors import DeviceIoError, ParseError
from kira.target import VALUE_LIMIT


def _parse_value(text: str, source: Path) -> int:
    raw = text.strip()
    if not raw.isascii() or not raw.isdigit():
        raise ParseError(f"{source} does not hold an unsigned integer: {raw!r}")
    value = int(raw)
    if value > VALUE_LIMIT:
        raise ParseError(f"{source} value out of range: {value}")
    return value


@dataclass(frozen=True)
class Backlight:
    sysfs_dir: Path

    @property
    def _brightness(self) -> Path:
        return self.sysfs_dir / "brightness"

    @property
    def _max_brightness(self) -> Path:
        return self.sysfs_dir / "max_brightness"

    def _read(self, path: Path) -> int:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise DeviceIoError(f"cannot read {path}: {e}") from e
        return _parse_value(text, path)

    def read_max(self) -> int:
        return self._read(self._max_brightness)

    def read_current(self) -> int:
        return self._read(self._brightness)

    def write(self, value: int) -> None:
        path = self._brightness
        try:
            with path.open("w", encoding="utf-8") as fh:
                fh.write(str(int(value)))
                fh.flush()
                os.fsync(fh.fileno())
        except OSError as e:
            raise DeviceIoError(f"cannot write {path}: {e}") from e
