from __future__ import annotations

from pathlib import Path

from kira.errors import ConfigError, DeviceIoError

BACKLIGHT_ROOT = Path("/sys/class/backlight")
DEFAULT_DEVICE = "intel_backlight"


def resolve_backlight_dir(device: str | None = None, root: Path = BACKLIGHT_ROOT) -> Path:
    """Return the sysfs directory of a backlight device.

    ``device`` is either a name under /sys/class/backlight or an absolute
    directory. None selects intel_backlight.
    """

    if device is None:
        return root / DEFAULT_DEVICE
    if not device:
        raise ConfigError("backlight device must not be empty")
    p = Path(device)
    if p.is_absolute():
        return p
    if len(p.parts) != 1 or p.name in (".", ".."):
        raise ConfigError(f"invalid backlight device name: {device}")
    return root / p


def list_backlight_devices(root: Path = BACKLIGHT_ROOT) -> list[str]:
    if not root.is_dir():
        return []
    try:
        return sorted(p.name for p in root.iterdir())
    except OSError as e:
        raise DeviceIoError(f"cannot list {root}: {e}") from e
