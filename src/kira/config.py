from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from kira.errors import ConfigError
from kira.transition import STEP_DELAY_SECONDS

__all__ = ["ConfigError", "default_config", "load", "normalize", "validate"]


def default_config() -> dict[str, Any]:
    return {
        "backlight": {"device": None, "min_brightness": 0},
        "transition": {"step_delay_seconds": STEP_DELAY_SECONDS},
    }


def _section(cfg: dict[str, Any], key: str) -> dict[str, Any]:
    section = cfg.get(key)
    if section is None:
        section = cfg[key] = {}
    if not isinstance(section, dict):
        raise ConfigError(f"{key} must be a mapping")
    return section


def load(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config file {p}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {p}: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Top-level config must be a mapping")
    normalize(data)
    validate(data)
    return data


def normalize(cfg: dict[str, Any]) -> None:
    """Fill in defaults and tidy string values in place."""

    defaults = default_config()
    for key, values in defaults.items():
        section = _section(cfg, key)
        for name, value in values.items():
            section.setdefault(name, value)

    device = cfg["backlight"]["device"]
    if isinstance(device, str):
        cfg["backlight"]["device"] = device.strip()


def validate(cfg: dict[str, Any]) -> None:
    backlight = _section(cfg, "backlight")
    transition = _section(cfg, "transition")

    device = backlight.get("device")
    if device is not None and (not isinstance(device, str) or not device):
        raise ConfigError("backlight.device must be a non-empty string")

    min_brightness = backlight.get("min_brightness", 0)
    if isinstance(min_brightness, bool) or not isinstance(min_brightness, int):
        raise ConfigError("backlight.min_brightness must be an integer")
    if min_brightness < 0:
        raise ConfigError("backlight.min_brightness must be >= 0")

    delay = transition.get("step_delay_seconds", STEP_DELAY_SECONDS)
    if isinstance(delay, bool) or not isinstance(delay, (int, float)):
        raise ConfigError("transition.step_delay_seconds must be a number")
    if delay < 0:
        raise ConfigError("transition.step_delay_seconds must be >= 0")
