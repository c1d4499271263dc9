from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    PARSE = "parse"
    DEVICE_IO = "device_io"
    CONFIG = "config"
    OTHER = "other"


class KiraError(Exception):
    kind: ErrorKind = ErrorKind.OTHER


class ParseError(KiraError):
    kind = ErrorKind.PARSE


class DeviceIoError(KiraError):
    kind = ErrorKind.DEVICE_IO


class ConfigError(KiraError, ValueError):
    kind = ErrorKind.CONFIG


class OtherError(KiraError):
    kind = ErrorKind.OTHER


_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.PARSE: "Given percent value needs to be a number between 0 and 100.",
    ErrorKind.DEVICE_IO: (
        "Could not access the backlight device.\n"
        "Does it exist?\n"
        "Usually `/sys/class/backlight/intel_backlight/` or similar.\n"
        "Also, do you have permission to edit it?\n"
        "On most Linux distributions you need to be part of a special group (video?)."
    ),
    ErrorKind.CONFIG: "The config file is invalid.",
    ErrorKind.OTHER: "Oh oh, something unexpected went wrong.",
}


def friendly_message(kind: ErrorKind) -> str:
    return _MESSAGES[kind]
