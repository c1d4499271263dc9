from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Protocol

log = logging.getLogger(__name__)

# Pause between two written steps.
STEP_DELAY_SECONDS = 100e-9


class Device(Protocol):
    def read_current(self) -> int: ...

    def read_max(self) -> int: ...

    def write(self, value: int) -> None: ...


def steps(current: int, target: int) -> list[int]:
    """Every value from current to target, both ends included."""

    if target > current:
        return list(range(current, target + 1))
    if target < current:
        return list(range(current, target - 1, -1))
    return []


def walk(
    device: Device,
    current: int,
    target: int,
    *,
    delay: float = STEP_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Move the device one unit at a time from current to target.

    Each value is written durably before the pause. A failing write stops
    the walk and the error propagates; values already written stay applied.

    Returns the number of values written.
    """

    written = 0
    for value in steps(current, target):
        device.write(value)
        log.debug("brightness step %d", value)
        written += 1
        sleep(delay)
    return written
