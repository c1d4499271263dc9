from __future__ import annotations

import enum
import re
from dataclasses import dataclass

from kira.errors import ParseError

PERCENT_LIMIT = 255

_DIGITS = re.compile(r"[0-9]+")


class Relation(enum.Enum):
    ABSOLUTE = "absolute"
    INCREASE_BY = "increase_by"
    DECREASE_BY = "decrease_by"


@dataclass(frozen=True)
class Directive:
    relation: Relation
    percent: int

    @classmethod
    def full(cls) -> Directive:
        return cls(Relation.ABSOLUTE, 100)


def _parse_percent(text: str) -> int:
    if not _DIGITS.fullmatch(text):
        raise ParseError(f"invalid percent value: {text!r}")
    value = int(text)
    if value > PERCENT_LIMIT:
        raise ParseError(f"percent value too large: {text!r} (max {PERCENT_LIMIT})")
    return value


def parse_directive(text: str) -> Directive:
    """Parse ``[+-]percent`` into a Directive.

    Values up to 255 are accepted; clamping to the device range is left to
    the target calculation.
    """

    if text.startswith("+"):
        return Directive(Relation.INCREASE_BY, _parse_percent(text[1:]))
    if text.startswith("-"):
        return Directive(Relation.DECREASE_BY, _parse_percent(text[1:]))
    return Directive(Relation.ABSOLUTE, _parse_percent(text))
