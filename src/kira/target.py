from __future__ import annotations

from kira.directive import Directive, Relation

# Brightness values are handled as unsigned 32-bit integers.
VALUE_LIMIT = 2**32 - 1


def saturating_add(a: int, b: int) -> int:
    return min(a + b, VALUE_LIMIT)


def saturating_sub(a: int, b: int) -> int:
    return max(a - b, 0)


def clamp(value: int, minimum: int, maximum: int) -> int:
    if value >= maximum:
        return maximum
    if value <= minimum:
        return minimum
    return value


def percent_of(maximum: int, percent: int) -> int:
    # Truncates toward zero; callers rely on this instead of rounding.
    return int(maximum * percent / 100)


def compute_target(directive: Directive, current: int, maximum: int, minimum: int = 0) -> int:
    """Return the absolute brightness value a directive asks for.

    ABSOLUTE sets brightness to ``percent`` of ``maximum``. INCREASE_BY and
    DECREASE_BY move ``current`` by that amount. The result is always within
    ``[minimum, maximum]``.
    """

    delta = percent_of(maximum, directive.percent)
    if directive.relation is Relation.INCREASE_BY:
        value = saturating_add(current, delta)
    elif directive.relation is Relation.DECREASE_BY:
        value = saturating_sub(current, delta)
    else:
        value = delta
    return clamp(value, minimum, maximum)
