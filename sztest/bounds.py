"""Range checks for bounded and unbounded intervals."""

from __future__ import annotations

import operator
from enum import Enum
from typing import Any, Callable


class BoundedOption(Enum):
    """Which ends of a bounded interval are included."""

    OPEN = "open"
    CLOSED = "closed"
    MIN_OPEN = "min_open"
    MAX_OPEN = "max_open"


class UnboundedOption(Enum):
    """Which side an unbounded interval extends to and whether it is closed."""

    MIN_OPEN = "min_open"
    MIN_CLOSED = "min_closed"
    MAX_OPEN = "max_open"
    MAX_CLOSED = "max_closed"


_Cmp = Callable[[Any, Any], bool]

# option -> (left bracket, right bracket, low comparison text, high comparison text,
#            low test, high test)
_BOUNDED: dict[BoundedOption, tuple[str, str, str, str, _Cmp, _Cmp]] = {
    BoundedOption.OPEN: ("(", ")", "<", "<", operator.lt, operator.lt),
    BoundedOption.CLOSED: ("[", "]", "<=", "<=", operator.le, operator.le),
    BoundedOption.MIN_OPEN: ("(", "]", "<", "<=", operator.lt, operator.le),
    BoundedOption.MAX_OPEN: ("[", ")", "<=", "<", operator.le, operator.lt),
}

# option -> (is lower bound, open, comparison text, test of got against bound)
_UNBOUNDED: dict[UnboundedOption, tuple[bool, bool, str, _Cmp]] = {
    UnboundedOption.MIN_OPEN: (True, True, ">", operator.gt),
    UnboundedOption.MIN_CLOSED: (True, False, ">=", operator.ge),
    UnboundedOption.MAX_OPEN: (False, True, "<", operator.lt),
    UnboundedOption.MAX_CLOSED: (False, False, "<=", operator.le),
}


def _show(value: Any) -> str:
    """Render a bound: strings quoted, everything else as is."""
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return str(value)


def in_bounded_range(
    got: Any, option: BoundedOption, low: Any, high: Any
) -> tuple[bool, str]:
    """Return whether got lies in the interval, and a description if not."""
    try:
        left, right, low_op, high_op, low_ok, high_ok = _BOUNDED[option]
    except (KeyError, TypeError):
        raise ValueError(f"unknown bounded option: {option!r}") from None

    if low_ok(low, got) and high_ok(got, high):
        return True, ""

    lo, hi = _show(low), _show(high)
    return False, (
        f"out of bounds: {left}{lo},{hi}{right} - "
        f"{{ want | {lo} {low_op} want {high_op} {hi} }}"
    )


def in_unbounded_range(
    got: Any, option: UnboundedOption, bound: Any
) -> tuple[bool, str]:
    """Return whether got lies beyond the bound, and a description if not."""
    try:
        is_min, is_open, op_text, ok = _UNBOUNDED[option]
    except (KeyError, TypeError):
        raise ValueError(f"unknown unbounded option: {option!r}") from None

    if ok(got, bound):
        return True, ""

    shown = _show(bound)
    if is_min:
        interval = ("(" if is_open else "[") + f"{shown},MAX)"
    else:
        interval = f"(MIN,{shown}" + (")" if is_open else "]")
    return False, f"out of bounds: {interval} - {{ want | want {op_text} {shown} }}"