"""Typed equality, sequence and range checks that collect failures."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import Any, Sequence

from sztest.bounds import (
    BoundedOption,
    UnboundedOption,
    in_bounded_range,
    in_unbounded_range,
)
from sztest.clock import Clock
from sztest.diff import diff_slice, diff_string
from sztest.diff_fmt import DiffType

MIN_RUN_SLICE = 1
MIN_RUN_CHARS = 2


def _sprint(args: Sequence[Any]) -> str:
    """Join message parts, spacing two adjacent parts when neither is a string."""
    parts: list[str] = []
    previous: Any = None
    for position, arg in enumerate(args):
        if position and not isinstance(arg, str) and not isinstance(previous, str):
            parts.append(" ")
        parts.append(str(arg))
        previous = arg
    return "".join(parts)


def _sprintf(msg_fmt: str, args: Sequence[Any]) -> str:
    return msg_fmt % tuple(args) if args else msg_fmt


@dataclass(frozen=True)
class Failure:
    """One failed check and what it reported."""

    check: str
    type_name: str
    message: str
    got: str = ""
    want: str = ""
    lines: tuple[str, ...] = ()
    got_len: int | None = None
    want_len: int | None = None

    def __str__(self) -> str:
        head = f"{self.check}: unexpected {self.type_name}"
        if self.message:
            head += f": {self.message}"
        if self.got_len is not None:
            body = [
                f"got ({self.got_len} lines) - want ({self.want_len} lines)",
                *self.lines,
            ]
        else:
            body = [f"GOT: {self.got}", f"WNT: {self.want}"]
        return "\n".join([head, *body])


@dataclass
class Checker:
    """Runs checks, records every failure and reports them on release."""

    clock: Clock = field(default_factory=Clock)
    failures: list[Failure] = field(default_factory=list)

    def _stringify(self, value: Any) -> Any:
        if isinstance(value, str):
            return self.clock.substitute(value)
        return value

    def _fail(self, failure: Failure) -> bool:
        self.failures.append(failure)
        return False

    # Equality.

    def _equal(self, check: str, got: Any, want: Any, type_name: str, message: str) -> bool:
        got, want = self._stringify(got), self._stringify(want)
        if got == want:
            return True
        got_text, want_text = str(got), str(want)
        return self._fail(
            Failure(
                check=check,
                type_name=type_name,
                message=message,
                got=diff_string(got_text, want_text, DiffType.GOT, MIN_RUN_CHARS),
                want=diff_string(got_text, want_text, DiffType.WANT, MIN_RUN_CHARS),
            )
        )

    def equal(self, got: Any, want: Any, type_name: str, *args: Any) -> bool:
        """Check that got equals want."""
        return self._equal("equal", got, want, type_name, _sprint(args))

    def equal_f(self, got: Any, want: Any, type_name: str, msg_fmt: str, *args: Any) -> bool:
        """Check that got equals want, with a formatted message."""
        return self._equal("equal_f", got, want, type_name, _sprintf(msg_fmt, args))

    # Sequences.

    def _slice(
        self, check: str, got: Sequence[Any], want: Sequence[Any], type_name: str, message: str
    ) -> bool:
        got_items = [self._stringify(v) for v in got]
        want_items = [self._stringify(v) for v in want]
        if got_items == want_items:
            return True
        lines, _ = diff_slice(
            got_items, want_items, None, MIN_RUN_SLICE, MIN_RUN_CHARS, operator.eq
        )
        return self._fail(
            Failure(
                check=check,
                type_name="[]" + type_name,
                message=message,
                lines=tuple(lines),
                got_len=len(got_items),
                want_len=len(want_items),
            )
        )

    def slice(self, got: Sequence[Any], want: Sequence[Any], type_name: str, *args: Any) -> bool:
        """Check that two sequences hold equal items in the same order."""
        return self._slice("slice", got, want, type_name, _sprint(args))

    def slice_f(
        self, got: Sequence[Any], want: Sequence[Any], type_name: str, msg_fmt: str, *args: Any
    ) -> bool:
        """Check two sequences for equality, with a formatted message."""
        return self._slice("slice_f", got, want, type_name, _sprintf(msg_fmt, args))

    # Ranges.

    def _bounded(
        self, check: str, got: Any, option: BoundedOption, low: Any, high: Any,
        type_name: str, message: str,
    ) -> bool:
        got = self._stringify(got)
        in_range, want = in_bounded_range(
            got, option, self._stringify(low), self._stringify(high)
        )
        if in_range:
            return True
        return self._fail(
            Failure(check=check, type_name=type_name, message=message, got=str(got), want=want)
        )

    def bounded(
        self, got: Any, option: BoundedOption, low: Any, high: Any, type_name: str, *args: Any
    ) -> bool:
        """Check that got lies within a bounded interval."""
        return self._bounded("bounded", got, option, low, high, type_name, _sprint(args))

    def bounded_f(
        self, got: Any, option: BoundedOption, low: Any, high: Any, type_name: str,
        msg_fmt: str, *args: Any,
    ) -> bool:
        """Check a bounded interval, with a formatted message."""
        return self._bounded(
            "bounded_f", got, option, low, high, type_name, _sprintf(msg_fmt, args)
        )

    def _unbounded(
        self, check: str, got: Any, option: UnboundedOption, bound: Any,
        type_name: str, message: str,
    ) -> bool:
        got = self._stringify(got)
        in_range, want = in_unbounded_range(got, option, self._stringify(bound))
        if in_range:
            return True
        return self._fail(
            Failure(check=check, type_name=type_name, message=message, got=str(got), want=want)
        )

    def unbounded(
        self, got: Any, option: UnboundedOption, bound: Any, type_name: str, *args: Any
    ) -> bool:
        """Check that got lies within an unbounded interval."""
        return self._unbounded("unbounded", got, option, bound, type_name, _sprint(args))

    def unbounded_f(
        self, got: Any, option: UnboundedOption, bound: Any, type_name: str,
        msg_fmt: str, *args: Any,
    ) -> bool:
        """Check an unbounded interval, with a formatted message."""
        return self._unbounded(
            "unbounded_f", got, option, bound, type_name, _sprintf(msg_fmt, args)
        )

    # Reporting.

    def release(self) -> None:
        """Clear recorded failures, raising AssertionError if there were any."""
        failures, self.failures = self.failures, []
        if failures:
            raise AssertionError("\n\n".join(str(f) for f in failures))

    def __enter__(self) -> Checker:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.release()