"""A controllable test clock that records ticks and substitutions."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from enum import IntFlag
from typing import Callable

FMT_TIME = "%H%M%S"
FMT_DATE = "%Y%m%d"
FMT_TS = FMT_DATE + FMT_TIME


class ClockSub(IntFlag):
    """Which formatted values are registered as substitutions on each tick."""

    NONE = 0
    TIME = 1 << 1
    DATE = 1 << 2
    TS = 1 << 3
    NANO = 1 << 4
    CUS_A = 1 << 5
    CUS_B = 1 << 6
    CUS_C = 1 << 7
    ALL = TIME | DATE | TS | NANO | CUS_A | CUS_B | CUS_C


_SUB_NAMES = {
    ClockSub.TIME: "Time",
    ClockSub.DATE: "Date",
    ClockSub.TS: "TS",
    ClockSub.NANO: "Nano",
    ClockSub.CUS_A: "CusA",
    ClockSub.CUS_B: "CusB",
    ClockSub.CUS_C: "CusC",
}

_KINDS = {
    "time": ClockSub.TIME,
    "date": ClockSub.DATE,
    "ts": ClockSub.TS,
    "nano": ClockSub.NANO,
    "cus_a": ClockSub.CUS_A,
    "cus_b": ClockSub.CUS_B,
    "cus_c": ClockSub.CUS_C,
}


@dataclass
class _State:
    last: datetime
    next: datetime
    inc: tuple[timedelta, ...]
    index: int = 0


def _new_state(start: datetime, inc: tuple[timedelta, ...]) -> _State:
    if not inc:
        inc = (timedelta(milliseconds=1),)
    return _State(last=start - inc[-1], next=start, inc=inc)


@dataclass
class Clock:
    """Produces timestamps, real or scripted, and remembers each one."""

    flags: ClockSub = ClockSub.NONE
    cus_a: str = ""
    cus_b: str = ""
    cus_c: str = ""
    ticks: list[datetime] = field(default_factory=list)
    subs: dict[str, str] = field(default_factory=dict)
    _state: _State = field(default_factory=lambda: _new_state(datetime.now(), ()))

    def set_sub(self, flags: int) -> None:
        self.flags = ClockSub(flags)

    def add_sub(self, flags: int) -> None:
        self.flags |= ClockSub(flags)

    def remove_sub(self, flags: int) -> None:
        self.flags &= ~ClockSub(flags)

    def _set_custom(self, attr: str, flag: ClockSub, fmt: str) -> None:
        setattr(self, attr, fmt)
        if fmt:
            self.add_sub(flag)
        else:
            self.remove_sub(flag)

    def set_cus_a(self, fmt: str) -> None:
        self._set_custom("cus_a", ClockSub.CUS_A, fmt)

    def set_cus_b(self, fmt: str) -> None:
        self._set_custom("cus_b", ClockSub.CUS_B, fmt)

    def set_cus_c(self, fmt: str) -> None:
        self._set_custom("cus_c", ClockSub.CUS_C, fmt)

    def _format(self, ts: datetime, flag: ClockSub) -> str:
        if flag is ClockSub.TIME:
            return ts.strftime(FMT_TIME)
        if flag is ClockSub.DATE:
            return ts.strftime(FMT_DATE)
        if flag is ClockSub.TS:
            return ts.strftime(FMT_TS)
        if flag is ClockSub.NANO:
            return ts.strftime(FMT_TS) + f".{ts.microsecond:06d}000"
        custom = {ClockSub.CUS_A: self.cus_a, ClockSub.CUS_B: self.cus_b,
                  ClockSub.CUS_C: self.cus_c}[flag]
        return ts.strftime(custom)

    @staticmethod
    def _kind(kind: str) -> ClockSub:
        try:
            return _KINDS[kind]
        except KeyError:
            raise ValueError(f"unknown clock format: {kind}") from None

    def last(self) -> datetime:
        """Return the last timestamp generated."""
        return self._state.last

    def last_fmt(self, kind: str) -> str:
        return self._format(self._state.last, self._kind(kind))

    def next(self) -> datetime:
        """Return the next timestamp and record it as a tick."""
        state = self._state
        state.last = state.next
        if state.index >= len(state.inc):
            state.index = 0
        state.next = state.next + state.inc[state.index]
        state.index += 1
        ts = state.last
        self.ticks.append(ts)
        idx = len(self.ticks) - 1
        for flag, name in _SUB_NAMES.items():
            if self.flags & flag:
                self.subs["{{clk" + name + str(idx) + "}}"] = self._format(ts, flag)
        return ts

    def next_fmt(self, kind: str) -> str:
        flag = self._kind(kind)
        return self._format(self.next(), flag)

    def tick(self, index: int) -> datetime:
        if index < 0 or index >= len(self.ticks):
            raise IndexError(f"unknown tick index: {index}")
        return self.ticks[index]

    def set(self, start: datetime, *args: timedelta) -> Callable[[], None]:
        """Set the clock; return a function restoring the previous clock."""
        saved = self._state
        inc = tuple(args) if args else saved.inc
        self._state = _new_state(start, inc)

        def reset() -> None:
            self._state = saved

        return reset

    def offset_day(self, days: int, *args: timedelta) -> Callable[[], None]:
        return self.set(self._state.last + timedelta(days=days), *args)

    def offset(self, delta: timedelta) -> Callable[[], None]:
        return self.set(self._state.next + delta)

    def substitute(self, text: str) -> str:
        """Replace registered tick placeholders in text."""
        for key, value in self.subs.items():
            text = text.replace(key, value)
        return text

    def __post_init__(self) -> None:
        self._state = replace(self._state)