"""Line formatting and change markers used when reporting differences."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

INS_OPEN = "⨭"
INS_CLOSE = "⨮"
DEL_OPEN = "⨴"
DEL_CLOSE = "⨵"
CHG_OPEN = "«"
CHG_CLOSE = "»"
SEP = "⧚/⧛"


class DiffType(Enum):
    """Which view of a difference is rendered."""

    WANT = "W"
    GOT = "G"
    MERGE = "M"


def mark_as_ins(text: str) -> str:
    """Mark text present only in what was got."""
    return f"{INS_OPEN}{text}{INS_CLOSE}"


def mark_as_del(text: str) -> str:
    """Mark text present only in what was wanted."""
    return f"{DEL_OPEN}{text}{DEL_CLOSE}"


def mark_as_chg(got: str, want: str, diff_type: DiffType) -> str:
    """Mark a changed section as seen from the given view."""
    if diff_type is DiffType.GOT:
        return f"{CHG_OPEN}{got}{CHG_CLOSE}"
    if diff_type is DiffType.WANT:
        return f"{CHG_OPEN}{want}{CHG_CLOSE}"
    return mark_as_del(want) + SEP + mark_as_ins(got)


@dataclass(frozen=True)
class DiffLineFormat:
    """Formats numbered diff lines with optional offsets."""

    width: int = 1
    got_offset: int = 0
    want_offset: int = 0

    def with_offset(self, got: int, want: int) -> DiffLineFormat:
        """Return a format whose offsets are moved by the given amounts."""
        return replace(
            self,
            got_offset=self.got_offset + got,
            want_offset=self.want_offset + want,
        )

    def line_number(self, n: int) -> str:
        """Format a line number, or dashes for a negative one."""
        if n < 0:
            return "-" * self.width
        return f"{n:0{self.width}d}"

    def same(self, got: int, want: int, value: Any) -> str:
        return (
            f"{self.line_number(got + self.got_offset)}:"
            f"{self.line_number(want + self.want_offset)} {value}"
        )

    def changed(self, got: int, want: int, line: str) -> str:
        return (
            mark_as_chg(self.line_number(got + self.got_offset), "", DiffType.GOT)
            + ":"
            + mark_as_chg("", self.line_number(want + self.want_offset), DiffType.WANT)
            + " "
            + line
        )

    def just_got(self, got: int, value: Any) -> str:
        return (
            mark_as_ins(self.line_number(got + self.got_offset))
            + ":"
            + self.line_number(-1)
            + " "
            + mark_as_ins(str(value))
        )

    def just_want(self, want: int, value: Any) -> str:
        return (
            self.line_number(-1)
            + ":"
            + mark_as_del(self.line_number(want + self.want_offset))
            + " "
            + mark_as_del(str(value))
        )


def line_format(got_len: int, want_len: int) -> DiffLineFormat:
    """Create a format wide enough for the longer of two sequences."""
    longest = max(got_len, want_len)
    return DiffLineFormat(width=len(str(longest)) if longest > 0 else 1)