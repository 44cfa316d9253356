"""Run-based differences between strings and sequences."""

from __future__ import annotations

import operator
from typing import Any, Callable, Sequence

from sztest.diff_fmt import (
    DiffLineFormat,
    DiffType,
    line_format,
    mark_as_chg,
    mark_as_del,
    mark_as_ins,
)

DEFAULT_MIN_RUN_SLICE = 1
DEFAULT_MIN_RUN_STRING = 1

Cmp = Callable[[Any, Any], bool]


def best_next_run(
    got: Sequence[Any], want: Sequence[Any], min_run: int, cmp: Cmp = operator.eq
) -> tuple[int, int, int]:
    """Return (got_start, want_start, length) of the best matching run."""
    best: tuple[int, int, int] | None = None
    for gi, g in enumerate(got):
        for wi, w in enumerate(want):
            if not cmp(g, w):
                continue
            length = 1
            while (
                gi + length < len(got)
                and wi + length < len(want)
                and cmp(got[gi + length], want[wi + length])
            ):
                length += 1
            if length >= min_run:
                key = (-length, gi, wi)
                if best is None or key < best:
                    best = key
    if best is None:
        return 0, 0, 0
    return best[1], best[2], -best[0]


def best_next_run_string(got: str, want: str, min_run: int) -> tuple[int, int, int]:
    return best_next_run(got, want, min_run)


def diff_string(got: str, want: str, diff_type: DiffType, min_run: int) -> str:
    """Mark up the differences between two strings."""
    if got == want:
        return got
    if diff_type is DiffType.WANT:
        if want == "":
            return want
        if got == "":
            return mark_as_del(want)
    elif diff_type is DiffType.GOT:
        if got == "":
            return got
        if want == "":
            return mark_as_ins(got)
    else:
        if got == "":
            return mark_as_del(want)
        if want == "":
            return mark_as_ins(got)

    gi, wi, n = best_next_run_string(got, want, min_run)
    if n == 0:
        return mark_as_chg(got, want, diff_type)
    return (
        diff_string(got[:gi], want[:wi], diff_type, min_run)
        + got[gi : gi + n]
        + diff_string(got[gi + n :], want[wi + n :], diff_type, min_run)
    )


def diff_slice(
    got: Sequence[Any],
    want: Sequence[Any],
    fmt: DiffLineFormat | None = None,
    min_run_slice: int = DEFAULT_MIN_RUN_SLICE,
    min_run_string: int = DEFAULT_MIN_RUN_STRING,
    cmp: Cmp = operator.eq,
) -> tuple[list[str], bool]:
    """Return the numbered diff lines and whether anything differed."""
    if fmt is None:
        fmt = line_format(len(got), len(want))

    if len(got) == len(want) and all(cmp(g, w) for g, w in zip(got, want)):
        return [fmt.same(i, i, v) for i, v in enumerate(got)], False
    if not got:
        return [fmt.just_want(i, v) for i, v in enumerate(want)], True
    if not want:
        return [fmt.just_got(i, v) for i, v in enumerate(got)], True

    gi, wi, n = best_next_run(got, want, min_run_slice, cmp)
    if n == 0:
        common = min(len(got), len(want))
        result = [
            fmt.changed(
                i, i, diff_string(str(got[i]), str(want[i]), DiffType.MERGE, min_run_string)
            )
            for i in range(common)
        ]
        result += [fmt.just_want(i, want[i]) for i in range(common, len(want))]
        result += [fmt.just_got(i, got[i]) for i in range(common, len(got))]
        return result, True

    before, changed_before = diff_slice(
        got[:gi], want[:wi], fmt, min_run_slice, min_run_string, cmp
    )
    middle = [fmt.same(gi + i, wi + i, got[gi + i]) for i in range(n)]
    after, changed_after = diff_slice(
        got[gi + n :],
        want[wi + n :],
        fmt.with_offset(gi + n, wi + n),
        min_run_slice,
        min_run_string,
        cmp,
    )
    return before + middle + after, changed_before or changed_after


def compare_slices(
    title: str,
    got: Sequence[Any],
    want: Sequence[Any],
    min_run_slice: int = DEFAULT_MIN_RUN_SLICE,
    min_run_string: int = DEFAULT_MIN_RUN_STRING,
    cmp: Cmp = operator.eq,
) -> str:
    """Return a titled difference report, or "" when the sequences match."""
    lines, changed = diff_slice(got, want, None, min_run_slice, min_run_string, cmp)
    if not changed:
        return ""
    prefix = f"{title}: " if title else ""
    header = f"{prefix}got ({len(got)} lines) - want ({len(want)} lines)\n"
    return header + "\n".join(lines)


def compare_arrays(got: Sequence[Any], want: Sequence[Any]) -> str:
    """Return the differences between two sequences, or "" if none."""
    lines, changed = diff_slice(got, want)
    return "\n".join(lines) if changed else ""