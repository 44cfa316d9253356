# sztest

Small helpers for writing unit tests that explain their failures well.

- **Marked-up diffs** (`sztest.diff`, `sztest.diff_fmt`): the longest
  common runs are kept as they are; text only in what was got is wrapped in
  `⨭…⨮`, text only in what was wanted in `⨴…⨵`, and changed sections in
  `«…»` (or `⨴want⨵⧚/⧛⨭got⨮` in the merged view). Sequence diffs carry
  `got:want` line numbers, zero-padded to a common width.
- **Range checks** (`sztest.bounds`): `in_bounded_range` and
  `in_unbounded_range` return `(ok, description)`, where the description
  reads like `out of bounds: [33,35] - { want | 33 <= want <= 35 }`.
  Strings are shown quoted.
- **Checker** (`sztest.checker`): `Checker` compares values, sequences and
  ranges, records a `Failure` for each mismatch with the diff already
  rendered, and raises `AssertionError` listing them all at `release()`.
- **Test clock** (`sztest.clock`): `Clock` hands out the real time or a
  scripted sequence of timestamps, remembers every tick, and can register
  `{{clkTime0}}`-style placeholders to substitute into expected text.

## Install

```
pip install sztest
```

## Diffing

```python
from sztest.diff import compare_arrays, compare_slices, diff_slice, diff_string
from sztest.diff_fmt import DiffType

diff_string("ABC", "BCD", DiffType.MERGE, 1)   # '⨭A⨮BC⨴D⨵'
compare_arrays(list("ABC"), list("ABC"))        # '' when equal
print(compare_arrays(list("ABC"), list("AbC")))
print(compare_slices("title", list("ABC"), list("BCD")))

lines, changed = diff_slice(["B1", "G2"], ["B1", "W2"])
```

`diff_string` takes a `DiffType` (`GOT`, `WANT` or `MERGE`) and a minimum
run length: common runs shorter than it are not kept. `diff_slice`,
`compare_slices` and `compare_arrays` also accept a comparison function and
separate minimum runs for items and for the characters within changed
items. `best_next_run` and `best_next_run_string` expose the longest-run
search; `line_format` and `DiffLineFormat` the line numbering.

## Range checks

```python
from sztest.bounds import BoundedOption, UnboundedOption, in_bounded_range, in_unbounded_range

in_bounded_range(34, BoundedOption.CLOSED, 33, 35)   # (True, '')
in_unbounded_range(60, UnboundedOption.MIN_OPEN, 62)
# (False, 'out of bounds: (62,MAX) - { want | want > 62 }')
```

`BoundedOption` is `OPEN`, `CLOSED`, `MIN_OPEN` or `MAX_OPEN`;
`UnboundedOption` is `MIN_OPEN`, `MIN_CLOSED`, `MAX_OPEN` or `MAX_CLOSED`.
Anything else raises `ValueError`.

## Checking

```python
from sztest.bounds import BoundedOption
from sztest.checker import Checker

chk = Checker()
chk.equal(2, 1, "uint")
chk.slice([1, 3], [1, 2], "uint", "lists differ")
chk.bounded_f(30, BoundedOption.CLOSED, 33, 35, "uint", "msg:%d", 30)
print(chk.failures)   # the recorded Failure objects
chk.release()         # raises AssertionError listing every failure
```

Every check returns `True` when it passes and `False` when it records a
failure. The `type_name` argument only labels the report. Methods without
`_f` join their extra arguments into the message; the `_f` variants apply
`%`-formatting. Used as a context manager, a `Checker` calls `release()` on
a clean exit. String values have the checker's clock placeholders
substituted before they are compared.

## Clock

```python
from datetime import datetime, timedelta
from sztest.clock import Clock, ClockSub

clock = Clock()
reset = clock.set(datetime(2999, 12, 25, 13, 15, 45), timedelta(microseconds=1))
first = clock.next()
clock.set_sub(ClockSub.TIME)
clock.next()
print(clock.substitute("at {{clkTime1}}"))
print(clock.last_fmt("ts"), clock.tick(0) == first)
reset()   # back to the clock as it was before set()
```

Without `set`, `next()` returns the real time once and then advances by the
increments (1 ms by default), cycling through them. `offset_day` and
`offset` also return a restore function. `last_fmt` and `next_fmt` take
`"time"`, `"date"`, `"ts"`, `"nano"`, `"cus_a"`, `"cus_b"` or `"cus_c"`;
the custom formats are `strftime` patterns set with `set_cus_a` and
friends, which also switch their substitution on or off. `tick` raises
`IndexError` for an unknown index. `"nano"` shows microsecond precision
followed by `000`.

## What it does not do

There is no pytest plugin or fixture and no capturing of standard output or
logs; a `Checker` reports only through `release()`. There are no per-type
check methods: one generic set of checks takes a type label instead.

## Running the tests

```
pip install -e .[test]
pytest
```