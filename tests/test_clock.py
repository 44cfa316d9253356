from datetime import datetime, timedelta

import pytest

from sztest.clock import Clock, ClockSub

US = timedelta(microseconds=1)
MS = timedelta(milliseconds=1)
START = datetime(2999, 12, 25, 13, 15, 45, 555555)


def test_current_time_ticks():
    clk = Clock()
    ts0 = clk.next()
    ts1 = clk.next()
    assert clk.tick(0) == ts0
    assert clk.tick(1) == ts1
    assert ts0 != ts1


@pytest.mark.parametrize("index", [-1, 0, 1])
def test_invalid_tick(index):
    with pytest.raises(IndexError, match=f"unknown tick index: {index}"):
        Clock().tick(index)


def test_last_and_next_formats():
    clk = Clock()
    ts = clk.next()
    assert clk.last_fmt("time") == ts.strftime("%H%M%S")
    assert clk.last_fmt("ts") == ts.strftime("%Y%m%d%H%M%S")
    assert clk.last_fmt("nano") == ts.strftime("%Y%m%d%H%M%S.") + f"{ts.microsecond:06d}000"
    clk.set_cus_a("%Y-%m")
    assert clk.next_fmt("cus_a") == clk.last_fmt("cus_a")
    with pytest.raises(ValueError):
        clk.last_fmt("bogus")


def test_use_case_1():
    clk = Clock()
    before_current = clk.last()
    before = clk.next()
    assert before_current < before
    reset_all = clk.set(START, US, US * 10)
    ts1, ts2, ts3 = clk.next(), clk.next(), clk.next()
    reset_day = clk.offset_day(-2, US * 100)
    d1, d2, d3 = clk.next(), clk.next(), clk.next()
    assert d3 == clk.last()
    reset_day()
    ts4, ts5, ts6 = clk.next(), clk.next(), clk.next()
    reset_all()
    after = clk.next()
    assert before < after < ts1
    assert ts2 - ts1 == US
    assert ts3 - ts2 == US * 10
    assert d1 < ts1
    assert d2 - d1 == US * 100 and d3 - d2 == US * 100
    assert ts4 - ts3 == US
    assert ts5 - ts4 == US * 10
    assert ts6 - ts5 == US


def test_use_case_2_keeps_increments():
    clk = Clock()
    clk.offset_day(-2, MS, MS * 10)
    assert clk.next() < datetime.now()
    clk.set(START)
    t2, t3, t4 = clk.next(), clk.next(), clk.next()
    assert t3 - t2 == MS
    assert t4 - t3 == MS * 10


def test_default_increment():
    clk = Clock()
    clk.set(START)
    assert clk.next() == START
    assert clk.next() - START == MS


def test_offset():
    clk = Clock()
    ts1 = clk.next()
    clk.offset(timedelta(seconds=1))
    ts2 = clk.next()
    assert ts2 - ts1 >= timedelta(seconds=1)
    clk.offset(timedelta(minutes=1))
    ts3 = clk.next()
    assert ts3 - ts2 >= timedelta(minutes=1)