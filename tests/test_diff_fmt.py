from sztest.diff_fmt import (
    DiffType,
    line_format,
    mark_as_chg,
    mark_as_del,
    mark_as_ins,
)


def test_width_one():
    assert line_format(0, 0).width == line_format(1, 0).width
    f = line_format(1, 0)
    assert f.line_number(-1) == "-"
    assert f.line_number(0) == "0"
    assert f.line_number(2) == "2"
    assert f.line_number(22) == "22"


def test_width_two():
    f = line_format(0, 10)
    assert f.line_number(-1) == "--"
    assert f.line_number(0) == "00"
    assert f.line_number(1) == "01"
    assert f.line_number(222) == "222"


def test_width_five():
    f = line_format(10000, 0)
    assert f.line_number(-1) == "-----"
    assert f.line_number(1) == "00001"
    assert f.line_number(22222) == "22222"


def test_same_line():
    f = line_format(100, 0)
    assert f.same(0, 0, "the line") == "000:000 the line"
    assert f.same(223, 159, "the line") == "223:159 the line"
    f = f.with_offset(8, 12)
    assert f.same(0, 0, "the line") == "008:012 the line"
    assert f.same(223, 159, "the line") == "231:171 the line"


def test_changed_line():
    f = line_format(100, 0).with_offset(8, 12)
    assert f.changed(223, 159, "the line") == (
        mark_as_chg("231", "", DiffType.GOT)
        + ":"
        + mark_as_chg("", "171", DiffType.WANT)
        + " the line"
    )
    assert f.changed(0, 0, "x") == "«008»:«012» x"


def test_just_got_and_want():
    f = line_format(100, 0)
    assert f.just_got(0, "the line") == mark_as_ins("000") + ":--- " + mark_as_ins("the line")
    f = f.with_offset(8, 12)
    assert f.just_got(223, "the line") == mark_as_ins("231") + ":--- " + mark_as_ins("the line")
    assert f.just_want(159, "the line") == "---:" + mark_as_del("171") + " " + mark_as_del("the line")


def test_merge_marker():
    assert mark_as_chg("ABC", "BCD", DiffType.MERGE) == "⨴BCD⨵⧚/⧛⨭ABC⨮"