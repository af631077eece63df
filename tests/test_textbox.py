import pytest

from menukit.lxdialog.screen import MAX_LEN
from menukit.lxdialog.textbox import TextPager


def test_get_line_reads_each_line():
    pager = TextPager("a\nb\nc")
    assert [pager.get_line() for _ in range(3)] == ["a", "b", "c"]
    assert pager.end_reached


def test_get_line_at_end_returns_empty():
    pager = TextPager("only")
    pager.get_line()
    assert pager.get_line() == ""
    assert pager.end_reached


def test_initial_vscroll_skips_lines():
    pager = TextPager("l0\nl1\nl2\nl3", vscroll=2)
    assert not pager.begin_reached
    assert pager.get_line() == "l2"


def test_page_lines_counts_real_lines():
    pager = TextPager("x\ny")
    lines = pager.page_lines(5)
    assert lines == ["x", "y", "", "", ""]
    assert pager.page_length == 2


def test_page_lines_full_page():
    text = "\n".join(f"line{i}" for i in range(10))
    pager = TextPager(text)
    lines = pager.page_lines(4)
    assert lines == text.split("\n")[:4]
    assert pager.page_length == 4


def test_back_lines_to_beginning():
    pager = TextPager("a\nb\nc\nd")
    pager.page_lines(3)
    pager.back_lines(10)
    assert pager.begin_reached
    assert pager.page == 0


def test_back_lines_returns_to_page_start():
    text = "\n".join(f"line{i}" for i in range(20))
    pager = TextPager(text, vscroll=5)
    first = pager.page_lines(4)
    pager.back_lines(pager.page_length)
    assert pager.page_lines(4) == first


@pytest.mark.parametrize("start", [0, 1, 3, 7])
def test_vscroll_round_trip(start):
    text = "\n".join(f"row{i}" for i in range(30))
    pager = TextPager(text, vscroll=start)
    pager.page_lines(5)
    assert pager.vscroll() == start


def test_percent_bounds():
    text = "ab\ncd"
    pager = TextPager(text)
    assert pager.percent() == 0
    pager.get_line()
    pager.get_line()
    assert pager.percent() == 100


def test_percent_grows_while_reading():
    pager = TextPager("\n".join(str(i) for i in range(50)))
    values = []
    for _ in range(10):
        pager.get_line()
        values.append(pager.percent())
    assert values == sorted(values)


def test_long_lines_are_truncated():
    pager = TextPager("z" * (MAX_LEN + 10) + "\nnext")
    assert len(pager.get_line()) == MAX_LEN
    assert pager.get_line() == "next"