"""
Tests for the symbol cursor.
"""

from cw_demangler.cursor import SENTINEL, Cursor


def test_read_and_peek():
    src = Cursor("Pi")
    assert src.peek() == "P"
    assert src.read() == "P"
    assert src.peek() == "i"
    assert src.read() == "i"
    assert src.at_end()


def test_reads_past_end_return_sentinel():
    src = Cursor("v")
    src.read()
    for _ in range(3):
        assert src.read() == SENTINEL
        assert src.peek() == SENTINEL
    assert src.position == 1

    assert Cursor("").read() == SENTINEL


def test_indexing():
    src = Cursor("abc")
    assert src[0] == "a"
    assert src[2] == "c"
    assert src[3] == SENTINEL
    assert src[-1] == SENTINEL
    assert len(src) == 3


def test_position_is_clamped():
    src = Cursor("abc")
    src.position = 10
    assert src.position == 3
    src.position = -4
    assert src.position == 0

    src.read()
    src.position -= 1
    assert src.peek() == "a"


def test_read_number():
    src = Cursor("123Foo")
    assert src.read_number() == 123
    assert src.peek() == "F"
    assert src.read_number() == 0
    assert src.peek() == "F"


def test_exhaust():
    src = Cursor("Q23Foo3Bar")
    src.exhaust()
    assert src.at_end()
    assert src.read() == SENTINEL


def test_find_last_separator():
    assert Cursor("foo__Fv").find_last_separator() == 3
    assert Cursor("a__b__Fi").find_last_separator() == 4
    assert Cursor("a___Fi").find_last_separator() == 2
    assert Cursor("main").find_last_separator() == 4
    assert Cursor("").find_last_separator() == 0

    src = Cursor("__a")
    src.read()
    # Only separators at or after the position count.
    assert src.find_last_separator() == 3
