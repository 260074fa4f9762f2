# topmark:header:start
#
#   project      : polyfmt
#   file         : test_wrap.py
#   file_relpath : tests/test_wrap.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line wrapping."""

from __future__ import annotations

from polyfmt.wrap import wrap_text
from tests.conftest import parametrize


def test_wraps_on_whitespace_within_the_remaining_width() -> None:
    lines = wrap_text("aaa bbb ccc ddd eee fff", indent=2, max_line_length=20)

    assert lines == ["aaa bbb ccc ddd", "eee fff"]
    assert all(len(line) <= 18 for line in lines)


def test_no_wrapping_when_disabled() -> None:
    text = "word " * 50

    assert wrap_text(text, indent=10, max_line_length=None) == [text]


def test_explicit_newlines_are_kept() -> None:
    assert wrap_text("first\nsecond", indent=0, max_line_length=80) == ["first", "second"]


def test_blank_paragraphs_become_empty_lines() -> None:
    assert wrap_text("top\n\nbottom", indent=0, max_line_length=80) == ["top", "", "bottom"]


def test_empty_text_is_one_empty_line() -> None:
    assert wrap_text("", indent=4, max_line_length=80) == [""]


def test_long_words_are_not_split() -> None:
    url = "https://example.com/" + "x" * 40

    assert wrap_text(f"see {url}", indent=0, max_line_length=20) == ["see", url]


@parametrize("indent", [20, 25])
def test_no_room_yields_nothing(indent: int) -> None:
    assert wrap_text("hello", indent=indent, max_line_length=20) == []
