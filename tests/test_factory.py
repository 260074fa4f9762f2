# topmark:header:start
#
#   project      : polyfmt
#   file         : test_factory.py
#   file_relpath : tests/test_factory.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatter construction and the spinner fallback."""

from __future__ import annotations

import io
import sys

import pytest

from polyfmt.errors import FormatParseError
from polyfmt.factory import BACKENDS, new
from polyfmt.formats import Format
from polyfmt.formatters import (
    Formatter,
    JsonFormatter,
    PlainFormatter,
    SilentFormatter,
    SpinnerFormatter,
    TreeFormatter,
)
from tests.conftest import TtyStringIO, make_options, parametrize


@parametrize(
    "output_format, expected",
    [
        (Format.PLAIN, PlainFormatter),
        (Format.TREE, TreeFormatter),
        (Format.JSON, JsonFormatter),
        (Format.SILENT, SilentFormatter),
    ],
)
def test_new_builds_the_registered_backend(
    output_format: Format, expected: type[Formatter]
) -> None:
    fmt = new(output_format, make_options())

    assert type(fmt) is expected
    assert fmt.format is output_format


def test_every_format_has_a_backend() -> None:
    assert set(BACKENDS) == set(Format)


def test_new_accepts_format_names() -> None:
    assert isinstance(new("Tree", make_options()), TreeFormatter)


def test_new_rejects_unknown_names() -> None:
    with pytest.raises(FormatParseError):
        new("yaml", make_options())


def test_new_defaults_to_default_options(monkeypatch: pytest.MonkeyPatch) -> None:
    buffer = io.StringIO()
    monkeypatch.setattr(sys, "stdout", buffer)

    fmt = new(Format.PLAIN)
    fmt.println("hello")

    assert buffer.getvalue() == "hello\n"


def test_spinner_on_custom_target_falls_back_to_plain() -> None:
    fmt = new(Format.SPINNER, make_options(TtyStringIO()))

    assert type(fmt) is PlainFormatter
    assert fmt.format is Format.PLAIN


def test_spinner_on_redirected_stdout_falls_back_to_plain(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(sys, "stdout", io.StringIO())

    fmt = new(Format.SPINNER)

    assert type(fmt) is PlainFormatter


def test_spinner_on_interactive_stdout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "stdout", TtyStringIO())

    fmt = new(Format.SPINNER)
    try:
        assert isinstance(fmt, SpinnerFormatter)
        assert fmt.format is Format.SPINNER
    finally:
        fmt.finish()


def _exercise(fmt: Formatter) -> None:
    fmt.print("starting ")
    fmt.println("up")
    with fmt.indent():
        fmt.error("a failure long enough to be wrapped onto a second line of output")
        fmt.success("done")
    fmt.spacer()
    fmt.table(["name", "count"], [["a", 1], ["bb", 22]])
    with fmt.progress("Working") as handle:
        handle.update(0.5)
    fmt.finish()


def test_spinner_fallback_is_byte_identical_to_plain() -> None:
    fallback_buffer = io.StringIO()
    plain_buffer = io.StringIO()

    _exercise(new(Format.SPINNER, make_options(fallback_buffer, max_line_length=40)))
    _exercise(new(Format.PLAIN, make_options(plain_buffer, max_line_length=40)))

    assert fallback_buffer.getvalue() == plain_buffer.getvalue()
    assert fallback_buffer.getvalue()
