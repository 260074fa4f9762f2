# topmark:header:start
#
#   project      : polyfmt
#   file         : test_options.py
#   file_relpath : tests/test_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Options: defaults, validation and copy-on-write builders."""

from __future__ import annotations

import dataclasses
import io
import os
import shutil

import pytest

from polyfmt.color import ColorMode
from polyfmt.errors import ConstructionError
from polyfmt.factory import new
from polyfmt.formats import Format
from polyfmt.options import DEFAULT_MAX_LINE_LENGTH, MAX_PADDING, Options
from polyfmt.sink import OutputTarget
from tests.conftest import parametrize


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        shutil, "get_terminal_size", lambda fallback=(80, 24): os.terminal_size((123, 40))
    )

    options = Options()

    assert options.debug is False
    assert options.padding == 0
    assert options.color is ColorMode.AUTO
    assert options.max_line_length == 123
    assert options.output_target is OutputTarget.stdout()


def test_max_line_length_falls_back_when_width_is_unknown(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        shutil, "get_terminal_size", lambda fallback=(80, 24): os.terminal_size((0, 0))
    )

    assert Options().max_line_length == DEFAULT_MAX_LINE_LENGTH


def test_builders_return_updated_copies() -> None:
    base = Options(max_line_length=80)

    updated = base.with_debug(True).with_padding(4).with_max_line_length(40)

    assert (updated.debug, updated.padding, updated.max_line_length) == (True, 4, 40)
    assert (base.debug, base.padding, base.max_line_length) == (False, 0, 80)


def test_chaining_order_does_not_matter() -> None:
    base = Options(max_line_length=80)

    one = base.with_debug(True).with_padding(2).with_color(ColorMode.NEVER)
    other = base.with_color(ColorMode.NEVER).with_padding(2).with_debug(True)

    assert one == other


def test_options_are_frozen() -> None:
    options = Options(max_line_length=80)

    with pytest.raises(dataclasses.FrozenInstanceError):
        options.debug = True  # type: ignore[misc]


def test_wrapping_can_be_disabled() -> None:
    assert Options(max_line_length=80).with_max_line_length(None).max_line_length is None


@parametrize("value", [0, -1])
def test_non_positive_line_length_is_rejected(value: int) -> None:
    with pytest.raises(ConstructionError):
        Options(max_line_length=value)


@parametrize("value", [-1, MAX_PADDING + 1])
def test_out_of_range_padding_is_rejected(value: int) -> None:
    with pytest.raises(ConstructionError):
        Options(max_line_length=80).with_padding(value)


def test_padding_upper_bound_is_accepted() -> None:
    assert Options(max_line_length=80).with_padding(MAX_PADDING).padding == MAX_PADDING


def test_custom_output_target_wraps_raw_streams() -> None:
    stream = io.StringIO()

    options = Options(max_line_length=80).with_custom_output_target(stream)

    assert isinstance(options.output_target, OutputTarget)
    assert options.output_target.is_custom
    assert options.output_target.stream is stream


def test_raw_stream_passed_to_constructor_is_wrapped() -> None:
    stream = io.StringIO()

    options = Options(max_line_length=80, output_target=stream)  # type: ignore[arg-type]

    assert isinstance(options.output_target, OutputTarget)
    assert options.output_target.stream is stream


def test_shared_target_is_reused_as_is() -> None:
    target = OutputTarget(io.StringIO())

    options = Options(max_line_length=80).with_custom_output_target(target)

    assert options.output_target is target


def test_formatter_keeps_the_options_it_was_built_with() -> None:
    options = Options(max_line_length=80).with_custom_output_target(io.StringIO())
    fmt = new(Format.PLAIN, options)

    changed = options.with_debug(True)

    assert fmt.options is options
    assert fmt.options.debug is False
    assert changed.debug is True
