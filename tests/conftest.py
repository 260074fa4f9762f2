# topmark:header:start
#
#   project      : polyfmt
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the polyfmt test suite.

Sets up typed wrappers around pytest decorators, verbose diagnostics logging,
and an autouse fixture that resets every piece of process-wide state between
tests (global formatter slot, indentation depth, color/format environment).

Notes:
    Build formatters over in-memory streams with `make_formatter`; it pins the
    line length and disables color so expected output is deterministic.
"""

from __future__ import annotations

import io
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from polyfmt.color import ColorMode
from polyfmt.config import logging
from polyfmt.factory import new
from polyfmt.indentation import IndentationState
from polyfmt.options import Options
from polyfmt.registry import FormatterRegistry

if TYPE_CHECKING:
    from polyfmt.formats import Format
    from polyfmt.formatters.base import Formatter

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]

#: Environment variables that change formatter or logging behavior.
POLYFMT_ENV_VARS: tuple[str, ...] = (
    "NO_COLOR",
    "FORCE_COLOR",
    "POLYFMT_FORMAT",
    "POLYFMT_LOG_LEVEL",
)


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.slow`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.slow)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.fixture`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.fixture`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    if len(args) == 1 and not kwargs and callable(args[0]):
        # bare ``@fixture`` usage: register the function directly
        return cast("Callable[[F], F]", pytest.fixture(args[0]))
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Log library diagnostics at TRACE level during test runs.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture(autouse=True)
def reset_polyfmt_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from each other and from the developer's shell.

    Clears the global formatter slot and the indentation stack before and
    after each test, and removes environment variables that influence color,
    format selection or logging.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove environment variables.

    Yields:
        None: Control to the test.
    """
    for name in POLYFMT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    FormatterRegistry.clear()
    IndentationState.reset()

    yield

    previous: Formatter | None = FormatterRegistry.clear()
    if previous is not None:
        previous.finish()
    IndentationState.reset()


class TtyStringIO(io.StringIO):
    """In-memory text stream that reports itself as an interactive terminal."""

    def isatty(self) -> bool:
        return True


def make_options(
    stream: io.StringIO | None = None,
    **overrides: Any,
) -> Options:
    """Return deterministic `Options` writing to ``stream``.

    Defaults: ``max_line_length=80`` and ``color=ColorMode.NEVER``; any
    `Options` field can be overridden by keyword.

    Args:
        stream (io.StringIO | None): Output stream; a new `io.StringIO` if None.
        **overrides (Any): `Options` field overrides.

    Returns:
        Options: The options.
    """
    values: dict[str, Any] = {"max_line_length": 80, "color": ColorMode.NEVER}
    values.update(overrides)
    return Options(output_target=stream if stream is not None else io.StringIO(), **values)


def make_formatter(
    output_format: Format,
    stream: io.StringIO | None = None,
    **overrides: Any,
) -> tuple[Formatter, io.StringIO]:
    """Build a formatter over an in-memory stream.

    Args:
        output_format (Format): The format to build.
        stream (io.StringIO | None): Output stream; a new `io.StringIO` if None.
        **overrides (Any): `Options` field overrides (see `make_options`).

    Returns:
        tuple[Formatter, io.StringIO]: The formatter and the stream it writes to.
    """
    buffer: io.StringIO = stream if stream is not None else io.StringIO()
    return new(output_format, make_options(buffer, **overrides)), buffer
