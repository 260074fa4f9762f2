# topmark:header:start
#
#   project      : polyfmt
#   file         : spinner.py
#   file_relpath : src/polyfmt/formatters/spinner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Spinner formatter for interactive terminals.

Messages render like the Plain formatter, above a live spinner line that a
background thread repaints every `FRAME_INTERVAL` seconds:

- ``print`` and ``progress`` set the spinner text and start spinning
  (``IDLE`` -> ``SPINNING``).
- Every other message clears the spinner line, prints its block, and lets the
  spinner repaint underneath.
- ``progress(...).finish()`` stops the redraw thread, clears the line and
  prints a success line (back to ``IDLE``).
- ``finish()`` stops the redraw thread, waits for it to exit and clears the
  line (``STOPPED``). Afterwards every call behaves like the Plain formatter.

Both the redraw thread and foreground calls write under the output target's
lock, so a repaint never lands in the middle of a rendered block. The redraw
task never takes the formatter lock, which keeps `finish` (called with the
formatter lock held) free to join it.

Notes:
    The factory only builds this formatter for the process standard output
    when it is a terminal; see `polyfmt.factory.new`.
"""

from __future__ import annotations

import threading
import weakref
from enum import Enum
from typing import TYPE_CHECKING, Final

from polyfmt.config.logging import get_logger
from polyfmt.formats import Format
from polyfmt.formatters.plain import PlainFormatter
from polyfmt.kinds import MessageKind, styled
from polyfmt.message import render_text

if TYPE_CHECKING:
    from polyfmt.formatters.base import ProgressHandle
    from polyfmt.options import Options
    from polyfmt.sink import OutputTarget

logger = get_logger(__name__)

FRAMES: Final[tuple[str, ...]] = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")
FRAME_INTERVAL: Final[float] = 0.12
CLEAR_LINE: Final[str] = "\r\x1b[2K"


class SpinnerState(str, Enum):
    """Lifecycle of a spinner formatter."""

    IDLE = "idle"
    SPINNING = "spinning"
    STOPPED = "stopped"


class _RedrawTask:
    """Background thread repainting the spinner line.

    The task only knows the output target, never the formatter, so the
    formatter can be garbage collected (and the task stopped by its finalizer)
    while the thread runs.
    """

    def __init__(self, target: OutputTarget, *, prefix: str, color: bool) -> None:
        self._target = target
        self._prefix = prefix
        self._color = color
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self._frame: int = 0
        self.text: str = ""

    @property
    def running(self) -> bool:
        return self._thread is not None

    def start(self) -> None:
        if self._thread is not None:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._spin, name="polyfmt-spinner", daemon=True)
        self._thread.start()
        logger.trace("Spinner redraw task started")

    def stop(self) -> None:
        """Stop the thread, wait for it to exit, then clear the spinner line.

        Must not be called while holding the output target's lock.
        """
        thread: threading.Thread | None = self._thread
        if thread is None:
            return
        self._stop.set()
        if thread is not threading.current_thread():
            thread.join()
        self._thread = None
        self._target.write(CLEAR_LINE, flush=True)
        logger.trace("Spinner redraw task stopped")

    def paint(self) -> None:
        """Repaint the spinner line with the current frame and text."""
        frame: str = styled(FRAMES[self._frame % len(FRAMES)], self._color, fg="cyan")
        self._target.write(f"{CLEAR_LINE}{self._prefix}{frame} {self.text}", flush=True)

    def _spin(self) -> None:
        while not self._stop.is_set():
            with self._target.lock:
                if self._stop.is_set():
                    break
                self.paint()
            self._frame += 1
            self._stop.wait(FRAME_INTERVAL)


class SpinnerFormatter(PlainFormatter):
    """Formatter with a live spinner line."""

    format = Format.SPINNER

    def __init__(self, options: Options) -> None:
        super().__init__(options)
        self.state: SpinnerState = SpinnerState.IDLE
        self._paused: bool = False
        self._task = _RedrawTask(
            self.target,
            prefix=" " * options.padding,
            color=self.color,
        )
        self._finalizer = weakref.finalize(self, self._task.stop)

    @property
    def spinning(self) -> bool:
        """True while the redraw thread is running."""
        return self._task.running

    # --- write path ---

    def _emit(self, text: str, *, flush: bool = False) -> None:
        if not text:
            return
        if self.state is not SpinnerState.SPINNING or not self._task.running:
            super()._emit(text, flush=flush)
            return
        with self.target.lock:
            self.target.write(CLEAR_LINE + text)
            self._at_line_start = text.endswith("\n")
            if self._at_line_start:
                self._task.paint()

    # --- spinner control ---

    def _spin(self, text: str) -> None:
        self._task.text = text.splitlines()[0] if text else ""
        if self.state is SpinnerState.STOPPED:
            return
        self.state = SpinnerState.SPINNING
        if not self._paused:
            self._task.start()

    def _settle(self) -> None:
        """Stop spinning and return to ``IDLE``."""
        self._task.stop()
        if self.state is SpinnerState.SPINNING:
            self.state = SpinnerState.IDLE

    def pause(self) -> None:
        """Stop repainting until `resume`; the spinner text is kept."""
        with self._lock:
            if self._paused:
                return
            self._paused = True
            self._task.stop()

    def resume(self) -> None:
        """Restart repainting if a spinner was active when paused."""
        with self._lock:
            if not self._paused:
                return
            self._paused = False
            if self.state is SpinnerState.SPINNING:
                self._task.start()

    def _finish(self) -> None:
        self._task.stop()
        self.state = SpinnerState.STOPPED

    # --- rendering hooks ---

    def _print(self, msg: object) -> None:
        if self.state is SpinnerState.STOPPED:
            super()._print(msg)
            return
        self._spin(render_text(msg))

    def _question(self, msg: object) -> str:
        was_running: bool = self._task.running
        self._task.stop()
        try:
            return super()._question(msg)
        finally:
            if was_running:
                self._task.start()

    def _progress_start(self, handle: ProgressHandle) -> None:
        if self.state is SpinnerState.STOPPED:
            super()._progress_start(handle)
            return
        self._spin(handle.render())

    def _progress_update(self, handle: ProgressHandle) -> None:
        if self.state is SpinnerState.STOPPED:
            return
        self._task.text = handle.render()

    def _progress_finish(self, handle: ProgressHandle, message: str) -> None:
        if self.state is not SpinnerState.STOPPED:
            self._settle()
        self._message(MessageKind.SUCCESS, message)
