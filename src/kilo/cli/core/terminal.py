"""Low-level terminal operations - raw mode and viewport discovery."""

from __future__ import annotations

import atexit
import logging
import os
import re
import sys
import termios
from dataclasses import dataclass
from typing import Optional

from kilo.cli.core.input import InputReader
from kilo.core.constants import (
    CLEAR_SCREEN,
    CURSOR_FAR_CORNER,
    CURSOR_HOME,
    QUERY_CURSOR,
)
from kilo.errors import (
    MalformedResponseError,
    TerminalConfigurationError,
    TerminalIOError,
    ViewportDiscoveryError,
)

logger = logging.getLogger(__name__)

# termios attribute list indices
IFLAG, OFLAG, CFLAG, LFLAG, ISPEED, OSPEED, CC = range(7)

_CURSOR_REPORT_RE = re.compile(rb"\x1b\[(\d+);(\d+)")
_CURSOR_REPORT_MAX = 31


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class RawMode:
    """
    Guard that holds the terminal in raw mode.

    The original attributes are captured once on ``enable()`` and put back
    exactly once by ``disable()``, whichever exit path gets there first:
    leaving the ``with`` block, an exception, ``sys.exit`` or interpreter
    shutdown via ``atexit``.
    """

    def __init__(self, fd: Optional[int] = None) -> None:
        self._fd = sys.stdin.fileno() if fd is None else fd
        self._original: Optional[list] = None

    @property
    def active(self) -> bool:
        return self._original is not None

    def enable(self) -> None:
        """Capture the current attributes and switch to raw mode."""
        if self._original is not None:
            return
        try:
            original = termios.tcgetattr(self._fd)
        except termios.error as e:
            raise TerminalConfigurationError("tcgetattr", _describe(e)) from e
        self._original = original
        atexit.register(self.disable)

        raw = original[:CC] + [list(original[CC])]
        # No break signal, no CR-to-NL, no parity check, no 8th-bit strip,
        # no Ctrl-S/Ctrl-Q flow control
        raw[IFLAG] &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK
                        | termios.ISTRIP | termios.IXON)
        # "\n" is not translated to "\r\n" on output
        raw[OFLAG] &= ~termios.OPOST
        # No echo, byte-at-a-time, no Ctrl-C/Ctrl-Z/Ctrl-V
        raw[LFLAG] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN
                        | termios.ISIG)
        raw[CC][termios.VMIN] = 0
        raw[CC][termios.VTIME] = 1  # tenths of a second

        try:
            termios.tcsetattr(self._fd, termios.TCSAFLUSH, raw)
        except termios.error as e:
            # Attributes were never changed, nothing to restore
            self._original = None
            atexit.unregister(self.disable)
            raise TerminalConfigurationError("tcsetattr", _describe(e)) from e
        logger.debug("Raw mode enabled on fd %d", self._fd)

    def disable(self) -> None:
        """Restore the captured attributes. Safe to call more than once."""
        original, self._original = self._original, None
        if original is None:
            return
        atexit.unregister(self.disable)
        try:
            termios.tcsetattr(self._fd, termios.TCSAFLUSH, original)
        except termios.error as e:
            raise TerminalConfigurationError("tcsetattr", _describe(e)) from e
        logger.debug("Raw mode disabled on fd %d", self._fd)

    def __enter__(self) -> "RawMode":
        self.enable()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.disable()


class Terminal:
    """Terminal I/O abstraction bound to an input and an output descriptor."""

    def __init__(
        self,
        in_fd: Optional[int] = None,
        out_fd: Optional[int] = None,
        reader: Optional[InputReader] = None,
    ) -> None:
        self.in_fd = sys.stdin.fileno() if in_fd is None else in_fd
        self.out_fd = sys.stdout.fileno() if out_fd is None else out_fd
        self.reader = reader or InputReader(self.in_fd)

    def raw_mode(self) -> RawMode:
        """Guard for raw mode on the input descriptor."""
        return RawMode(self.in_fd)

    def write(self, data: bytes) -> int:
        """Write bytes to the terminal in a single call."""
        try:
            return os.write(self.out_fd, data)
        except OSError as e:
            raise TerminalIOError("write", e.strerror or str(e)) from e

    def clear(self) -> None:
        """Clear screen and move cursor to home."""
        self.write(CLEAR_SCREEN + CURSOR_HOME)

    def size(self) -> TerminalSize:
        """
        Get current terminal dimensions.

        Asks the output device first. When that fails or reports zero rows
        or columns, pushes the cursor to the bottom-right corner and reads
        back where it landed.
        """
        try:
            size = os.get_terminal_size(self.out_fd)
        except OSError as e:
            logger.debug("Window size query failed (%s), probing cursor", e)
        else:
            if size.columns > 0 and size.lines > 0:
                return TerminalSize(size.lines, size.columns)
            logger.debug(
                "Window size query reported %dx%d, probing cursor",
                size.lines, size.columns,
            )

        try:
            written = os.write(self.out_fd, CURSOR_FAR_CORNER)
        except OSError as e:
            raise ViewportDiscoveryError(
                "getWindowSize", e.strerror or str(e)
            ) from e
        if written != len(CURSOR_FAR_CORNER):
            raise ViewportDiscoveryError("getWindowSize", "cursor move was cut short")
        return self.cursor_position()

    def cursor_position(self) -> TerminalSize:
        """
        Ask the terminal where the cursor is (1-indexed row and column).

        Reads the ``ESC [ rows ; cols R`` report byte by byte, giving up
        after a bounded number of bytes or when input stops arriving.
        """
        try:
            written = os.write(self.out_fd, QUERY_CURSOR)
        except OSError as e:
            raise ViewportDiscoveryError(
                "getWindowSize", e.strerror or str(e)
            ) from e
        if written != len(QUERY_CURSOR):
            raise ViewportDiscoveryError("getWindowSize", "cursor query was cut short")

        buf = b""
        while len(buf) < _CURSOR_REPORT_MAX:
            c = self.reader.read_byte()
            if c is None or c == b"R":
                break
            buf += c

        match = _CURSOR_REPORT_RE.fullmatch(buf)
        if not match:
            raise MalformedResponseError(
                "getWindowSize", f"unexpected cursor report {buf!r}"
            )
        rows, cols = int(match.group(1)), int(match.group(2))
        if rows < 1 or cols < 1:
            raise MalformedResponseError(
                "getWindowSize", f"degenerate cursor report {buf!r}"
            )
        logger.debug("Cursor probe reported %dx%d", rows, cols)
        return TerminalSize(rows, cols)


def _describe(error: termios.error) -> str:
    args = error.args
    if len(args) >= 2:
        return str(args[1])
    return str(error)
