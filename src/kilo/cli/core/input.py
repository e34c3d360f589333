"""Keyboard input decoding with event abstraction."""

from __future__ import annotations

import logging
import os
import select
import sys
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from kilo.core.constants import ESC
from kilo.errors import TerminalIOError

logger = logging.getLogger(__name__)


class Key(Enum):
    """Named key constants."""
    ARROW_UP = auto()
    ARROW_DOWN = auto()
    ARROW_LEFT = auto()
    ARROW_RIGHT = auto()
    DELETE = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    ESCAPE = auto()


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event.

    Exactly one of ``key`` (a named key) or ``char`` (a literal byte) is set.
    """
    key: Optional[Key] = None
    char: Optional[int] = None
    raw: bytes = b""

    @property
    def is_char(self) -> bool:
        """Check if this is a literal byte rather than a named key."""
        return self.char is not None and self.key is None


# Escape sequence mappings (without the \x1b prefix)
TILDE_SEQUENCES: dict[bytes, Key] = {
    b"1": Key.HOME,
    b"3": Key.DELETE,
    b"4": Key.END,
    b"5": Key.PAGE_UP,
    b"6": Key.PAGE_DOWN,
    b"7": Key.HOME,
    b"8": Key.END,
}

CSI_SEQUENCES: dict[bytes, Key] = {
    b"A": Key.ARROW_UP,
    b"B": Key.ARROW_DOWN,
    b"C": Key.ARROW_RIGHT,
    b"D": Key.ARROW_LEFT,
    b"H": Key.HOME,
    b"F": Key.END,
}

SS3_SEQUENCES: dict[bytes, Key] = {
    b"H": Key.HOME,
    b"F": Key.END,
}


class InputReader:
    """
    Byte-at-a-time keyboard reader.

    Uses os.read() on the raw descriptor so Python's buffering never holds
    back the tail of an escape sequence. Each read waits at most
    ``timeout`` seconds, mirroring the 100ms VTIME configured for raw mode;
    ``select`` keeps the same bound on descriptors that are not terminals.
    """

    def __init__(self, fd: Optional[int] = None, timeout: float = 0.1) -> None:
        self._fd = sys.stdin.fileno() if fd is None else fd
        self._timeout = timeout

    def read_byte(self) -> Optional[bytes]:
        """
        Read one byte, waiting at most one read window.

        Returns None when nothing arrived in time.
        """
        try:
            ready, _, _ = select.select([self._fd], [], [], self._timeout)
            if not ready:
                return None
            data = os.read(self._fd, 1)
        except (BlockingIOError, InterruptedError):
            return None
        except OSError as e:
            raise TerminalIOError("read", e.strerror or str(e)) from e
        return data or None

    def read_key(self) -> KeyEvent:
        """Block until a byte arrives and decode it into a key event."""
        c = self.read_byte()
        while c is None:
            c = self.read_byte()

        if c[0] != ESC:
            return KeyEvent(char=c[0], raw=c)
        return self._read_escape()

    def _read_escape(self) -> KeyEvent:
        """Decode the bytes following an escape. Never fails."""
        raw = bytes([ESC])
        escape = KeyEvent(key=Key.ESCAPE, raw=raw)

        first = self.read_byte()
        if first is None:
            return escape
        raw += first
        second = self.read_byte()
        if second is None:
            return KeyEvent(key=Key.ESCAPE, raw=raw)
        raw += second

        key: Optional[Key] = None
        if first == b"[":
            if second.isdigit():
                third = self.read_byte()
                if third is None:
                    return KeyEvent(key=Key.ESCAPE, raw=raw)
                raw += third
                if third == b"~":
                    key = TILDE_SEQUENCES.get(second)
            else:
                key = CSI_SEQUENCES.get(second)
        elif first == b"O":
            key = SS3_SEQUENCES.get(second)

        if key is None:
            logger.debug("Unrecognized escape sequence %r", raw)
            key = Key.ESCAPE
        return KeyEvent(key=key, raw=raw)
