"""FrameBuffer - one frame of terminal output, written in a single call."""

from __future__ import annotations

import logging
from typing import Union

logger = logging.getLogger(__name__)


class FrameBuffer:
    """
    Append-only byte accumulator for a single frame.

    Everything drawn in one refresh goes here first and reaches the
    terminal through exactly one ``os.write``, so the user never sees a
    half-drawn screen.
    """

    def __init__(self) -> None:
        self._data = bytearray()

    def append(self, data: Union[bytes, str]) -> None:
        """Copy ``data`` onto the end of the frame.

        An append that cannot be allocated is dropped; a degraded frame is
        better than losing the terminal.
        """
        if isinstance(data, str):
            data = data.encode("utf-8")
        try:
            self._data += data
        except MemoryError:
            logger.debug("Dropped %d bytes from frame", len(data))

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)
