"""Fatal error types raised by the terminal layer."""

from __future__ import annotations


class KiloError(Exception):
    """Base class for fatal terminal errors.

    ``operation`` names the step that failed (``tcsetattr``, ``read``, ...)
    and is what gets reported to the user before exiting.
    """

    def __init__(self, operation: str, detail: str = "") -> None:
        self.operation = operation
        self.detail = detail
        super().__init__(f"{operation}: {detail}" if detail else operation)


class TerminalConfigurationError(KiloError):
    """Querying or applying terminal attributes failed."""


class ViewportDiscoveryError(KiloError):
    """Neither the window-size query nor the cursor probe produced a size."""


class MalformedResponseError(ViewportDiscoveryError):
    """The cursor position report did not look like ``ESC [ rows ; cols R``."""


class TerminalIOError(KiloError):
    """Reading from or writing to the terminal failed."""
