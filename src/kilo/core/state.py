"""EditorState - cursor position within the viewport."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class EditorState:
    """
    Cursor position and viewport dimensions for one editor session.

    ``cx``/``cy`` are 0-indexed and always stay inside the viewport:
    ``0 <= cx < screen_cols`` and ``0 <= cy < screen_rows``.
    """
    screen_rows: int
    screen_cols: int
    cx: int = 0
    cy: int = 0

    def __post_init__(self) -> None:
        if self.screen_rows < 1 or self.screen_cols < 1:
            raise ValueError(
                f"Viewport must be at least 1x1, got {self.screen_rows}x{self.screen_cols}"
            )
        self.cx = min(max(self.cx, 0), self.screen_cols - 1)
        self.cy = min(max(self.cy, 0), self.screen_rows - 1)

    @property
    def last_col(self) -> int:
        return self.screen_cols - 1

    @property
    def last_row(self) -> int:
        return self.screen_rows - 1
