"""Render the editor screen to terminal escape sequences."""

from __future__ import annotations

from kilo.core.constants import (
    CLEAR_LINE,
    CURSOR_HOME,
    HIDE_CURSOR,
    ROW_BREAK,
    ROW_FILL,
    SHOW_CURSOR,
    WELCOME,
)
from kilo.core.state import EditorState
from kilo.render.buffer import FrameBuffer


class TerminalRenderer:
    """
    Compose full-screen frames for an EditorState.

    Rows are drawn in place from the top-left and each one clears its own
    tail with ``ESC[K``, so the screen is never blanked between frames.
    """

    def __init__(self, welcome: str = WELCOME) -> None:
        self.welcome = welcome

    def render(self, state: EditorState) -> FrameBuffer:
        """Build one complete frame."""
        ab = FrameBuffer()
        ab.append(HIDE_CURSOR)
        ab.append(CURSOR_HOME)

        self.draw_rows(state, ab)

        ab.append(f"\x1b[{state.cy + 1};{state.cx + 1}H")
        ab.append(SHOW_CURSOR)
        return ab

    def draw_rows(self, state: EditorState, ab: FrameBuffer) -> None:
        """Fill every row with a tilde, with the banner a third of the way down."""
        for y in range(state.screen_rows):
            if y == state.screen_rows // 3:
                ab.append(self.banner_row(state.screen_cols))
            else:
                ab.append(ROW_FILL)

            ab.append(CLEAR_LINE)
            # No line break after the last row, it would scroll the screen
            if y < state.screen_rows - 1:
                ab.append(ROW_BREAK)

    def banner_row(self, cols: int) -> bytes:
        """Welcome text cut to ``cols`` and centered, first cell a tilde."""
        welcome = self.welcome.encode("utf-8")[:cols]
        padding = (cols - len(welcome)) // 2
        row = b""
        if padding:
            row += ROW_FILL
            padding -= 1
        return row + b" " * padding + welcome


def render_frame(state: EditorState) -> FrameBuffer:
    """Compose the default frame for ``state``."""
    return TerminalRenderer().render(state)
