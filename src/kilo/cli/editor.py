"""Full-screen editor loop."""

from __future__ import annotations

import logging
from typing import Optional

from kilo.cli.core.terminal import Terminal
from kilo.core.state import EditorState
from kilo.edit.dispatch import handle_key
from kilo.render.terminal import TerminalRenderer

logger = logging.getLogger(__name__)


class EditorApp:
    """
    The editor: raw mode, a sized viewport, and a render/read/dispatch loop.

    Runs until Ctrl-Q. Terminal failures propagate as ``KiloError`` after
    raw mode has been restored.
    """

    def __init__(
        self,
        terminal: Optional[Terminal] = None,
        renderer: Optional[TerminalRenderer] = None,
    ) -> None:
        self.terminal = terminal or Terminal()
        self.renderer = renderer or TerminalRenderer()
        self.state: Optional[EditorState] = None
        self.running = False

    def init_editor(self) -> EditorState:
        """Size the viewport and put the cursor at the top-left."""
        size = self.terminal.size()
        logger.debug("Viewport is %dx%d", size.rows, size.cols)
        self.state = EditorState(screen_rows=size.rows, screen_cols=size.cols)
        return self.state

    def run(self) -> None:
        """Main application loop."""
        with self.terminal.raw_mode():
            self.init_editor()
            self.running = True
            while self.running:
                self.refresh_screen()
                self.process_keypress()

    def refresh_screen(self) -> None:
        """Draw the current state in one write."""
        frame = bytes(self.renderer.render(self.state))
        written = self.terminal.write(frame)
        if written < len(frame):
            logger.debug("Short frame write: %d of %d bytes", written, len(frame))

    def process_keypress(self) -> None:
        """Wait for one key and apply it."""
        event = self.terminal.reader.read_key()
        if not handle_key(self.state, event):
            self.terminal.clear()
            self.running = False


def run_editor() -> None:
    """Launch the editor on the controlling terminal."""
    EditorApp().run()
