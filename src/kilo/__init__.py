"""
kilo: terminal core for a tiny full-screen editor

Puts the terminal into raw mode, decodes keypresses (arrows, Home/End,
Page Up/Down, Delete) and redraws the whole screen each cycle in a single
write.

Quick Start:
    $ kilo            # Ctrl-Q quits

Library use:
    >>> from kilo import EditorState, render_frame
    >>> frame = render_frame(EditorState(screen_rows=24, screen_cols=80))
    >>> len(bytes(frame)) > 0
    True
"""

__version__ = "0.0.1"

from kilo.core.state import EditorState
from kilo.core.constants import KILO_VERSION, WELCOME
from kilo.errors import (
    KiloError,
    TerminalConfigurationError,
    ViewportDiscoveryError,
    MalformedResponseError,
    TerminalIOError,
)
from kilo.render.buffer import FrameBuffer
from kilo.render.terminal import TerminalRenderer, render_frame
from kilo.edit.dispatch import handle_key

__all__ = [
    "__version__",
    # State
    "EditorState",
    "KILO_VERSION",
    "WELCOME",
    # Errors
    "KiloError",
    "TerminalConfigurationError",
    "ViewportDiscoveryError",
    "MalformedResponseError",
    "TerminalIOError",
    # Rendering
    "FrameBuffer",
    "TerminalRenderer",
    "render_frame",
    # Input
    "handle_key",
]
