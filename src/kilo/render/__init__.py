"""Frame composition for the editor screen."""

from kilo.render.buffer import FrameBuffer
from kilo.render.terminal import TerminalRenderer, render_frame

__all__ = ["FrameBuffer", "TerminalRenderer", "render_frame"]
