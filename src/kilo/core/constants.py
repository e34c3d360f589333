"""Escape sequences and fixed strings shared by the terminal layer."""

KILO_VERSION = "0.0.1"
WELCOME = f"Kilo editor -- version {KILO_VERSION}"

ESC = 0x1B

# Output sequences
HIDE_CURSOR = b"\x1b[?25l"
SHOW_CURSOR = b"\x1b[?25h"
CURSOR_HOME = b"\x1b[H"
CLEAR_LINE = b"\x1b[K"
CLEAR_SCREEN = b"\x1b[2J"
CURSOR_FAR_CORNER = b"\x1b[999C\x1b[999B"
QUERY_CURSOR = b"\x1b[6n"

ROW_FILL = b"~"
ROW_BREAK = b"\r\n"


def ctrl_key(ch: str) -> int:
    """Byte produced by pressing Ctrl together with ``ch``."""
    return ord(ch) & 0x1F


QUIT_KEY = ctrl_key("q")
