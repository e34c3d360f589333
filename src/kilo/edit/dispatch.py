"""Map key events onto cursor movement."""

from __future__ import annotations

from kilo.cli.core.input import Key, KeyEvent
from kilo.core.constants import QUIT_KEY
from kilo.core.state import EditorState

ARROW_KEYS = (Key.ARROW_UP, Key.ARROW_DOWN, Key.ARROW_LEFT, Key.ARROW_RIGHT)


def move_cursor(state: EditorState, key: Key) -> None:
    """Move one cell in the arrow's direction, stopping at the viewport edge."""
    if key == Key.ARROW_LEFT:
        if state.cx != 0:
            state.cx -= 1
    elif key == Key.ARROW_RIGHT:
        if state.cx != state.last_col:
            state.cx += 1
    elif key == Key.ARROW_UP:
        if state.cy != 0:
            state.cy -= 1
    elif key == Key.ARROW_DOWN:
        if state.cy != state.last_row:
            state.cy += 1


def is_quit(event: KeyEvent) -> bool:
    return event.char == QUIT_KEY


def handle_key(state: EditorState, event: KeyEvent) -> bool:
    """
    Apply one key event to ``state``.

    Returns False when the event asks the editor to quit. Keys with no
    binding are ignored.
    """
    if is_quit(event):
        return False

    key = event.key
    if key == Key.HOME:
        state.cx = 0
    elif key == Key.END:
        state.cx = state.last_col
    elif key in (Key.PAGE_UP, Key.PAGE_DOWN):
        direction = Key.ARROW_UP if key == Key.PAGE_UP else Key.ARROW_DOWN
        for _ in range(state.screen_rows):
            move_cursor(state, direction)
    elif key in ARROW_KEYS:
        move_cursor(state, key)
    return True
