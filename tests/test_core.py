"""Tests for editor state and key dispatch (no terminal needed)."""

import pytest

from kilo.cli.core.input import Key, KeyEvent
from kilo.core.constants import QUIT_KEY, ctrl_key
from kilo.core.state import EditorState
from kilo.edit.dispatch import handle_key, move_cursor


def key(k: Key) -> KeyEvent:
    return KeyEvent(key=k)


class TestEditorState:
    """Tests for EditorState."""

    def test_starts_at_origin(self) -> None:
        state = EditorState(screen_rows=24, screen_cols=80)
        assert (state.cy, state.cx) == (0, 0)

    @pytest.mark.parametrize("rows,cols", [(1, 1), (1, 80), (24, 1), (200, 300)])
    def test_cursor_inside_viewport(self, rows: int, cols: int) -> None:
        state = EditorState(screen_rows=rows, screen_cols=cols)
        assert 0 <= state.cx < cols
        assert 0 <= state.cy < rows

    @pytest.mark.parametrize("rows,cols", [(0, 80), (24, 0), (-1, 10)])
    def test_rejects_empty_viewport(self, rows: int, cols: int) -> None:
        with pytest.raises(ValueError):
            EditorState(screen_rows=rows, screen_cols=cols)

    def test_clamps_initial_cursor(self) -> None:
        state = EditorState(screen_rows=5, screen_cols=10, cx=50, cy=-3)
        assert state.cx == 9
        assert state.cy == 0


class TestCtrlKey:

    def test_ctrl_q(self) -> None:
        assert ctrl_key("q") == 0x11
        assert QUIT_KEY == 0x11


class TestMoveCursor:
    """Arrow movement is clamped at every edge."""

    def test_left_at_edge(self) -> None:
        state = EditorState(screen_rows=24, screen_cols=80)
        move_cursor(state, Key.ARROW_LEFT)
        assert state.cx == 0

    def test_right_at_edge(self) -> None:
        state = EditorState(screen_rows=24, screen_cols=80, cx=79)
        move_cursor(state, Key.ARROW_RIGHT)
        assert state.cx == 79

    def test_up_at_edge(self) -> None:
        state = EditorState(screen_rows=24, screen_cols=80)
        move_cursor(state, Key.ARROW_UP)
        assert state.cy == 0

    def test_down_at_edge(self) -> None:
        state = EditorState(screen_rows=24, screen_cols=80, cy=23)
        move_cursor(state, Key.ARROW_DOWN)
        assert state.cy == 23

    def test_moves_one_cell(self) -> None:
        state = EditorState(screen_rows=24, screen_cols=80, cx=10, cy=5)
        move_cursor(state, Key.ARROW_RIGHT)
        move_cursor(state, Key.ARROW_DOWN)
        assert (state.cy, state.cx) == (6, 11)
        move_cursor(state, Key.ARROW_LEFT)
        move_cursor(state, Key.ARROW_UP)
        assert (state.cy, state.cx) == (5, 10)

    def test_single_cell_viewport(self) -> None:
        state = EditorState(screen_rows=1, screen_cols=1)
        for k in (Key.ARROW_UP, Key.ARROW_DOWN, Key.ARROW_LEFT, Key.ARROW_RIGHT):
            move_cursor(state, k)
            assert (state.cy, state.cx) == (0, 0)


class TestHandleKey:
    """Tests for key dispatch."""

    def test_arrow_up_at_origin(self) -> None:
        state = EditorState(screen_rows=24, screen_cols=80)
        assert handle_key(state, key(Key.ARROW_UP)) is True
        assert (state.cy, state.cx) == (0, 0)

    def test_end_moves_to_last_column(self) -> None:
        state = EditorState(screen_rows=24, screen_cols=80, cx=10, cy=5)
        handle_key(state, key(Key.END))
        assert (state.cy, state.cx) == (5, 79)

    def test_home_moves_to_first_column(self) -> None:
        state = EditorState(screen_rows=24, screen_cols=80, cx=42, cy=7)
        handle_key(state, key(Key.HOME))
        assert (state.cy, state.cx) == (7, 0)

    @pytest.mark.parametrize("rows", [1, 2, 24, 100])
    def test_page_down_lands_on_last_row(self, rows: int) -> None:
        state = EditorState(screen_rows=rows, screen_cols=80)
        handle_key(state, key(Key.PAGE_DOWN))
        assert state.cy == rows - 1

    @pytest.mark.parametrize("rows", [1, 2, 24, 100])
    def test_page_up_lands_on_first_row(self, rows: int) -> None:
        state = EditorState(screen_rows=rows, screen_cols=80, cy=rows - 1)
        handle_key(state, key(Key.PAGE_UP))
        assert state.cy == 0

    def test_page_keys_leave_column_alone(self) -> None:
        state = EditorState(screen_rows=24, screen_cols=80, cx=33, cy=12)
        handle_key(state, key(Key.PAGE_DOWN))
        assert state.cx == 33

    def test_quit(self) -> None:
        state = EditorState(screen_rows=24, screen_cols=80, cx=3, cy=4)
        assert handle_key(state, KeyEvent(char=0x11, raw=b"\x11")) is False
        assert (state.cy, state.cx) == (4, 3)

    @pytest.mark.parametrize("event", [
        KeyEvent(char=ord("q"), raw=b"q"),
        KeyEvent(char=0x7F, raw=b"\x7f"),
        KeyEvent(key=Key.ESCAPE, raw=b"\x1b"),
        KeyEvent(key=Key.DELETE, raw=b"\x1b[3~"),
    ])
    def test_unbound_keys_are_ignored(self, event: KeyEvent) -> None:
        state = EditorState(screen_rows=24, screen_cols=80, cx=3, cy=4)
        assert handle_key(state, event) is True
        assert (state.cy, state.cx) == (4, 3)
