"""Input dispatch - key events to editor actions."""

from kilo.edit.dispatch import handle_key, move_cursor, is_quit

__all__ = ["handle_key", "move_cursor", "is_quit"]
