"""Core types - editor state and terminal constants."""

from kilo.core.state import EditorState
from kilo.core.constants import KILO_VERSION, WELCOME, QUIT_KEY, ctrl_key

__all__ = [
    "EditorState",
    "KILO_VERSION",
    "WELCOME",
    "QUIT_KEY",
    "ctrl_key",
]
