"""Core TUI infrastructure - terminal modes, sizing, input decoding."""

from kilo.cli.core.terminal import RawMode, Terminal, TerminalSize
from kilo.cli.core.input import InputReader, KeyEvent, Key

__all__ = [
    "RawMode",
    "Terminal",
    "TerminalSize",
    "InputReader",
    "KeyEvent",
    "Key",
]
