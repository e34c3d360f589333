"""Pytest fixtures providing pipes and pseudo-terminals to drive the terminal layer."""

import fcntl
import os
import pty
import select
import struct
import termios
from typing import Iterator

import pytest


def set_winsize(fd: int, rows: int, cols: int) -> None:
    """Set the window size reported by a pty."""
    fcntl.ioctl(fd, termios.TIOCSWINSZ, struct.pack("HHHH", rows, cols, 0, 0))


def drain(fd: int, timeout: float = 0.5) -> bytes:
    """Read everything that arrives on a non-blocking descriptor until it goes quiet."""
    chunks: list[bytes] = []
    while True:
        ready, _, _ = select.select([fd], [], [], timeout if not chunks else 0.05)
        if not ready:
            break
        try:
            chunk = os.read(fd, 65536)
        except (BlockingIOError, OSError):
            break
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks)


@pytest.fixture
def pipe() -> Iterator[tuple[int, int]]:
    """A (read_fd, write_fd) pair, closed after the test."""
    r, w = os.pipe()
    yield r, w
    for fd in (r, w):
        try:
            os.close(fd)
        except OSError:
            pass


@pytest.fixture
def out_pipe() -> Iterator[tuple[int, int]]:
    """A second pipe for capturing terminal output; read end is non-blocking."""
    r, w = os.pipe()
    os.set_blocking(r, False)
    yield r, w
    for fd in (r, w):
        try:
            os.close(fd)
        except OSError:
            pass


@pytest.fixture
def pty_pair() -> Iterator[tuple[int, int]]:
    """A (master_fd, slave_fd) pseudo-terminal; master is non-blocking."""
    master, slave = pty.openpty()
    os.set_blocking(master, False)
    yield master, slave
    for fd in (master, slave):
        try:
            os.close(fd)
        except OSError:
            pass
