# src/subnetcalc/terminal.py
"""
Raw keyboard input for the full-screen UI.

raw_mode() is the scoped acquisition of the tty: it saves the current
attributes, switches stdin to raw input and always puts the saved attributes
back. KeyReader turns the bytes that arrive into Key events, one per poll().
"""
from __future__ import annotations

import codecs
import os
import select
import termios
import tty
from collections import deque
from contextlib import contextmanager
from typing import Iterator, Optional

from .keys import Key, decode_keys
from .logging import get_logger

log = get_logger()

READ_SIZE = 64


class TerminalError(RuntimeError):
    pass


@contextmanager
def raw_mode(fd: int) -> Iterator[None]:
    try:
        saved = termios.tcgetattr(fd)
    except termios.error as e:
        raise TerminalError(f"stdin is not a terminal: {e}") from e

    try:
        tty.setraw(fd, termios.TCSANOW)
        attrs = termios.tcgetattr(fd)
        # keep output post-processing so "\n" from the renderer still returns the carriage
        attrs[1] |= termios.OPOST | termios.ONLCR
        termios.tcsetattr(fd, termios.TCSANOW, attrs)
    except termios.error as e:
        termios.tcsetattr(fd, termios.TCSANOW, saved)
        raise TerminalError(f"Unable to enter raw mode: {e}") from e

    log.debug("Terminal switched to raw mode")
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSAFLUSH, saved)
        log.debug("Terminal attributes restored")


class KeyReader:
    def __init__(self, fd: int):
        self.fd = fd
        self._pending: deque[Key] = deque()
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def poll(self, timeout: float) -> Optional[Key]:
        """Next key event, or None if nothing arrived within `timeout` seconds."""
        if self._pending:
            return self._pending.popleft()
        ready, _, _ = select.select([self.fd], [], [], timeout)
        if not ready:
            return None
        data = os.read(self.fd, READ_SIZE)
        if not data:
            raise TerminalError("stdin closed")
        self._pending.extend(decode_keys(self._decoder.decode(data)))
        if not self._pending:
            return None
        return self._pending.popleft()
