"""Terminal control: cbreak input, alternate screen, and key polling."""

from __future__ import annotations

import logging
import os
import select
import sys
import termios
import tty
from contextlib import contextmanager
from typing import Iterator, TextIO

log = logging.getLogger(__name__)

ENTER_SCREEN = "\033[?1049h\033[?25l"   # alternate screen, hide cursor
LEAVE_SCREEN = "\033[?25h\033[?1049l"


@contextmanager
def terminal_session(stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> Iterator[None]:
    """Take over the terminal for the chart; always hand it back on exit."""
    if not stdin.isatty():
        raise RuntimeError("netchart needs an interactive terminal on stdin")
    fd = stdin.fileno()
    saved = termios.tcgetattr(fd)
    tty.setcbreak(fd)
    stdout.write(ENTER_SCREEN)
    stdout.flush()
    log.debug("terminal session started on fd %d", fd)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        stdout.write(LEAVE_SCREEN)
        stdout.flush()
        log.debug("terminal restored")


class KeyReader:
    """Waits on stdin for one keypress with a timeout."""

    def __init__(self, stdin: TextIO = sys.stdin):
        self._fd = stdin.fileno()

    def wait(self, timeout: float) -> str | None:
        """Return the next key, or None if ``timeout`` seconds pass first."""
        ready, _, _ = select.select([self._fd], [], [], max(0.0, timeout))
        if not ready:
            return None
        data = os.read(self._fd, 1)
        if not data:
            raise EOFError("keyboard input closed")
        return data.decode("utf-8", errors="replace")
