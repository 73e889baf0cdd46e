"""Terminal setup for simple full-screen text animations."""

from __future__ import annotations

import signal
import sys

__all__ = [
    "CLEAR",
    "ALT_BUF_ON",
    "ALT_BUF_OFF",
    "CURSOR_ON",
    "CURSOR_OFF",
    "simple_animation_screen",
]

CLEAR = "\033[H\033[2J"
ALT_BUF_ON = "\033[?1049h"
ALT_BUF_OFF = "\033[?1049l"
CURSOR_ON = "\033[?25h"
CURSOR_OFF = "\033[?25l"


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _restore(signum, frame) -> None:
    _write(CLEAR + ALT_BUF_OFF + CURSOR_ON)
    raise SystemExit(0)


def simple_animation_screen() -> None:
    """Switch to the alternate screen with the cursor hidden.

    Interrupt and terminate signals restore the screen and cursor and
    end the program.
    """
    for signum in (signal.SIGINT, signal.SIGTERM):
        signal.signal(signum, _restore)
    _write(CURSOR_OFF + ALT_BUF_ON)