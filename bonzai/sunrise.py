"""A terminal animation cycling smoothly through background colours."""

from __future__ import annotations

import math
import sys
import time
from typing import Iterator, Optional, Sequence

from bonzai.anim import simple_animation_screen
from bonzai.cmd import Cmd
from bonzai.comp import CMDS

__all__ = ["CMD", "colors", "sunrise", "main"]

P = 3.14
STEP = 0.04
DEFAULT_SPEED_MS = 10


def colors(step: float = STEP) -> Iterator[tuple[int, int, int]]:
    """Yield an endless sequence of (r, g, b), advancing the phase by step."""
    i = 0.0
    while True:
        i += step
        yield (
            int(128 + 127 * math.sin(i)),
            int(128 + 127 * math.sin(i + P * (1.0 / 3))),
            int(128 + 127 * math.sin(i + P * (2.0 / 3))),
        )


def sunrise(speed: float) -> None:
    """Fill the terminal with colour lines forever, pausing speed seconds each."""
    simple_animation_screen()
    for r, g, b in colors():
        sys.stdout.write(f"\033[48;2;{r};{g};{b}m\n")
        sys.stdout.flush()
        time.sleep(speed)


def _parse_ms(text: str) -> int:
    try:
        return int(text, 10)
    except ValueError:
        return 0


def _call(x: Cmd, *args: str) -> None:
    ms = _parse_ms(args[0]) if args else DEFAULT_SPEED_MS
    sunrise(max(ms, 0) / 1000)


CMD = Cmd(
    name="sunrise",
    vers="v0.1.0",
    short="showcase all colors of terminal",
    comp=CMDS,
    max_args=1,
    call=_call,
)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Run the sunrise command; the optional argument is the delay in ms."""
    args = sys.argv[1:] if argv is None else list(argv)
    CMD.run(*args)