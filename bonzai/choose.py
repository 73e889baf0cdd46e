"""Let a terminal user pick one item from a numbered list."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")

__all__ = ["DEFAULT_PROMPT", "choose"]

DEFAULT_PROMPT = "#? "


def _parse(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def choose(choices: Sequence[T]) -> tuple[int, Optional[T]]:
    """Prompt until a valid number is entered; return (index, choice).

    Entering ``q`` returns (-1, None). Raises EOFError when input ends.
    """
    width = len(str(len(choices) + 1))
    for number, value in enumerate(choices, start=1):
        print(f"{number:>{width}}. {value}")
    while True:
        sys.stdout.write(DEFAULT_PROMPT)
        sys.stdout.flush()
        line = sys.stdin.readline()
        if not line:
            raise EOFError("no more input")
        response = line.rstrip("\r\n")
        if response == "q":
            return -1, None
        n = _parse(response)
        if 0 < n < len(choices) + 1:
            return n - 1, choices[n - 1]