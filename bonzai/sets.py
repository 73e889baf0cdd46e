"""Simple set operations over string forms of values."""

from __future__ import annotations

from typing import Any, Iterable

__all__ = ["minus"]


def minus(items: Iterable[Any], removed: Iterable[Any]) -> list[str]:
    """Return the string forms of items not found among removed, in order."""
    excluded = {str(r) for r in removed}
    return [s for s in map(str, items) if s not in excluded]