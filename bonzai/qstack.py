"""A combined queue and stack with cheap operations at both ends."""

from __future__ import annotations

import json
from collections import deque
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")

__all__ = ["QS", "fields"]


def _dumps(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), sort_keys=True, ensure_ascii=False)


class QS(Generic[T]):
    """Queue stack: push and pop at the top, shift and unshift at the bottom.

    Items are kept bottom (oldest) to top (newest). ``scan`` and
    ``current`` provide a resettable cursor over the items.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: deque[T] = deque(items)
        self._cursor: Optional[int] = None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def push(self, *args: T) -> None:
        """Add items to the top, in the order given."""
        self._items.extend(args)

    def pop(self) -> Optional[T]:
        """Remove and return the top item, or None when empty."""
        if not self._items:
            return None
        return self._items.pop()

    def shift(self) -> Optional[T]:
        """Remove and return the bottom item, or None when empty."""
        if not self._items:
            return None
        return self._items.popleft()

    def unshift(self, *args: T) -> None:
        """Add items to the bottom, keeping the order given."""
        self._items.extendleft(reversed(args))

    def peek(self) -> Optional[T]:
        """Return the top item without removing it, or None when empty."""
        if not self._items:
            return None
        return self._items[-1]

    def items(self) -> list[T]:
        """Return the items as a list, oldest first."""
        return list(self._items)

    def scan(self) -> bool:
        """Advance the cursor; return False (and reset) past the last item."""
        if self._cursor is None:
            if not self._items:
                return False
            self._cursor = 0
            return True
        if self._cursor + 1 < len(self._items):
            self._cursor += 1
            return True
        self._cursor = None
        return False

    def current(self) -> Optional[T]:
        """Return the item under the cursor, or None if not scanning."""
        if self._cursor is None or self._cursor >= len(self._items):
            return None
        return self._items[self._cursor]

    def copy(self) -> "QS[T]":
        """Return an independent copy; values are not deep-copied."""
        clone: QS[T] = QS(self._items)
        clone._cursor = self._cursor
        return clone

    def to_json(self) -> str:
        """Return the items as a compact JSON array.

        Raises TypeError when an item cannot be represented in JSON.
        """
        return _dumps(list(self._items))

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f"QS({list(self._items)!r})"


def fields(text: str) -> QS[str]:
    """Split text on Unicode whitespace into a QS of fields."""
    return QS(text.split())