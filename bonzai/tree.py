"""Rooted node tree with integer-typed nodes."""

from __future__ import annotations

import json
from collections import deque
from typing import Any, Callable, Optional

__all__ = ["Node"]


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (bool, int, float, str, list, dict, tuple)):
        return not value
    return False


def _dumps(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), sort_keys=True, ensure_ascii=False)


class Node:
    """A tree node with an integer type ``t`` and an optional value ``v``.

    A node either holds a value (a leaf) or other nodes under it; having
    both works but is not supported by the JSON form.
    """

    def __init__(self, t: int = 0, v: Any = None) -> None:
        self.t = t
        self.v = v
        self.parent: Optional[Node] = None
        self._children: list[Node] = []

    @property
    def count(self) -> int:
        """Number of nodes directly under this one."""
        return len(self._children)

    def init(self) -> None:
        """Reset type, value and children to the empty state."""
        self.t = 0
        self.v = None
        self._children = []

    def nodes(self) -> list[Node]:
        """Return the nodes directly under this one, in order."""
        return list(self._children)

    def add(self, t: int, v: Any) -> Node:
        """Create a node with type and value, append it and return it."""
        node = Node(t, v)
        self.append(node)
        return node

    def append(self, node: Node) -> None:
        """Attach an existing node as the last one under this node."""
        node.parent = self
        self._children.append(node)

    def cut(self) -> Node:
        """Detach this node from its parent and return it."""
        if self.parent is not None:
            siblings = self.parent._children
            for index, sibling in enumerate(siblings):
                if sibling is self:
                    del siblings[index]
                    break
        self.parent = None
        return self

    def take(self, source: Node) -> None:
        """Move all nodes under source to the end of this node's nodes."""
        moved = source._children
        source._children = []
        for node in moved:
            node.parent = self
        self._children.extend(moved)

    def morph(self, other: Node) -> None:
        """Become a copy of other's type, value, parent and nodes in place."""
        self.init()
        self.t = other.t
        self.v = other.v
        self.parent = other.parent
        self._children = list(other._children)

    def copy(self) -> Node:
        """Return a structural copy of this subtree; values are shared."""
        clone = Node(self.t, self.v)
        for child in self._children:
            clone.append(child.copy())
        return clone

    def walk_levels(self, do: Callable[[Node], Any]) -> None:
        """Call do on every node, breadth first."""
        queue: deque[Node] = deque([self])
        while queue:
            cur = queue.popleft()
            queue.extend(cur._children)
            do(cur)

    def walk_deep_pre(self, do: Callable[[Node], Any]) -> None:
        """Call do on every node, depth first in preorder."""
        stack: deque[Node] = deque([self])
        while stack:
            cur = stack.popleft()
            stack.extendleft(reversed(cur._children))
            do(cur)

    def to_json(self) -> str:
        """Return the compact JSON form {"T":..,"V":..,"N":[..]}.

        Raises TypeError when a value cannot be represented in JSON.
        """
        parts = [f'"T":{_dumps(self.t)}']
        if not _is_empty(self.v):
            parts.append(f'"V":{_dumps(self.v)}')
        if self._children:
            inner = ",".join(child.to_json() for child in self._children)
            parts.append(f'"N":[{inner}]')
        return "{" + ",".join(parts) + "}"

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return f"Node(t={self.t!r}, v={self.v!r}, count={self.count})"