"""Node — a shared electrical connection point (net)."""

from __future__ import annotations

from wirelang.core.sequence import current_sequence

GROUND_NAMES = frozenset({"GND", "0"})


class Node:
    """A named or anonymous net. Pins bind to nodes, never to each other."""

    __slots__ = ("id", "name")

    def __init__(self, name: str | None = None):
        self.id: str = current_sequence().next_node_id()
        self.name: str | None = name

    def is_ground(self) -> bool:
        return self.name in GROUND_NAMES

    def __repr__(self) -> str:
        return f"Node({self.name if self.name is not None else self.id})"

    __str__ = __repr__


def create_ground_node() -> Node:
    """A fresh node named ``GND``."""
    return Node("GND")
