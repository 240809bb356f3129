"""Pin — a named terminal on a component."""

from __future__ import annotations

from typing import TYPE_CHECKING

from wirelang.core.node import Node
from wirelang.core.sequence import current_sequence
from wirelang.core.types import PinDirection

if TYPE_CHECKING:
    from wirelang.core.component import Component


class Pin:
    """A terminal bound to at most one node.

    ``connect_to`` always overwrites the previous binding, there is no
    implicit merge of the old and new nodes.
    """

    __slots__ = ("id", "name", "direction", "component", "_node")

    def __init__(
        self,
        name: str,
        direction: PinDirection | None = None,
        component: Component | None = None,
    ):
        self.id: str = current_sequence().next_pin_id()
        self.name = name
        self.direction = direction
        self.component = component
        self._node: Node | None = None

    @property
    def node(self) -> Node | None:
        return self._node

    @property
    def full_name(self) -> str:
        if self.component is None:
            return self.name
        return f"{self.component.label}.{self.name}"

    def connect_to(self, node: Node) -> None:
        self._node = node

    def disconnect(self) -> None:
        self._node = None

    def is_connected(self) -> bool:
        return self._node is not None

    def is_connected_to(self, node: Node) -> bool:
        return self._node is node

    def __repr__(self) -> str:
        target = f" -> {self._node}" if self._node is not None else ""
        return f"Pin({self.full_name}{target})"
