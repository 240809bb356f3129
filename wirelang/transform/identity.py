"""Identity overrides used by generated source.

Regenerated code calls these right after constructing each component and
node so the rebuilt schematic carries the document's original ids.
"""

from __future__ import annotations

from collections.abc import Mapping

from wirelang.core.component import Component
from wirelang.core.node import Node
from wirelang.core.pin import Pin


def apply_pin_identity(pin: Pin, pin_id: str) -> Pin:
    pin.id = pin_id
    return pin


def apply_node_identity(node: Node, node_id: str) -> Node:
    node.id = node_id
    return node


def apply_component_identity(
    component: Component,
    id: str | None = None,
    label: str | None = None,
    pin_ids: Mapping[str, str] | None = None,
) -> Component:
    """Overwrite a component's id, label and pin ids (keyed by pin name).

    Pin names the component does not have are ignored.
    """
    if id is not None:
        component.id = id
    if label is not None:
        component.label = label
    for pin_name, pin_id in (pin_ids or {}).items():
        pin = component.get_pin(pin_name)
        if pin is not None:
            apply_pin_identity(pin, pin_id)
    return component
