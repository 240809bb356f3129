"""Schematic -> portable document.

A pure, order-preserving projection: nodes and components appear in
container order, pins in declaration order. Nothing in the schematic is
modified.
"""

from __future__ import annotations

import logging
from typing import Any

from wirelang.core.component import Component
from wirelang.core.schematic import Schematic
from wirelang.schemas.db import (
    ComponentParams,
    DbComponent,
    DbNode,
    DbPin,
    WireLangDb,
)

logger = logging.getLogger(__name__)


def _component_record(component: Component) -> DbComponent:
    pins = [
        DbPin(
            id=pin.id,
            name=pin.name,
            direction=pin.direction,
            node_id=pin.node.id if pin.node is not None else None,
        )
        for pin in component.pins
    ]
    return DbComponent(
        id=component.id,
        type=component.type.value,
        label=component.label,
        params=ComponentParams(**dict(component.params)),
        pins=pins,
        extras=component.extras() or None,
    )


def compile_dsl_to_db(
    schematic: Schematic,
    meta: dict[str, Any] | None = None,
) -> WireLangDb:
    """Snapshot ``schematic`` as a ``wirelang-db@v1`` document."""
    nodes = [
        DbNode(id=node.id, name=node.name, is_ground=node.is_ground())
        for node in schematic.nodes
    ]
    components = [_component_record(c) for c in schematic.components]

    known = {n.id for n in nodes}
    dangling = {
        pin.node_id
        for record in components
        for pin in record.pins
        if pin.node_id is not None and pin.node_id not in known
    }
    if dangling:
        logger.warning(
            "Schematic %r: pins reference unregistered node(s) %s",
            schematic.name,
            ", ".join(sorted(dangling)),
        )

    logger.debug(
        "Compiled %r: %d components, %d nodes",
        schematic.name,
        len(components),
        len(nodes),
    )
    return WireLangDb(
        name=schematic.name, components=components, nodes=nodes, meta=meta
    )


dsl_to_db = compile_dsl_to_db
dsl2db = compile_dsl_to_db
