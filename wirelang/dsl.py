"""Topology builders.

``Series`` and ``Parallel`` wire components (or pins, or earlier builder
results) together with fresh nodes and hand back a ``ConnectionResult``;
nothing touches a schematic until ``apply_to_circuit``. ``Circuit`` is the
one-shot form: build, apply, auto-ground.

    s = Circuit("LED", DC(5), R(330), LED(RED), GND())

    s = Circuit("Divider", [
        [DC(12), r1, r2, GND()],
        [r1.p2, probe],
    ])
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from wirelang.config import get_settings
from wirelang.core.component import Component
from wirelang.core.node import Node
from wirelang.core.pin import Pin
from wirelang.core.schematic import Schematic

logger = logging.getLogger(__name__)


class TopologyError(ValueError):
    """Raised when a builder is given a shape it cannot wire."""


@dataclass
class ConnectionResult:
    components: list[Component]
    nodes: list[Node]
    first_pin: Pin
    last_pin: Pin


Connectable = Union[Component, Pin, ConnectionResult]


class CircuitOptions(BaseModel):
    """Accepts ``auto_ground`` or ``autoGround``; unknown keys are rejected."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )

    auto_ground: bool = Field(default_factory=lambda: get_settings().auto_ground)


# ─── Internal Helpers ───


def _terminals(item: Connectable) -> tuple[Pin, Pin, list[Component], list[Node]]:
    """(first pin, last pin, owned components, owned nodes) for any item."""
    if isinstance(item, Pin):
        return item, item, [], []
    if isinstance(item, Component):
        return item.p1, item.p2, [item], []
    if isinstance(item, ConnectionResult):
        return item.first_pin, item.last_pin, list(item.components), list(item.nodes)
    raise TopologyError(f"Cannot connect {type(item).__name__}: {item!r}")


def _bind(
    pin: Pin,
    node: Node,
    components: list[Component],
    nodes: list[Node],
) -> None:
    """Bind ``pin`` to ``node``.

    A component-less pin (a Parallel rail terminal) that already sits on
    a rail carries that rail with it: every collected component pin on
    the old rail moves to ``node`` and the old rail is dropped.
    """
    previous = pin.node
    pin.connect_to(node)
    if pin.component is not None or previous is None or previous is node:
        return
    for component in components:
        for other in component.pins:
            if other.is_connected_to(previous):
                other.connect_to(node)
    nodes[:] = [n for n in nodes if n is not previous]


# ═══════════════════════════════════════════════════════════
# Series / Parallel
# ═══════════════════════════════════════════════════════════


def Series(*items: Connectable) -> ConnectionResult:
    """Chain items end to end: one fresh node per adjacent pair."""
    if not items:
        raise TopologyError("Series requires at least one component")

    first_pin, last_pin, components, nodes = _terminals(items[0])

    for item in items[1:]:
        first, last, owned, owned_nodes = _terminals(item)
        components.extend(owned)
        nodes.extend(owned_nodes)
        node = Node()
        nodes.append(node)
        _bind(last_pin, node, components, nodes)
        _bind(first, node, components, nodes)
        last_pin = last

    return ConnectionResult(components, nodes, first_pin, last_pin)


def Parallel(*items: Connectable) -> ConnectionResult:
    """Tie every item between two shared rails.

    The result's first/last pins are component-less terminals sitting on
    the start and end rails, so it can be chained into a ``Series``.
    """
    if not items:
        raise TopologyError("Parallel requires at least one component")

    start = Node()
    end = Node()
    components: list[Component] = []
    nodes: list[Node] = [start, end]

    for item in items:
        first, last, owned, owned_nodes = _terminals(item)
        components.extend(owned)
        nodes.extend(owned_nodes)
        _bind(first, start, components, nodes)
        _bind(last, end, components, nodes)

    rail_in = Pin("parallel_in")
    rail_out = Pin("parallel_out")
    rail_in.connect_to(start)
    rail_out.connect_to(end)
    return ConnectionResult(components, nodes, rail_in, rail_out)


# ═══════════════════════════════════════════════════════════
# Point-to-point helpers
# ═══════════════════════════════════════════════════════════


def wire(pin1: Pin, pin2: Pin) -> Node:
    """Join two pins on a fresh node."""
    node = Node()
    pin1.connect_to(node)
    pin2.connect_to(node)
    return node


def junction(*pins: Pin) -> Node:
    """Join two or more pins on a fresh node."""
    if len(pins) < 2:
        raise TopologyError("Junction requires at least two pins")
    node = Node()
    for pin in pins:
        pin.connect_to(node)
    return node


def to_ground(pin: Pin, schematic: Schematic) -> None:
    schematic.connect(pin, schematic.ground_node)


def apply_to_circuit(schematic: Schematic, result: ConnectionResult) -> Schematic:
    """Register a builder result's components and nodes on ``schematic``."""
    schematic.add_components(*result.components)
    for node in result.nodes:
        schematic.add_node(node)
    return schematic


# ═══════════════════════════════════════════════════════════
# Multi-path
# ═══════════════════════════════════════════════════════════


def _output_pin(item: Connectable) -> Pin:
    if isinstance(item, Pin):
        return item
    if isinstance(item, Component):
        return item.p2
    return item.last_pin


def _input_pin(item: Connectable) -> Pin:
    if isinstance(item, Pin):
        return item
    if isinstance(item, Component):
        return item.p1
    return item.first_pin


def connect_path(path: Sequence[Connectable]) -> tuple[list[Component], list[Node]]:
    """Wire one path, reusing a node already on either boundary pin.

    The out pin's node wins over the in pin's; a fresh node is created
    only when both are floating. Pins already on the chosen node are
    left alone.
    """
    components: list[Component] = []
    nodes: list[Node] = []

    for item in path:
        if isinstance(item, Component):
            components.append(item)
        elif isinstance(item, Pin):
            if item.component is not None:
                components.append(item.component)
        elif isinstance(item, ConnectionResult):
            components.extend(item.components)
            nodes.extend(item.nodes)
        else:
            raise TopologyError(f"Cannot connect {type(item).__name__}: {item!r}")

    for current, following in zip(path, path[1:]):
        out_pin = _output_pin(current)
        in_pin = _input_pin(following)
        node = out_pin.node or in_pin.node
        if node is None:
            node = Node()
        nodes.append(node)
        if not out_pin.is_connected_to(node):
            out_pin.connect_to(node)
        if not in_pin.is_connected_to(node):
            in_pin.connect_to(node)

    return components, nodes


def _is_path_list(args: Sequence[Any]) -> bool:
    return (
        len(args) == 1
        and isinstance(args[0], (list, tuple))
        and len(args[0]) > 0
        and isinstance(args[0][0], (list, tuple))
    )


def _is_options(arg: Any) -> bool:
    return isinstance(arg, (CircuitOptions, Mapping))


# ═══════════════════════════════════════════════════════════
# Circuit
# ═══════════════════════════════════════════════════════════


def Circuit(name: str, *args: Any) -> Schematic:
    """Build a complete schematic in one call.

    Accepted shapes:
        Circuit(name, a, b, c)             -> Series(a, b, c)
        Circuit(name, [[a, b], [b.p2, c]]) -> multi-path
        Circuit(name, options, ...)        -> either, with options

    ``options`` is a ``CircuitOptions`` or a mapping such as
    ``{"auto_ground": False}``. Auto-grounding is on by default.
    """
    options = CircuitOptions()
    rest: Sequence[Any] = args
    if rest and _is_options(rest[0]):
        first = rest[0]
        if isinstance(first, CircuitOptions):
            options = first
        else:
            try:
                options = CircuitOptions.model_validate(first)
            except ValidationError as e:
                raise TopologyError(f"Invalid Circuit options {dict(first)!r}: {e}") from e
        rest = rest[1:]

    schematic = Schematic(name)

    if _is_path_list(rest):
        seen: set[int] = set()
        for path in rest[0]:
            components, nodes = connect_path(path)
            for component in components:
                if id(component) not in seen:
                    seen.add(id(component))
                    schematic.add_component(component)
            for node in nodes:
                schematic.add_node(node)
        logger.debug("Circuit %r: %d path(s)", name, len(rest[0]))
    else:
        apply_to_circuit(schematic, Series(*rest))

    if options.auto_ground:
        result = schematic.auto_connect_grounds()
        for warning in result.warnings:
            logger.debug("Circuit %r: %s", name, warning)

    return schematic
