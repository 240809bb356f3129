"""Schematic — the graph container.

Holds components in insertion order and the nodes their pins bind to.
Components own their pins; the schematic never copies them. Duplicate
components are not filtered, nodes are de-duplicated by identity.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from wirelang.core.component import Component
from wirelang.core.node import Node, create_ground_node
from wirelang.core.pin import Pin
from wirelang.core.types import ComponentType
from wirelang.schemas.validation import ValidationResult
from wirelang.validation.engine import validate_schematic

logger = logging.getLogger(__name__)

SOURCE_TYPES = frozenset({ComponentType.VOLTAGE_SOURCE, ComponentType.CURRENT_SOURCE})


@dataclass
class AutoGroundResult:
    connected: list[Pin] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


class Schematic:
    def __init__(self, name: str = "unnamed"):
        self.name = name
        self._components: list[Component] = []
        self._nodes: list[Node] = []
        self._ground_node: Node | None = None

    @property
    def components(self) -> list[Component]:
        return list(self._components)

    @property
    def nodes(self) -> list[Node]:
        return list(self._nodes)

    @property
    def ground_node(self) -> Node:
        """The container's own ground node, created and registered on
        first access."""
        if self._ground_node is None:
            self._ground_node = create_ground_node()
            self._nodes.append(self._ground_node)
        return self._ground_node

    # ─── Mutation ───

    def add_component(self, component: Component) -> None:
        self._components.append(component)

    def add_components(self, *components: Component) -> None:
        for component in components:
            self.add_component(component)

    def add_node(self, node: Node) -> None:
        if not any(existing is node for existing in self._nodes):
            self._nodes.append(node)

    def create_node(self, name: str | None = None) -> Node:
        node = Node(name)
        self._nodes.append(node)
        return node

    def connect(self, pin: Pin, node: Node) -> None:
        pin.connect_to(node)
        self.add_node(node)

    def connect_all(self, pins: Iterable[Pin], node: Node) -> None:
        for pin in pins:
            pin.connect_to(node)
        self.add_node(node)

    def _drop_node(self, node: Node) -> None:
        self._nodes = [n for n in self._nodes if n is not node]

    # ─── Queries ───

    def get_component_by_id(self, component_id: str) -> Component | None:
        for component in self._components:
            if component.id == component_id:
                return component
        return None

    def get_components_by_type(self, type_tag: ComponentType | str) -> list[Component]:
        return [c for c in self._components if c.type == type_tag]

    def ground_components(self) -> list[Component]:
        return self.get_components_by_type(ComponentType.GROUND)

    def get_pins_at_node(self, node: Node) -> list[Pin]:
        """Pins bound to ``node``, in component order then pin order."""
        return [
            pin
            for component in self._components
            for pin in component.pins
            if pin.is_connected_to(node)
        ]

    def get_unconnected_pins(self) -> list[Pin]:
        return [
            pin
            for component in self._components
            for pin in component.pins
            if not pin.is_connected()
        ]

    # ─── Ground handling ───

    def merge_grounds(self) -> list[Pin]:
        """Fold every ground component onto the first one's node.

        Each other ground sitting on a different node drags every pin on
        that node along with it; the emptied node is removed. Unconnected
        grounds are bound to the master node. With an unconnected master
        nothing happens.

        Returns:
            Pins whose binding changed.
        """
        grounds = self.ground_components()
        if len(grounds) <= 1:
            return []

        master = grounds[0].pins[0].node
        if master is None:
            logger.debug("merge_grounds: master ground %s unconnected", grounds[0].label)
            return []
        self.add_node(master)

        moved: list[Pin] = []
        for ground in grounds[1:]:
            ground_pin = ground.pins[0]
            current = ground_pin.node
            if current is None:
                self.connect(ground_pin, master)
                moved.append(ground_pin)
            elif current is not master:
                for pin in self.get_pins_at_node(current):
                    pin.connect_to(master)
                    moved.append(pin)
                self._drop_node(current)
                if self._ground_node is current:
                    self._ground_node = master

        if moved:
            logger.info(
                "Merged %d ground component(s) onto %s (%d pins moved)",
                len(grounds) - 1,
                master,
                len(moved),
            )
        return moved

    def auto_connect_grounds(self) -> AutoGroundResult:
        """Bind every floating source return path to ground.

        Runs ``merge_grounds()`` first. Without a ground component this
        only reports a warning. Safe to call repeatedly.
        """
        self.merge_grounds()
        result = AutoGroundResult()

        grounds = self.ground_components()
        if not grounds:
            result.warnings.append(
                "No ground component found; source return pins left unconnected"
            )
            logger.warning("auto_connect_grounds: %s has no ground", self.name)
            return result

        master_pin = grounds[0].pins[0]
        ground = master_pin.node
        if ground is None:
            ground = self.ground_node
            self.connect(master_pin, ground)
            self.merge_grounds()

        for component in self._components:
            if component.type not in SOURCE_TYPES:
                continue
            negative = component.get_pin("negative")
            if negative is not None and not negative.is_connected():
                self.connect(negative, ground)
                result.connected.append(negative)

        if result.connected:
            logger.debug(
                "Auto-grounded %s",
                ", ".join(p.full_name for p in result.connected),
            )
        return result

    # ─── Validation / reporting ───

    def validate(self) -> ValidationResult:
        return validate_schematic(self)

    def summary(self) -> str:
        lines = [
            f"Circuit: {self.name}",
            f"Components: {len(self._components)}",
            f"Nodes: {len(self._nodes)}",
            "",
            "Components:",
        ]
        lines.extend(f"  {component!r}" for component in self._components)
        lines.extend(["", "Topology:"])
        for node in self._nodes:
            pins = self.get_pins_at_node(node)
            if pins:
                names = ", ".join(p.full_name for p in pins)
                lines.append(f"  {node}: [{names}]")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"Schematic({self.name}, {len(self._components)} components, "
            f"{len(self._nodes)} nodes)"
        )


def create_schematic(name: str = "unnamed") -> Schematic:
    return Schematic(name)
