"""Unit tests for pins, nodes and identity sequences."""

from wirelang.components.passives import R
from wirelang.core.node import Node, create_ground_node
from wirelang.core.pin import Pin
from wirelang.core.sequence import identity_scope
from wirelang.core.types import PinDirection


# ═══════════════════════════════════════════════════════════
# Pin
# ═══════════════════════════════════════════════════════════


class TestPin:
    def test_new_pin_is_unconnected(self):
        pin = Pin("a")
        assert pin.node is None
        assert not pin.is_connected()
        assert pin.direction is None

    def test_connect_and_disconnect(self):
        pin = Pin("a", PinDirection.INPUT)
        node = Node()
        pin.connect_to(node)
        assert pin.is_connected()
        assert pin.is_connected_to(node)
        pin.disconnect()
        assert not pin.is_connected()
        # Second disconnect is a no-op.
        pin.disconnect()
        assert pin.node is None

    def test_connect_overwrites(self):
        pin = Pin("a")
        first, second = Node(), Node()
        pin.connect_to(first)
        pin.connect_to(second)
        assert pin.is_connected_to(second)
        assert not pin.is_connected_to(first)

    def test_full_name_with_component(self):
        r = R(100)
        assert r.p1.full_name == "R1.1"
        assert r.p2.full_name == "R1.2"

    def test_full_name_without_component(self):
        assert Pin("parallel_in").full_name == "parallel_in"

    def test_pin_ids_are_sequential(self):
        a, b = Pin("a"), Pin("b")
        assert (a.id, b.id) == ("pin_1", "pin_2")


# ═══════════════════════════════════════════════════════════
# Node
# ═══════════════════════════════════════════════════════════


class TestNode:
    def test_ground_names(self):
        assert Node("GND").is_ground()
        assert Node("0").is_ground()
        assert not Node("gnd").is_ground()
        assert not Node().is_ground()

    def test_create_ground_node(self):
        node = create_ground_node()
        assert node.name == "GND"
        assert node.is_ground()

    def test_repr(self):
        assert repr(Node("VOUT")) == "Node(VOUT)"
        assert repr(Node()) == "Node(node_2)"


# ═══════════════════════════════════════════════════════════
# Identity sequences
# ═══════════════════════════════════════════════════════════


class TestIdentitySequence:
    def test_component_counter_is_global_labels_per_prefix(self):
        from wirelang.components.passives import C

        r1, c1, r2 = R(1), C(1e-6), R(2)
        assert [r1.id, c1.id, r2.id] == ["resistor_1", "capacitor_2", "resistor_3"]
        assert [r1.label, c1.label, r2.label] == ["R1", "C1", "R2"]

    def test_nested_scope_is_isolated(self):
        R(1)
        with identity_scope():
            inner = R(2)
        outer = R(3)
        assert inner.id == "resistor_1"
        assert inner.label == "R1"
        assert outer.id == "resistor_2"
        assert outer.label == "R2"
