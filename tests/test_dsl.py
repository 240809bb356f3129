"""Unit tests for the topology builders."""

import pytest

from wirelang.components.diodes import LED, RED
from wirelang.components.passives import C, R
from wirelang.components.sources import DC, GND
from wirelang.core.node import Node
from wirelang.core.pin import Pin
from wirelang.core.schematic import Schematic
from wirelang.dsl import (
    Circuit,
    CircuitOptions,
    Parallel,
    Series,
    TopologyError,
    apply_to_circuit,
    connect_path,
    junction,
    to_ground,
    wire,
)


def _same_node(*pins: Pin) -> bool:
    first = pins[0].node
    return first is not None and all(p.node is first for p in pins)


# ═══════════════════════════════════════════════════════════
# Series
# ═══════════════════════════════════════════════════════════


class TestSeries:
    def test_chains_adjacent_terminals(self):
        v, r, led, g = DC(5), R(330), LED(RED), GND()
        result = Series(v, r, led, g)

        assert len(result.nodes) == 3
        assert result.components == [v, r, led, g]
        assert result.first_pin is v.negative
        assert result.last_pin is g.gnd
        assert _same_node(v.positive, r.p1)
        assert _same_node(r.p2, led.anode)
        assert _same_node(led.cathode, g.gnd)
        assert not v.negative.is_connected()

    def test_single_item(self):
        r = R(1)
        result = Series(r)
        assert result.nodes == []
        assert result.first_pin is r.p1
        assert result.last_pin is r.p2

    def test_pin_items(self):
        a, b = R(1), R(2)
        result = Series(a.p2, b.p1)
        assert result.components == []
        assert _same_node(a.p2, b.p1)

    def test_empty_raises(self):
        with pytest.raises(TopologyError, match="at least one"):
            Series()

    def test_rejects_unknown_items(self):
        with pytest.raises(TopologyError):
            Series(R(1), "not a component")


# ═══════════════════════════════════════════════════════════
# Parallel
# ═══════════════════════════════════════════════════════════


class TestParallel:
    def test_two_rails(self):
        r1, r2, r3 = R(1), R(2), R(3)
        result = Parallel(r1, r2, r3)
        start, end = result.nodes
        assert len(result.nodes) == 2
        assert all(r.p1.is_connected_to(start) for r in (r1, r2, r3))
        assert all(r.p2.is_connected_to(end) for r in (r1, r2, r3))
        assert result.first_pin.component is None
        assert result.first_pin.is_connected_to(start)
        assert result.last_pin.is_connected_to(end)

    def test_empty_raises(self):
        with pytest.raises(TopologyError):
            Parallel()

    def test_parallel_inside_series_stays_joined(self):
        v, r1, r2, g = DC(9), R(1), R(2), GND()
        result = Series(v, Parallel(r1, r2), g)

        assert len(result.nodes) == 2
        assert _same_node(v.positive, r1.p1, r2.p1)
        assert _same_node(r1.p2, r2.p2, g.gnd)
        for pin in (v.positive, r1.p1, r1.p2, g.gnd):
            assert any(pin.node is n for n in result.nodes)

    def test_parallel_of_series_branches(self):
        r1, led1, r2, led2 = R(220), LED(), R(220), LED()
        result = Parallel(Series(r1, led1), Series(r2, led2))
        start, end = result.nodes[0], result.nodes[1]
        assert r1.p1.is_connected_to(start) and r2.p1.is_connected_to(start)
        assert led1.cathode.is_connected_to(end) and led2.cathode.is_connected_to(end)
        # Two rails plus one internal node per branch.
        assert len(result.nodes) == 4

    def test_nested_parallel(self):
        r1, r2, r3 = R(1), R(2), R(3)
        result = Parallel(r1, Parallel(r2, r3))
        start, end = result.nodes[0], result.nodes[1]
        assert _same_node(r1.p1, r2.p1, r3.p1)
        assert r1.p1.is_connected_to(start)
        assert _same_node(r1.p2, r2.p2, r3.p2)
        assert r1.p2.is_connected_to(end)
        assert len(result.nodes) == 2


# ═══════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════


class TestHelpers:
    def test_wire(self):
        a, b = R(1), R(2)
        node = wire(a.p2, b.p1)
        assert a.p2.is_connected_to(node) and b.p1.is_connected_to(node)

    def test_junction(self):
        a, b, c = R(1), R(2), R(3)
        node = junction(a.p1, b.p1, c.p1)
        assert _same_node(a.p1, b.p1, c.p1)
        assert a.p1.node is node

    def test_junction_requires_two_pins(self):
        with pytest.raises(TopologyError, match="at least two pins"):
            junction(R(1).p1)

    def test_to_ground(self):
        s = Schematic()
        r = R(1)
        to_ground(r.p2, s)
        assert r.p2.is_connected_to(s.ground_node)
        assert s.ground_node in s.nodes

    def test_apply_to_circuit(self):
        s = Schematic()
        result = Series(R(1), R(2))
        apply_to_circuit(s, result)
        assert s.components == result.components
        assert s.nodes == result.nodes


# ═══════════════════════════════════════════════════════════
# Multi-path
# ═══════════════════════════════════════════════════════════


class TestConnectPath:
    def test_reuses_existing_node(self):
        r1, r2, c = R(1), R(2), C(1e-6)
        Series(r1, r2)
        mid = r1.p2.node
        components, nodes = connect_path([r1.p2, c])
        assert c.p1.is_connected_to(mid)
        assert components == [r1, c]
        assert nodes == [mid]

    def test_prefers_out_pin_node(self):
        a, b = R(1), R(2)
        left, right = Node("L"), Node("R")
        a.p2.connect_to(left)
        b.p1.connect_to(right)
        connect_path([a, b])
        assert b.p1.is_connected_to(left)

    def test_fresh_node_when_both_floating(self):
        a, b = R(1), R(2)
        _, nodes = connect_path([a, b])
        assert len(nodes) == 1
        assert _same_node(a.p2, b.p1)


# ═══════════════════════════════════════════════════════════
# Circuit
# ═══════════════════════════════════════════════════════════


class TestCircuit:
    def test_flat_items_build_series_and_auto_ground(self):
        v, r, led, g = DC(5), R(330), LED(RED), GND()
        s = Circuit("LED", v, r, led, g)
        assert s.name == "LED"
        assert s.components == [v, r, led, g]
        assert v.negative.is_connected_to(g.gnd.node)
        result = s.validate()
        assert result.valid
        assert result.warnings == []

    def test_auto_ground_disabled_with_options(self):
        v, g = DC(5), GND()
        s = Circuit("raw", CircuitOptions(auto_ground=False), v, R(1), g)
        assert not v.negative.is_connected()

    def test_auto_ground_disabled_with_mapping(self):
        v = DC(5)
        Circuit("raw", {"auto_ground": False}, v, R(1), GND())
        assert not v.negative.is_connected()

    def test_auto_ground_disabled_with_camel_case_key(self):
        v = DC(5)
        Circuit("raw", {"autoGround": False}, v, R(1), GND())
        assert not v.negative.is_connected()

    def test_unknown_option_key_rejected(self):
        with pytest.raises(TopologyError, match="auto_grund"):
            Circuit("raw", {"auto_grund": False}, DC(5), R(1), GND())

    def test_options_model_accepts_both_spellings(self):
        assert CircuitOptions(autoGround=False).auto_ground is False
        assert CircuitOptions(auto_ground=False).auto_ground is False

    def test_auto_ground_default_from_settings(self, monkeypatch):
        monkeypatch.setenv("WIRELANG_AUTO_GROUND", "false")
        v = DC(5)
        Circuit("raw", v, R(1), GND())
        assert not v.negative.is_connected()

    def test_multi_path(self):
        v, r1, r2, g = DC(12), R(1000), R(2000), GND()
        probe = R(10_000)
        s = Circuit("divider", [
            [v, r1, r2, g],
            [r1.p2, probe, g],
        ])
        assert s.components == [v, r1, r2, g, probe]
        assert _same_node(r1.p2, r2.p1, probe.p1)
        assert _same_node(r2.p2, g.gnd, probe.p2, v.negative)
        assert s.validate().valid

    def test_single_path_matches_flat_form(self):
        def partition(s: Schematic) -> list[list[int]]:
            index = {id(node): i for i, node in enumerate(s.nodes)}
            return [[index[id(pin.node)] for pin in c.pins] for c in s.components]

        single = Circuit("Divider", [[DC(12), R(10000), R(10000), GND()]])
        flat = Circuit("Divider", DC(12), R(10000), R(10000), GND())

        assert len(single.components) == 4
        assert len(single.nodes) == 3
        assert len(flat.nodes) == 3
        assert partition(single) == partition(flat)
        assert single.validate().errors == []

    def test_series_creates_one_node_per_adjacent_pair(self):
        for count in range(1, 6):
            result = Series(*[R(1) for _ in range(count)])
            assert len(result.nodes) == count - 1

    def test_multi_path_registers_each_component_once(self):
        r = R(1)
        g = GND()
        s = Circuit("dup", [[r, g], [r.p1, g]])
        assert s.components.count(r) == 1
        assert s.components.count(g) == 1

    def test_empty_circuit_raises(self):
        with pytest.raises(TopologyError):
            Circuit("nothing")
