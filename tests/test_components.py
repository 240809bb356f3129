"""Unit tests for the component catalog."""

import pytest

from wirelang.components.diodes import BLUE, LED, D
from wirelang.components.logic import AND, CLK, HIGH, LOW, NAND, NOT
from wirelang.components.opamp import LM741, OpAmp, OpAmp3
from wirelang.components.passives import C, L, R
from wirelang.components.sources import AC, DC, GND, IAC, IDC, VCC, VNEG, VPOS, PowerRail, VoltageSource
from wirelang.components.transistors import NMOS, NPN, PMOS, PNP
from wirelang.core.component import PinNotFoundError
from wirelang.core.types import ComponentType, PinDirection, SourceType


# ═══════════════════════════════════════════════════════════
# Passives
# ═══════════════════════════════════════════════════════════


class TestPassives:
    def test_resistor_params_and_pins(self):
        r = R(330)
        assert r.type == ComponentType.RESISTOR
        assert r.params == {"value": 330, "unit": "Ω"}
        assert [p.name for p in r.pins] == ["1", "2"]
        assert r.p1 is r.pins[0]
        assert r.p2 is r.pins[1]

    def test_zero_resistance_is_invalid(self):
        assert R(0).validate() == [
            "Resistor: Resistance cannot be zero (use a wire/short instead)"
        ]

    def test_negative_value_is_invalid(self):
        errors = C(-1e-6).validate()
        assert errors == ["capacitor: Value cannot be negative"]

    def test_zero_inductance(self):
        assert L(0).validate() == ["Inductor: Inductance cannot be zero"]

    def test_repr_uses_si_prefix(self):
        assert repr(R(4700)) == "Resistor(4.7kΩ)"

    def test_pin_lookup(self):
        r = R(1)
        assert r.pin("2") is r.p2
        assert r.get_pin("x") is None
        with pytest.raises(PinNotFoundError, match='Pin "x" not found on component R1'):
            r.pin("x")

    def test_pins_are_immutable_tuple(self):
        assert isinstance(R(1).pins, tuple)


# ═══════════════════════════════════════════════════════════
# Diodes / LEDs
# ═══════════════════════════════════════════════════════════


class TestDiodes:
    def test_diode_defaults(self):
        d = D()
        assert d.value == 0.7
        assert d.anode is d.p1
        assert d.cathode is d.p2
        assert d.label == "D1"
        assert d.validate() == []

    def test_diode_part_number_extras(self):
        d = D("1N4148")
        assert d.extras() == {"forwardVoltage": 0.7, "partNumber": "1N4148"}

    def test_diode_bad_max_current(self):
        assert D(max_current=0).validate() == ["Diode: Maximum current must be positive"]

    def test_led_forward_voltage_from_color(self):
        led = LED(BLUE)
        assert led.value == 3.2
        assert led.params["color"] == "blue"
        assert led.label == "LED1"

    def test_led_accepts_color_string(self):
        assert LED("green").forward_voltage == 2.2

    def test_led_unknown_color(self):
        with pytest.raises(ValueError):
            LED("plaid")


# ═══════════════════════════════════════════════════════════
# Sources / ground / rails
# ═══════════════════════════════════════════════════════════


class TestSources:
    def test_source_series_terminals_reversed(self):
        v = DC(5)
        assert [p.name for p in v.pins] == ["positive", "negative"]
        assert v.p1 is v.negative
        assert v.p2 is v.positive
        assert v.positive.direction == PinDirection.OUTPUT
        assert v.negative.direction == PinDirection.INPUT

    def test_ac_source(self):
        v = AC(5, 1000)
        assert v.source_type is SourceType.AC
        assert v.params["sourceType"] == "ac"
        assert v.extras() == {"voltage": 5, "sourceType": "ac", "frequency": 1000}
        assert v.validate() == []

    def test_ac_without_frequency_is_invalid(self):
        v = VoltageSource(5, SourceType.AC)
        assert v.validate() == ["VoltageSource: AC source requires frequency"]

    def test_negative_frequency(self):
        assert IAC(0.01, -5).validate() == ["CurrentSource: Frequency must be positive"]

    def test_current_source_labels(self):
        assert IDC(0.001).label == "I1"
        assert IDC(0.001).unit == "A"

    def test_ground(self):
        g = GND()
        assert g.label == "GND1"
        assert g.p1 is g.p2 is g.gnd
        assert g.validate() == []

    def test_power_rails(self):
        assert VCC().value == 5
        assert VPOS().label == "V+"
        rail = VNEG()
        assert rail.value == -15
        assert rail.validate() == []
        assert rail.p1 is rail.p2

    def test_custom_rail(self):
        rail = PowerRail(12, "V12")
        assert rail.label == "V12"
        assert rail.params["railName"] == "V12"


# ═══════════════════════════════════════════════════════════
# Transistors
# ═══════════════════════════════════════════════════════════


class TestTransistors:
    def test_npn_model_preset(self):
        q = NPN("2N3904")
        assert q.hfe == 150
        assert q.vce_sat == 0.2
        assert q.params["transistorType"] == "NPN"
        assert q.label == "Q1"
        assert [p.name for p in q.pins] == ["B", "C", "E"]
        assert q.p1 is q.B
        assert q.p2 is q.C

    def test_unknown_model_falls_back_to_generic(self):
        assert PNP("nope").hfe == 100

    def test_hfe_override_and_validation(self):
        q = NPN(hfe=0)
        assert q.validate() == ["NPN: hfe (current gain) must be positive"]

    def test_nmos(self):
        m = NMOS("IRF540")
        assert m.vth == 4.0
        assert m.label == "M1"
        assert m.p1 is m.G
        assert m.p2 is m.D
        assert m.validate() == []

    def test_pmos_defaults_validate_clean(self):
        m = PMOS()
        assert m.vth == -2.0
        assert m.value == 2.0
        assert m.validate() == []

    def test_mosfet_limits(self):
        m = NMOS(rds_on=-1, id_max=0)
        assert m.validate() == [
            "NMOS: Rds(on) cannot be negative",
            "NMOS: Max drain current must be positive",
        ]


# ═══════════════════════════════════════════════════════════
# Op-amps
# ═══════════════════════════════════════════════════════════


class TestOpAmp:
    def test_five_pin(self):
        u = OpAmp()
        assert [p.name for p in u.pins] == ["inP", "inN", "out", "vPos", "vNeg"]
        assert u.p1.name == "inP"
        assert u.p2.name == "out"
        assert u.params["partNumber"] == "Generic"
        assert u.gain == 100_000
        assert u.label == "U1"

    def test_three_pin(self):
        u = OpAmp3("TL072")
        assert [p.name for p in u.pins] == ["inP", "inN", "out"]
        assert u.p2 is u.out

    def test_preset(self):
        assert LM741().part_number == "LM741"

    def test_gain_must_be_positive(self):
        assert OpAmp(gain=0).validate() == ["OpAmp: Gain must be positive"]


# ═══════════════════════════════════════════════════════════
# Logic
# ═══════════════════════════════════════════════════════════


class TestLogic:
    def test_not_gate(self):
        g = NOT()
        assert [p.name for p in g.pins] == ["A", "Y"]
        assert g.value == 1
        assert g.p1 is g.A
        assert g.p2 is g.Y

    def test_two_input_gate_labels(self):
        first, second = NAND(), NAND()
        other = AND("74LS")
        assert (first.label, second.label, other.label) == ("NAND1", "NAND2", "AND1")
        assert [p.name for p in other.pins] == ["A", "B", "Y"]
        assert other.params["family"] == "74LS"
        assert other.value == 2

    def test_levels(self):
        assert HIGH().value == 1
        assert LOW().value == 0
        assert HIGH().unit == "logic"

    def test_clock(self):
        clk = CLK(1000)
        assert clk.duty_cycle == 0.5
        assert clk.validate() == []

    def test_clock_validation(self):
        assert CLK(0, 1.5).validate() == [
            "Clock: Frequency must be positive",
            "Clock: Duty cycle must be between 0 and 1",
        ]
