"""Reference circuits.

Each builder returns a fresh schematic; ``EXAMPLES`` maps a short name to
its builder for the CLI and the HTTP app.
"""

from __future__ import annotations

from collections.abc import Callable

from wirelang.components.diodes import BLUE, GREEN, LED, RED, D
from wirelang.components.logic import NAND
from wirelang.components.passives import C, L, R
from wirelang.components.sources import AC, DC, GND, VCC
from wirelang.components.transistors import NPN
from wirelang.core.schematic import Schematic, create_schematic
from wirelang.core.units import kHz, kOhm, mH, uF
from wirelang.dsl import Circuit, Parallel, Series, apply_to_circuit


def simple_led_circuit() -> Schematic:
    """DC source -> resistor -> LED -> ground."""
    return Circuit("LED Blinker", DC(5), R(330), LED(RED), GND())


def voltage_divider() -> Schematic:
    s = create_schematic("Voltage Divider")
    apply_to_circuit(s, Series(DC(12), R(kOhm(10)), R(kOhm(10)), GND()))
    s.auto_connect_grounds()
    return s


def parallel_resistors() -> Schematic:
    s = create_schematic("Parallel Resistors")
    result = Series(DC(9), Parallel(R(kOhm(1)), R(kOhm(2)), R(kOhm(3))), GND())
    apply_to_circuit(s, result)
    s.auto_connect_grounds()
    return s


def rc_low_pass_filter() -> Schematic:
    return Circuit("RC Low-Pass Filter", AC(5, kHz(1)), R(kOhm(1)), C(uF(0.1)), GND())


def lc_tank_circuit() -> Schematic:
    return Circuit(
        "LC Tank", DC(12), R(100), Parallel(L(mH(10)), C(uF(1))), GND()
    )


def traffic_light() -> Schematic:
    return Circuit(
        "Traffic Light",
        DC(5),
        Parallel(
            Series(R(220), LED(RED)),
            Series(R(220), LED(GREEN)),
            Series(R(180), LED(BLUE)),
        ),
        GND(),
    )


def full_wave_rectifier() -> Schematic:
    s = create_schematic("Full-Wave Rectifier")
    source = AC(12, 60)
    d1, d2, d3, d4 = (D("1N4007") for _ in range(4))
    load = R(kOhm(1))
    filter_cap = C(uF(470))
    ground = GND()
    s.add_components(source, d1, d2, d3, d4, load, filter_cap, ground)

    ac_pos = s.create_node("AC+")
    ac_neg = s.create_node("AC-")
    dc_pos = s.create_node("DC+")
    dc_neg = s.create_node("DC-")

    s.connect(source.positive, ac_pos)
    s.connect(source.negative, ac_neg)
    s.connect(d1.anode, ac_pos)
    s.connect(d1.cathode, dc_pos)
    s.connect(d2.anode, dc_neg)
    s.connect(d2.cathode, ac_pos)
    s.connect(d3.anode, ac_neg)
    s.connect(d3.cathode, dc_pos)
    s.connect(d4.anode, dc_neg)
    s.connect(d4.cathode, ac_neg)
    s.connect_all([load.p1, filter_cap.p1], dc_pos)
    s.connect_all([load.p2, filter_cap.p2, ground.gnd], dc_neg)
    return s


def npn_switch() -> Schematic:
    """VCC -> load resistor -> collector; base driven through 10k."""
    q1 = NPN("2N2222")
    r_load = R(1000)
    r_base = R(kOhm(10))
    return Circuit(
        "NPN Switch",
        [
            [VCC(5), r_load, q1.C],
            [DC(5), r_base, q1.B],
            [q1.E, GND()],
        ],
    )


def sr_latch() -> Schematic:
    """Cross-coupled NAND latch."""
    top, bottom = NAND(), NAND()
    s = create_schematic("SR Latch")
    s.add_components(top, bottom)
    q = s.create_node("Q")
    q_bar = s.create_node("Q_BAR")
    s.connect_all([top.Y, bottom.A], q)
    s.connect_all([bottom.Y, top.B], q_bar)
    s.connect(top.A, s.create_node("S_BAR"))
    s.connect(bottom.B, s.create_node("R_BAR"))
    return s


EXAMPLES: dict[str, Callable[[], Schematic]] = {
    "led": simple_led_circuit,
    "divider": voltage_divider,
    "parallel": parallel_resistors,
    "rc-filter": rc_low_pass_filter,
    "lc-tank": lc_tank_circuit,
    "traffic-light": traffic_light,
    "rectifier": full_wave_rectifier,
    "npn-switch": npn_switch,
    "sr-latch": sr_latch,
}
