"""Shared enums for the circuit model."""

from __future__ import annotations

from enum import Enum


class ComponentType(str, Enum):
    RESISTOR = "resistor"
    CAPACITOR = "capacitor"
    INDUCTOR = "inductor"
    DIODE = "diode"
    LED = "led"
    VOLTAGE_SOURCE = "voltage_source"
    CURRENT_SOURCE = "current_source"
    GROUND = "ground"
    POWER_RAIL = "power_rail"
    BJT = "bjt"
    MOSFET = "mosfet"
    OPAMP = "opamp"
    LOGIC_GATE = "logic_gate"
    LOGIC_HIGH = "logic_high"
    LOGIC_LOW = "logic_low"
    CLOCK = "clock"


class SourceType(str, Enum):
    DC = "dc"
    AC = "ac"


class PinDirection(str, Enum):
    INPUT = "input"
    OUTPUT = "output"
    BIDIRECTIONAL = "bidirectional"


class TransistorType(str, Enum):
    NPN = "NPN"
    PNP = "PNP"
    NMOS = "NMOS"
    PMOS = "PMOS"


class GateType(str, Enum):
    NOT = "NOT"
    AND = "AND"
    OR = "OR"
    XOR = "XOR"
    NAND = "NAND"
    NOR = "NOR"


class Color(str, Enum):
    """Indicator colors (LEDs, sensors)."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"
    WHITE = "white"
    ORANGE = "orange"
    PURPLE = "purple"
    CYAN = "cyan"
    PINK = "pink"
    AMBER = "amber"
    IR = "infrared"
    UV = "ultraviolet"
