"""Resistor, capacitor and inductor."""

from __future__ import annotations

from typing import ClassVar

from wirelang.core.component import TwoTerminalComponent
from wirelang.core.types import ComponentType
from wirelang.core.units import format_with_unit


class _Passive(TwoTerminalComponent):
    kind: ClassVar[str]
    symbol: ClassVar[str]
    zero_message: ClassVar[str]

    def __init__(self, value: float, label: str | None = None):
        super().__init__({"value": value, "unit": self.symbol}, label)

    def validate(self) -> list[str]:
        errors = super().validate()
        if self.value == 0:
            errors.append(self.zero_message)
        return errors

    def __repr__(self) -> str:
        return f"{self.kind}({format_with_unit(self.value, self.symbol)})"


class Resistor(_Passive):
    type = ComponentType.RESISTOR
    prefix = "R"
    kind = "Resistor"
    symbol = "Ω"
    zero_message = "Resistor: Resistance cannot be zero (use a wire/short instead)"

    @property
    def resistance(self) -> float:
        return self.value


class Capacitor(_Passive):
    type = ComponentType.CAPACITOR
    prefix = "C"
    kind = "Capacitor"
    symbol = "F"
    zero_message = "Capacitor: Capacitance cannot be zero"

    @property
    def capacitance(self) -> float:
        return self.value


class Inductor(_Passive):
    type = ComponentType.INDUCTOR
    prefix = "L"
    kind = "Inductor"
    symbol = "H"
    zero_message = "Inductor: Inductance cannot be zero"

    @property
    def inductance(self) -> float:
        return self.value


def R(resistance: float) -> Resistor:
    return Resistor(resistance)


def C(capacitance: float) -> Capacitor:
    return Capacitor(capacitance)


def L(inductance: float) -> Inductor:
    return Inductor(inductance)
