"""Voltage/current sources, ground and power rails.

Sources declare ``positive`` before ``negative`` but chain with
p1 = negative and p2 = positive, so ``Series(DC(5), R(330), GND())``
leaves the source's positive terminal on the resistor.
"""

from __future__ import annotations

from typing import Any, ClassVar

from wirelang.core.component import (
    Component,
    SingleTerminalComponent,
    compact_extras,
)
from wirelang.core.pin import Pin
from wirelang.core.types import ComponentType, PinDirection, SourceType
from wirelang.core.units import format_with_unit


class _Source(Component):
    pin_layout = (
        ("positive", PinDirection.OUTPUT),
        ("negative", PinDirection.INPUT),
    )
    series_terminals = (1, 0)

    kind: ClassVar[str]
    quantity: ClassVar[str]
    symbol: ClassVar[str]

    def __init__(
        self,
        value: float,
        source_type: SourceType | str = SourceType.DC,
        frequency: float | None = None,
        label: str | None = None,
    ):
        source_type = SourceType(source_type)
        super().__init__(
            {"value": value, "unit": self.symbol, "sourceType": source_type.value},
            label,
        )
        self.source_type = source_type
        self.frequency = frequency

    @property
    def positive(self) -> Pin:
        return self.pins[0]

    @property
    def negative(self) -> Pin:
        return self.pins[1]

    def extras(self) -> dict[str, Any]:
        return compact_extras(
            **{self.quantity: self.value},
            sourceType=self.source_type,
            frequency=self.frequency,
        )

    def validate(self) -> list[str]:
        errors = super().validate()
        if self.source_type is SourceType.AC and self.frequency is None:
            errors.append(f"{self.kind}: AC source requires frequency")
        if self.frequency is not None and self.frequency <= 0:
            errors.append(f"{self.kind}: Frequency must be positive")
        return errors

    def __repr__(self) -> str:
        text = format_with_unit(self.value, self.symbol)
        if self.source_type is SourceType.AC and self.frequency is not None:
            text += f" @ {format_with_unit(self.frequency, 'Hz')}"
        return f"{self.source_type.value.upper()} {self.kind}({text})"


class VoltageSource(_Source):
    type = ComponentType.VOLTAGE_SOURCE
    prefix = "V"
    kind = "VoltageSource"
    quantity = "voltage"
    symbol = "V"

    @property
    def voltage(self) -> float:
        return self.value


class CurrentSource(_Source):
    type = ComponentType.CURRENT_SOURCE
    prefix = "I"
    kind = "CurrentSource"
    quantity = "current"
    symbol = "A"

    @property
    def current(self) -> float:
        return self.value


class Ground(SingleTerminalComponent):
    type = ComponentType.GROUND
    prefix = "GND"
    pin_layout = (("gnd", None),)

    def __init__(self, label: str | None = None):
        super().__init__({"value": 0, "unit": "V"}, label)

    @property
    def gnd(self) -> Pin:
        return self.pins[0]

    def validate(self) -> list[str]:
        return []

    def __repr__(self) -> str:
        return "GND"


class PowerRail(SingleTerminalComponent):
    """A named supply rail (VCC, VDD, V+, V-). Labelled by its rail name."""

    type = ComponentType.POWER_RAIL

    def __init__(self, voltage: float, name: str = "VCC", label: str | None = None):
        super().__init__(
            {"value": voltage, "unit": "V", "railName": name}, label or name
        )
        self.rail_name = name

    @property
    def voltage(self) -> float:
        return self.value

    @property
    def out(self) -> Pin:
        return self.pins[0]

    def extras(self) -> dict[str, Any]:
        return compact_extras(voltage=self.value, railName=self.rail_name)

    def validate(self) -> list[str]:
        # Negative rails are legitimate.
        return []

    def __repr__(self) -> str:
        return f"{self.rail_name}({format_with_unit(self.value, 'V')})"


# ─── Factories ───


def DC(voltage: float) -> VoltageSource:
    return VoltageSource(voltage)


def AC(voltage: float, frequency: float) -> VoltageSource:
    return VoltageSource(voltage, SourceType.AC, frequency)


def IDC(current: float) -> CurrentSource:
    return CurrentSource(current)


def IAC(current: float, frequency: float) -> CurrentSource:
    return CurrentSource(current, SourceType.AC, frequency)


def GND() -> Ground:
    return Ground()


def VCC(voltage: float = 5) -> PowerRail:
    return PowerRail(voltage, "VCC")


def VDD(voltage: float = 3.3) -> PowerRail:
    return PowerRail(voltage, "VDD")


def VPOS(voltage: float = 15) -> PowerRail:
    return PowerRail(voltage, "V+")


def VNEG(voltage: float = -15) -> PowerRail:
    return PowerRail(voltage, "V-")
