"""Logic gates, fixed logic levels and clock sources."""

from __future__ import annotations

from typing import Any

from wirelang.core.component import (
    Component,
    SingleTerminalComponent,
    compact_extras,
)
from wirelang.core.pin import Pin
from wirelang.core.types import ComponentType, GateType, PinDirection
from wirelang.core.units import format_with_unit

DEFAULT_FAMILY = "74HC"

_SINGLE_INPUT = (("A", PinDirection.INPUT), ("Y", PinDirection.OUTPUT))
_DUAL_INPUT = (
    ("A", PinDirection.INPUT),
    ("B", PinDirection.INPUT),
    ("Y", PinDirection.OUTPUT),
)


class LogicGate(Component):
    """A gate labelled by its type (NAND1, NAND2, ...). Chains A -> Y."""

    type = ComponentType.LOGIC_GATE

    def __init__(
        self,
        gate_type: GateType | str,
        family: str = DEFAULT_FAMILY,
        label: str | None = None,
    ):
        self.gate_type = GateType(gate_type)
        self.family = family
        # Instance-level layout: NOT has one input, the rest two.
        self.pin_layout = (
            _SINGLE_INPUT if self.gate_type is GateType.NOT else _DUAL_INPUT
        )
        self.series_terminals = (0, len(self.pin_layout) - 1)
        super().__init__(
            {
                "value": len(self.pin_layout) - 1,
                "unit": "inputs",
                "gateType": self.gate_type.value,
                "family": family,
            },
            label,
        )

    def label_prefix(self) -> str:
        return self.gate_type.value

    @property
    def A(self) -> Pin:
        return self.pin("A")

    @property
    def B(self) -> Pin:
        return self.pin("B")

    @property
    def Y(self) -> Pin:
        return self.pin("Y")

    def extras(self) -> dict[str, Any]:
        return compact_extras(gateType=self.gate_type, family=self.family)

    def validate(self) -> list[str]:
        return []

    def __repr__(self) -> str:
        return f"{self.gate_type.value}({self.family})"


class LogicHigh(SingleTerminalComponent):
    type = ComponentType.LOGIC_HIGH
    prefix = "HIGH"

    def __init__(self, label: str | None = None):
        super().__init__({"value": 1, "unit": "logic"}, label)

    @property
    def out(self) -> Pin:
        return self.pins[0]

    def validate(self) -> list[str]:
        return []

    def __repr__(self) -> str:
        return "HIGH"


class LogicLow(SingleTerminalComponent):
    type = ComponentType.LOGIC_LOW
    prefix = "LOW"

    def __init__(self, label: str | None = None):
        super().__init__({"value": 0, "unit": "logic"}, label)

    @property
    def out(self) -> Pin:
        return self.pins[0]

    def validate(self) -> list[str]:
        return []

    def __repr__(self) -> str:
        return "LOW"


class ClockSource(SingleTerminalComponent):
    type = ComponentType.CLOCK
    prefix = "CLK"

    def __init__(
        self, frequency: float, duty_cycle: float = 0.5, label: str | None = None
    ):
        super().__init__(
            {"value": frequency, "unit": "Hz", "dutyCycle": duty_cycle}, label
        )
        self.frequency = frequency
        self.duty_cycle = duty_cycle

    @property
    def out(self) -> Pin:
        return self.pins[0]

    def extras(self) -> dict[str, Any]:
        return compact_extras(frequency=self.frequency, dutyCycle=self.duty_cycle)

    def validate(self) -> list[str]:
        errors: list[str] = []
        if self.frequency <= 0:
            errors.append("Clock: Frequency must be positive")
        if not 0 <= self.duty_cycle <= 1:
            errors.append("Clock: Duty cycle must be between 0 and 1")
        return errors

    def __repr__(self) -> str:
        return f"CLK({format_with_unit(self.frequency, 'Hz')})"


# ─── Factories ───


def NOT(family: str = DEFAULT_FAMILY) -> LogicGate:
    return LogicGate(GateType.NOT, family)


def AND(family: str = DEFAULT_FAMILY) -> LogicGate:
    return LogicGate(GateType.AND, family)


def OR(family: str = DEFAULT_FAMILY) -> LogicGate:
    return LogicGate(GateType.OR, family)


def XOR(family: str = DEFAULT_FAMILY) -> LogicGate:
    return LogicGate(GateType.XOR, family)


def NAND(family: str = DEFAULT_FAMILY) -> LogicGate:
    return LogicGate(GateType.NAND, family)


def NOR(family: str = DEFAULT_FAMILY) -> LogicGate:
    return LogicGate(GateType.NOR, family)


def HIGH() -> LogicHigh:
    return LogicHigh()


def LOW() -> LogicLow:
    return LogicLow()


def CLK(frequency: float, duty_cycle: float = 0.5) -> ClockSource:
    return ClockSource(frequency, duty_cycle)
