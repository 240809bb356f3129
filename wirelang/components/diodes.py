"""Diodes and LEDs."""

from __future__ import annotations

from typing import Any

from wirelang.core.component import PolarizedComponent, compact_extras
from wirelang.core.pin import Pin
from wirelang.core.types import Color, ComponentType

DEFAULT_FORWARD_VOLTAGE = 0.7
DEFAULT_LED_MAX_CURRENT = 0.02

# Typical forward voltage per LED color.
LED_FORWARD_VOLTAGES: dict[Color, float] = {
    Color.RED: 1.8,
    Color.ORANGE: 2.0,
    Color.YELLOW: 2.1,
    Color.AMBER: 2.1,
    Color.GREEN: 2.2,
    Color.BLUE: 3.2,
    Color.WHITE: 3.2,
    Color.PURPLE: 3.2,
    Color.CYAN: 3.2,
    Color.PINK: 3.2,
    Color.IR: 1.2,
    Color.UV: 3.4,
}

RED = Color.RED
GREEN = Color.GREEN
BLUE = Color.BLUE
YELLOW = Color.YELLOW
WHITE = Color.WHITE
ORANGE = Color.ORANGE


class _DiodeBase(PolarizedComponent):
    kind = "Diode"

    forward_voltage: float
    max_current: float | None

    @property
    def anode(self) -> Pin:
        return self.pins[0]

    @property
    def cathode(self) -> Pin:
        return self.pins[1]

    def validate(self) -> list[str]:
        errors = super().validate()
        if self.forward_voltage <= 0:
            errors.append(f"{self.kind}: Forward voltage must be positive")
        if self.max_current is not None and self.max_current <= 0:
            errors.append(f"{self.kind}: Maximum current must be positive")
        return errors


class Diode(_DiodeBase):
    type = ComponentType.DIODE
    prefix = "D"

    def __init__(
        self,
        part_number: str | None = None,
        *,
        forward_voltage: float = DEFAULT_FORWARD_VOLTAGE,
        max_current: float | None = None,
        label: str | None = None,
    ):
        super().__init__({"value": forward_voltage, "unit": "V"}, label)
        self.part_number = part_number
        self.forward_voltage = forward_voltage
        self.max_current = max_current

    def extras(self) -> dict[str, Any]:
        return compact_extras(
            forwardVoltage=self.forward_voltage,
            maxCurrent=self.max_current,
            partNumber=self.part_number,
        )

    def __repr__(self) -> str:
        if self.part_number:
            return f"Diode({self.part_number})"
        return f"Diode(Vf={self.forward_voltage}V)"


class LightEmittingDiode(_DiodeBase):
    type = ComponentType.LED
    prefix = "LED"
    kind = "LED"

    def __init__(
        self,
        color: Color | str = Color.RED,
        *,
        forward_voltage: float | None = None,
        max_current: float = DEFAULT_LED_MAX_CURRENT,
        label: str | None = None,
    ):
        color = Color(color)
        if forward_voltage is None:
            forward_voltage = LED_FORWARD_VOLTAGES[color]
        super().__init__(
            {"value": forward_voltage, "unit": "V", "color": color.value}, label
        )
        self.color = color
        self.forward_voltage = forward_voltage
        self.max_current = max_current

    def extras(self) -> dict[str, Any]:
        return compact_extras(
            color=self.color,
            forwardVoltage=self.forward_voltage,
            maxCurrent=self.max_current,
        )

    def __repr__(self) -> str:
        return f"LED({self.color.value}, Vf={self.forward_voltage}V)"


def D(
    part_number: str | None = None,
    *,
    forward_voltage: float = DEFAULT_FORWARD_VOLTAGE,
    max_current: float | None = None,
) -> Diode:
    """Diode factory. ``D("1N4148")`` or ``D(forward_voltage=0.3)``."""
    return Diode(part_number, forward_voltage=forward_voltage, max_current=max_current)


def LED(
    color: Color | str = Color.RED,
    *,
    forward_voltage: float | None = None,
    max_current: float = DEFAULT_LED_MAX_CURRENT,
) -> LightEmittingDiode:
    return LightEmittingDiode(
        color, forward_voltage=forward_voltage, max_current=max_current
    )


create_led = LED
