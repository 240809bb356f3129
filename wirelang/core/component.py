"""Component base class.

A component owns an immutable, ordered tuple of pins, a parameter bag
(``value`` + ``unit`` plus variant keys) and a human label such as
``R1``. Concrete variants live in ``wirelang.components``; each one
declares its variant tag, pin layout and label prefix as class
attributes and lists its extension fields in ``extras()``.
"""

from __future__ import annotations

from typing import Any, ClassVar

from wirelang.core.pin import Pin
from wirelang.core.sequence import current_sequence
from wirelang.core.types import ComponentType, PinDirection


class PinNotFoundError(LookupError):
    """Raised when a component has no pin with the requested name."""

    def __init__(self, pin_name: str, label: str):
        self.pin_name = pin_name
        self.label = label
        super().__init__(f'Pin "{pin_name}" not found on component {label}')


PinSpec = tuple[str, PinDirection | None]


class Component:
    type: ClassVar[ComponentType]
    prefix: ClassVar[str] = "U"
    pin_layout: ClassVar[tuple[PinSpec, ...]] = ()
    # Indexes into ``pins`` for the series terminals p1 / p2.
    series_terminals: ClassVar[tuple[int, int]] = (0, 1)

    def __init__(self, params: dict[str, Any], label: str | None = None):
        seq = current_sequence()
        self.id: str = seq.next_component_id(self.type.value)
        self.params: dict[str, Any] = params
        self.label: str = label or seq.next_label(self.label_prefix())
        self.pins: tuple[Pin, ...] = tuple(
            Pin(name, direction, self) for name, direction in self.pin_layout
        )

    def label_prefix(self) -> str:
        return self.prefix

    # ─── Pins ───

    def get_pin(self, name: str) -> Pin | None:
        for pin in self.pins:
            if pin.name == name:
                return pin
        return None

    def pin(self, name: str) -> Pin:
        found = self.get_pin(name)
        if found is None:
            raise PinNotFoundError(name, self.label)
        return found

    @property
    def p1(self) -> Pin:
        return self.pins[self.series_terminals[0]]

    @property
    def p2(self) -> Pin:
        return self.pins[self.series_terminals[1]]

    # ─── Parameters ───

    @property
    def value(self) -> float:
        return self.params["value"]

    @property
    def unit(self) -> str:
        return self.params["unit"]

    def extras(self) -> dict[str, Any]:
        """Variant-specific fields that are not part of the parameter bag
        contract. ``None`` entries are omitted."""
        return {}

    def validate(self) -> list[str]:
        errors: list[str] = []
        if self.value < 0:
            errors.append(f"{self.type.value}: Value cannot be negative")
        return errors

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.label})"


class TwoTerminalComponent(Component):
    """Unpolarized two-pin part with pins ``1`` and ``2``."""

    pin_layout = (("1", None), ("2", None))


class PolarizedComponent(Component):
    pin_layout = (("anode", None), ("cathode", None))


class SingleTerminalComponent(Component):
    """One ``out`` pin; p1 and p2 both resolve to it."""

    pin_layout = (("out", PinDirection.OUTPUT),)
    series_terminals = (0, 0)


def compact_extras(**fields: Any) -> dict[str, Any]:
    """Drop ``None`` entries and store enum members by value."""
    return {
        key: getattr(val, "value", val) for key, val in fields.items() if val is not None
    }
