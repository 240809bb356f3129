"""Per-variant factory-call table.

Maps a document component record to the shortest factory call that
rebuilds it: positional arguments for the common case, keyword arguments
only for fields that differ from the factory's defaults. The same call is
rendered as source by the reverse transform and invoked directly by the
document loader, so both paths agree on what each record means.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from wirelang.components import diodes, logic, opamp, passives, sources, transistors
from wirelang.core.component import Component
from wirelang.core.types import Color, ComponentType, GateType, SourceType, TransistorType
from wirelang.schemas.db import DbComponent

logger = logging.getLogger(__name__)


class UnsupportedComponentError(ValueError):
    """Raised for a component record whose variant cannot be rebuilt."""

    def __init__(self, type_tag: str, detail: str | None = None):
        self.type_tag = type_tag
        message = f"Unsupported component type: {type_tag}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


FACTORIES: dict[str, Callable[..., Component]] = {
    "R": passives.R,
    "C": passives.C,
    "L": passives.L,
    "D": diodes.D,
    "LED": diodes.LED,
    "DC": sources.DC,
    "AC": sources.AC,
    "IDC": sources.IDC,
    "IAC": sources.IAC,
    "VoltageSource": sources.VoltageSource,
    "CurrentSource": sources.CurrentSource,
    "GND": sources.GND,
    "VCC": sources.VCC,
    "VDD": sources.VDD,
    "VPOS": sources.VPOS,
    "VNEG": sources.VNEG,
    "PowerRail": sources.PowerRail,
    "NPN": transistors.NPN,
    "PNP": transistors.PNP,
    "NMOS": transistors.NMOS,
    "PMOS": transistors.PMOS,
    "OpAmp": opamp.OpAmp,
    "OpAmp3": opamp.OpAmp3,
    "NOT": logic.NOT,
    "AND": logic.AND,
    "OR": logic.OR,
    "XOR": logic.XOR,
    "NAND": logic.NAND,
    "NOR": logic.NOR,
    "HIGH": logic.HIGH,
    "LOW": logic.LOW,
    "CLK": logic.CLK,
}


def _literal(value: Any) -> str:
    """Source literal for one argument. ``repr(inf)`` is not valid Python."""
    if isinstance(value, float) and not math.isfinite(value):
        return f"float({str(value)!r})"
    return repr(value)


@dataclass
class ComponentCall:
    factory: str
    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = field(default_factory=dict)

    def render(self) -> str:
        parts = [_literal(arg) for arg in self.args]
        parts.extend(f"{key}={_literal(val)}" for key, val in self.kwargs.items())
        return f"{self.factory}({', '.join(parts)})"

    def instantiate(self) -> Component:
        return FACTORIES[self.factory](*self.args, **self.kwargs)


def _changed(**fields: tuple[Any, Any]) -> dict[str, Any]:
    """Keep ``name=(value, default)`` pairs whose value differs."""
    return {
        name: value
        for name, (value, default) in fields.items()
        if value is not None and value != default
    }


# ─── Builders ───


def _passive(factory: str) -> Callable[[DbComponent], ComponentCall]:
    def build(record: DbComponent) -> ComponentCall:
        return ComponentCall(factory, (record.params.value,))

    return build


def _diode(record: DbComponent) -> ComponentCall:
    part_number = record.extra("partNumber")
    kwargs = _changed(
        forward_voltage=(
            record.extra("forwardVoltage", record.params.value),
            diodes.DEFAULT_FORWARD_VOLTAGE,
        ),
        max_current=(record.extra("maxCurrent"), None),
    )
    return ComponentCall("D", (part_number,) if part_number is not None else (), kwargs)


def _led(record: DbComponent) -> ComponentCall:
    color = Color(record.extra("color", Color.RED.value))
    kwargs = _changed(
        forward_voltage=(
            record.extra("forwardVoltage", record.params.value),
            diodes.LED_FORWARD_VOLTAGES[color],
        ),
        max_current=(record.extra("maxCurrent"), diodes.DEFAULT_LED_MAX_CURRENT),
    )
    args = (color.value,) if color is not Color.RED else ()
    return ComponentCall("LED", args, kwargs)


def _source(dc: str, ac: str, generic: str) -> Callable[[DbComponent], ComponentCall]:
    def build(record: DbComponent) -> ComponentCall:
        value = record.params.value
        source_type = SourceType(record.extra("sourceType", SourceType.DC.value))
        frequency = record.extra("frequency")
        if source_type is SourceType.AC:
            if frequency is not None:
                return ComponentCall(ac, (value, frequency))
            return ComponentCall(generic, (value,), {"source_type": source_type.value})
        if frequency is not None:
            return ComponentCall(generic, (value,), {"frequency": frequency})
        return ComponentCall(dc, (value,))

    return build


_RAIL_FACTORIES = {"VCC": "VCC", "VDD": "VDD", "V+": "VPOS", "V-": "VNEG"}


def _power_rail(record: DbComponent) -> ComponentCall:
    rail_name = record.extra("railName", "VCC")
    value = record.params.value
    if rail_name in _RAIL_FACTORIES:
        return ComponentCall(_RAIL_FACTORIES[rail_name], (value,))
    return ComponentCall("PowerRail", (value, rail_name))


def _bjt(record: DbComponent) -> ComponentCall:
    transistor_type = TransistorType(record.extra("transistorType", "NPN"))
    if transistor_type not in (TransistorType.NPN, TransistorType.PNP):
        raise UnsupportedComponentError(record.type, f"transistorType={transistor_type.value}")
    model = record.extra("model", transistors.GENERIC_MODEL)
    defaults = transistors.model_defaults(transistors.BJT_MODELS, model)
    kwargs = _changed(
        hfe=(record.extra("hfe", record.params.value), defaults["hfe"]),
        vce_sat=(record.extra("vce_sat"), defaults["vce_sat"]),
        vbe=(record.extra("vbe"), defaults["vbe"]),
    )
    args = (model,) if model != transistors.GENERIC_MODEL else ()
    return ComponentCall(transistor_type.value, args, kwargs)


def _mosfet(record: DbComponent) -> ComponentCall:
    transistor_type = TransistorType(record.extra("transistorType", "NMOS"))
    if transistor_type not in (TransistorType.NMOS, TransistorType.PMOS):
        raise UnsupportedComponentError(record.type, f"transistorType={transistor_type.value}")
    p_channel = transistor_type is TransistorType.PMOS
    model = record.extra("model", transistors.GENERIC_MODEL)
    defaults = transistors.model_defaults(transistors.MOSFET_MODELS, model)
    default_vth = -abs(defaults["vth"]) if p_channel else defaults["vth"]
    vth = record.extra("vth")
    if vth is None:
        vth = -record.params.value if p_channel else record.params.value
    kwargs = _changed(
        vth=(vth, default_vth),
        rds_on=(record.extra("rds_on"), defaults["rds_on"]),
        id_max=(record.extra("id_max"), defaults["id_max"]),
    )
    args = (model,) if model != transistors.GENERIC_MODEL else ()
    return ComponentCall(transistor_type.value, args, kwargs)


def _opamp(record: DbComponent) -> ComponentCall:
    factory = "OpAmp3" if len(record.pins) == 3 else "OpAmp"
    part_number = record.extra("partNumber", opamp.DEFAULT_PART_NUMBER)
    kwargs = _changed(gain=(record.extra("gain", record.params.value), opamp.DEFAULT_GAIN))
    args = (part_number,) if part_number != opamp.DEFAULT_PART_NUMBER else ()
    return ComponentCall(factory, args, kwargs)


def _logic_gate(record: DbComponent) -> ComponentCall:
    gate_type = record.extra("gateType")
    try:
        gate = GateType(gate_type)
    except ValueError:
        raise UnsupportedComponentError(record.type, f"gateType={gate_type!r}") from None
    family = record.extra("family", logic.DEFAULT_FAMILY)
    args = (family,) if family != logic.DEFAULT_FAMILY else ()
    return ComponentCall(gate.value, args)


def _clock(record: DbComponent) -> ComponentCall:
    frequency = record.extra("frequency", record.params.value)
    duty_cycle = record.extra("dutyCycle", 0.5)
    if duty_cycle != 0.5:
        return ComponentCall("CLK", (frequency, duty_cycle))
    return ComponentCall("CLK", (frequency,))


def _fixed(factory: str) -> Callable[[DbComponent], ComponentCall]:
    def build(record: DbComponent) -> ComponentCall:
        return ComponentCall(factory)

    return build


CALL_BUILDERS: dict[ComponentType, Callable[[DbComponent], ComponentCall]] = {
    ComponentType.RESISTOR: _passive("R"),
    ComponentType.CAPACITOR: _passive("C"),
    ComponentType.INDUCTOR: _passive("L"),
    ComponentType.DIODE: _diode,
    ComponentType.LED: _led,
    ComponentType.VOLTAGE_SOURCE: _source("DC", "AC", "VoltageSource"),
    ComponentType.CURRENT_SOURCE: _source("IDC", "IAC", "CurrentSource"),
    ComponentType.GROUND: _fixed("GND"),
    ComponentType.POWER_RAIL: _power_rail,
    ComponentType.BJT: _bjt,
    ComponentType.MOSFET: _mosfet,
    ComponentType.OPAMP: _opamp,
    ComponentType.LOGIC_GATE: _logic_gate,
    ComponentType.LOGIC_HIGH: _fixed("HIGH"),
    ComponentType.LOGIC_LOW: _fixed("LOW"),
    ComponentType.CLOCK: _clock,
}


def build_call(record: DbComponent) -> ComponentCall:
    """Factory call for one document component.

    Raises:
        UnsupportedComponentError: unknown variant tag or sub-type.
    """
    try:
        type_tag = ComponentType(record.type)
    except ValueError:
        raise UnsupportedComponentError(record.type) from None
    try:
        return CALL_BUILDERS[type_tag](record)
    except ValueError as e:
        if isinstance(e, UnsupportedComponentError):
            raise
        # Bad enum value inside the record (color, sourceType, ...).
        raise UnsupportedComponentError(record.type, str(e)) from e
