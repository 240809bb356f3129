"""Operational amplifiers.

5-pin pinout: inP (+), inN (-), out, vPos (V+), vNeg (V-).
The 3-pin variant drops the supply pins. Both chain inP -> out.
"""

from __future__ import annotations

from typing import Any

from wirelang.core.component import Component, compact_extras
from wirelang.core.pin import Pin
from wirelang.core.types import ComponentType, PinDirection

DEFAULT_PART_NUMBER = "Generic"
DEFAULT_GAIN = 100_000


class OpAmpComponent(Component):
    type = ComponentType.OPAMP
    prefix = "U"
    pin_layout = (
        ("inP", PinDirection.INPUT),
        ("inN", PinDirection.INPUT),
        ("out", PinDirection.OUTPUT),
        ("vPos", PinDirection.INPUT),
        ("vNeg", PinDirection.INPUT),
    )
    series_terminals = (0, 2)

    def __init__(
        self,
        part_number: str | None = None,
        *,
        gain: float | None = None,
        label: str | None = None,
    ):
        self.part_number = part_number or DEFAULT_PART_NUMBER
        self.gain = gain if gain is not None else DEFAULT_GAIN
        super().__init__(
            {"value": self.gain, "unit": "V/V", "partNumber": self.part_number},
            label,
        )

    @property
    def in_p(self) -> Pin:
        return self.pin("inP")

    @property
    def in_n(self) -> Pin:
        return self.pin("inN")

    @property
    def out(self) -> Pin:
        return self.pin("out")

    @property
    def pin_count(self) -> int:
        return len(self.pins)

    def extras(self) -> dict[str, Any]:
        return compact_extras(partNumber=self.part_number, gain=self.gain)

    def validate(self) -> list[str]:
        if self.gain <= 0:
            return ["OpAmp: Gain must be positive"]
        return []

    def __repr__(self) -> str:
        return f"{type(self).__name__.removesuffix('Component')}({self.part_number})"


class OpAmp3Component(OpAmpComponent):
    pin_layout = OpAmpComponent.pin_layout[:3]


def OpAmp(part_number: str | None = None, *, gain: float | None = None) -> OpAmpComponent:
    return OpAmpComponent(part_number, gain=gain)


def OpAmp3(part_number: str | None = None, *, gain: float | None = None) -> OpAmp3Component:
    return OpAmp3Component(part_number, gain=gain)


def LM741() -> OpAmpComponent:
    return OpAmp("LM741")


def TL072() -> OpAmpComponent:
    return OpAmp("TL072")


def NE5532() -> OpAmpComponent:
    return OpAmp("NE5532")


def LM358() -> OpAmpComponent:
    return OpAmp("LM358")
