"""Bipolar and MOS transistors with model presets."""

from __future__ import annotations

from typing import Any

from wirelang.core.component import Component, compact_extras
from wirelang.core.pin import Pin
from wirelang.core.types import ComponentType, TransistorType

GENERIC_MODEL = "generic"

BJT_MODELS: dict[str, dict[str, float]] = {
    # NPN
    "2N2222": {"hfe": 100, "vce_sat": 0.3, "vbe": 0.7},
    "2N3904": {"hfe": 150, "vce_sat": 0.2, "vbe": 0.7},
    "BC547": {"hfe": 200, "vce_sat": 0.2, "vbe": 0.7},
    "BC548": {"hfe": 200, "vce_sat": 0.2, "vbe": 0.7},
    # PNP
    "2N2907": {"hfe": 100, "vce_sat": 0.3, "vbe": 0.7},
    "2N3906": {"hfe": 150, "vce_sat": 0.2, "vbe": 0.7},
    "BC557": {"hfe": 200, "vce_sat": 0.2, "vbe": 0.7},
    GENERIC_MODEL: {"hfe": 100, "vce_sat": 0.3, "vbe": 0.7},
}

MOSFET_MODELS: dict[str, dict[str, float]] = {
    # N-channel
    "2N7000": {"vth": 2.1, "rds_on": 5, "id_max": 0.2},
    "BS170": {"vth": 2.1, "rds_on": 5, "id_max": 0.5},
    "IRF540": {"vth": 4.0, "rds_on": 0.077, "id_max": 28},
    "IRF3205": {"vth": 4.0, "rds_on": 0.008, "id_max": 110},
    "IRLZ44N": {"vth": 2.0, "rds_on": 0.022, "id_max": 47},
    # P-channel
    "IRF9540": {"vth": -4.0, "rds_on": 0.2, "id_max": 19},
    "IRF5305": {"vth": -4.0, "rds_on": 0.06, "id_max": 31},
    GENERIC_MODEL: {"vth": 2.0, "rds_on": 0.1, "id_max": 1},
}


def model_defaults(table: dict[str, dict[str, float]], model: str) -> dict[str, float]:
    """Preset values for ``model``; unknown models fall back to generic."""
    return table.get(model, table[GENERIC_MODEL])


class BipolarTransistor(Component):
    """NPN or PNP transistor. Pins: base, collector, emitter."""

    type = ComponentType.BJT
    prefix = "Q"
    pin_layout = (("B", None), ("C", None), ("E", None))

    def __init__(
        self,
        transistor_type: TransistorType | str = TransistorType.NPN,
        model: str = GENERIC_MODEL,
        *,
        hfe: float | None = None,
        vce_sat: float | None = None,
        vbe: float | None = None,
        label: str | None = None,
    ):
        transistor_type = TransistorType(transistor_type)
        defaults = model_defaults(BJT_MODELS, model)
        self.transistor_type = transistor_type
        self.model = model
        self.hfe = hfe if hfe is not None else defaults["hfe"]
        self.vce_sat = vce_sat if vce_sat is not None else defaults["vce_sat"]
        self.vbe = vbe if vbe is not None else defaults["vbe"]
        super().__init__(
            {
                "value": self.hfe,
                "unit": "hfe",
                "model": model,
                "transistorType": transistor_type.value,
            },
            label,
        )

    @property
    def B(self) -> Pin:
        return self.pins[0]

    @property
    def C(self) -> Pin:
        return self.pins[1]

    @property
    def E(self) -> Pin:
        return self.pins[2]

    def extras(self) -> dict[str, Any]:
        return compact_extras(
            model=self.model, hfe=self.hfe, vce_sat=self.vce_sat, vbe=self.vbe
        )

    def validate(self) -> list[str]:
        errors = super().validate()
        if self.hfe <= 0:
            errors.append(
                f"{self.transistor_type.value}: hfe (current gain) must be positive"
            )
        return errors

    def __repr__(self) -> str:
        return f"{self.transistor_type.value}({self.model}, hfe={self.hfe})"


class MosTransistor(Component):
    """N- or P-channel MOSFET. Pins: gate, drain, source.

    The parameter bag stores ``|vth|`` so a P-channel threshold does not
    trip the negative-value rule; the signed threshold stays on ``vth``.
    """

    type = ComponentType.MOSFET
    prefix = "M"
    pin_layout = (("G", None), ("D", None), ("S", None))

    def __init__(
        self,
        transistor_type: TransistorType | str = TransistorType.NMOS,
        model: str = GENERIC_MODEL,
        *,
        vth: float | None = None,
        rds_on: float | None = None,
        id_max: float | None = None,
        label: str | None = None,
    ):
        transistor_type = TransistorType(transistor_type)
        defaults = model_defaults(MOSFET_MODELS, model)
        if vth is None:
            vth = defaults["vth"]
            if transistor_type is TransistorType.PMOS:
                vth = -abs(vth)
        self.transistor_type = transistor_type
        self.model = model
        self.vth = vth
        self.rds_on = rds_on if rds_on is not None else defaults["rds_on"]
        self.id_max = id_max if id_max is not None else defaults["id_max"]
        super().__init__(
            {
                "value": abs(vth),
                "unit": "V",
                "model": model,
                "transistorType": transistor_type.value,
            },
            label,
        )

    @property
    def G(self) -> Pin:
        return self.pins[0]

    @property
    def D(self) -> Pin:
        return self.pins[1]

    @property
    def S(self) -> Pin:
        return self.pins[2]

    def extras(self) -> dict[str, Any]:
        return compact_extras(
            model=self.model, vth=self.vth, rds_on=self.rds_on, id_max=self.id_max
        )

    def validate(self) -> list[str]:
        errors = super().validate()
        kind = self.transistor_type.value
        if self.rds_on < 0:
            errors.append(f"{kind}: Rds(on) cannot be negative")
        if self.id_max <= 0:
            errors.append(f"{kind}: Max drain current must be positive")
        return errors

    def __repr__(self) -> str:
        return f"{self.transistor_type.value}({self.model}, Vth={self.vth}V)"


# ─── Factories ───


def NPN(
    model: str = GENERIC_MODEL,
    *,
    hfe: float | None = None,
    vce_sat: float | None = None,
    vbe: float | None = None,
) -> BipolarTransistor:
    return BipolarTransistor(
        TransistorType.NPN, model, hfe=hfe, vce_sat=vce_sat, vbe=vbe
    )


def PNP(
    model: str = GENERIC_MODEL,
    *,
    hfe: float | None = None,
    vce_sat: float | None = None,
    vbe: float | None = None,
) -> BipolarTransistor:
    return BipolarTransistor(
        TransistorType.PNP, model, hfe=hfe, vce_sat=vce_sat, vbe=vbe
    )


def NMOS(
    model: str = GENERIC_MODEL,
    *,
    vth: float | None = None,
    rds_on: float | None = None,
    id_max: float | None = None,
) -> MosTransistor:
    return MosTransistor(
        TransistorType.NMOS, model, vth=vth, rds_on=rds_on, id_max=id_max
    )


def PMOS(
    model: str = GENERIC_MODEL,
    *,
    vth: float | None = None,
    rds_on: float | None = None,
    id_max: float | None = None,
) -> MosTransistor:
    return MosTransistor(
        TransistorType.PMOS, model, vth=vth, rds_on=rds_on, id_max=id_max
    )
