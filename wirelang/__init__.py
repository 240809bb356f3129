"""WireLang — circuit topology in Python.

Describe which pins of which components meet at which nodes, validate the
result, and move it to and from the ``wirelang-db@v1`` document format.
"""

from wirelang.components.diodes import (
    BLUE,
    GREEN,
    ORANGE,
    RED,
    WHITE,
    YELLOW,
    D,
    Diode,
    LED,
    LightEmittingDiode,
    create_led,
)
from wirelang.components.logic import (
    AND,
    CLK,
    HIGH,
    LOW,
    NAND,
    NOR,
    NOT,
    OR,
    XOR,
    ClockSource,
    LogicGate,
    LogicHigh,
    LogicLow,
)
from wirelang.components.opamp import (
    LM358,
    LM741,
    NE5532,
    TL072,
    OpAmp,
    OpAmp3,
    OpAmp3Component,
    OpAmpComponent,
)
from wirelang.components.passives import C, Capacitor, Inductor, L, R, Resistor
from wirelang.components.sources import (
    AC,
    DC,
    GND,
    IAC,
    IDC,
    VCC,
    VDD,
    VNEG,
    VPOS,
    CurrentSource,
    Ground,
    PowerRail,
    VoltageSource,
)
from wirelang.components.transistors import (
    NMOS,
    NPN,
    PMOS,
    PNP,
    BipolarTransistor,
    MosTransistor,
)
from wirelang.core.component import Component, PinNotFoundError
from wirelang.core.node import Node, create_ground_node
from wirelang.core.pin import Pin
from wirelang.core.schematic import AutoGroundResult, Schematic, create_schematic
from wirelang.core.sequence import IdentitySequence, identity_scope
from wirelang.core.types import (
    Color,
    ComponentType,
    GateType,
    PinDirection,
    SourceType,
    TransistorType,
)
from wirelang.core.units import (
    GHz,
    H,
    Hz,
    MHz,
    MOhm,
    format_with_unit,
    kHz,
    kOhm,
    mA,
    mH,
    mV,
    mW,
    nF,
    nH,
    ohm,
    parse_with_unit,
    pF,
    uA,
    uF,
    uH,
)
from wirelang.dsl import (
    Circuit,
    CircuitOptions,
    ConnectionResult,
    Parallel,
    Series,
    TopologyError,
    apply_to_circuit,
    junction,
    to_ground,
    wire,
)
from wirelang.schemas.db import (
    DbToDslOptions,
    DocumentValidationError,
    WireLangDb,
    parse_db,
)
from wirelang.schemas.validation import ValidationResult
from wirelang.transform.calls import UnsupportedComponentError
from wirelang.transform.compiler import compile_dsl_to_db, dsl2db, dsl_to_db
from wirelang.transform.identity import (
    apply_component_identity,
    apply_node_identity,
    apply_pin_identity,
)
from wirelang.transform.loader import (
    ExportNotFoundError,
    load_schematic,
    load_source,
    schematic_from_db,
)
from wirelang.transform.reverse import db2dsl, db_to_dsl, reverse_db_to_dsl

__version__ = "0.1.0"
