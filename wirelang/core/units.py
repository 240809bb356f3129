"""SI unit helpers.

Plain multiplier functions (``kOhm(10) == 10_000``) plus formatting and
parsing of values such as ``4.7kΩ`` or ``100nF``.
"""

from __future__ import annotations

import re

PICO = 1e-12
NANO = 1e-9
MICRO = 1e-6
MILLI = 1e-3
KILO = 1e3
MEGA = 1e6
GIGA = 1e9

PREFIX_MULTIPLIERS: dict[str, float] = {
    "p": PICO,
    "n": NANO,
    "u": MICRO,
    "µ": MICRO,
    "m": MILLI,
    "k": KILO,
    "M": MEGA,
    "G": GIGA,
}

# Ordered largest first; the first threshold <= |value| wins.
_FORMAT_STEPS: tuple[tuple[float, str], ...] = (
    (GIGA, "G"),
    (MEGA, "M"),
    (KILO, "k"),
    (1.0, ""),
    (MILLI, "m"),
    (MICRO, "µ"),
    (NANO, "n"),
    (PICO, "p"),
)

_VALUE_RE = re.compile(r"^([\d.]+)\s*([pnuµmkMG]?)(\w+)$")


# ─── Resistance ───


def ohm(value: float) -> float:
    return value


def kOhm(value: float) -> float:
    return value * KILO


def MOhm(value: float) -> float:
    return value * MEGA


# ─── Capacitance ───


def F(value: float) -> float:
    return value


def mF(value: float) -> float:
    return value * MILLI


def uF(value: float) -> float:
    return value * MICRO


def nF(value: float) -> float:
    return value * NANO


def pF(value: float) -> float:
    return value * PICO


# ─── Inductance ───


def H(value: float) -> float:
    return value


def mH(value: float) -> float:
    return value * MILLI


def uH(value: float) -> float:
    return value * MICRO


def nH(value: float) -> float:
    return value * NANO


# ─── Voltage ───


def V(value: float) -> float:
    return value


def mV(value: float) -> float:
    return value * MILLI


def uV(value: float) -> float:
    return value * MICRO


def kV(value: float) -> float:
    return value * KILO


# ─── Current ───


def A(value: float) -> float:
    return value


def mA(value: float) -> float:
    return value * MILLI


def uA(value: float) -> float:
    return value * MICRO


def nA(value: float) -> float:
    return value * NANO


# ─── Frequency ───


def Hz(value: float) -> float:
    return value


def kHz(value: float) -> float:
    return value * KILO


def MHz(value: float) -> float:
    return value * MEGA


def GHz(value: float) -> float:
    return value * GIGA


# ─── Power ───


def W(value: float) -> float:
    return value


def mW(value: float) -> float:
    return value * MILLI


def uW(value: float) -> float:
    return value * MICRO


def kW(value: float) -> float:
    return value * KILO


# ─── Formatting ───


def _trim(number: float) -> str:
    return f"{number:.6g}"


def format_with_unit(value: float, base_unit: str) -> str:
    """Render ``value`` with the largest SI prefix that keeps it >= 1.

    >>> format_with_unit(4700, "Ω")
    '4.7kΩ'
    """
    magnitude = abs(value)
    if magnitude == 0:
        return f"{_trim(value)}{base_unit}"
    for threshold, prefix in _FORMAT_STEPS:
        if magnitude >= threshold:
            return f"{_trim(value / threshold)}{prefix}{base_unit}"
    return f"{_trim(value)}{base_unit}"


def parse_with_unit(text: str) -> tuple[float, str]:
    """Parse ``"4.7kΩ"`` into ``(4700.0, "Ω")``.

    Raises:
        ValueError: when the text is not ``<number><prefix?><unit>``.
    """
    match = _VALUE_RE.match(text.strip())
    if match is None:
        raise ValueError(f"Invalid unit format: {text}")
    number, prefix, unit = match.groups()
    try:
        magnitude = float(number)
    except ValueError as e:
        raise ValueError(f"Invalid unit format: {text}") from e
    return magnitude * PREFIX_MULTIPLIERS.get(prefix, 1.0), unit
