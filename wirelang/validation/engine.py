"""Topology Validation Engine — Deterministic Rule-Based Schematic Checker.

Validates a schematic against five rules:
  1. Component parameter sanity (per-variant rules)
  2. Every pin bound to a node
  3. No non-ground node carrying a single pin
  4. At least one component
  5. A ground reference (ground node or ground component)

Input:  Schematic
Output: ValidationResult with status VALID|INVALID, errors[], warnings[],
        and the structured findings behind them

Findings are always fully collected; nothing here raises.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from wirelang.core.types import ComponentType
from wirelang.schemas.validation import (
    ValidationFinding,
    ValidationResult,
    ValidationSeverity,
    ValidationStatus,
)

if TYPE_CHECKING:
    from wirelang.core.schematic import Schematic

Check = Callable[["Schematic"], list[ValidationFinding]]


# ═══════════════════════════════════════════════════════════
# Check 1: Component Values
# ═══════════════════════════════════════════════════════════


def check_component_values(schematic: Schematic) -> list[ValidationFinding]:
    """Collect every component's own parameter findings as errors."""
    findings: list[ValidationFinding] = []
    for component in schematic.components:
        for message in component.validate():
            findings.append(
                ValidationFinding(
                    code="E_COMPONENT_VALUE",
                    severity=ValidationSeverity.ERROR,
                    message=message,
                    refs=[component.id],
                )
            )
    return findings


# ═══════════════════════════════════════════════════════════
# Check 2: Unconnected Pins
# ═══════════════════════════════════════════════════════════


def check_unconnected_pins(schematic: Schematic) -> list[ValidationFinding]:
    return [
        ValidationFinding(
            code="W_UNCONNECTED_PIN",
            severity=ValidationSeverity.WARNING,
            message=f"Unconnected pin: {pin.full_name}",
            refs=[pin.id],
        )
        for pin in schematic.get_unconnected_pins()
    ]


# ═══════════════════════════════════════════════════════════
# Check 3: Dangling Nodes
# ═══════════════════════════════════════════════════════════


def check_dangling_nodes(schematic: Schematic) -> list[ValidationFinding]:
    """A non-ground node with exactly one pin goes nowhere."""
    findings: list[ValidationFinding] = []
    for node in schematic.nodes:
        if node.is_ground():
            continue
        pins = schematic.get_pins_at_node(node)
        if len(pins) == 1:
            findings.append(
                ValidationFinding(
                    code="W_SINGLE_CONNECTION",
                    severity=ValidationSeverity.WARNING,
                    message=f"Node {node} has only one connection",
                    refs=[node.id, pins[0].id],
                )
            )
    return findings


# ═══════════════════════════════════════════════════════════
# Check 4: Empty Circuit
# ═══════════════════════════════════════════════════════════


def check_has_components(schematic: Schematic) -> list[ValidationFinding]:
    if schematic.components:
        return []
    return [
        ValidationFinding(
            code="E_EMPTY_CIRCUIT",
            severity=ValidationSeverity.ERROR,
            message="Circuit has no components",
        )
    ]


# ═══════════════════════════════════════════════════════════
# Check 5: Ground Reference
# ═══════════════════════════════════════════════════════════


def check_ground_reference(schematic: Schematic) -> list[ValidationFinding]:
    has_ground = any(n.is_ground() for n in schematic.nodes) or any(
        c.type == ComponentType.GROUND for c in schematic.components
    )
    if has_ground:
        return []
    return [
        ValidationFinding(
            code="W_NO_GROUND",
            severity=ValidationSeverity.WARNING,
            message="Circuit has no ground reference",
        )
    ]


# ═══════════════════════════════════════════════════════════
# Main Validator
# ═══════════════════════════════════════════════════════════

ALL_CHECKS: list[Check] = [
    check_component_values,
    check_unconnected_pins,
    check_dangling_nodes,
    check_has_components,
    check_ground_reference,
]


def validate_schematic(
    schematic: Schematic,
    checks: list[Check] | None = None,
) -> ValidationResult:
    """Run all (or selected) checks on a schematic.

    Args:
        schematic: The schematic to validate.
        checks: Optional subset of check functions to run.
                Defaults to ALL_CHECKS.

    Returns:
        ValidationResult; ``valid`` is true iff no check produced an error.
    """
    check_fns = checks if checks is not None else ALL_CHECKS
    findings: list[ValidationFinding] = []
    checks_passed = 0

    for check_fn in check_fns:
        issues = check_fn(schematic)
        findings.extend(issues)
        if not any(f.severity == ValidationSeverity.ERROR for f in issues):
            checks_passed += 1

    errors = [f.message for f in findings if f.severity == ValidationSeverity.ERROR]
    warnings = [f.message for f in findings if f.severity != ValidationSeverity.ERROR]
    status = ValidationStatus.VALID if not errors else ValidationStatus.INVALID

    return ValidationResult(
        status=status,
        errors=errors,
        warnings=warnings,
        findings=findings,
        checks_passed=checks_passed,
        checks_total=len(check_fns),
    )
