"""Portable document -> Python source.

Emits a module that rebuilds the document's schematic through the public
factories:

    from wirelang import (
        DC,
        R,
        create_schematic,
    )

    s = create_schematic('Divider')

    V1 = DC(12.0)
    ...
    s.connect(V1.pin('positive'), node_1)

    schematic = s

Deterministic: the same document always yields the same text.
"""

from __future__ import annotations

import keyword
import logging
import re
from io import StringIO
from typing import TextIO

from wirelang.schemas.db import DbNode, DbToDslOptions, WireLangDb
from wirelang.transform.calls import ComponentCall, build_call

logger = logging.getLogger(__name__)

SCHEMATIC_VAR = "s"

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_]")


# ─── Identifiers ───


class IdentifierPool:
    """Hands out collision-free Python identifiers."""

    def __init__(self, reserved: set[str]):
        self._reserved = set(reserved)
        self._used: set[str] = set()

    def take(self, raw: str, fallback: str) -> str:
        base = to_safe_identifier(raw, fallback)
        if base in self._reserved or keyword.iskeyword(base):
            base = f"{base}_"
        name = base
        suffix = 2
        while name in self._used or name in self._reserved:
            name = f"{base}_{suffix}"
            suffix += 1
        self._used.add(name)
        return name


def to_safe_identifier(raw: str, fallback: str) -> str:
    """``"V+"`` -> ``"V_"``, ``"1k"`` -> ``"<fallback>_1k"``."""
    cleaned = _UNSAFE_CHARS.sub("_", raw or "")
    if not cleaned:
        return fallback
    if cleaned[0].isdigit():
        return f"{fallback}_{cleaned}"
    return cleaned


# ─── Emission ───


def _write_imports(out: TextIO, module: str, names: set[str]) -> None:
    out.write(f"from {module} import (\n")
    for name in sorted(names):
        out.write(f"    {name},\n")
    out.write(")\n")


def reverse_db_to_dsl(db: WireLangDb, options: DbToDslOptions | None = None) -> str:
    """Render ``db`` as Python source.

    Raises:
        UnsupportedComponentError: a component's variant has no factory.
    """
    opts = options or DbToDslOptions()

    # Resolve every call first so an unsupported variant fails before any
    # output is produced.
    calls: list[ComponentCall] = [build_call(c) for c in db.components]

    imports = {call.factory for call in calls} | {"create_schematic"}
    if opts.preserve_ids:
        imports |= {"apply_component_identity", "apply_node_identity"}

    pool = IdentifierPool(reserved=imports | {SCHEMATIC_VAR, opts.export_name})
    component_vars = [
        pool.take(record.label or record.id, "component") for record in db.components
    ]

    nodes = list(db.nodes)
    known = {n.id for n in nodes}
    for record in db.components:
        for pin in record.pins:
            if pin.node_id is not None and pin.node_id not in known:
                logger.warning("Document %r: synthesizing missing node %s", db.name, pin.node_id)
                nodes.append(DbNode(id=pin.node_id))
                known.add(pin.node_id)
    node_vars = {
        node.id: pool.take(f"node_{node.name if node.name is not None else node.id}", "node")
        for node in nodes
    }

    out = StringIO()
    _write_imports(out, opts.module_import, imports)
    out.write("\n")
    out.write(f"{SCHEMATIC_VAR} = create_schematic({db.name!r})\n")

    if db.components:
        out.write("\n")
    for record, call, var in zip(db.components, calls, component_vars):
        out.write(f"{var} = {call.render()}\n")
        if opts.preserve_ids:
            pin_ids = {pin.name: pin.id for pin in record.pins}
            out.write(
                f"apply_component_identity({var}, id={record.id!r}, "
                f"label={record.label!r}, pin_ids={pin_ids!r})\n"
            )
    if component_vars:
        out.write(f"{SCHEMATIC_VAR}.add_components({', '.join(component_vars)})\n")

    if nodes:
        out.write("\n")
    for node in nodes:
        var = node_vars[node.id]
        args = repr(node.name) if node.name is not None else ""
        out.write(f"{var} = {SCHEMATIC_VAR}.create_node({args})\n")
        if opts.preserve_ids:
            out.write(f"apply_node_identity({var}, {node.id!r})\n")

    connects = [
        (var, pin.name, node_vars[pin.node_id])
        for record, var in zip(db.components, component_vars)
        for pin in record.pins
        if pin.node_id is not None
    ]
    if connects:
        out.write("\n")
    for var, pin_name, node_var in connects:
        out.write(f"{SCHEMATIC_VAR}.connect({var}.pin({pin_name!r}), {node_var})\n")

    out.write("\n")
    out.write(f"{opts.export_name} = {SCHEMATIC_VAR}\n")

    logger.debug(
        "Rendered %r: %d component(s), %d node(s), %d connection(s)",
        db.name,
        len(calls),
        len(nodes),
        len(connects),
    )
    return out.getvalue()


db_to_dsl = reverse_db_to_dsl
db2dsl = reverse_db_to_dsl
