"""Load schematics from source files, source text or documents."""

from __future__ import annotations

import importlib.util
import logging
import uuid
from pathlib import Path
from typing import Any

from wirelang.core.node import Node
from wirelang.core.schematic import Schematic
from wirelang.schemas.db import WireLangDb
from wirelang.transform.calls import build_call
from wirelang.transform.identity import apply_component_identity, apply_node_identity

logger = logging.getLogger(__name__)


class ExportNotFoundError(LookupError):
    """Raised when a loaded module does not export a schematic."""

    def __init__(self, export_name: str, source: str, detail: str = "not found"):
        self.export_name = export_name
        self.source = source
        super().__init__(f"Export {export_name!r} {detail} in {source}")


def _resolve_export(namespace: dict[str, Any], export_name: str, source: str) -> Schematic:
    if export_name not in namespace:
        raise ExportNotFoundError(export_name, source)
    exported = namespace[export_name]
    # A builder function is called to produce the schematic.
    if callable(exported) and not isinstance(exported, Schematic):
        exported = exported()
    if not isinstance(exported, Schematic):
        raise ExportNotFoundError(
            export_name,
            source,
            detail=f"is a {type(exported).__name__}, not a Schematic,",
        )
    return exported


def load_source(text: str, export_name: str = "schematic", filename: str = "<wirelang>") -> Schematic:
    """Execute source text and return its exported schematic.

    The text runs with full interpreter privileges, so only pass trusted
    source (such as the output of ``reverse_db_to_dsl``). The HTTP app
    never calls this.
    """
    namespace: dict[str, Any] = {"__name__": f"wirelang_source_{uuid.uuid4().hex}"}
    exec(compile(text, filename, "exec"), namespace)
    return _resolve_export(namespace, export_name, filename)


def load_schematic(path: str | Path, export_name: str = "schematic") -> Schematic:
    """Import a Python file and return its exported schematic.

    Raises:
        FileNotFoundError: ``path`` does not exist.
        ExportNotFoundError: the module has no usable ``export_name``.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"No such file: {path}")
    module_name = f"wirelang_user_{path.stem}_{uuid.uuid4().hex[:8]}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot import {path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    logger.info("Loaded %s (export %r)", path, export_name)
    return _resolve_export(vars(module), export_name, str(path))


def schematic_from_db(db: WireLangDb) -> Schematic:
    """Rebuild a live schematic straight from a document.

    Uses the same factory-call table as the source generator. Ids and
    labels are restored; unconnected pins stay unconnected.
    """
    schematic = Schematic(db.name)
    nodes: dict[str, Node] = {}
    for record in db.nodes:
        node = schematic.create_node(record.name)
        nodes[record.id] = apply_node_identity(node, record.id)

    for record in db.components:
        component = build_call(record).instantiate()
        apply_component_identity(
            component,
            id=record.id,
            label=record.label,
            pin_ids={pin.name: pin.id for pin in record.pins},
        )
        schematic.add_component(component)
        for pin_record in record.pins:
            if pin_record.node_id is None:
                continue
            node = nodes.get(pin_record.node_id)
            if node is None:
                logger.warning(
                    "Document %r: pin %s references missing node %s",
                    db.name,
                    pin_record.id,
                    pin_record.node_id,
                )
                node = apply_node_identity(Node(), pin_record.node_id)
                nodes[pin_record.node_id] = node
            schematic.connect(component.pin(pin_record.name), node)

    return schematic
