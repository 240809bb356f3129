"""``wirelang`` command line.

    wirelang dsl2db circuit.py [--export schematic] [--out circuit.json]
    wirelang db2dsl circuit.json [--out circuit.py] [--module wirelang] [--no-ids]
    wirelang validate circuit.json|circuit.py [--export schematic]
    wirelang example led [--json]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from wirelang.config import get_settings
from wirelang.core.component import PinNotFoundError
from wirelang.core.schematic import Schematic
from wirelang.dsl import TopologyError
from wirelang.examples import EXAMPLES
from wirelang.schemas.db import DbToDslOptions, DocumentValidationError, parse_db
from wirelang.transform.calls import UnsupportedComponentError
from wirelang.transform.compiler import compile_dsl_to_db
from wirelang.transform.loader import (
    ExportNotFoundError,
    load_schematic,
    schematic_from_db,
)
from wirelang.transform.reverse import reverse_db_to_dsl

logger = logging.getLogger(__name__)

# Failures reported as a one-line message instead of a traceback.
CLI_ERRORS = (
    OSError,
    ExportNotFoundError,
    DocumentValidationError,
    ValidationError,
    UnsupportedComponentError,
    PinNotFoundError,
    TopologyError,
)


def _emit(text: str, out: str | None) -> None:
    if out:
        Path(out).write_text(text, encoding="utf-8")
        logger.info("Wrote %s", out)
    else:
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")


def _load_any(path: str, export_name: str) -> Schematic:
    if path.endswith(".json"):
        db = parse_db(Path(path).read_text(encoding="utf-8"), source=path)
        return schematic_from_db(db)
    return load_schematic(path, export_name)


# ─── Commands ───


def cmd_dsl2db(args: argparse.Namespace) -> int:
    schematic = load_schematic(args.input, args.export)
    db = compile_dsl_to_db(schematic)
    _emit(db.to_json(), args.out)
    return 0


def cmd_db2dsl(args: argparse.Namespace) -> int:
    db = parse_db(Path(args.input).read_text(encoding="utf-8"), source=args.input)
    options = DbToDslOptions(
        module_import=args.module,
        export_name=args.export,
        preserve_ids=not args.no_ids,
    )
    _emit(reverse_db_to_dsl(db, options), args.out)
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    schematic = _load_any(args.input, args.export)
    result = schematic.validate()
    for message in result.errors:
        print(f"error: {message}")
    for message in result.warnings:
        print(f"warning: {message}")
    print(
        f"{schematic.name}: {result.status.value} "
        f"({len(result.errors)} error(s), {len(result.warnings)} warning(s))"
    )
    return 0 if result.valid else 1


def cmd_example(args: argparse.Namespace) -> int:
    schematic = EXAMPLES[args.name]()
    if args.json:
        _emit(compile_dsl_to_db(schematic).to_json(), args.out)
    else:
        _emit(schematic.summary(), args.out)
    return 0


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="wirelang", description="WireLang circuit topology tools"
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (default: %(default)s)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("dsl2db", help="Compile a Python circuit module to a JSON document")
    p.add_argument("input", help="Python file exporting a schematic")
    p.add_argument("--export", default=settings.export_name, help="Export name")
    p.add_argument("--out", help="Output file (default: stdout)")
    p.set_defaults(func=cmd_dsl2db)

    p = sub.add_parser("db2dsl", help="Generate Python source from a JSON document")
    p.add_argument("input", help="wirelang-db@v1 JSON file")
    p.add_argument("--out", help="Output file (default: stdout)")
    p.add_argument("--module", default=settings.module_import, help="Import path in generated code")
    p.add_argument("--export", default=settings.export_name, help="Export name in generated code")
    p.add_argument("--no-ids", action="store_true", help="Do not pin ids and labels")
    p.set_defaults(func=cmd_db2dsl)

    p = sub.add_parser("validate", help="Validate a document or circuit module")
    p.add_argument("input", help="JSON document or Python file")
    p.add_argument("--export", default=settings.export_name, help="Export name for Python input")
    p.set_defaults(func=cmd_validate)

    p = sub.add_parser("example", help="Print a bundled example circuit")
    p.add_argument("name", choices=sorted(EXAMPLES))
    p.add_argument("--json", action="store_true", help="Print the JSON document instead of a summary")
    p.add_argument("--out", help="Output file (default: stdout)")
    p.set_defaults(func=cmd_example)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        return args.func(args)
    except CLI_ERRORS as e:
        print(f"wirelang: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
