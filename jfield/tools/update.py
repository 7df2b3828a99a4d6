"""Field assignment: ``jfield set``.

CLI:
  jfield set [-f FILE] -k FIELD -v VALUE [-t TYPE] [--create-missing]
             [--in-place | --out FILE] [--schema SCHEMA] [--indent N]

TYPE is one of auto (default), string, number, boolean, null, array, object.
Without --in-place or --out the updated document goes to stdout and the file is
left alone. With --schema the updated document must validate before anything
is written.

Exit codes:
  0 OK
  1 path syntax / navigation / value coercion error
  2 schema validation failed
  3 IO/JSON parse error
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Union

from jfield.errors import JFieldError
from jfield.tools import schema as schema_mod
from jfield.tools.diag import report
from jfield.tools.coerce import TypeHint, coerce
from jfield.tools.jsonio import check_indent, default_file, default_indent, dumps_document, load_json, write_atomic
from jfield.tools.navigate import set_value
from jfield.tools.path import parse

TYPE_CHOICES = ["auto"] + [h.value for h in TypeHint]


@dataclass
class SetConfig:
    file_path: str = "package.json"
    field_path: str = "name"
    value: str = ""
    value_type: Optional[TypeHint] = None
    create_missing: bool = False


def set_field(config: SetConfig, schema_path: Optional[Union[str, Path]] = None) -> Any:
    """Apply ``config`` to the file's document and return the updated document.

    The file itself is not touched.
    """
    doc = load_json(config.file_path)
    steps = parse(config.field_path)
    value = coerce(config.value, config.value_type)
    set_value(doc, steps, value, create_missing=config.create_missing)
    if schema_path is not None:
        schema_mod.check(doc, schema_mod.load_schema(schema_path))
    return doc


def set_field_and_save(
    config: SetConfig,
    out_path: Optional[Union[str, Path]] = None,
    schema_path: Optional[Union[str, Path]] = None,
    indent: Optional[int] = None,
) -> Any:
    indent = default_indent() if indent is None else check_indent(indent)
    doc = set_field(config, schema_path)
    text = dumps_document(doc, indent)
    write_atomic(out_path or config.file_path, text)
    return doc


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="jfield set", description="Set a field in a JSON file")
    ap.add_argument("-f", "--file", default=None, help="JSON file path (default: $JFIELD_FILE or package.json)")
    ap.add_argument("-k", "--field", required=True, help="Field path, e.g. version, scripts.test, keywords[2]")
    ap.add_argument("-v", "--value", required=True, help="Value to set")
    ap.add_argument("-t", "--type", default="auto", choices=TYPE_CHOICES, help="Value type (default: auto)")
    ap.add_argument("--create-missing", action="store_true", help="Create missing parent fields and array slots")
    dest = ap.add_mutually_exclusive_group()
    dest.add_argument("-i", "--in-place", action="store_true", help="Overwrite input file")
    dest.add_argument("--out", help="Write updated JSON to this file")
    ap.add_argument("--schema", help="Validate the updated document against this JSON Schema")
    ap.add_argument("--indent", type=int, default=None, help="Indentation of written JSON (default: $JFIELD_INDENT or 2)")
    ap.add_argument("--json-errors", action="store_true", help="Emit errors as JSON on stderr")
    args = ap.parse_args(argv)

    try:
        indent = default_indent() if args.indent is None else check_indent(args.indent)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    file_path = args.file or default_file()
    config = SetConfig(
        file_path=file_path,
        field_path=args.field,
        value=args.value,
        value_type=TypeHint.parse(args.type),
        create_missing=args.create_missing,
    )

    try:
        if args.in_place or args.out:
            set_field_and_save(config, out_path=args.out, schema_path=args.schema, indent=indent)
        else:
            doc = set_field(config, schema_path=args.schema)
    except JFieldError as e:
        return report(e, field_path=args.field, json_errors=args.json_errors)

    if args.in_place:
        print(f"Field '{args.field}' set to '{args.value}' in {file_path}")
    elif not args.out:
        sys.stdout.write(dumps_document(doc, indent))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
