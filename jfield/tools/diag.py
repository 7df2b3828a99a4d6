"""Error reporting shared by the CLI tools.

Exit codes:
  0 OK
  1 path syntax / navigation / value coercion error
  2 schema validation failed (argparse also uses 2 for bad usage)
  3 IO/JSON parse error
"""

from __future__ import annotations

import json
import sys
from typing import Any, Dict

from jfield.errors import BatchError, DocumentError, JFieldError, PathSyntaxError, SchemaViolation
from jfield.tools.path import parse
from jfield.tools.pointer import steps_to_pointer

EXIT_OK = 0
EXIT_FIELD = 1
EXIT_SCHEMA = 2
EXIT_IO = 3


def exit_code(err: JFieldError) -> int:
    if isinstance(err, BatchError):
        return exit_code(err.cause)
    if isinstance(err, DocumentError):
        return EXIT_IO
    if isinstance(err, SchemaViolation):
        return EXIT_SCHEMA
    return EXIT_FIELD


def error_payload(err: JFieldError, field_path: str = "") -> Dict[str, Any]:
    payload = err.to_dict()
    if field_path and "field" not in payload:
        payload["field"] = field_path
    field_path = payload.get("field", "")
    if field_path:
        try:
            payload["pointer"] = steps_to_pointer(parse(field_path))
        except PathSyntaxError:
            pass
    return payload


def report(err: JFieldError, *, field_path: str = "", json_errors: bool = False) -> int:
    """Print ``err`` to stderr and return the matching exit code."""
    if json_errors:
        print(json.dumps(error_payload(err, field_path), indent=2, ensure_ascii=False), file=sys.stderr)
    elif field_path and not isinstance(err, (BatchError, DocumentError, PathSyntaxError)):
        print(f"error: {field_path}: {err}", file=sys.stderr)
    else:
        print(f"error: {err}", file=sys.stderr)
    return exit_code(err)
