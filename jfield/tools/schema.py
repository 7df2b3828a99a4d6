"""JSON Schema gate for ``jfield set --schema``.

The mutated document is validated before anything is written; violations are
reported with JSON Pointers to the offending nodes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Union

import jsonschema

from jfield.errors import InvalidDocument, SchemaViolation
from jfield.tools.jsonio import load_json
from jfield.tools.pointer import join_pointer


def load_schema(path: Union[str, Path]) -> Dict[str, Any]:
    schema = load_json(path)
    cls = jsonschema.validators.validator_for(schema, default=jsonschema.Draft202012Validator)
    try:
        cls.check_schema(schema)
    except jsonschema.exceptions.SchemaError as e:
        raise InvalidDocument(str(path), f"not a valid JSON Schema: {e.message}") from e
    return schema


def validate(doc: Any, schema: Dict[str, Any]) -> List[Dict[str, Any]]:
    cls = jsonschema.validators.validator_for(schema, default=jsonschema.Draft202012Validator)
    validator = cls(schema)
    errors: List[Dict[str, Any]] = []
    for err in sorted(validator.iter_errors(doc), key=lambda e: [str(p) for p in e.absolute_path]):
        errors.append(
            {
                "pointer": join_pointer(list(err.absolute_path)),
                "message": err.message,
                "validator": err.validator,
            }
        )
    return errors


def check(doc: Any, schema: Dict[str, Any]) -> None:
    issues = validate(doc, schema)
    if issues:
        raise SchemaViolation(issues)
