"""A small "drop-in" integration layer for jfield.

Wires the path parser, navigator, coercer and formatter into one object for
Python hosts that already hold (or want to load) a JSON document.

Typical usage:

    from jfield.engine import FieldEngine

    eng = FieldEngine(create_missing=True)
    doc = eng.load_path("package.json")
    eng.set(doc, "scripts.test", "pytest -q")
    eng.get(doc, "version")
    eng.save(doc, "package.json")

"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from jfield.errors import NotAnArray, kind_name
from jfield.tools import batch, jsonio
from jfield.tools import schema as schema_mod
from jfield.tools.coerce import TypeHint, coerce
from jfield.tools.navigate import get_value, set_value
from jfield.tools.output import OutputFormat, format_value


class FieldEngine:
    def __init__(
        self,
        *,
        create_missing: bool = False,
        indent: int = jsonio.DEFAULT_INDENT,
        schema: Optional[Dict[str, Any]] = None,
    ):
        self.create_missing = create_missing
        self.indent = jsonio.check_indent(indent)
        self.schema = schema

    def load_path(self, path: str | Path) -> Any:
        return jsonio.load_json(path)

    def get(self, doc: Any, field_path: str) -> Any:
        return get_value(doc, field_path)

    def get_formatted(
        self,
        doc: Any,
        field_path: str,
        output: Union[OutputFormat, str] = OutputFormat.RAW,
        *,
        strip_quotes: bool = False,
    ) -> str:
        mode = output if isinstance(output, OutputFormat) else OutputFormat.parse(output)
        return format_value(get_value(doc, field_path), mode, strip_quotes=strip_quotes)

    def set(
        self,
        doc: Any,
        field_path: str,
        raw: str,
        value_type: Union[TypeHint, str, None] = None,
    ) -> Any:
        """Coerce ``raw`` and assign it at ``field_path``; returns the stored value."""
        hint = value_type if isinstance(value_type, TypeHint) or value_type is None else TypeHint.parse(value_type)
        value = coerce(raw, hint)
        set_value(doc, field_path, value, create_missing=self.create_missing)
        return value

    def extract_multiple(self, doc: Any, field_paths: List[str], *, strip_quotes: bool = False) -> Dict[str, str]:
        return batch.extract_multiple(doc, field_paths, strip_quotes)

    def length(self, doc: Any, field_path: str) -> int:
        value = get_value(doc, field_path)
        if not isinstance(value, list):
            raise NotAnArray(field_path, kind_name(value))
        return len(value)

    def dumps(self, doc: Any) -> str:
        return jsonio.dumps_document(doc, self.indent)

    def save(self, doc: Any, path: str | Path) -> None:
        # schema is checked on save only, not per set()
        if self.schema is not None:
            schema_mod.check(doc, self.schema)
        jsonio.write_atomic(path, self.dumps(doc))
