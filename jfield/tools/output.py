"""Rendering of extracted values.

Modes:
- raw           canonical JSON text (strings keep their quotes)
- strip-quotes  strings print bare; any other value prints as raw
- json          compact single-line JSON
- json-pretty   2-space indented JSON, document key order
"""

from __future__ import annotations

import enum
import json
from typing import Any, Optional

Json = Any


class OutputFormat(enum.Enum):
    RAW = "raw"
    STRIP_QUOTES = "strip-quotes"
    JSON = "json"
    JSON_PRETTY = "json-pretty"

    @classmethod
    def parse(cls, name: Optional[str]) -> "OutputFormat":
        if name is None:
            return cls.RAW
        try:
            return cls(name.strip().lower().replace("_", "-"))
        except ValueError:
            choices = ", ".join(f.value for f in cls)
            raise ValueError(f"Unknown output format {name!r} (expected one of: {choices})") from None


def dumps_compact(value: Json) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), allow_nan=False)


def dumps_pretty(value: Json, indent: int = 2) -> str:
    return json.dumps(value, indent=indent, ensure_ascii=False, allow_nan=False)


def format_value(value: Json, mode: OutputFormat = OutputFormat.RAW, *, strip_quotes: bool = False) -> str:
    if isinstance(value, str) and (strip_quotes or mode is OutputFormat.STRIP_QUOTES):
        return value
    if mode is OutputFormat.JSON_PRETTY:
        return dumps_pretty(value)
    return dumps_compact(value)
