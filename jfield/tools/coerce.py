"""Raw string -> typed JSON value for ``jfield set``.

Without a type hint the value is inferred: ``true``/``false`` become booleans,
JSON number literals become numbers, anything else stays a string. Pass
``--type string`` to store a literal ``"true"`` or ``"42"``.
"""

from __future__ import annotations

import enum
import json
import math
import re
from typing import Any, Optional

from jfield.errors import InvalidBoolean, InvalidJson, InvalidNumber

Json = Any

_NUMBER_RE = re.compile(r"-?(?:0|[1-9][0-9]*)(?P<frac>\.[0-9]+)?(?P<exp>[eE][+-]?[0-9]+)?")


class TypeHint(enum.Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    ARRAY = "array"
    OBJECT = "object"

    @classmethod
    def parse(cls, name: Optional[str]) -> Optional["TypeHint"]:
        """Map a CLI type name to a hint; ``auto`` (or nothing) means infer."""
        if name is None:
            return None
        key = name.strip().lower()
        if key in ("", "auto"):
            return None
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(["auto"] + [h.value for h in cls])
            raise ValueError(f"Unknown value type {name!r} (expected one of: {choices})") from None


def reject_constant(name: str) -> Any:
    """``parse_constant`` hook for ``json.loads``: NaN and Infinity are not JSON."""
    raise ValueError(f"{name} is not a valid JSON value")


def parse_number(raw: str) -> Optional[Json]:
    """Parse a JSON number literal; None if ``raw`` is not one (or is too long for int)."""
    m = _NUMBER_RE.fullmatch(raw)
    if m is None:
        return None
    if m.group("frac") is None and m.group("exp") is None:
        try:
            return int(raw)
        except ValueError:
            # interpreter's int digit limit
            return None
    num = float(raw)
    if not math.isfinite(num):
        return None
    return num


def parse_boolean(raw: str) -> Optional[bool]:
    if raw == "true":
        return True
    if raw == "false":
        return False
    return None


def _parse_container(raw: str, hint: TypeHint) -> Json:
    try:
        val = json.loads(raw, parse_constant=reject_constant)
    except (ValueError, RecursionError) as e:
        raise InvalidJson(raw, f"{raw!r} is not valid JSON ({e})") from e
    expected = list if hint is TypeHint.ARRAY else dict
    if not isinstance(val, expected):
        raise InvalidJson(raw, f"{raw!r} is not a JSON {hint.value}")
    return val


def coerce(raw: str, hint: Optional[TypeHint] = None) -> Json:
    if hint is None:
        as_bool = parse_boolean(raw)
        if as_bool is not None:
            return as_bool
        as_num = parse_number(raw)
        if as_num is not None:
            return as_num
        return raw

    if hint is TypeHint.STRING:
        return raw
    if hint is TypeHint.NUMBER:
        as_num = parse_number(raw)
        if as_num is None:
            raise InvalidNumber(raw, f"{raw} is not a valid number")
        return as_num
    if hint is TypeHint.BOOLEAN:
        as_bool = parse_boolean(raw)
        if as_bool is None:
            raise InvalidBoolean(raw, f"{raw} is not a valid boolean")
        return as_bool
    if hint is TypeHint.NULL:
        return None
    return _parse_container(raw, hint)
