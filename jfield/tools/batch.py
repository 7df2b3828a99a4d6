"""Extract several independent fields from one document.

All-or-nothing: the first path that fails to parse or resolve fails the whole
batch with a BatchError naming that path. Results keep the caller's order.
"""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Iterable

from jfield.errors import BatchError, JFieldError
from jfield.tools.navigate import get_value
from jfield.tools.output import OutputFormat, format_value

Json = Any


@dataclass
class ExtractionResult:
    file_path: str
    fields: "OrderedDict[str, str]" = field(default_factory=OrderedDict)

    def add_field(self, path: str, value: str) -> None:
        self.fields[path] = value


def extract_multiple(doc: Json, field_paths: Iterable[str], strip_quotes: bool = False) -> "OrderedDict[str, str]":
    out: "OrderedDict[str, str]" = OrderedDict()
    for path in field_paths:
        try:
            value = get_value(doc, path)
        except JFieldError as e:
            raise BatchError(path, e) from e
        out[path] = format_value(value, OutputFormat.RAW, strip_quotes=strip_quotes)
    return out
