"""Error taxonomy for jfield.

Every error raised by the library derives from ``JFieldError`` and carries
enough context to produce an actionable message: the failing path segment and
the expected vs actual kind or index.

Kinds:
- PathSyntaxError   malformed path string
- NavigationError   the path does not resolve against the document
- CoercionError     a raw value cannot be converted to the requested type
- DocumentError     the file cannot be read, parsed or written
- SchemaViolation   a mutated document fails its JSON Schema
- BatchError        one path of a batch extraction failed
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


def kind_name(value: Any) -> str:
    """JSON type name of a Python value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _where(at: str) -> str:
    return at or "(root)"


class JFieldError(Exception):
    code = "Error"

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": str(self)}


# ---- path syntax ----

@dataclass
class PathSyntaxError(JFieldError):
    path: str
    detail: str = ""

    code = "PathSyntaxError"

    def __str__(self) -> str:
        return f"Invalid field path {self.path!r}: {self.detail}"


class EmptyPath(PathSyntaxError):
    code = "EmptyPath"


class InvalidSegment(PathSyntaxError):
    code = "InvalidSegment"


class InvalidIndex(PathSyntaxError):
    code = "InvalidIndex"


# ---- navigation ----

class NavigationError(JFieldError):
    code = "NavigationError"


@dataclass
class KeyNotFound(NavigationError):
    name: str
    at: str

    code = "KeyNotFound"

    def __str__(self) -> str:
        if self.at != self.name:
            return f"Field not found: {self.name} (at {self.at})"
        return f"Field not found: {self.name}"


@dataclass
class IndexOutOfBounds(NavigationError):
    index: int
    length: int
    at: str

    code = "IndexOutOfBounds"

    def __str__(self) -> str:
        return f"Array index out of bounds: {self.at}, array length: {self.length}"


@dataclass
class NotAnObject(NavigationError):
    at: str
    actual: str

    code = "NotAnObject"

    def __str__(self) -> str:
        return f"Not an object: {_where(self.at)} is {self.actual}"


@dataclass
class NotAnArray(NavigationError):
    at: str
    actual: str

    code = "NotAnArray"

    def __str__(self) -> str:
        return f"Not an array: {_where(self.at)} is {self.actual}"


@dataclass
class PathNotFound(NavigationError):
    at: str

    code = "PathNotFound"

    def __str__(self) -> str:
        return f"Path not found: {self.at} (use --create-missing to create it)"


# ---- coercion ----

@dataclass
class CoercionError(JFieldError):
    raw: str
    detail: str = ""

    code = "CoercionError"

    def __str__(self) -> str:
        return f"Invalid value type: {self.detail}"


class InvalidNumber(CoercionError):
    code = "InvalidNumber"


class InvalidBoolean(CoercionError):
    code = "InvalidBoolean"


class InvalidJson(CoercionError):
    code = "InvalidJson"


# ---- documents ----

@dataclass
class DocumentError(JFieldError):
    file: str
    detail: str = ""

    code = "DocumentError"

    def __str__(self) -> str:
        return f"{self.detail}: {self.file}"


class DocumentNotFound(DocumentError):
    code = "FileNotFound"

    def __str__(self) -> str:
        return f"File not found: {self.file}"


class InvalidDocument(DocumentError):
    code = "InvalidJson"

    def __str__(self) -> str:
        return f"Invalid JSON syntax in {self.file}: {self.detail}"


class DocumentWriteError(DocumentError):
    code = "WriteError"

    def __str__(self) -> str:
        return f"Failed to write to file {self.file}: {self.detail}"


# ---- schema / batch ----

@dataclass
class SchemaViolation(JFieldError):
    issues: List[Dict[str, Any]] = field(default_factory=list)

    code = "SchemaViolation"

    def __str__(self) -> str:
        lines = [f"{_where(i['pointer'])}: {i['message']}" for i in self.issues]
        return "Schema validation failed:\n" + "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": "Schema validation failed", "issues": self.issues}


@dataclass
class BatchError(JFieldError):
    field_path: str
    cause: JFieldError

    code = "BatchError"

    def __str__(self) -> str:
        return f"{self.field_path}: {self.cause}"

    def to_dict(self) -> Dict[str, Any]:
        out = self.cause.to_dict()
        out["field"] = self.field_path
        return out
