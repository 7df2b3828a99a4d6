"""Reading and writing JSON documents.

Writes are atomic from the caller's point of view: the text goes to a temporary
file next to the target, which then replaces the target with ``os.replace``.
An interrupted write leaves the original file untouched.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Union

from jfield.errors import DocumentError, DocumentNotFound, DocumentWriteError, InvalidDocument
from jfield.tools.coerce import reject_constant

Json = Any

DEFAULT_FILE = "package.json"
DEFAULT_INDENT = 2


def default_file() -> str:
    return os.getenv("JFIELD_FILE") or DEFAULT_FILE


def default_indent() -> int:
    raw = os.getenv("JFIELD_INDENT")
    if not raw:
        return DEFAULT_INDENT
    try:
        return max(0, int(raw))
    except ValueError:
        raise ValueError(f"JFIELD_INDENT must be an integer, got {raw!r}") from None


def load_json(path: Union[str, Path]) -> Json:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise DocumentNotFound(str(p)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentError(str(p), f"Failed to read file ({e})") from e
    try:
        return json.loads(text, parse_constant=reject_constant)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError, NaN/Infinity, int digit limit, nesting depth
        raise InvalidDocument(str(p), str(e)) from e


def check_indent(indent: int) -> int:
    if indent < 0:
        raise ValueError(f"indent must be >= 0, got {indent}")
    return indent


def dumps_document(doc: Json, indent: int = DEFAULT_INDENT) -> str:
    return json.dumps(doc, indent=check_indent(indent), ensure_ascii=False, allow_nan=False) + "\n"


def write_atomic(path: Union[str, Path], text: str) -> None:
    p = Path(path)
    try:
        fd, tmp = tempfile.mkstemp(dir=p.parent, prefix=f".{p.name}.", suffix=".tmp")
    except OSError as e:
        raise DocumentWriteError(str(p), str(e)) from e
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        if p.exists():
            os.chmod(tmp, p.stat().st_mode & 0o7777)
        os.replace(tmp, p)
    except OSError as e:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise DocumentWriteError(str(p), str(e)) from e
    except BaseException:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise


def save_json(path: Union[str, Path], doc: Json, indent: int = DEFAULT_INDENT) -> None:
    write_atomic(path, dumps_document(doc, indent))
