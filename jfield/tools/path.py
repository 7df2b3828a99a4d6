"""Dot/bracket field paths.

A field path names one location inside a JSON document:

    name
    dependencies.express
    keywords[3]
    matrix[0][1].label

Grammar:

    path    = segment ("." segment)*
    segment = ident ("[" digits "]")*

Each segment becomes a ``Key`` step followed by zero or more ``Index`` steps,
left to right. Identifiers are any run of characters other than ``.``, ``[``
and ``]``, so keys like ``@scope/pkg`` or ``gpt-4`` need no quoting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

from jfield.errors import EmptyPath, InvalidIndex, InvalidSegment


@dataclass(frozen=True)
class Key:
    name: str


@dataclass(frozen=True)
class Index:
    index: int


Step = Union[Key, Index]
Path = Tuple[Step, ...]


def _parse_segment(segment: str, path: str) -> List[Step]:
    bracket = segment.find("[")
    ident = segment if bracket == -1 else segment[:bracket]
    if not ident:
        raise InvalidSegment(path, f"empty field name in segment {segment!r}")
    if "]" in ident:
        raise InvalidSegment(path, f"unexpected ']' in segment {segment!r}")

    steps: List[Step] = [Key(ident)]
    i = bracket
    while i != -1 and i < len(segment):
        if segment[i] != "[":
            raise InvalidSegment(path, f"unexpected text after ']' in segment {segment!r}")
        close = segment.find("]", i + 1)
        if close == -1:
            raise InvalidSegment(path, f"unterminated '[' in segment {segment!r}")
        digits = segment[i + 1 : close]
        # isdigit() also accepts unicode digits like '²'
        if not digits or not all("0" <= ch <= "9" for ch in digits):
            raise InvalidIndex(path, f"invalid array index {digits!r}")
        steps.append(Index(int(digits)))
        i = close + 1
    return steps


def parse(path: str) -> Path:
    """Parse a field path into its navigation steps.

    Raises EmptyPath, InvalidSegment or InvalidIndex.
    """
    if path is None or path == "":
        raise EmptyPath("" if path is None else path, "field path is empty")

    steps: List[Step] = []
    for segment in path.split("."):
        if segment == "":
            raise InvalidSegment(path, "empty path segment")
        steps.extend(_parse_segment(segment, path))
    return tuple(steps)


def render(steps: Iterable[Step]) -> str:
    """Render steps back to canonical ``a.b[0]`` form."""
    out: List[str] = []
    for step in steps:
        if isinstance(step, Index):
            out.append(f"[{step.index}]")
        else:
            if out:
                out.append(".")
            out.append(step.name)
    return "".join(out)
