"""JSON Pointer (RFC 6901) helpers.

Field paths are the user-facing syntax; JSON Pointers are used where a location
has to be reported unambiguously, e.g. schema validation errors and the
``pointer`` entry of ``--json-errors`` output.
"""

from __future__ import annotations

from typing import Iterable, List, Union

from jfield.tools.path import Index, Step


def escape_segment(seg: str) -> str:
    return seg.replace("~", "~0").replace("/", "~1")


def join_pointer(segments: Iterable[Union[str, int]]) -> str:
    out: List[str] = [escape_segment(str(s)) for s in segments]
    if not out:
        return ""
    return "/" + "/".join(out)


def steps_to_pointer(steps: Iterable[Step]) -> str:
    return join_pointer(s.index if isinstance(s, Index) else s.name for s in steps)
