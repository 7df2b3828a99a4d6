"""Read and write traversal of a JSON document along a field path.

``get_value`` walks the steps and returns the located node (a reference into the
document, not a copy). ``set_value`` walks all but the last step and assigns at
the last one, mutating the document in place.

create_missing policy for ``set_value``:
- a missing key on the way is created as ``{}``, or ``[]`` when the next step is
  an index;
- an index past the end of an array pads the array with ``null`` and places the
  new container (or, at the last step, the value) at that index;
- an existing node of the wrong kind is never replaced, ``null`` included. That
  is always NotAnObject / NotAnArray.
"""

from __future__ import annotations

from typing import Any, Sequence, Union

from jfield.errors import (
    EmptyPath,
    IndexOutOfBounds,
    InvalidIndex,
    KeyNotFound,
    NotAnArray,
    NotAnObject,
    PathNotFound,
    kind_name,
)
from jfield.tools.path import Index, Key, Path, Step, parse, render

Json = Any


def as_steps(path: Union[str, Sequence[Step]]) -> Path:
    if isinstance(path, str):
        return parse(path)
    steps = tuple(path)
    if not steps:
        raise EmptyPath("", "field path is empty")
    for step in steps:
        if isinstance(step, Index) and step.index < 0:
            raise InvalidIndex(render(steps), f"array index must be non-negative, got {step.index}")
    return steps


def _empty_for(step: Step) -> Json:
    return [] if isinstance(step, Index) else {}


def get_value(doc: Json, path: Union[str, Sequence[Step]]) -> Json:
    steps = as_steps(path)
    cur: Any = doc
    for i, step in enumerate(steps):
        if isinstance(step, Key):
            if not isinstance(cur, dict):
                raise NotAnObject(render(steps[:i]), kind_name(cur))
            if step.name not in cur:
                raise KeyNotFound(step.name, render(steps[: i + 1]))
            cur = cur[step.name]
        else:
            if not isinstance(cur, list):
                raise NotAnArray(render(steps[:i]), kind_name(cur))
            if step.index >= len(cur):
                raise IndexOutOfBounds(step.index, len(cur), render(steps[: i + 1]))
            cur = cur[step.index]
    return cur


def set_value(
    doc: Json,
    path: Union[str, Sequence[Step]],
    value: Json,
    *,
    create_missing: bool = False,
) -> None:
    steps = as_steps(path)
    cur: Any = doc
    for i, step in enumerate(steps[:-1]):
        nxt = steps[i + 1]
        if isinstance(step, Key):
            if not isinstance(cur, dict):
                raise NotAnObject(render(steps[:i]), kind_name(cur))
            if step.name not in cur:
                if not create_missing:
                    raise PathNotFound(render(steps[: i + 1]))
                cur[step.name] = _empty_for(nxt)
            cur = cur[step.name]
        else:
            if not isinstance(cur, list):
                raise NotAnArray(render(steps[:i]), kind_name(cur))
            if step.index >= len(cur):
                if not create_missing:
                    raise PathNotFound(render(steps[: i + 1]))
                cur.extend([None] * (step.index - len(cur)))
                cur.append(_empty_for(nxt))
            cur = cur[step.index]

    last = steps[-1]
    parent_at = render(steps[:-1])
    if isinstance(last, Key):
        if not isinstance(cur, dict):
            raise NotAnObject(parent_at, kind_name(cur))
        cur[last.name] = value
        return

    if not isinstance(cur, list):
        raise NotAnArray(parent_at, kind_name(cur))
    if last.index >= len(cur):
        if not create_missing:
            raise IndexOutOfBounds(last.index, len(cur), render(steps))
        cur.extend([None] * (last.index - len(cur) + 1))
    cur[last.index] = value
