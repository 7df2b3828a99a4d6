#!/usr/bin/env python3
"""jfield unified CLI.

Argument parsing is delegated to the individual tool modules, so each tool is
usable both as:
- `jfield <command> ...`
- `python -m jfield.tools.<tool> ...`

Commands:
- get       Read one field (-k) or several (-m)
- set       Write one field, optionally in place
- len       Length of an array field
- pkg       package.json shortcuts (name, version, deps)
- version   Show current version

Example:
  jfield set -f package.json -k version -v 2.0.0 --in-place
"""

from __future__ import annotations

import sys
from typing import List, Optional

from jfield.tools import extract, length, presets, update


def _help() -> str:
    return (
        "jfield CLI\n\n"
        "Usage:\n"
        "  jfield <command> [args...]\n\n"
        "Commands:\n"
        "  get       Read fields (-k FIELD or -m FIELD ...)\n"
        "  set       Set a field (-k FIELD -v VALUE [-t TYPE])\n"
        "  len       Print the length of an array field\n"
        "  pkg       package.json shortcuts (name | version | deps)\n"
        "  version   Show current version\n\n"
        "Run `jfield <command> --help` for the options of a command.\n"
    )


def _version() -> str:
    try:
        from importlib.metadata import version
        return version("jfield")
    except Exception:
        return "unknown"


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv or argv[0] in {"-h", "--help", "help"}:
        sys.stdout.write(_help())
        return 0

    cmd, rest = argv[0], argv[1:]
    if cmd in {"--version", "-V", "version"}:
        print(_version())
        return 0
    if cmd == "get":
        return extract.main(rest)
    if cmd == "set":
        return update.main(rest)
    if cmd in {"len", "length"}:
        return length.main(rest)
    if cmd == "pkg":
        return presets.main(rest)

    sys.stderr.write(f"Unknown command: {cmd}\n\n")
    sys.stderr.write(_help())
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
