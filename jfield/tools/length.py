"""Array length: ``jfield len``.

CLI:
  jfield len [-f FILE] -k FIELD
"""

from __future__ import annotations

import argparse
from typing import List

from jfield.errors import JFieldError
from jfield.tools.diag import report
from jfield.tools.extract import extract_array_length
from jfield.tools.jsonio import default_file


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="jfield len", description="Print the length of an array field")
    ap.add_argument("-f", "--file", default=None, help="JSON file path (default: $JFIELD_FILE or package.json)")
    ap.add_argument("-k", "--field", required=True, help="Path to an array, e.g. keywords")
    ap.add_argument("--json-errors", action="store_true", help="Emit errors as JSON on stderr")
    args = ap.parse_args(argv)

    try:
        n = extract_array_length(args.file or default_file(), args.field)
    except JFieldError as e:
        return report(e, field_path=args.field, json_errors=args.json_errors)
    print(n)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
