"""package.json shortcuts: ``jfield pkg``.

CLI:
  jfield pkg name [-f FILE]
  jfield pkg version [-f FILE]
  jfield pkg deps [-f FILE] [--dev] [--json]
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Dict, List, Optional, Union

from jfield.errors import JFieldError
from jfield.tools.diag import report
from jfield.tools.extract import ExtractConfig, extract_field
from jfield.tools.jsonio import default_file, load_json


def get_package_name(file_path: Optional[Union[str, Path]] = None) -> str:
    return extract_field(ExtractConfig(file_path=str(file_path or default_file()), field_path="name", strip_quotes=True))


def get_package_version(file_path: Optional[Union[str, Path]] = None) -> str:
    return extract_field(ExtractConfig(file_path=str(file_path or default_file()), field_path="version", strip_quotes=True))


def get_dependencies(file_path: Optional[Union[str, Path]] = None, section: str = "dependencies") -> Dict[str, str]:
    """Dependency name -> version spec. Missing section gives {}; non-string specs give ''."""
    doc = load_json(file_path or default_file())
    deps = doc.get(section) if isinstance(doc, dict) else None
    if not isinstance(deps, dict):
        return {}
    return {name: spec if isinstance(spec, str) else "" for name, spec in deps.items()}


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="jfield pkg", description="package.json shortcuts")
    ap.add_argument("what", choices=["name", "version", "deps"])
    ap.add_argument("-f", "--file", default=None, help="package.json path (default: $JFIELD_FILE or package.json)")
    ap.add_argument("--dev", action="store_true", help="deps: read devDependencies instead")
    ap.add_argument("--json", action="store_true", help="deps: print as a JSON object")
    ap.add_argument("--json-errors", action="store_true", help="Emit errors as JSON on stderr")
    args = ap.parse_args(argv)

    file_path = args.file or default_file()
    try:
        if args.what == "name":
            print(get_package_name(file_path))
        elif args.what == "version":
            print(get_package_version(file_path))
        else:
            deps = get_dependencies(file_path, "devDependencies" if args.dev else "dependencies")
            if args.json:
                print(json.dumps(deps, indent=2, ensure_ascii=False))
            else:
                for name, spec in deps.items():
                    print(f"{name}: {spec}")
    except JFieldError as e:
        return report(e, field_path=args.what, json_errors=args.json_errors)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
