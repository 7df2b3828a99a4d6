"""Field extraction: ``jfield get``.

CLI:
  jfield get [-f FILE] -k FIELD [--output raw|json|json-pretty] [--strip-quotes]
  jfield get [-f FILE] -m FIELD -m FIELD ... [--output ...] [--strip-quotes]

With ``-m`` every field is printed as ``FIELD: VALUE``; ``--output json`` or
``json-pretty`` prints one JSON object mapping each field to its value text
instead. Batch extraction is all-or-nothing.

Exit codes:
  0 OK
  1 path syntax / field not found
  3 IO/JSON parse error
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

from jfield.errors import JFieldError, NotAnArray, kind_name
from jfield.tools import batch
from jfield.tools.diag import report
from jfield.tools.jsonio import default_file, load_json
from jfield.tools.navigate import get_value
from jfield.tools.output import OutputFormat, format_value
from jfield.tools.path import Index, parse


@dataclass
class ExtractConfig:
    file_path: str = "package.json"
    field_path: str = "name"
    output_format: Optional[OutputFormat] = None
    strip_quotes: bool = False


def extract_field(config: ExtractConfig) -> str:
    doc = load_json(config.file_path)
    value = get_value(doc, config.field_path)
    return format_value(value, config.output_format or OutputFormat.RAW, strip_quotes=config.strip_quotes)


def extract_multiple_fields(
    file_path: Union[str, Path],
    field_paths: Sequence[str],
    strip_quotes: bool = False,
) -> batch.ExtractionResult:
    doc = load_json(file_path)
    result = batch.ExtractionResult(str(file_path))
    for path, text in batch.extract_multiple(doc, field_paths, strip_quotes).items():
        result.add_field(path, text)
    return result


def extract_array_length(file_path: Union[str, Path], array_path: str) -> int:
    doc = load_json(file_path)
    value = get_value(doc, array_path)
    if not isinstance(value, list):
        raise NotAnArray(array_path, kind_name(value))
    return len(value)


def extract_array_element(
    file_path: Union[str, Path],
    array_path: str,
    index: int,
    strip_quotes: bool = False,
) -> str:
    doc = load_json(file_path)
    steps = parse(array_path) + (Index(index),)
    return format_value(get_value(doc, steps), OutputFormat.RAW, strip_quotes=strip_quotes)


def _print_batch(result: batch.ExtractionResult, output: OutputFormat) -> None:
    if output is OutputFormat.JSON:
        print(json.dumps(result.fields, ensure_ascii=False, separators=(",", ":")))
    elif output is OutputFormat.JSON_PRETTY:
        print(json.dumps(result.fields, indent=2, ensure_ascii=False))
    else:
        for path, text in result.fields.items():
            print(f"{path}: {text}")


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="jfield get", description="Read fields from a JSON file")
    ap.add_argument("-f", "--file", default=None, help="JSON file path (default: $JFIELD_FILE or package.json)")
    target = ap.add_mutually_exclusive_group(required=True)
    target.add_argument("-k", "--field", help="Field path, e.g. name, dependencies.express, keywords[0]")
    target.add_argument("-m", "--multiple", action="append", metavar="FIELD", help="Extract several fields (repeatable)")
    ap.add_argument("--output", choices=["raw", "json", "json-pretty"], default="raw", help="Output format")
    ap.add_argument("-s", "--strip-quotes", action="store_true", help="Print string values without quotes")
    ap.add_argument("--json-errors", action="store_true", help="Emit errors as JSON on stderr")
    args = ap.parse_args(argv)

    file_path = args.file or default_file()
    output = OutputFormat.parse(args.output)

    if args.multiple:
        try:
            result = extract_multiple_fields(file_path, args.multiple, args.strip_quotes)
        except JFieldError as e:
            return report(e, json_errors=args.json_errors)
        _print_batch(result, output)
        return 0

    config = ExtractConfig(
        file_path=file_path,
        field_path=args.field,
        output_format=output,
        strip_quotes=args.strip_quotes,
    )
    try:
        text = extract_field(config)
    except JFieldError as e:
        return report(e, field_path=args.field, json_errors=args.json_errors)
    sys.stdout.write(text + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
