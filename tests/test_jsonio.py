import os
import sys

import pytest

from jfield.errors import DocumentNotFound, DocumentWriteError, InvalidDocument
from jfield.tools import jsonio


def test_load_json(tmp_path):
    p = tmp_path / "package.json"
    p.write_text('{"name": "demo"}', encoding="utf-8")
    assert jsonio.load_json(p) == {"name": "demo"}


def test_load_missing_file(tmp_path):
    with pytest.raises(DocumentNotFound) as exc:
        jsonio.load_json(tmp_path / "nope.json")
    assert "nope.json" in str(exc.value)


def test_load_malformed_json_keeps_parser_message(tmp_path):
    p = tmp_path / "bad.json"
    p.write_text('{"name": ', encoding="utf-8")
    with pytest.raises(InvalidDocument) as exc:
        jsonio.load_json(p)
    assert "Expecting value" in exc.value.detail


def test_save_json_replaces_file(tmp_path):
    p = tmp_path / "out.json"
    p.write_text("old", encoding="utf-8")
    jsonio.save_json(p, {"a": ["é"]}, indent=2)
    assert p.read_text(encoding="utf-8") == '{\n  "a": [\n    "é"\n  ]\n}\n'
    assert [f.name for f in tmp_path.iterdir()] == ["out.json"]


def test_failed_write_leaves_original_and_no_temp(tmp_path, monkeypatch):
    p = tmp_path / "doc.json"
    p.write_text('{"a": 1}', encoding="utf-8")

    def boom(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(jsonio.os, "replace", boom)
    with pytest.raises(DocumentWriteError):
        jsonio.write_atomic(p, '{"a": 2}\n')
    assert p.read_text(encoding="utf-8") == '{"a": 1}'
    assert sorted(os.listdir(tmp_path)) == ["doc.json"]


def test_env_defaults(monkeypatch):
    monkeypatch.delenv("JFIELD_FILE", raising=False)
    monkeypatch.delenv("JFIELD_INDENT", raising=False)
    assert jsonio.default_file() == "package.json"
    assert jsonio.default_indent() == 2
    monkeypatch.setenv("JFIELD_FILE", "composer.json")
    monkeypatch.setenv("JFIELD_INDENT", "4")
    assert jsonio.default_file() == "composer.json"
    assert jsonio.default_indent() == 4
    monkeypatch.setenv("JFIELD_INDENT", "wide")
    with pytest.raises(ValueError):
        jsonio.default_indent()


@pytest.mark.parametrize("text", ['{"x": NaN}', "[Infinity]", '{"x": [-Infinity]}'])
def test_load_rejects_non_json_constants(tmp_path, text):
    p = tmp_path / "doc.json"
    p.write_text(text, encoding="utf-8")
    with pytest.raises(InvalidDocument):
        jsonio.load_json(p)


def test_load_too_deeply_nested_document(tmp_path):
    p = tmp_path / "deep.json"
    p.write_text("[" * 1_000_000 + "]" * 1_000_000, encoding="utf-8")
    with pytest.raises(InvalidDocument):
        jsonio.load_json(p)


@pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="no int digit limit")
def test_load_integer_past_digit_limit(tmp_path):
    p = tmp_path / "big.json"
    p.write_text('{"x": ' + "9" * (sys.get_int_max_str_digits() + 1) + "}", encoding="utf-8")
    with pytest.raises(InvalidDocument):
        jsonio.load_json(p)


def test_dumps_never_writes_nan():
    with pytest.raises(ValueError):
        jsonio.dumps_document({"x": float("nan")})


def test_negative_indent_rejected():
    assert jsonio.check_indent(0) == 0
    with pytest.raises(ValueError):
        jsonio.dumps_document({}, indent=-1)
