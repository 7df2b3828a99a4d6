import pytest

from jfield.tools.output import OutputFormat, format_value


def test_raw_keeps_string_quotes():
    assert format_value("express") == '"express"'


def test_strip_quotes_only_touches_strings():
    assert format_value("express", OutputFormat.STRIP_QUOTES) == "express"
    assert format_value(1, OutputFormat.STRIP_QUOTES) == "1"
    assert format_value(None, OutputFormat.STRIP_QUOTES) == "null"
    assert format_value([1, "a"], OutputFormat.STRIP_QUOTES) == '[1,"a"]'


def test_strip_quotes_flag_over_any_mode():
    assert format_value("v", OutputFormat.JSON_PRETTY, strip_quotes=True) == "v"
    assert format_value({"a": 1}, OutputFormat.JSON, strip_quotes=True) == '{"a":1}'


def test_compact_json():
    assert format_value({"a": [1, 2], "b": True}, OutputFormat.JSON) == '{"a":[1,2],"b":true}'


def test_pretty_json_keeps_insertion_order():
    text = format_value({"z": 1, "a": {"b": None}}, OutputFormat.JSON_PRETTY)
    assert text == '{\n  "z": 1,\n  "a": {\n    "b": null\n  }\n}'


def test_non_ascii_is_not_escaped():
    assert format_value("héllo") == '"héllo"'


def test_output_format_parse():
    assert OutputFormat.parse(None) is OutputFormat.RAW
    assert OutputFormat.parse("json-pretty") is OutputFormat.JSON_PRETTY
    assert OutputFormat.parse("strip_quotes") is OutputFormat.STRIP_QUOTES
    with pytest.raises(ValueError):
        OutputFormat.parse("yaml")


def test_non_finite_numbers_are_not_rendered():
    with pytest.raises(ValueError):
        format_value(float("inf"))
    with pytest.raises(ValueError):
        format_value([float("nan")], OutputFormat.JSON_PRETTY)
