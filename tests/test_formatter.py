from __future__ import annotations

import json

import pytest

from devtoolkit import formatter
from devtoolkit.errors import InvalidJson, InvalidYaml, ParseError


def test_format_json() -> None:
    assert formatter.format_json('{"a":1,"b":[1,2]}') == '{\n  "a": 1,\n  "b": [\n    1,\n    2\n  ]\n}'


def test_format_json_indent_and_unicode() -> None:
    assert formatter.format_json('{"k":"\\u00fc"}', indent=4) == '{\n    "k": "ü"\n}'


def test_minify_json() -> None:
    assert formatter.minify_json('{ "a" : 1,\n "b" : [ true, null ] }') == '{"a":1,"b":[true,null]}'


def test_json_to_yaml_keeps_key_order() -> None:
    assert formatter.json_to_yaml('{"name":"x","items":[1,2],"a":{"b":null}}') == (
        "name: x\nitems:\n- 1\n- 2\na:\n  b: null\n"
    )


def test_yaml_to_json() -> None:
    out = formatter.yaml_to_json("a: 1\nb: [x, y]\n")
    assert json.loads(out) == {"a": 1, "b": ["x", "y"]}
    assert out == json.dumps({"a": 1, "b": ["x", "y"]}, indent=2)


def test_round_trip_through_yaml() -> None:
    doc = {"user": {"id": 7, "tags": ["a", "b"], "active": False}}
    assert json.loads(formatter.yaml_to_json(formatter.json_to_yaml(json.dumps(doc)))) == doc


def test_yaml_without_json_form() -> None:
    with pytest.raises(InvalidYaml):
        formatter.yaml_to_json("when: 2024-01-01\n")


@pytest.mark.parametrize("text", ["", "{", "{'a': 1}", "[1,]"])
def test_invalid_json(text: str) -> None:
    with pytest.raises(InvalidJson):
        formatter.format_json(text)
    with pytest.raises(InvalidJson):
        formatter.validate(text, "json")


def test_validate() -> None:
    assert formatter.validate('{"a": 1}') is True
    assert formatter.validate("a: 1\n", "yaml") is True
    with pytest.raises(InvalidYaml):
        formatter.validate("a: [1, 2\n", "yaml")
    with pytest.raises(ParseError):
        formatter.validate("{}", "toml")


@pytest.mark.parametrize("text", ["NaN", "[Infinity]", '{"a": -Infinity}'])
def test_non_standard_constants_are_rejected(text: str) -> None:
    with pytest.raises(InvalidJson):
        formatter.validate(text)
    with pytest.raises(InvalidJson):
        formatter.format_json(text)
    with pytest.raises(InvalidJson):
        formatter.minify_json(text)
    with pytest.raises(InvalidJson):
        formatter.json_to_yaml(text)


def test_strict_loads_keeps_string_constants() -> None:
    assert formatter.strict_loads('{"v": "NaN"}') == {"v": "NaN"}


def test_format_yaml() -> None:
    assert formatter.format_yaml("b: [1, 2]\na: {c: x}\n") == "b:\n- 1\n- 2\na:\n  c: x\n"


def test_format_yaml_invalid() -> None:
    with pytest.raises(InvalidYaml):
        formatter.format_yaml("a: [1, 2\n")
