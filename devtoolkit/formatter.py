"""JSON pretty-printing, minifying, validation and JSON <-> YAML conversion."""
import json
import logging

import yaml

from .errors import InvalidJson, InvalidYaml, ParseError

logger = logging.getLogger(__name__)

FORMATS = ('json', 'yaml')


def _reject_constant(name: str):
    raise ValueError(f"{name} is not a JSON value")

def strict_loads(text: str):
    """``json.loads`` without the NaN, Infinity and -Infinity extensions."""
    return json.loads(text, parse_constant=_reject_constant)

def _load_json(text: str):
    try:
        return strict_loads(text)
    except ValueError as e:
        raise InvalidJson(f"Invalid JSON: {e}") from e

def _load_yaml(text: str):
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise InvalidYaml(f"Invalid YAML: {e}") from e

def _dump_yaml(value) -> str:
    return yaml.safe_dump(value, indent=2, sort_keys=False, allow_unicode=True, default_flow_style=False)


def format_json(text: str, indent: int = 2) -> str:
    return json.dumps(_load_json(text), indent=indent, ensure_ascii=False)

def minify_json(text: str) -> str:
    return json.dumps(_load_json(text), separators=(',', ':'), ensure_ascii=False)

def validate(text: str, fmt: str = 'json') -> bool:
    """Raise the matching decode error if ``text`` is not valid ``fmt``."""
    if fmt == 'json':
        _load_json(text)
    elif fmt == 'yaml':
        _load_yaml(text)
    else:
        raise ParseError(f"Unknown format: {fmt!r}")
    return True

def format_yaml(text: str) -> str:
    return _dump_yaml(_load_yaml(text))

def json_to_yaml(text: str) -> str:
    return _dump_yaml(_load_json(text))

def yaml_to_json(text: str, indent: int = 2) -> str:
    value = _load_yaml(text)
    try:
        return json.dumps(value, indent=indent, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        # e.g. YAML timestamps or binary scalars
        logger.debug("yaml value of type %s has no JSON form", type(value).__name__)
        raise InvalidYaml(f"YAML document cannot be represented as JSON: {e}") from e
