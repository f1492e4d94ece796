"""
Generic JSON value layer.

The codec works on plain JSON values (dict/list/str/int/float/bool/None)
rather than on any library's parse tree. Parsing goes through the standard
``json`` module because it is the only parser that exposes object key
pairs before they collapse into a dict, which is what lets duplicate keys
be rejected. Serialization goes through orjson.
"""

import json
from typing import Any, Union

import orjson

from prometheus_query.core.exceptions import MalformedJsonError, SchemaViolationError

JsonValue = Union[None, bool, int, float, str, list["JsonValue"], dict[str, "JsonValue"]]


def _reject_duplicate_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    obj: dict[str, Any] = {}
    for key, value in pairs:
        if key in obj:
            raise SchemaViolationError(
                f"Duplicate field '{key}'",
                details={"field": key, "reason": "duplicate"},
            )
        obj[key] = value
    return obj


def _reject_constant(token: str) -> float:
    raise ValueError(f"Non-standard JSON constant '{token}'")


def parse_json(payload: bytes | bytearray | memoryview | str) -> JsonValue:
    """
    Parse a response body into a JSON value.

    Raises:
        MalformedJsonError: Payload is not valid JSON text
        SchemaViolationError: An object repeats a key
    """
    if isinstance(payload, memoryview):
        payload = payload.tobytes()
    try:
        return json.loads(
            payload,
            object_pairs_hook=_reject_duplicate_keys,
            parse_constant=_reject_constant,
        )
    except (ValueError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors;
        # RecursionError comes from nesting deeper than the interpreter stack
        raise MalformedJsonError(
            f"Response is not valid JSON: {e}",
            details={"original_error": e.__class__.__name__, "original_message": str(e)},
        ) from e


def dump_json(value: JsonValue) -> bytes:
    """Serialize a JSON value to UTF-8 bytes."""
    return orjson.dumps(value)


def describe(value: Any) -> str:
    """Short description of a JSON value's structure, for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        if not value:
            return "empty array"
        kinds = sorted({describe(item).split(" ")[0] for item in value})
        return f"array of {len(value)} elements ({', '.join(kinds)})"
    if isinstance(value, dict):
        return f"object with keys {sorted(value)}"
    return type(value).__name__


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_string_map(value: Any) -> bool:
    return isinstance(value, dict) and all(isinstance(v, str) for v in value.values())
