"""JSON Bridge — text form of values, and values of a given type from text.

Invariants:
    - get_json output is compact (no whitespace between tokens) and keeps key order
    - from_json never runs the target type's __init__; parsed fields become attributes
    - Behavior (methods, properties) of the result comes from the target type
    - Malformed text raises JsonParseError; a non-object payload, a dunder field
      name, or a field the type refuses raises JsonShapeError

Design Decisions:
    - stdlib json: the payloads are plain dicts/lists, no schema involved
    - Objects without a JSON form serialize their instance fields (vars)
"""

import json
from typing import Any, TypeVar

from object_tasks.core.errors import JsonParseError, JsonShapeError

T = TypeVar("T")


def _encode_fields(value: Any) -> Any:
    if hasattr(value, "__dict__"):
        return vars(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def get_json(value: Any) -> str:
    """Serialize value to compact JSON text.

    >>> get_json([1, 2, 3])
    '[1,2,3]'
    """
    return json.dumps(
        value, separators=(",", ":"), ensure_ascii=False, default=_encode_fields,
    )


def parse_json(text: str) -> Any:
    """Parse JSON text, raising JsonParseError on malformed input."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise JsonParseError(e.msg, position=e.pos) from e


def from_json(proto: type[T], text: str) -> T:
    """Build a blank instance of proto and apply the parsed JSON fields to it."""
    fields = parse_json(text)
    if not isinstance(fields, dict):
        raise JsonShapeError(f"Expected a JSON object, got {type(fields).__name__}")
    reserved = [name for name in fields if name.startswith("__") and name.endswith("__")]
    if reserved:
        raise JsonShapeError(f"Reserved field names are not allowed: {reserved}")
    instance = proto.__new__(proto)
    for name, value in fields.items():
        try:
            setattr(instance, name, value)
        except (AttributeError, TypeError):
            raise JsonShapeError(
                f"Field '{name}' cannot be set on {proto.__name__}",
            ) from None
    return instance
