"""JSON Bridge — tests for get_json / from_json.

Tests cover:
    - compact output for lists, dicts, frozen mappings, plain objects
    - from_json builds an instance without calling __init__
    - parse and shape errors carry their codes
"""

import pytest

from object_tasks.core.errors import JsonParseError, JsonShapeError
from object_tasks.core.immutable import freeze
from object_tasks.core.json_bridge import from_json, get_json, parse_json
from object_tasks.core.rectangle import Rectangle


class Circle:
    def __init__(self, radius):
        raise AssertionError("from_json must not call __init__")

    def get_circumference(self):
        return 2 * 3 * self.radius


# ─── get_json ────────────────────────────────────────────────────

def test_get_json_list_is_compact():
    assert get_json([1, 2, 3]) == "[1,2,3]"


def test_get_json_keeps_key_order():
    assert get_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'


def test_get_json_frozen_mapping():
    assert get_json(freeze({"a": 1})) == '{"a":1}'


def test_get_json_plain_object_uses_fields():
    assert get_json(Rectangle(10, 20)) == '{"width":10,"height":20}'


def test_get_json_keeps_non_ascii():
    assert get_json({"city": "Kraków"}) == '{"city":"Kraków"}'


def test_get_json_rejects_unserializable():
    with pytest.raises(TypeError):
        get_json({1, 2})


# ─── from_json ───────────────────────────────────────────────────

def test_from_json_applies_fields_onto_type():
    r = from_json(Rectangle, '{"width":10,"height":20}')
    assert isinstance(r, Rectangle)
    assert r.width == 10
    assert r.height == 20
    assert r.area == 200


def test_from_json_skips_constructor():
    c = from_json(Circle, '{"radius":10}')
    assert isinstance(c, Circle)
    assert c.get_circumference() == 60


def test_from_json_round_trips_get_json():
    r = from_json(Rectangle, get_json(Rectangle(3, 4)))
    assert r == Rectangle(3, 4)


def test_from_json_extra_fields_are_kept():
    r = from_json(Rectangle, '{"width":1,"height":2,"color":"red"}')
    assert r.color == "red"


def test_from_json_malformed_raises_parse_error():
    with pytest.raises(JsonParseError) as exc_info:
        from_json(Rectangle, '{"width": 10,')
    assert exc_info.value.code == "JSON_PARSE_ERROR"
    assert exc_info.value.http_status == 400
    assert exc_info.value.position is not None


def test_from_json_array_raises_shape_error():
    with pytest.raises(JsonShapeError) as exc_info:
        from_json(Rectangle, "[1,2,3]")
    assert exc_info.value.code == "JSON_SHAPE_ERROR"
    assert "list" in exc_info.value.message


def test_from_json_read_only_field_raises_shape_error():
    with pytest.raises(JsonShapeError) as exc_info:
        from_json(Rectangle, '{"area": 5}')
    assert "area" in exc_info.value.message


def test_parse_json_returns_value():
    assert parse_json("[1, 2]") == [1, 2]


def test_from_json_dunder_field_raises_shape_error():
    for text in ('{"__class__": 1}', '{"__dict__": 5}', '{"width": 1, "__init__": 0}'):
        with pytest.raises(JsonShapeError) as exc_info:
            from_json(Rectangle, text)
        assert exc_info.value.code == "JSON_SHAPE_ERROR"


class Slotted:
    __slots__ = ("radius",)


def test_from_json_unknown_slot_raises_shape_error():
    with pytest.raises(JsonShapeError) as exc_info:
        from_json(Slotted, '{"diameter": 4}')
    assert "diameter" in exc_info.value.message
