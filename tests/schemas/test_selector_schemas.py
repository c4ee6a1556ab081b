"""Selector tree schema — discriminated nodes, kinds and combinator tokens."""

import pytest
from pydantic import ValidationError

from object_tasks.schemas.selector import (
    CombineNode,
    CompoundNode,
    SelectorBuildRequest,
)


def test_parses_compound_node():
    req = SelectorBuildRequest.model_validate({
        "selector": {"type": "compound", "parts": [{"kind": "id", "value": "main"}]},
    })
    assert isinstance(req.selector, CompoundNode)
    assert req.selector.parts[0].kind == "id"


def test_parses_nested_combine_node():
    req = SelectorBuildRequest.model_validate({
        "selector": {
            "type": "combine",
            "left": {"type": "compound", "parts": [{"kind": "element", "value": "div"}]},
            "combinator": "+",
            "right": {
                "type": "combine",
                "left": {"type": "compound", "parts": [{"kind": "element", "value": "a"}]},
                "combinator": ">",
                "right": {"type": "compound", "parts": [{"kind": "element", "value": "b"}]},
            },
        },
    })
    assert isinstance(req.selector, CombineNode)
    assert isinstance(req.selector.right, CombineNode)


def test_rejects_unknown_kind():
    with pytest.raises(ValidationError):
        CompoundNode(parts=[{"kind": "combinator", "value": "+"}])


def test_rejects_unknown_combinator():
    with pytest.raises(ValidationError):
        SelectorBuildRequest.model_validate({
            "selector": {
                "type": "combine",
                "left": {"type": "compound", "parts": [{"kind": "element", "value": "a"}]},
                "combinator": "|",
                "right": {"type": "compound", "parts": [{"kind": "element", "value": "b"}]},
            },
        })


def test_rejects_empty_parts():
    with pytest.raises(ValidationError):
        CompoundNode(parts=[])


def test_rejects_empty_value():
    with pytest.raises(ValidationError):
        CompoundNode(parts=[{"kind": "class", "value": ""}])
