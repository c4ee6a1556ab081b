"""Selector Schemas — recursive selector tree accepted by POST /selectors/build.

Invariants:
    - A node is either a compound (ordered parts) or a combine (left, token, right)
    - Part kinds and combinator tokens are validated here; ordering and
      duplicate rules are left to the builder so the API reports them as 400s
      with the builder's own error codes

Design Decisions:
    - Discriminated union on `type`: unambiguous parsing of nested nodes
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

PartKind = Literal[
    "element", "id", "class", "attribute", "pseudo-class", "pseudo-element",
]


class SelectorPart(BaseModel):
    kind: PartKind
    value: str = Field(min_length=1, max_length=500)


class CompoundNode(BaseModel):
    """element#id.class[attr]:pseudo-class::pseudo-element, in part order."""
    type: Literal["compound"] = "compound"
    parts: list[SelectorPart] = Field(min_length=1, max_length=50)


class CombineNode(BaseModel):
    type: Literal["combine"] = "combine"
    left: "SelectorNode"
    combinator: Literal[" ", "+", "~", ">"]
    right: "SelectorNode"


SelectorNode = Annotated[
    Union[CompoundNode, CombineNode], Field(discriminator="type"),
]

CombineNode.model_rebuild()


class SelectorBuildRequest(BaseModel):
    selector: SelectorNode


class SelectorBuildResponse(BaseModel):
    selector: str
    fragments: int
