"""Exercise Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - List payloads are bounded by Settings.max_items
    - Bills are restricted to 25, 50, 100 before reaching the ticket seller
    - MakeWordRequest keys are single characters, positions non-negative
    - GroupRequest items all carry both selected fields; keys are strings or numbers

Design Decisions:
    - Literal types over str enums: Pydantic handles validation natively
    - Payload mappings stay dict[str, Any]: exercises operate on arbitrary values
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from object_tasks.config import get_settings


def _check_item_count(items: list | dict, field_name: str) -> None:
    limit = get_settings().max_items
    if len(items) > limit:
        raise ValueError(f"{field_name} accepts at most {limit} items")


# --- Object utilities --------------------------------------------------------

class ObjectPayload(BaseModel):
    """Single mapping payload (copy, is-empty)."""
    obj: dict[str, Any]


class MergeRequest(BaseModel):
    """Mappings to merge, summing values on repeated keys."""
    objects: list[dict[str, Any]]

    @field_validator("objects")
    @classmethod
    def bound_objects(cls, v: list[dict[str, Any]]) -> list[dict[str, Any]]:
        _check_item_count(v, "objects")
        return v


class RemovePropertiesRequest(BaseModel):
    """Mapping and the keys to remove from it."""
    obj: dict[str, Any]
    keys: list[str] | str


class CompareRequest(BaseModel):
    first: dict[str, Any]
    second: dict[str, Any]


class FreezeRequest(BaseModel):
    """Mapping to freeze plus the writes and deletes to attempt afterwards."""
    obj: dict[str, Any]
    writes: dict[str, Any] = Field(default_factory=dict)
    deletes: list[str] = Field(default_factory=list)


class FreezeResponse(BaseModel):
    frozen: dict[str, Any]
    unchanged: bool


# --- Word and tickets --------------------------------------------------------

class MakeWordRequest(BaseModel):
    """Letter → positions mapping."""
    letters: dict[str, list[Annotated[int, Field(ge=0)]]]

    @field_validator("letters")
    @classmethod
    def single_character_keys(
        cls, v: dict[str, list[int]],
    ) -> dict[str, list[int]]:
        bad = [key for key in v if len(key) != 1]
        if bad:
            raise ValueError(f"keys must be single characters: {bad}")
        _check_item_count(v, "letters")
        return v


class SellTicketsRequest(BaseModel):
    """Bills in queue order."""
    queue: list[Literal[25, 50, 100]]

    @field_validator("queue")
    @classmethod
    def bound_queue(cls, v: list[int]) -> list[int]:
        _check_item_count(v, "queue")
        return v


class SellTicketsResponse(BaseModel):
    can_sell: bool
    customers: int


# --- Rectangle ---------------------------------------------------------------

class RectangleRequest(BaseModel):
    width: float
    height: float


class RectangleResponse(BaseModel):
    width: float
    height: float
    area: float


# --- Cities and grouping -----------------------------------------------------

class CityRecord(BaseModel):
    """Country/city pair. Empty strings allowed; they sort first."""
    country: str
    city: str


class SortCitiesRequest(BaseModel):
    records: list[CityRecord]

    @field_validator("records")
    @classmethod
    def bound_records(cls, v: list[CityRecord]) -> list[CityRecord]:
        _check_item_count(v, "records")
        return v


class GroupRequest(BaseModel):
    """Records grouped by key_field, collecting value_field."""
    items: list[dict[str, Any]]
    key_field: str = Field(min_length=1)
    value_field: str = Field(min_length=1)

    @model_validator(mode="after")
    def items_carry_fields(self):
        _check_item_count(self.items, "items")
        for index, item in enumerate(self.items):
            if self.key_field not in item or self.value_field not in item:
                raise ValueError(
                    f"items[{index}] lacks '{self.key_field}' or '{self.value_field}'"
                )
            key = item[self.key_field]
            # bool hashes equal to 0/1 and would merge with numeric groups
            if isinstance(key, bool) or not isinstance(key, (str, int, float)):
                raise ValueError(
                    f"items[{index}].{self.key_field} must be a string or number"
                )
        return self


class GroupEntry(BaseModel):
    key: Any
    values: list[Any]


# --- JSON bridge -------------------------------------------------------------

class JsonStringifyRequest(BaseModel):
    value: Any


class JsonParseRequest(BaseModel):
    """JSON text and the registered type name to apply it to."""
    type_name: str = Field(min_length=1)
    text: str

    @field_validator("type_name")
    @classmethod
    def normalize_type_name(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("type_name cannot be empty or whitespace")
        return v
