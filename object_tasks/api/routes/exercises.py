"""Exercise Routes — word reconstruction, tickets, rectangle, cities, grouping, JSON.

Invariants:
    - Request bodies are validated by Pydantic before reaching the handler
    - /sort-cities returns the records in sorted order (core sorts in place)
    - /group returns a list of {key, values} to keep non-string keys intact
    - /json/parse resolves the target type through the type registry
"""

import logging
from operator import itemgetter

from fastapi import APIRouter

from object_tasks.core.group import group
from object_tasks.core.json_bridge import from_json, get_json
from object_tasks.core.make_word import make_word
from object_tasks.core.rectangle import Rectangle
from object_tasks.core.sell_tickets import sell_tickets
from object_tasks.core.sort_cities import sort_cities_array
from object_tasks.schemas.exercises import (
    GroupEntry,
    GroupRequest,
    JsonParseRequest,
    JsonStringifyRequest,
    MakeWordRequest,
    RectangleRequest,
    RectangleResponse,
    SellTicketsRequest,
    SellTicketsResponse,
    SortCitiesRequest,
)
from object_tasks.services.type_registry import registered_types, resolve_type

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/exercises", tags=["exercises"])


@router.post("/make-word")
async def build_word(body: MakeWordRequest):
    return {"word": make_word(body.letters)}


@router.post("/sell-tickets", response_model=SellTicketsResponse)
async def sell(body: SellTicketsRequest):
    can_sell = sell_tickets(body.queue)
    logger.info(
        f"Ticket queue served: {can_sell}",
        extra={"operation": "tickets.sell", "item_count": len(body.queue)},
    )
    return SellTicketsResponse(can_sell=can_sell, customers=len(body.queue))


@router.post("/rectangle", response_model=RectangleResponse)
async def rectangle(body: RectangleRequest):
    rect = Rectangle(body.width, body.height)
    return RectangleResponse(width=rect.width, height=rect.height, area=rect.area)


@router.post("/sort-cities")
async def sort_cities(body: SortCitiesRequest):
    records = [record.model_dump() for record in body.records]
    return {"records": sort_cities_array(records)}


@router.post("/group", response_model=list[GroupEntry])
async def group_items(body: GroupRequest):
    grouped = group(
        body.items, itemgetter(body.key_field), itemgetter(body.value_field),
    )
    logger.info(
        f"Grouped into {len(grouped)} keys",
        extra={"operation": "exercises.group", "item_count": len(body.items)},
    )
    return [GroupEntry(key=key, values=values) for key, values in grouped.items()]


@router.post("/json/stringify")
async def stringify(body: JsonStringifyRequest):
    return {"json": get_json(body.value)}


@router.get("/json/types")
async def json_types():
    return {"types": registered_types()}


@router.post("/json/parse")
async def parse(body: JsonParseRequest):
    """Build an instance of the named type from JSON text."""
    instance = from_json(resolve_type(body.type_name), body.text)
    return {
        "type_name": body.type_name,
        "fields": vars(instance),
        "area": getattr(instance, "area", None),
    }
