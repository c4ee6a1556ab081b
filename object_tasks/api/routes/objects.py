"""Object Routes — HTTP access to the object utilities.

Invariants:
    - Each route calls exactly one core function
    - /freeze applies the requested writes and deletes to the FROZEN mapping
      and reports whether its contents survived unchanged
"""

import logging

from fastapi import APIRouter

from object_tasks.core.object_utils import (
    compare_objects,
    is_empty_object,
    make_immutable,
    merge_objects,
    remove_properties,
    shallow_copy,
)
from object_tasks.schemas.exercises import (
    CompareRequest,
    FreezeRequest,
    FreezeResponse,
    MergeRequest,
    ObjectPayload,
    RemovePropertiesRequest,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/objects", tags=["objects"])


@router.post("/copy")
async def copy_object(body: ObjectPayload):
    return {"result": shallow_copy(body.obj)}


@router.post("/merge")
async def merge(body: MergeRequest):
    logger.info(
        "Merging objects",
        extra={"operation": "objects.merge", "item_count": len(body.objects)},
    )
    return {"result": merge_objects(body.objects)}


@router.post("/remove")
async def remove(body: RemovePropertiesRequest):
    return {"result": remove_properties(body.obj, body.keys)}


@router.post("/compare")
async def compare(body: CompareRequest):
    return {"equal": compare_objects(body.first, body.second)}


@router.post("/is-empty")
async def is_empty(body: ObjectPayload):
    return {"empty": is_empty_object(body.obj)}


@router.post("/freeze", response_model=FreezeResponse)
async def freeze(body: FreezeRequest):
    """Freeze obj, then attempt the writes and deletes against it."""
    frozen = make_immutable(body.obj)
    before = dict(frozen)
    for key, value in body.writes.items():
        frozen[key] = value
    for key in body.deletes:
        del frozen[key]
    return FreezeResponse(frozen=dict(frozen), unchanged=dict(frozen) == before)
