"""Selector Routes — build CSS selectors from a nested request tree.

Invariants:
    - Ordering/duplicate/combinator violations surface as 400 via the
      ObjectTasksError handler (codes SELECTOR_ORDER, SELECTOR_DUPLICATE, ...)
"""

import logging

from fastapi import APIRouter

from object_tasks.schemas.selector import SelectorBuildRequest, SelectorBuildResponse
from object_tasks.services.selector_assembly import build_selector

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/selectors", tags=["selectors"])


@router.post("/build", response_model=SelectorBuildResponse)
async def build(body: SelectorBuildRequest):
    builder = build_selector(body.selector)
    selector = builder.stringify()
    logger.info(
        f"Built selector {selector!r}",
        extra={"operation": "selector.build", "item_count": len(builder.fragments)},
    )
    return SelectorBuildResponse(selector=selector, fragments=len(builder.fragments))
