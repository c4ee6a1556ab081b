"""Selector Assembly — turns a validated selector tree into a SelectorBuilder.

Invariants:
    - Every node is built from the shared css_selector_builder facade
    - Builder errors (order, duplicate, combinator) propagate unchanged
    - Depth-first: left subtree, then right subtree, then the combine step

Design Decisions:
    - Lives in services/: the core builder knows nothing about request schemas
"""

import logging

from object_tasks.core.css_selector import SelectorBuilder, css_selector_builder
from object_tasks.schemas.selector import CombineNode, CompoundNode

logger = logging.getLogger(__name__)


def build_compound(node: CompoundNode) -> SelectorBuilder:
    """Append each part to an empty builder, in request order."""
    builder = css_selector_builder
    for part in node.parts:
        builder = builder.part(part.kind, part.value)
    return builder


def build_selector(node: CompoundNode | CombineNode) -> SelectorBuilder:
    """Recursively build a selector tree."""
    if isinstance(node, CompoundNode):
        return build_compound(node)
    left = build_selector(node.left)
    right = build_selector(node.right)
    logger.debug(
        f"Combining selectors with {node.combinator!r}",
        extra={"operation": "selector.combine"},
    )
    return css_selector_builder.combine(left, node.combinator, right)
