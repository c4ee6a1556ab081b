"""Domain Types — enums and aliases shared by the exercises.

Invariants:
    - SELECTOR_ORDER is the single source of truth for compound selector ordering
    - Bill values are the only denominations the ticket seller knows

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
    - Aliases over wrapper classes: payloads stay plain dicts and lists
"""

from enum import Enum, IntEnum
from typing import Any


# ─── Aliases ─────────────────────────────────────────────────────

PlainMapping = dict[str, Any]
LetterPositions = dict[str, list[int]]


# ─── Tickets ─────────────────────────────────────────────────────

class Bill(IntEnum):
    """Denominations accepted at the ticket window."""
    TWENTY_FIVE = 25
    FIFTY = 50
    HUNDRED = 100


TICKET_PRICE: int = Bill.TWENTY_FIVE


# ─── Selectors ───────────────────────────────────────────────────

class SelectorKind(str, Enum):
    """Kind of a selector fragment."""
    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"
    COMBINATOR = "combinator"


class Combinator(str, Enum):
    """Tokens joining two compound selectors."""
    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"


SELECTOR_ORDER: tuple[SelectorKind, ...] = (
    SelectorKind.ELEMENT,
    SelectorKind.ID,
    SelectorKind.CLASS,
    SelectorKind.ATTRIBUTE,
    SelectorKind.PSEUDO_CLASS,
    SelectorKind.PSEUDO_ELEMENT,
)

UNIQUE_KINDS: frozenset[SelectorKind] = frozenset({
    SelectorKind.ELEMENT,
    SelectorKind.ID,
    SelectorKind.PSEUDO_ELEMENT,
})
