"""Grouping — build a multimap (key → list of values) from a sequence.

Invariants:
    - One entry per distinct key, in order of first appearance
    - Values inside each group keep their input order
    - Selectors are called on every element; keys must be hashable

Design Decisions:
    - Rescans the whole input for each newly seen key (quadratic in the worst case);
      inputs are small exercise payloads
"""

from collections.abc import Callable, Hashable, Sequence
from typing import Any, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def group(
    items: Sequence[Any],
    key_selector: Callable[[Any], K],
    value_selector: Callable[[Any], V],
) -> dict[K, list[V]]:
    """Group values by key.

    >>> group([{"c": "BY", "city": "Brest"}, {"c": "RU", "city": "Omsk"},
    ...        {"c": "BY", "city": "Minsk"}], lambda i: i["c"], lambda i: i["city"])
    {'BY': ['Brest', 'Minsk'], 'RU': ['Omsk']}
    """
    grouped: dict[K, list[V]] = {}
    for element in items:
        key = key_selector(element)
        if key in grouped:
            continue
        grouped[key] = [
            value_selector(item) for item in items if key_selector(item) == key
        ]
    return grouped
