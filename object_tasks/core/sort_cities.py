"""City Sort — order records by country, then city, in place.

Invariants:
    - Sorts the given list in place and returns the same list object
    - Only the FIRST character of country and city takes part in the comparison
    - Records whose first characters match on both fields keep their input order

Known limitation (kept as-is):
    - 'Russia' and 'Romania' compare equal, as do 'Minsk' and 'Moscow'
"""

from functools import cmp_to_key
from typing import Any


def _first(text: str) -> str:
    return text[:1]


def _compare_cities(a: dict[str, Any], b: dict[str, Any]) -> int:
    if _first(a["country"]) != _first(b["country"]):
        return 1 if _first(a["country"]) > _first(b["country"]) else -1
    if _first(a["city"]) != _first(b["city"]):
        return 1 if _first(a["city"]) > _first(b["city"]) else -1
    return 0


def sort_cities_array(records: list[dict[str, Any]]) -> list[dict[str, Any]]:
    records.sort(key=cmp_to_key(_compare_cities))
    return records
