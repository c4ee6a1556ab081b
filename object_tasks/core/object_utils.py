"""Object Utilities — shallow copy, merge, property removal, comparison, freezing.

Invariants:
    - shallow_copy, merge_objects, compare_objects, is_empty_object never mutate inputs
    - remove_properties mutates and returns the SAME mapping
    - merge_objects keeps first-seen key order and sums values on repeated keys;
      values that cannot be added raise MergeValueError
    - compare_objects is shallow: nested values compared with ==, no recursion

Design Decisions:
    - Plain dicts in, plain dicts out: callers keep ownership of their payloads
    - make_immutable delegates to FrozenMapping (writes become no-ops, not errors)
"""

from collections.abc import Iterable, Mapping
from typing import Any

from object_tasks.core.errors import MergeValueError
from object_tasks.core.immutable import FrozenMapping, freeze


def shallow_copy(obj: Mapping[str, Any]) -> dict[str, Any]:
    """New dict with the same pairs. Nested values are shared."""
    return dict(obj)


def merge_objects(objects: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
    """Merge mappings into one, adding values of keys seen more than once.

    >>> merge_objects([{"a": 1, "b": 2}, {"b": 3, "c": 5}])
    {'a': 1, 'b': 5, 'c': 5}
    """
    merged: dict[str, Any] = {}
    for obj in objects:
        for key, value in obj.items():
            # Falsy accumulated values are replaced, not added to
            if merged.get(key):
                try:
                    merged[key] = merged[key] + value
                except TypeError:
                    raise MergeValueError(key, merged[key], value) from None
            else:
                merged[key] = value
    return merged


def remove_properties(obj: dict[str, Any], keys: Iterable[str] | str) -> dict[str, Any]:
    """Delete keys from obj in place and return it. Absent keys are ignored."""
    if isinstance(keys, str):
        keys = [keys]
    for key in keys:
        obj.pop(key, None)
    return obj


_MISSING = object()


def compare_objects(obj1: Mapping[str, Any], obj2: Mapping[str, Any]) -> bool:
    """Shallow equality: same key count and equal values under every key."""
    if len(obj1) != len(obj2):
        return False
    return all(obj2.get(key, _MISSING) == value for key, value in obj1.items())


def is_empty_object(obj: Mapping[str, Any]) -> bool:
    return len(obj) == 0


def make_immutable(obj: dict[str, Any]) -> FrozenMapping:
    """Return a frozen view of obj's contents. Later writes and deletes are ignored."""
    return freeze(obj)
