"""Frozen Mapping — dict variant whose writes and deletions are silent no-ops.

Invariants:
    - Contents are fixed at construction; no public method changes them
    - Mutation attempts never raise (item, attribute, and bulk mutators alike)
    - Reads, iteration, equality, and JSON serialization behave like dict
    - copy, deepcopy and pickle rebuild from the contents, not by item assignment

Design Decisions:
    - Subclass of dict: json.dumps and == against plain dicts work unchanged
    - Frozen is a capability of the value, not a deep-freeze of nested values
"""

from typing import Any


class FrozenMapping(dict):
    """Read-only dict. Assignment and deletion are ignored."""

    __slots__ = ()

    def __setitem__(self, key: str, value: Any) -> None:
        pass

    def __delitem__(self, key: str) -> None:
        pass

    def __setattr__(self, name: str, value: Any) -> None:
        pass

    def __delattr__(self, name: str) -> None:
        pass

    def __ior__(self, other):
        return self

    def update(self, *args, **kwargs) -> None:
        pass

    def clear(self) -> None:
        pass

    def pop(self, key: str, default: Any = None) -> Any:
        return self.get(key, default)

    def popitem(self) -> None:
        return None

    def setdefault(self, key: str, default: Any = None) -> Any:
        return self.get(key, default)

    def __reduce__(self):
        return (FrozenMapping, (dict(self),))

    def __repr__(self) -> str:
        return f"FrozenMapping({dict.__repr__(self)})"


def freeze(obj: dict[str, Any]) -> FrozenMapping:
    """Return the frozen variant of obj. Already frozen values are returned as-is."""
    if isinstance(obj, FrozenMapping):
        return obj
    return FrozenMapping(obj)
