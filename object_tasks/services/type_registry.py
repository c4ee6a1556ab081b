"""Type Registry — names the types the HTTP JSON bridge may build from text.

Invariants:
    - Lookup is by lower-case name; unknown names raise UnknownTypeError
    - Registered types are plain classes; from_json bypasses their __init__
"""

from object_tasks.core.errors import ErrorContext, UnknownTypeError
from object_tasks.core.rectangle import Rectangle

_TYPES: dict[str, type] = {
    "rectangle": Rectangle,
}


def registered_types() -> list[str]:
    return sorted(_TYPES)


def resolve_type(name: str) -> type:
    """Return the registered type for name or raise UnknownTypeError."""
    try:
        return _TYPES[name.lower()]
    except KeyError:
        raise UnknownTypeError(
            name, ErrorContext(operation="json.parse"),
        ) from None
