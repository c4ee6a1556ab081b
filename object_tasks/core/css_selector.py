"""CSS Selector Builder — fluent, immutable construction of CSS selectors.

A compound selector is built from parts in a fixed order:

    element#id.class[attr]:pseudoClass::pseudoElement
              \\----/\\----/\\----------/
              may repeat

Compound selectors are joined with combine() using ' ', '+', '~' or '>'.

Invariants:
    - A SelectorBuilder is never mutated; every step returns a new builder
    - Parts of one compound follow SELECTOR_ORDER, else SelectorOrderError
    - element, id and pseudo-element occur at most once per compound,
      else SelectorDuplicateError (checked before ordering)
    - Validation only looks at the trailing compound (after the last combinator)
    - stringify() has no side effects

Design Decisions:
    - Frozen dataclass over a tuple of fragments: builders share no mutable state,
      so the module-level facade can be reused across unrelated chains
    - Combinators render as ' {token} ', so the descendant combinator is three spaces
"""

from dataclasses import dataclass
from typing import NamedTuple

from object_tasks.core.domain_types import (
    Combinator,
    SELECTOR_ORDER,
    SelectorKind,
    UNIQUE_KINDS,
)
from object_tasks.core.errors import (
    InvalidCombinatorError,
    SelectorDuplicateError,
    SelectorOrderError,
)


class Fragment(NamedTuple):
    """One atomic piece of a selector and its kind."""
    text: str
    kind: SelectorKind


_PREFIXES: dict[SelectorKind, tuple[str, str]] = {
    SelectorKind.ELEMENT: ("", ""),
    SelectorKind.ID: ("#", ""),
    SelectorKind.CLASS: (".", ""),
    SelectorKind.ATTRIBUTE: ("[", "]"),
    SelectorKind.PSEUDO_CLASS: (":", ""),
    SelectorKind.PSEUDO_ELEMENT: ("::", ""),
}


def _trailing_compound(fragments: tuple[Fragment, ...]) -> tuple[Fragment, ...]:
    for index in range(len(fragments) - 1, -1, -1):
        if fragments[index].kind is SelectorKind.COMBINATOR:
            return fragments[index + 1:]
    return fragments


def check_part(fragments: tuple[Fragment, ...], kind: SelectorKind) -> None:
    """Raise if appending `kind` would break the trailing compound."""
    compound = _trailing_compound(fragments)
    present = {fragment.kind for fragment in compound}
    if kind in UNIQUE_KINDS and kind in present:
        raise SelectorDuplicateError(kind.value)
    later = SELECTOR_ORDER[SELECTOR_ORDER.index(kind) + 1:]
    if present.intersection(later):
        raise SelectorOrderError(kind.value)


@dataclass(frozen=True)
class SelectorBuilder:
    """Immutable selector under construction."""

    fragments: tuple[Fragment, ...] = ()

    def _append(self, kind: SelectorKind, value: str) -> "SelectorBuilder":
        check_part(self.fragments, kind)
        prefix, suffix = _PREFIXES[kind]
        return SelectorBuilder(
            self.fragments + (Fragment(f"{prefix}{value}{suffix}", kind),),
        )

    def element(self, value: str) -> "SelectorBuilder":
        return self._append(SelectorKind.ELEMENT, value)

    def id(self, value: str) -> "SelectorBuilder":
        return self._append(SelectorKind.ID, value)

    def class_(self, value: str) -> "SelectorBuilder":
        return self._append(SelectorKind.CLASS, value)

    def attr(self, value: str) -> "SelectorBuilder":
        return self._append(SelectorKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> "SelectorBuilder":
        return self._append(SelectorKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> "SelectorBuilder":
        return self._append(SelectorKind.PSEUDO_ELEMENT, value)

    def part(self, kind: SelectorKind | str, value: str) -> "SelectorBuilder":
        """Append a part by kind name, e.g. part("pseudo-class", "hover")."""
        kind = SelectorKind(kind)
        if kind not in _PREFIXES:
            raise ValueError(f"{kind.value} is not a compound selector part")
        return self._append(kind, value)

    def combine(
        self,
        left: "SelectorBuilder",
        combinator: Combinator | str,
        right: "SelectorBuilder",
    ) -> "SelectorBuilder":
        """Join two selectors with a combinator token."""
        try:
            token = Combinator(combinator)
        except ValueError:
            raise InvalidCombinatorError(str(combinator)) from None
        joint = Fragment(f" {token.value} ", SelectorKind.COMBINATOR)
        return SelectorBuilder(left.fragments + (joint,) + right.fragments)

    def stringify(self) -> str:
        return "".join(fragment.text for fragment in self.fragments)

    def __str__(self) -> str:
        return self.stringify()


css_selector_builder = SelectorBuilder()
