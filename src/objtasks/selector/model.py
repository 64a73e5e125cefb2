"""Selector part model: the ranked kinds a compound selector is built from."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class PartKind(IntEnum):
    """Kind of a simple selector, valued by its rank inside a compound selector.

    Parts must be appended in non-decreasing rank:
        element < id < class < attribute < pseudo-class < pseudo-element
    """

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def rank(self) -> int:
        return int(self)

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``pseudo-class``."""
        return self.name.lower().replace("_", "-")

    @property
    def is_singleton(self) -> bool:
        """True for kinds that may occur at most once in a compound selector."""
        return self in _SINGLETONS

    def render(self, value: str) -> str:
        """Wrap *value* in this kind's punctuation."""
        prefix, suffix = _PUNCTUATION[self]
        return f"{prefix}{value}{suffix}"


# (prefix, suffix) per kind.
_PUNCTUATION: dict[PartKind, tuple[str, str]] = {
    PartKind.ELEMENT: ("", ""),
    PartKind.ID: ("#", ""),
    PartKind.CLASS: (".", ""),
    PartKind.ATTRIBUTE: ("[", "]"),
    PartKind.PSEUDO_CLASS: (":", ""),
    PartKind.PSEUDO_ELEMENT: ("::", ""),
}

_SINGLETONS = frozenset({PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT})


class Combinator(StrEnum):
    """The four CSS combinator tokens."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
