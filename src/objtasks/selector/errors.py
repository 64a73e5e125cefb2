"""Selector builder error types."""

from __future__ import annotations

from objtasks.selector.model import PartKind

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)


class SelectorError(Exception):
    """Base error for an append that breaks the compound selector rules."""

    def __init__(
        self,
        message: str,
        *,
        kind: PartKind | None = None,
        last_kind: PartKind | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.last_kind = last_kind


class OrderError(SelectorError):
    """A part was appended after a part of higher rank."""

    def __init__(self, kind: PartKind, last_kind: PartKind | None) -> None:
        super().__init__(ORDER_MESSAGE, kind=kind, last_kind=last_kind)


class DuplicateError(SelectorError):
    """An element, id or pseudo-element was appended twice in a row."""

    def __init__(self, kind: PartKind) -> None:
        super().__init__(DUPLICATE_MESSAGE, kind=kind, last_kind=kind)
