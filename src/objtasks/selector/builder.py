"""Immutable fluent builder for CSS compound and complex selectors.

Every append returns a new :class:`Selector`; the receiver is never
modified, so a single empty value can seed any number of unrelated chains::

    css_selector_builder.id("main").class_("container").stringify()
    # '#main.container'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from objtasks.selector.errors import DuplicateError, OrderError
from objtasks.selector.model import PartKind

__all__ = ["Selector", "combine", "css_selector_builder"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selector:
    """A (possibly partial) CSS selector.

    Attributes:
        rendered: The selector text accumulated so far.
        last_kind: Kind of the most recently appended part, or ``None`` for a
            fresh or combined selector.
    """

    rendered: str = ""
    last_kind: PartKind | None = None

    # --- parts ----------------------------------------------------------------

    def append(self, kind: PartKind, value: str) -> Selector:
        """Return a new selector with *value* appended as a part of *kind*.

        Raises:
            OrderError: *kind* ranks below the last appended part.
            DuplicateError: *kind* is a singleton kind equal to the last one.
        """
        self._check(kind)
        return Selector(rendered=self.rendered + kind.render(value), last_kind=kind)

    def element(self, value: str) -> Selector:
        return self.append(PartKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self.append(PartKind.ID, value)

    def class_(self, value: str) -> Selector:
        return self.append(PartKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        """Append an attribute part; *value* goes inside the brackets verbatim."""
        return self.append(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return self.append(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self.append(PartKind.PSEUDO_ELEMENT, value)

    # --- composition ----------------------------------------------------------

    def combine(self, first: Selector, combinator: str, second: Selector) -> Selector:
        """Join two selectors with *combinator*; the receiver is not used."""
        return combine(first, combinator, second)

    def stringify(self) -> str:
        return self.rendered

    def __str__(self) -> str:
        return self.rendered

    # --- rules ----------------------------------------------------------------

    def _check(self, kind: PartKind) -> None:
        last = self.last_kind
        if last is None:
            return
        if kind.rank < last.rank:
            logger.debug(
                "Rejected %s after %s in %r", kind.label, last.label, self.rendered
            )
            raise OrderError(kind, last)
        if kind is last and kind.is_singleton:
            logger.debug("Rejected repeated %s in %r", kind.label, self.rendered)
            raise DuplicateError(kind)


def combine(first: Selector, combinator: str, second: Selector) -> Selector:
    """Return ``"<first> <combinator> <second>"`` as a fresh selector.

    The combinator is inserted verbatim with one space on each side, and the
    result carries no ordering state from either operand.
    """
    return Selector(
        rendered=f"{first.stringify()} {combinator} {second.stringify()}",
        last_kind=None,
    )


# Shared starting point for new chains.
css_selector_builder = Selector()
