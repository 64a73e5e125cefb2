from objtasks.selector.builder import Selector, combine, css_selector_builder
from objtasks.selector.errors import DuplicateError, OrderError, SelectorError
from objtasks.selector.model import Combinator, PartKind

__all__ = [
    "Selector",
    "combine",
    "css_selector_builder",
    "SelectorError",
    "OrderError",
    "DuplicateError",
    "Combinator",
    "PartKind",
]
