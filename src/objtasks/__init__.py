"""objtasks: object exercises and an immutable CSS selector builder."""

__version__ = "0.1.0"

from objtasks.config import ObjtasksConfig
from objtasks.model.rectangle import Rectangle
from objtasks.selector import (
    Combinator,
    DuplicateError,
    OrderError,
    PartKind,
    Selector,
    SelectorError,
    combine,
    css_selector_builder,
)
from objtasks.serialization import (
    Rehydrated,
    SerializationError,
    fields_of,
    from_json,
    prototype_of,
    to_json,
)

__all__ = [
    "__version__",
    "ObjtasksConfig",
    "Rectangle",
    "Selector",
    "combine",
    "css_selector_builder",
    "Combinator",
    "PartKind",
    "SelectorError",
    "OrderError",
    "DuplicateError",
    "Rehydrated",
    "SerializationError",
    "fields_of",
    "from_json",
    "prototype_of",
    "to_json",
]
