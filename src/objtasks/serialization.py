"""JSON helpers: canonical encoding and prototype-backed rehydration.

``from_json`` never mutates the prototype it is given.  The parsed fields and
the prototype are held side by side in a :class:`Rehydrated` wrapper, which
answers attribute lookups from the fields first and falls back to the
prototype's capabilities, binding prototype methods to the wrapper::

    rect = from_json(Rectangle, '{"width": 10, "height": 20}')
    rect.area()  # 200
"""

from __future__ import annotations

import copy
import dataclasses
import functools
import inspect
import json
import logging
import math
import types
from typing import Any

from objtasks.config import ObjtasksConfig

__all__ = [
    "Rehydrated",
    "SerializationError",
    "fields_of",
    "from_json",
    "prototype_of",
    "to_json",
]

logger = logging.getLogger(__name__)

_MISSING = object()

# Slot methods of builtin types only accept instances of that type.
_BUILTIN_DESCRIPTORS = (types.MethodDescriptorType, types.WrapperDescriptorType)


class SerializationError(ValueError):
    """Raised when JSON text cannot be rehydrated."""


class Rehydrated:
    """Parsed JSON fields layered over a prototype class or instance.

    Only dunder names live on this class so that every plain attribute name
    is free for data.  Use :func:`fields_of` and :func:`prototype_of` to reach
    the two layers directly.

    Prototypes should be Python-level classes or their instances.  Methods of
    builtin types (``dict.keys``, ``list.append``) cannot run against the
    wrapper and are not exposed.  Python looks special methods up on the
    type, so only ``__str__``, ``__len__``, ``__iter__``, ``__contains__`` and
    ``__bool__`` are forwarded to the prototype; other operators are not.
    """

    __slots__ = ("__rehydrated_prototype__", "__rehydrated_fields__")

    def __init__(self, prototype: Any, fields: dict[str, Any]) -> None:
        object.__setattr__(self, "__rehydrated_prototype__", prototype)
        object.__setattr__(self, "__rehydrated_fields__", dict(fields))

    def __getattr__(self, name: str) -> Any:
        if name in Rehydrated.__slots__:
            raise AttributeError(name)
        fields = self.__rehydrated_fields__
        if name in fields:
            return fields[name]
        value = _capability(self.__rehydrated_prototype__, name, self)
        if value is _MISSING:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            )
        return value

    def __setattr__(self, name: str, value: Any) -> None:
        self.__rehydrated_fields__[name] = value

    def __delattr__(self, name: str) -> None:
        try:
            del self.__rehydrated_fields__[name]
        except KeyError:
            raise AttributeError(name) from None

    def __dir__(self) -> list[str]:
        return sorted(
            set(self.__rehydrated_fields__) | set(dir(self.__rehydrated_prototype__))
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rehydrated):
            return NotImplemented
        return (
            self.__rehydrated_prototype__ == other.__rehydrated_prototype__
            and self.__rehydrated_fields__ == other.__rehydrated_fields__
        )

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> Rehydrated:
        return Rehydrated(self.__rehydrated_prototype__, self.__rehydrated_fields__)

    def __deepcopy__(self, memo: dict[int, Any]) -> Rehydrated:
        # The prototype is a shared capability set; only the data is copied.
        fields = copy.deepcopy(self.__rehydrated_fields__, memo)
        return Rehydrated(self.__rehydrated_prototype__, fields)

    def __repr__(self) -> str:
        return f"Rehydrated({_prototype_name(self)}, {self.__rehydrated_fields__!r})"

    # --- forwarded special methods --------------------------------------------

    def __str__(self) -> str:
        method = _special(self, "__str__")
        return method() if method is not None else repr(self)

    def __len__(self) -> int:
        method = _special(self, "__len__")
        if method is None:
            raise TypeError(f"object of type {_prototype_name(self)!r} has no len()")
        return method()

    def __iter__(self):
        method = _special(self, "__iter__")
        if method is None:
            raise TypeError(f"{_prototype_name(self)!r} object is not iterable")
        return method()

    def __contains__(self, item: Any) -> bool:
        method = _special(self, "__contains__")
        if method is not None:
            return method(item)
        return any(value is item or value == item for value in iter(self))

    def __bool__(self) -> bool:
        method = _special(self, "__bool__")
        if method is not None:
            return method()
        method = _special(self, "__len__")
        if method is not None:
            return method() != 0
        return True


def _prototype_name(obj: Rehydrated) -> str:
    proto = prototype_of(obj)
    return proto.__name__ if isinstance(proto, type) else type(proto).__name__


def _capability(prototype: Any, name: str, target: Rehydrated) -> Any:
    """Resolve *name* on *prototype*, binding descriptors to *target*."""
    owner = prototype if isinstance(prototype, type) else type(prototype)
    attr = inspect.getattr_static(owner, name, _MISSING)

    if isinstance(attr, _BUILTIN_DESCRIPTORS):
        return _MISSING
    if isinstance(attr, functools.cached_property):
        # The wrapper has no __dict__ to cache into.
        return attr.func(target)
    if attr is not _MISSING and hasattr(type(attr), "__get__"):
        return attr.__get__(target, owner)
    if not isinstance(prototype, type):
        return getattr(prototype, name, _MISSING)
    return attr


def _special(obj: Rehydrated, name: str) -> Any:
    """Return the prototype's *name* bound to *obj*, unless only object has it."""
    proto = prototype_of(obj)
    owner = proto if isinstance(proto, type) else type(proto)
    if inspect.getattr_static(owner, name, None) is object.__dict__.get(name):
        return None
    value = _capability(proto, name, obj)
    return None if value is _MISSING else value


def fields_of(obj: Rehydrated) -> dict[str, Any]:
    """Return a copy of the parsed field table of *obj*."""
    return dict(object.__getattribute__(obj, "__rehydrated_fields__"))


def prototype_of(obj: Rehydrated) -> Any:
    return object.__getattribute__(obj, "__rehydrated_prototype__")


def _finite(value: Any) -> Any:
    """Replace NaN and infinities with None, as ``JSON.stringify`` does."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(item) for item in value]
    return value


def _encode(value: Any) -> Any:
    if isinstance(value, Rehydrated):
        return _finite(fields_of(value))
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _finite(dataclasses.asdict(value))
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(obj: Any, *, config: ObjtasksConfig | None = None) -> str:
    """Encode *obj* as JSON text.

    Output is compact unless ``config.json_indent`` is set.  Dataclass
    instances encode as their fields and :class:`Rehydrated` values as their
    parsed field table.  Non-finite floats encode as ``null``.
    """
    cfg = config or ObjtasksConfig()
    separators = (",", ":") if cfg.json_indent is None else None
    return json.dumps(
        _finite(obj),
        indent=cfg.json_indent,
        sort_keys=cfg.json_sort_keys,
        separators=separators,
        ensure_ascii=False,
        allow_nan=False,
        default=_encode,
    )


def from_json(prototype: Any, text: str) -> Rehydrated:
    """Parse a JSON object from *text* and layer it over *prototype*.

    Raises:
        SerializationError: *text* is not valid JSON or is not a JSON object.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.debug("Could not decode JSON: %s", exc)
        raise SerializationError(f"Invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise SerializationError(
            f"Expected a JSON object, got {type(data).__name__}"
        )
    return Rehydrated(prototype, data)
