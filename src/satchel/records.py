"""Field access helpers shared by the collection engine."""
from __future__ import annotations

import numbers
import types
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any, Iterator, Tuple


@dataclass(frozen=True)
class _Missing:
    """Marker for a field or argument that was not supplied."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()

_OPAQUE_TYPES = (type, types.FunctionType, types.BuiltinFunctionType, types.MethodType, types.ModuleType)


def is_keyed(value: Any) -> bool:
    """Return True for mappings and plain objects that carry their own fields."""
    if isinstance(value, Mapping):
        return True
    if isinstance(value, (str, bytes, list, tuple)) or isinstance(value, _OPAQUE_TYPES):
        return False
    return hasattr(value, "__dict__")


def own_fields(value: Any) -> Iterator[Tuple[str, Any]]:
    if isinstance(value, Mapping):
        yield from value.items()
    elif is_keyed(value):
        yield from vars(value).items()


def get_field(record: Any, key: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(key, MISSING)
    if not isinstance(key, str):
        return MISSING
    return getattr(record, key, MISSING)


def set_field(record: Any, key: str, value: Any) -> None:
    if isinstance(record, MutableMapping):
        record[key] = value
    else:
        setattr(record, key, value)


def is_undefined(value: Any) -> bool:
    return value is None or value is MISSING


def type_tag(value: Any) -> str:
    """
    Classify ``value`` for ordering purposes.

    ``int`` and ``float`` share the ``number`` tag; ``bool`` is kept apart so
    that ``True`` never orders or compares equal against ``1``.
    """
    if value is MISSING:
        return "missing"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, numbers.Number):
        return "number"
    if isinstance(value, str):
        return "text"
    return type(value).__name__


def strict_equals(left: Any, right: Any) -> bool:
    return type_tag(left) == type_tag(right) and left == right
