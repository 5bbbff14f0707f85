"""Binary search over record lists kept sorted by a single field."""
from __future__ import annotations

from typing import Any, Optional, Sequence

from .errors import TypeMismatchError, UndefinedValueError
from .records import get_field, is_undefined, type_tag


def insertion_index(records: Sequence[Any], value: Any, key: str = "id") -> int:
    """
    Return the rightmost index at which a record holding ``value`` in ``key``
    can be inserted without breaking the ordering of ``records``.

    Raises:
        UndefinedValueError: ``value`` is ``None`` or missing.
        TypeMismatchError: ``value`` cannot be ordered against the stored values.
    """
    if is_undefined(value):
        raise UndefinedValueError("The value for getting an insert index was undefined.")

    if not records:
        return 0

    if type_tag(get_field(records[0], key)) != type_tag(value):
        raise TypeMismatchError(
            f"The value {value!r} is not of the same type as the values held by key '{key}'."
        )

    low, high = 0, len(records) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if value < get_field(records[mid], key):
            high = mid - 1
        else:
            low = mid + 1
    return high + 1


def locate(records: Sequence[Any], value: Any, key: str = "id") -> Optional[int]:
    """
    Return the index of the record whose ``key`` equals ``value``, or ``None``.

    An empty sequence or a value of another type is simply not found.
    """
    if is_undefined(value):
        raise UndefinedValueError("The value for binary searching was undefined.")

    if not records or type_tag(get_field(records[0], key)) != type_tag(value):
        return None

    low, high = 0, len(records) - 1
    while low <= high:
        mid = low + (high - low) // 2
        current = get_field(records[mid], key)
        if current < value:
            low = mid + 1
        elif value < current:
            high = mid - 1
        else:
            return mid
    return None


def locate_record(records: Sequence[Any], value: Any, key: str = "id") -> Any:
    idx = locate(records, value, key)
    return None if idx is None else records[idx]
