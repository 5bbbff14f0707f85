"""Insert, query and removal operations over id-sorted record lists."""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, List, MutableSequence, Optional, Sequence, Tuple

from .errors import AmbiguousRemovalError, TypeMismatchError
from .index import insertion_index, locate, locate_record
from .merger import merge_fields
from .records import MISSING, get_field, is_undefined, strict_equals

logger = logging.getLogger(__name__)


def _as_list(records: Any) -> List[Any]:
    if isinstance(records, (list, tuple)):
        return list(records)
    return [records]


def insert_all(collection: MutableSequence[Any], records: Any, key: str = "id") -> None:
    """
    Insert ``records`` into ``collection`` keeping it sorted and unique by ``key``.

    A record whose id is already present is merged into the stored record,
    which is mutated in place; the incoming record itself is not kept.
    """
    incoming = _as_list(records)
    if not incoming:
        return

    merged = inserted = 0
    for record in incoming:
        value = get_field(record, key)
        idx = locate(collection, value, key)
        if idx is not None:
            merge_fields(collection[idx], record)
            merged += 1
        else:
            collection.insert(insertion_index(collection, value, key), record)
            inserted += 1
    logger.debug("Inserted %d and merged %d record(s)", inserted, merged)


def _sort_key(key: str) -> Callable[[Any], Tuple[int, Any]]:
    # records without a value for the field sort last, in their existing order
    def sort_key(record: Any) -> Tuple[int, Any]:
        value = get_field(record, key)
        return (1, 0) if is_undefined(value) else (0, value)
    return sort_key


def sorted_view(records: Sequence[Any],
                key: str = "id",
                *,
                presorted_by: Optional[str] = None) -> List[Any]:
    """
    Return a shallow copy of ``records`` ordered by ``key``.

    Records lacking ``key``, or holding ``None`` in it, follow all the others
    in their existing order. Raises ``TypeMismatchError`` when the present values cannot be ordered
    against each other, such as numbers mixed with strings.
    """
    view = list(records)
    if not view or key == presorted_by:
        return view

    try:
        view.sort(key=_sort_key(key))
    except TypeError as exc:
        raise TypeMismatchError(f"Records cannot be ordered by key '{key}': {exc}") from exc
    return view


def _matches(collection: Sequence[Any], key: Any, value: Any) -> Iterator[Any]:
    return (record for record in collection if strict_equals(get_field(record, key), value))


def query(collection: Sequence[Any],
          key: Any = MISSING,
          value: Any = MISSING,
          *,
          id_key: str = "id") -> List[Any]:
    """
    Return all records where ``key`` strictly equals ``value``.

    With no arguments every record is returned. With a single argument it is
    taken as an id value (positional ``key`` for legacy callers, or ``value``
    by keyword) and answered by binary search.
    """
    if value is MISSING:
        if key is MISSING:
            return list(collection)
        key, value = id_key, key
    elif key is MISSING:
        key = id_key
    elif is_undefined(value):
        return list(_matches(collection, key, value))

    if key == id_key:
        found = locate_record(collection, value, id_key)
        return [] if found is None else [found]

    return list(_matches(collection, key, value))


def find_one(collection: Sequence[Any],
             key: Any = MISSING,
             value: Any = MISSING,
             *,
             id_key: str = "id") -> Any:
    """Return the first record matching ``key``/``value``, or ``None``."""
    if value is MISSING:
        key, value = id_key, key
    elif key is MISSING:
        key = id_key
    elif is_undefined(value):
        return next(_matches(collection, key, value), None)

    if key == id_key:
        return locate_record(collection, value, id_key)

    return next(_matches(collection, key, value), None)


def remove_records(collection: MutableSequence[Any], records: Any, key: str = "id") -> List[Any]:
    """Remove ``records`` from ``collection`` by id and return the ones that were present."""
    removed: List[Any] = []
    for record in _as_list(records):
        idx = locate(collection, get_field(record, key), key)
        if idx is not None:
            removed.append(collection.pop(idx))
    return removed


def remove_where(collection: MutableSequence[Any],
                 key: Any = MISSING,
                 value: Any = MISSING,
                 *,
                 id_key: str = "id") -> List[Any]:
    if key is MISSING and value is MISSING:
        raise AmbiguousRemovalError(
            "Cannot remove records without a value to match; use clear() to empty a collection."
        )
    matches = query(collection, key, value, id_key=id_key)
    return remove_records(collection, matches, id_key)
