"""Pluggable record construction."""
from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, runtime_checkable

from .merger import merge_fields


@runtime_checkable
class RecordFactory(Protocol):
    """
    Anything that builds a record from raw arguments via ``create``.

    Records a factory already built are stored as-is by ``Satchel.load``
    instead of being passed through ``create`` again. A class acting as its
    own factory is recognised automatically; any other factory names the
    class it builds in a ``record_type`` attribute.
    """

    def create(self, *args: Any) -> Any:
        ...


def is_record_factory(candidate: Any) -> bool:
    return isinstance(candidate, RecordFactory) and callable(getattr(candidate, "create", None))


def produced_by(record: Any, factory: Optional[RecordFactory]) -> bool:
    """Return True if ``record`` is an instance of the type ``factory`` builds."""
    record_type = factory if isinstance(factory, type) else getattr(factory, "record_type", None)
    return isinstance(record_type, type) and isinstance(record, record_type)


def create_record(factory: Optional[RecordFactory], *args: Any) -> Any:
    """
    Build a record with ``factory``, or as a plain dict when there is none.

    Without a factory every keyed argument is deep merged into a new dict and
    all other arguments are ignored. A factory receives the arguments
    untouched and its result is returned as-is.
    """
    if factory is not None:
        return factory.create(*args)

    record: Dict[str, Any] = {}
    merge_fields(record, *args)
    return record
