"""The Satchel container: named, id-sorted record collections."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from . import collection as engine
from .errors import (
    DuplicateCollectionError,
    InvalidFactoryError,
    InvalidPayloadError,
    UnknownCollectionError,
)
from .factories import RecordFactory, create_record, is_record_factory, produced_by
from .payload import normalize_payload
from .records import MISSING, is_keyed
from .settings import StoreSettings

logger = logging.getLogger(__name__)


class Satchel:
    """
    Hold named collections of records, each kept sorted by ``id_field``.

    Records are mappings or plain objects. Loading a record whose id is already
    stored merges its fields into the stored record instead of adding a second
    one.
    """

    def __init__(self, id_field: str = "id") -> None:
        self._id_field = id_field
        self._store: Dict[str, List[Any]] = {}
        self._factories: Dict[str, RecordFactory] = {}

    @classmethod
    def from_settings(cls, settings: StoreSettings) -> "Satchel":
        """Build a store with the collections and seed records named in ``settings``."""
        satchel = cls(id_field=settings.id_field)
        for name, seeds in settings.collections.items():
            satchel.add_collection(name)
            if seeds:
                satchel.load(name, seeds)
        logger.info(
            "Built store with %d collection(s) and %d seed record(s)",
            len(settings.collections),
            settings.seed_count(),
        )
        return satchel

    @property
    def id_field(self) -> str:
        return self._id_field

    # ------------------------------------------------------------------
    # collections

    def add_collection(self, name: str) -> None:
        if name in self._store:
            raise DuplicateCollectionError(
                f"A collection named '{name}' already exists; cannot add it again."
            )
        self._store[name] = []
        logger.debug("Added collection '%s'", name)

    def has_collection(self, name: str) -> bool:
        return name in self._store

    def collection_names(self) -> List[str]:
        return list(self._store)

    def count(self, name: str) -> int:
        return len(self._collection(name))

    def clear(self) -> None:
        """Empty every collection in place. Factories stay registered."""
        for records in self._store.values():
            del records[:]
        logger.debug("Cleared %d collection(s)", len(self._store))

    def _collection(self, name: str) -> List[Any]:
        try:
            return self._store[name]
        except KeyError:
            raise UnknownCollectionError(f"There is no collection named '{name}'.") from None

    # ------------------------------------------------------------------
    # factories

    def add_factory(self, name: str, factory: RecordFactory) -> None:
        if name not in self._store:
            raise UnknownCollectionError(f"There is no collection named '{name}'.")
        if name in self._factories:
            raise InvalidFactoryError(
                f"A record factory is already registered for the collection named '{name}'."
            )
        if not is_record_factory(factory):
            raise InvalidFactoryError(
                f"The record factory for collection '{name}' must provide a callable create()."
            )
        self._factories[name] = factory
        logger.debug("Registered factory %r for collection '%s'", factory, name)

    register_model_factory = add_factory

    def has_factory(self, name: str) -> bool:
        return name in self._factories

    def remove_factory(self, name: str) -> None:
        self._factories.pop(name, None)

    def clear_factories(self) -> None:
        self._factories.clear()

    # ------------------------------------------------------------------
    # records

    def create_model_of_type(self, name: str, *args: Any) -> Any:
        return create_record(self._factories.get(name), *args)

    def load(self, name: str, payload: Any) -> None:
        """
        Load ``payload`` into the named collection.

        ``payload`` is a record, a sequence of records, or a JSON string of
        either. Instances already built by the collection's factory are stored
        as given; everything else is built through ``create_model_of_type``.
        """
        records = self._collection(name)
        factory = self._factories.get(name)
        items = normalize_payload(payload)
        if not items:
            return

        models = [
            item if produced_by(item, factory) else self.create_model_of_type(name, item)
            for item in items
        ]
        logger.debug("Loading %d record(s) into '%s'", len(models), name)
        engine.insert_all(records, models, self._id_field)

    def sort_by(self, name: str, key: Optional[str] = None) -> List[Any]:
        """Return a copy of the collection sorted by ``key`` (the id field by default)."""
        return engine.sorted_view(
            self._collection(name),
            key or self._id_field,
            presorted_by=self._id_field,
        )

    def all(self, name: str, key: Any = MISSING, val: Any = MISSING) -> List[Any]:
        """
        Return every record in ``name`` whose ``key`` equals ``val``.

        ``all(name)`` returns the whole collection and ``all(name, 5)`` treats
        its single argument as an id.
        """
        return engine.query(self._collection(name), key, val, id_key=self._id_field)

    def find(self, name: str, key: Any = MISSING, val: Any = MISSING) -> Any:
        return engine.find_one(self._collection(name), key, val, id_key=self._id_field)

    def remove_models(self, name: str, models: Any) -> List[Any]:
        records = self._collection(name)
        if not isinstance(models, (list, tuple)) and not is_keyed(models):
            raise InvalidPayloadError(
                f"Records to remove must be a record or a sequence of records, got {type(models).__name__}"
            )
        removed = engine.remove_records(records, models, self._id_field)
        logger.debug("Removed %d record(s) from '%s'", len(removed), name)
        return removed

    def remove_where(self, name: str, key: Any = MISSING, val: Any = MISSING) -> List[Any]:
        records = self._collection(name)
        removed = engine.remove_where(records, key, val, id_key=self._id_field)
        logger.debug("Removed %d record(s) from '%s'", len(removed), name)
        return removed
