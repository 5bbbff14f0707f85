"""
Satchel public API.
"""
from __future__ import annotations

from typing import Optional

from .errors import (
    AmbiguousRemovalError,
    DuplicateCollectionError,
    InvalidFactoryError,
    InvalidPayloadError,
    MalformedJSONError,
    SatchelError,
    SettingsError,
    SettingsNotFoundError,
    TypeMismatchError,
    UndefinedValueError,
    UnknownCollectionError,
    UnsupportedFormatError,
)
from .factories import RecordFactory
from .records import MISSING
from .settings import PathLike, StoreSettings, load_settings
from .store import Satchel


def create_store(*seed_files: PathLike,
                 optional: bool = False,
                 id_field: Optional[str] = None) -> Satchel:
    """
    Build a store from seed files, creating and populating their collections.

    With no files this is an empty store keyed by ``id_field`` (``id`` unless
    given).
    """
    settings = load_settings(*seed_files, optional=optional, id_field=id_field)
    return Satchel.from_settings(settings)


__all__ = [
    "AmbiguousRemovalError",
    "DuplicateCollectionError",
    "InvalidFactoryError",
    "InvalidPayloadError",
    "MISSING",
    "MalformedJSONError",
    "RecordFactory",
    "Satchel",
    "SatchelError",
    "SettingsError",
    "SettingsNotFoundError",
    "StoreSettings",
    "TypeMismatchError",
    "UndefinedValueError",
    "UnknownCollectionError",
    "UnsupportedFormatError",
    "create_store",
    "load_settings",
]
