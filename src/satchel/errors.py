"""Exception types for the Satchel API."""
from __future__ import annotations

from .exceptions import SatchelError


class DuplicateCollectionError(SatchelError):
    """Raised when a collection name is added a second time."""


class UnknownCollectionError(SatchelError):
    """Raised when an operation references a collection that was never added."""


class InvalidFactoryError(SatchelError):
    """Raised when a factory is unusable or a collection already has one."""


class InvalidPayloadError(SatchelError):
    """Raised when a payload is neither a record nor a sequence of records."""


class MalformedJSONError(InvalidPayloadError):
    """Raised when a string payload is not valid JSON."""


class TypeMismatchError(SatchelError):
    """Raised when values of different types would be ordered against each other."""


class UndefinedValueError(SatchelError):
    """Raised when a search or insert is given no value to compare."""


class AmbiguousRemovalError(SatchelError):
    """Raised when a conditional removal names neither a key nor a value."""


class SettingsError(SatchelError):
    """Raised when a settings fragment or value is invalid."""


class UnsupportedFormatError(SettingsError):
    """Raised when a settings file format is not supported."""


class SettingsNotFoundError(SettingsError):
    """Raised when a required settings file could not be located."""


__all__ = [
    "SatchelError",
    "SettingsNotFoundError",
    "DuplicateCollectionError",
    "UnknownCollectionError",
    "InvalidFactoryError",
    "InvalidPayloadError",
    "MalformedJSONError",
    "TypeMismatchError",
    "UndefinedValueError",
    "AmbiguousRemovalError",
    "SettingsError",
    "UnsupportedFormatError",
]
