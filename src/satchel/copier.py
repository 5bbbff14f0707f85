"""Recursive duplication of nested record data."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def deep_copy(value: Any) -> Any:
    """
    Return a copy of ``value`` that shares no container with the original.

    Lists, tuples and mappings are rebuilt recursively (mappings as plain
    ``dict``). Every other value is returned as-is.
    """
    if isinstance(value, list):
        return [deep_copy(item) for item in value]
    if isinstance(value, tuple):
        return tuple(deep_copy(item) for item in value)
    if isinstance(value, Mapping):
        return {key: deep_copy(item) for key, item in value.items()}
    return value
