"""Field-wise merging of records."""
from __future__ import annotations

from typing import Any, TypeVar

from .copier import deep_copy
from .records import is_keyed, own_fields, set_field

T = TypeVar("T")


def merge_fields(target: T, *sources: Any) -> T:
    """
    Copy every field of each source into ``target``, in argument order.

    Values are deep copied and replace the target's field wholesale; fields
    the sources do not mention are left alone. Non-keyed targets and sources
    are ignored.
    """
    if not is_keyed(target):
        return target

    for source in sources:
        if not is_keyed(source):
            continue
        # snapshot first: source may be target
        for key, value in list(own_fields(source)):
            set_field(target, key, deep_copy(value))
    return target
