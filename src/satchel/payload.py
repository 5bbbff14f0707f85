"""Normalization of raw payloads into lists of candidate records."""
from __future__ import annotations

import json
from typing import Any, List

from .errors import InvalidPayloadError, MalformedJSONError
from .records import is_keyed


def parse_payload(payload: Any) -> Any:
    if not isinstance(payload, str):
        return payload
    try:
        return json.loads(payload)
    except json.JSONDecodeError as exc:
        raise MalformedJSONError(f"Payload is not valid JSON: {exc.msg}") from exc


def normalize_payload(payload: Any) -> List[Any]:
    """
    Turn ``payload`` into a list of records.

    Accepts a record, a list or tuple of records, or a JSON string holding
    either.
    """
    data = parse_payload(payload)
    if isinstance(data, (list, tuple)):
        return list(data)
    if is_keyed(data):
        return [data]
    raise InvalidPayloadError(
        f"Payload must be a record or a sequence of records, got {type(data).__name__}"
    )
