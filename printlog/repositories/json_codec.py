"""
Document codec: the ordered record collection <-> UTF-8 JSON bytes.

Only strict RFC 8259 JSON is written or accepted: ``NaN`` and ``Infinity``
have no JSON spelling and are rejected in both directions.
"""

from __future__ import annotations

import json
from typing import Any

from printlog.core.errors import FormatError, ValidationError


def _reject_constant(token: str) -> Any:
    raise FormatError(f"Document contains non-JSON number {token}")


def encode(collection: list[dict[str, Any]]) -> bytes:
    """
    Serialize the collection as indented JSON, keeping field order.

    Raises ValidationError for values JSON cannot represent (NaN, Infinity),
    before anything reaches storage.
    """
    try:
        text = json.dumps(collection, ensure_ascii=False, indent=2, allow_nan=False)
    except ValueError as exc:
        raise ValidationError(f"Record contains a value JSON cannot represent: {exc}", code="invalid_value") from exc
    return (text + "\n").encode("utf-8")


def decode(data: bytes) -> list[dict[str, Any]]:
    """
    Parse document bytes into a collection.

    Blank documents decode to an empty collection. Anything that is not a JSON
    array of objects raises FormatError.
    """
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise FormatError(f"Document is not valid UTF-8: {exc}") from exc
    if not text.strip():
        return []
    try:
        parsed = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise FormatError(f"Document is not valid JSON: {exc}") from exc
    if not isinstance(parsed, list):
        raise FormatError("Document top level must be an array of records")
    for position, item in enumerate(parsed):
        if not isinstance(item, dict):
            raise FormatError(f"Document entry {position} is not an object")
    return parsed


EMPTY_DOCUMENT = encode([])
