"""Domain helpers for record identifiers and record shape checks."""
from __future__ import annotations

import re
import uuid
from collections.abc import Container, Mapping, Sequence
from typing import Any, Callable

RECORD_ID_PATTERN = re.compile(r"[A-Za-z0-9_.:-]{1,128}")


def is_valid_record_id(value: Any) -> bool:
    """Return True when value is a non-empty id string of the accepted shape."""
    if not isinstance(value, str) or not value:
        return False
    return bool(RECORD_ID_PATTERN.fullmatch(value))


def random_record_id() -> str:
    return uuid.uuid4().hex


def new_record_id(
    existing: Container[str],
    factory: Callable[[], str] = random_record_id,
    attempts: int = 16,
) -> str:
    """Generate an id not present in ``existing``."""
    for _ in range(attempts):
        candidate = factory()
        if candidate not in existing:
            return candidate
    raise RuntimeError("Could not generate a unique record id")


def is_record_sequence(value: Any) -> bool:
    """True for list-like containers of mappings (strings and mappings excluded)."""
    if isinstance(value, (str, bytes, bytearray, Mapping)):
        return False
    if not isinstance(value, Sequence):
        return False
    return all(isinstance(item, Mapping) for item in value)


def find_index(records: Sequence[Mapping[str, Any]], record_id: str) -> int:
    """Position of the record with ``record_id``, or -1."""
    for idx, record in enumerate(records):
        if record.get("id") == record_id:
            return idx
    return -1
