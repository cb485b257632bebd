"""
Record store: CRUD and bulk replace over the single record document.

The store keeps no collection in memory; each call re-reads the document
through its storage port. Mutations run load -> modify -> save while holding
the writer lock of that document, so concurrent requests cannot lose updates.
Reads take no lock and rely on the port's atomic save.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any, Callable

from printlog.core.config import Settings, get_settings
from printlog.core.errors import FormatError, NotFoundError, ValidationError
from printlog.core.utils import later_timestamp, utc_now_iso
from printlog.domain.records import (
    find_index,
    is_record_sequence,
    is_valid_record_id,
    new_record_id,
    random_record_id,
)
from printlog.repositories import build_storage, json_codec
from printlog.repositories.storage import DocumentStorage

logger = logging.getLogger(__name__)

_registry_lock = threading.Lock()
_document_locks: dict[str, threading.RLock] = {}


def _writer_lock(identity: str) -> threading.RLock:
    """One writer lock per document, shared by every store opened on it."""
    with _registry_lock:
        lock = _document_locks.get(identity)
        if lock is None:
            lock = threading.RLock()
            _document_locks[identity] = lock
        return lock


class RecordStore:
    """Owns every write to the record document."""

    def __init__(
        self,
        storage: DocumentStorage,
        *,
        strict_reads: bool = False,
        clock: Callable[[], str] = utc_now_iso,
        id_factory: Callable[[], str] = random_record_id,
    ) -> None:
        self.storage = storage
        self.strict_reads = strict_reads
        self._clock = clock
        self._id_factory = id_factory
        self._lock = _writer_lock(storage.identity)

    # -------------------------- reads --------------------------
    def list_all(self) -> list[dict[str, Any]]:
        """
        Return the current collection.

        A document that fails to decode is reported as an empty collection
        unless ``strict_reads`` is set, in which case FormatError propagates.
        """
        try:
            return self._load()
        except FormatError as exc:
            if self.strict_reads:
                raise
            logger.error(
                "Record document unreadable, reporting empty collection: %s",
                exc.message,
                extra={"document": self.storage.identity},
            )
            return []

    def get(self, record_id: str) -> dict[str, Any]:
        records = self._load()
        idx = find_index(records, record_id)
        if idx == -1:
            raise NotFoundError()
        return records[idx]

    # -------------------------- mutations --------------------------
    def create(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        if not isinstance(fields, Mapping):
            raise ValidationError("Record fields must be an object")
        with self._lock:
            records = self._load()
            existing = {r.get("id") for r in records}
            record_id = new_record_id(existing, self._id_factory)
            record = dict(fields)
            record["id"] = record_id
            record["timestamp"] = self._clock()
            records.append(record)
            self._save(records)
        logger.info("Record created", extra={"record_id": record_id})
        return record

    def update(self, record_id: str, fields: Mapping[str, Any]) -> dict[str, Any]:
        if not isinstance(fields, Mapping):
            raise ValidationError("Record fields must be an object")
        if "id" in fields and fields["id"] != record_id:
            raise ValidationError("Record id cannot be changed", code="immutable_id")
        with self._lock:
            records = self._load()
            idx = find_index(records, record_id)
            if idx == -1:
                raise NotFoundError()
            current = records[idx]
            merged = dict(current)
            merged.update(fields)
            merged["id"] = record_id
            merged["timestamp"] = later_timestamp(current.get("timestamp"), self._clock())
            records[idx] = merged
            self._save(records)
        logger.info("Record updated", extra={"record_id": record_id})
        return merged

    def delete(self, record_id: str) -> dict[str, Any]:
        with self._lock:
            records = self._load()
            idx = find_index(records, record_id)
            if idx == -1:
                raise NotFoundError()
            removed = records.pop(idx)
            self._save(records)
        logger.info("Record deleted", extra={"record_id": record_id})
        return removed

    def clear(self) -> None:
        with self._lock:
            self._save([])
        logger.info("All records cleared")

    def replace_all(self, records: Any) -> int:
        """Persist ``records`` verbatim (restore); ids and timestamps are kept."""
        collection = validate_collection(records)
        with self._lock:
            self._save(collection)
        logger.info("Collection replaced", extra={"count": len(collection)})
        return len(collection)

    # -------------------------- internals --------------------------
    def _load(self) -> list[dict[str, Any]]:
        return json_codec.decode(self.storage.load())

    def _save(self, records: list[dict[str, Any]]) -> None:
        self.storage.save(json_codec.encode(records))


def validate_collection(records: Any) -> list[dict[str, Any]]:
    """Check a restore payload and return it as a list of plain dicts."""
    if not is_record_sequence(records):
        raise ValidationError("Records must be a list of objects", code="invalid_collection")
    seen: set[str] = set()
    collection: list[dict[str, Any]] = []
    for position, item in enumerate(records):
        record_id = item.get("id")
        if not is_valid_record_id(record_id):
            raise ValidationError(f"Record {position} has a missing or malformed id", code="invalid_id")
        if record_id in seen:
            raise ValidationError(f"Duplicate record id {record_id!r}", code="duplicate_id")
        seen.add(record_id)
        collection.append(dict(item))
    return collection


def open_store(settings: Settings | None = None) -> RecordStore:
    """Store over the configured storage backend (used by scripts)."""
    settings = settings or get_settings()
    return RecordStore(build_storage(settings), strict_reads=settings.strict_reads)
