"""Backup/restore envelope around the record collection."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from printlog.core.errors import ValidationError
from printlog.core.utils import utc_now_iso
from printlog.services.record_store import RecordStore

BACKUP_FILENAME = "3d_printing_backup.json"


def build_backup(store: RecordStore) -> dict[str, Any]:
    """Snapshot of the collection as downloaded by ``GET /api/backup``."""
    records = store.list_all()
    return {
        "timestamp": utc_now_iso(),
        "recordCount": len(records),
        "data": records,
    }


def restore_backup(store: RecordStore, payload: Any) -> int:
    """Replace the collection with ``payload["data"]`` and return the count."""
    if not isinstance(payload, Mapping) or not isinstance(payload.get("data"), list):
        raise ValidationError("Invalid backup data format", code="invalid_backup")
    return store.replace_all(payload["data"])
