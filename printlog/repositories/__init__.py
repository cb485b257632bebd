"""
Persistence adapters.

Services depend on the DocumentStorage contract (``load``/``save`` of the whole
document) rather than touching the JSON file or the database directly.
"""

from __future__ import annotations

from printlog.core.config import Settings
from printlog.repositories.json_storage import JsonFileStorage
from printlog.repositories.storage import DocumentStorage


def build_storage(settings: Settings) -> DocumentStorage:
    """Pick the persistence adapter named by ``STORAGE_BACKEND``."""
    backend = settings.storage_backend
    if backend == "json":
        return JsonFileStorage(settings.data_file)
    if backend == "sql":
        from printlog.repositories.sql_storage import SqlDocumentStorage

        storage = SqlDocumentStorage(settings.document_name)
        storage.ensure_schema()
        return storage
    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")


__all__ = ["DocumentStorage", "JsonFileStorage", "build_storage"]
