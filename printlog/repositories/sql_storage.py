"""Persistence adapter keeping the document in a SQL table (one row per document)."""
from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError

from printlog.core.errors import StorageError
from printlog.db.models import Document
from printlog.db.session import create_schema, get_engine, get_session
from printlog.repositories.json_codec import EMPTY_DOCUMENT

logger = logging.getLogger(__name__)


class SqlDocumentStorage:
    """Whole-document access backed by the ``documents`` table."""

    def __init__(self, name: str = "records") -> None:
        self.name = name

    def ensure_schema(self) -> None:
        """Create the documents table when missing."""
        try:
            create_schema()
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to prepare document table: {exc}") from exc

    @property
    def identity(self) -> str:
        return f"sql:{get_engine().url.render_as_string(hide_password=True)}#{self.name}"

    def load(self) -> bytes:
        try:
            with get_session() as session:
                entity = session.get(Document, self.name)
                if entity is None:
                    return EMPTY_DOCUMENT
                return bytes(entity.body)
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to read document {self.name!r}: {exc}") from exc

    def save(self, data: bytes) -> None:
        try:
            with get_session() as session:
                entity = session.get(Document, self.name)
                if entity is None:
                    session.add(Document(name=self.name, body=data))
                else:
                    entity.body = data
                    entity.updated_at = datetime.now(timezone.utc)
                session.commit()
        except SQLAlchemyError as exc:
            logger.error("Failed to save document %s: %s", self.name, exc)
            raise StorageError(f"Failed to write document {self.name!r}: {exc}") from exc
