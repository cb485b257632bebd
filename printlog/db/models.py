"""SQLAlchemy models for the SQL document backend."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, LargeBinary, String, func

from .session import Base


class Document(Base):
    """One serialized record collection, addressed by name."""

    __tablename__ = "documents"

    name = Column(String(128), primary_key=True)
    body = Column(LargeBinary, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
