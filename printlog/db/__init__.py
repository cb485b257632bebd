"""Database helpers for the optional SQL storage backend."""

from .session import Base, create_schema, get_engine, get_session

__all__ = ["Base", "create_schema", "get_engine", "get_session"]
