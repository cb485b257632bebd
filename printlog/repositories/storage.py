"""Persistence port contract shared by the JSON file and SQL adapters."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DocumentStorage(Protocol):
    """Reads and atomically replaces one whole document."""

    @property
    def identity(self) -> str:
        """Stable key naming the underlying document."""
        ...

    def load(self) -> bytes:
        ...

    def save(self, data: bytes) -> None:
        ...
