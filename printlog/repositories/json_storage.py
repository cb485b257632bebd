"""
JSON file persistence adapter.

Writes go to a temporary sibling file that is fsync'ed and then moved over the
target with ``os.replace``, so a concurrent ``load`` sees either the previous
document or the new one.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from printlog.core.errors import StorageError
from printlog.repositories.json_codec import EMPTY_DOCUMENT

logger = logging.getLogger(__name__)


class JsonFileStorage:
    """Whole-document access to one JSON file on disk."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    @property
    def identity(self) -> str:
        return f"file:{self.path.resolve()}"

    def load(self) -> bytes:
        try:
            return self.path.read_bytes()
        except FileNotFoundError:
            return EMPTY_DOCUMENT
        except OSError as exc:
            raise StorageError(f"Failed to read {self.path}: {exc}") from exc

    def save(self, data: bytes) -> None:
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as exc:
            logger.error("Failed to save document %s: %s", self.path, exc)
            raise StorageError(f"Failed to write {self.path}: {exc}") from exc
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass
