"""
Image upload handling.

Stores attachment bytes under the uploads directory and hands back the URL the
client saves as an ordinary record field. The record store never sees bytes.
"""

from __future__ import annotations

import io
import logging
import os
import secrets
import time
from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError

from printlog.core.errors import StorageError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024


@dataclass(frozen=True)
class StoredUpload:
    """Reference to a saved attachment."""

    filename: str
    original_name: str
    url: str
    size: int

    def as_dict(self) -> dict:
        return {
            "filename": self.filename,
            "originalName": self.original_name,
            "url": self.url,
            "size": self.size,
        }


def _unique_name(field_name: str, original_name: str) -> str:
    ext = os.path.splitext(original_name or "")[1].lower()
    suffix = f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}"
    return f"{field_name}-{suffix}{ext}"


def _size_label(num_bytes: int) -> str:
    mb = 1024 * 1024
    if num_bytes >= mb and num_bytes % mb == 0:
        return f"{num_bytes // mb}MB"
    return f"{num_bytes} bytes"


def _is_image(data: bytes) -> bool:
    try:
        with Image.open(io.BytesIO(data)) as image:
            image.verify()
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError):
        return False
    return True


class UploadService:
    """Validates and writes image uploads."""

    def __init__(
        self,
        directory: str | os.PathLike[str],
        *,
        max_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
        url_prefix: str = "/uploads",
    ) -> None:
        self.directory = os.fspath(directory)
        self.max_bytes = max_bytes
        self.url_prefix = url_prefix.rstrip("/")

    def save_image(
        self,
        data: bytes,
        *,
        original_name: str,
        content_type: str | None,
        field_name: str = "image",
    ) -> StoredUpload:
        ct = (content_type or "").lower()
        if not ct.startswith("image/"):
            raise ValidationError("Only image files are allowed!", code="unsupported_type")
        if not data:
            raise ValidationError("No file uploaded", code="empty_file")
        if len(data) > self.max_bytes:
            raise ValidationError(f"File too large. Maximum size is {_size_label(self.max_bytes)}.", code="file_too_large")
        if not _is_image(data):
            raise ValidationError("Invalid image file", code="invalid_image")

        filename = _unique_name(field_name, original_name)
        dest_path = os.path.join(self.directory, filename)
        try:
            os.makedirs(self.directory, exist_ok=True)
            with open(dest_path, "wb") as f:
                f.write(data)
        except OSError as exc:
            raise StorageError(f"Failed to store upload: {exc}") from exc
        logger.info("Upload stored", extra={"path": dest_path})
        return StoredUpload(
            filename=filename,
            original_name=original_name,
            url=f"{self.url_prefix}/{filename}",
            size=len(data),
        )
