from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest
from PIL import Image

# Garante que o pacote seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from printlog.core.errors import ValidationError  # noqa: E402
from printlog.services.upload_service import UploadService  # noqa: E402


def _png_bytes() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (8, 8), "orange").save(buffer, format="PNG")
    return buffer.getvalue()


def test_save_image_writes_file_and_returns_reference(tmp_path):
    svc = UploadService(tmp_path / "uploads")
    data = _png_bytes()

    stored = svc.save_image(data, original_name="Benchy.PNG", content_type="image/png")

    assert stored.filename.startswith("image-")
    assert stored.filename.endswith(".png")
    assert stored.url == f"/uploads/{stored.filename}"
    assert stored.size == len(data)
    assert (tmp_path / "uploads" / stored.filename).read_bytes() == data
    assert stored.as_dict()["originalName"] == "Benchy.PNG"


def test_filenames_are_unique(tmp_path):
    svc = UploadService(tmp_path)
    data = _png_bytes()
    names = {svc.save_image(data, original_name="a.png", content_type="image/png").filename for _ in range(20)}
    assert len(names) == 20


@pytest.mark.parametrize(
    "data, content_type, code",
    [
        (b"hello", "text/plain", "unsupported_type"),
        (b"", "image/png", "empty_file"),
        (b"definitely not a png", "image/png", "invalid_image"),
    ],
)
def test_rejects_bad_uploads(tmp_path, data, content_type, code):
    svc = UploadService(tmp_path)
    with pytest.raises(ValidationError) as info:
        svc.save_image(data, original_name="x.png", content_type=content_type)
    assert info.value.code == code
    assert list(tmp_path.iterdir()) == []


def test_rejects_files_over_limit(tmp_path):
    svc = UploadService(tmp_path, max_bytes=16)
    with pytest.raises(ValidationError) as info:
        svc.save_image(_png_bytes(), original_name="x.png", content_type="image/png")
    assert info.value.code == "file_too_large"


def test_default_limit_message_names_megabytes(tmp_path):
    svc = UploadService(tmp_path)
    oversized = b"\x89PNG" + b"\x00" * svc.max_bytes
    with pytest.raises(ValidationError) as info:
        svc.save_image(oversized, original_name="x.png", content_type="image/png")
    assert info.value.message == "File too large. Maximum size is 10MB."
