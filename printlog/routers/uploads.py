from __future__ import annotations

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse

from printlog.routers.deps import get_upload_service
from printlog.services.upload_service import UploadService

router = APIRouter(prefix="/api", tags=["uploads"])


@router.post("/upload")
async def upload_image(
    image: UploadFile | None = File(None),
    uploads: UploadService = Depends(get_upload_service),
):
    if image is None or not image.filename:
        return JSONResponse({"success": False, "error": "No file uploaded"}, status_code=400)
    # one byte past the limit is enough to know the file is too large
    data = await image.read(uploads.max_bytes + 1)
    stored = uploads.save_image(
        data,
        original_name=image.filename,
        content_type=image.content_type,
        field_name="image",
    )
    return {"success": True, "data": stored.as_dict()}
