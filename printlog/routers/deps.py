"""Accessors for services stored on ``app.state``."""
from __future__ import annotations

from fastapi import Request

from printlog.services.record_store import RecordStore
from printlog.services.upload_service import UploadService


def get_record_store(request: Request) -> RecordStore:
    store = getattr(getattr(request.app, "state", None), "record_store", None)
    if not store:
        raise RuntimeError("RecordStore not configured")
    return store


def get_upload_service(request: Request) -> UploadService:
    svc = getattr(getattr(request.app, "state", None), "upload_service", None)
    if not svc:
        raise RuntimeError("UploadService not configured")
    return svc
