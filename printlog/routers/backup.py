"""Backup, restore and spreadsheet export endpoints."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from printlog.routers.deps import get_record_store
from printlog.services.backup_service import BACKUP_FILENAME, build_backup, restore_backup
from printlog.services.record_store import RecordStore

router = APIRouter(prefix="/api", tags=["backup"])


@router.get("/export/excel")
def export_excel(store: RecordStore = Depends(get_record_store)):
    # the client builds the workbook from these rows
    records = store.list_all()
    if not records:
        return JSONResponse({"success": False, "error": "No data to export"}, status_code=400)
    return {"success": True, "data": records}


@router.get("/backup")
def download_backup(store: RecordStore = Depends(get_record_store)):
    return JSONResponse(
        build_backup(store),
        headers={"Content-Disposition": f'attachment; filename="{BACKUP_FILENAME}"'},
    )


@router.post("/restore")
def restore(payload: Any = Body(None), store: RecordStore = Depends(get_record_store)):
    count = restore_backup(store, payload)
    return {"success": True, "message": f"Restored {count} records successfully"}
