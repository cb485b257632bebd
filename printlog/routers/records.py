from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends

from printlog.routers.deps import get_record_store
from printlog.services.record_store import RecordStore

router = APIRouter(prefix="/api/records", tags=["records"])


@router.get("")
def list_records(store: RecordStore = Depends(get_record_store)):
    return {"success": True, "data": store.list_all()}


@router.get("/{record_id}")
def get_record(record_id: str, store: RecordStore = Depends(get_record_store)):
    return {"success": True, "data": store.get(record_id)}


@router.post("")
def create_record(payload: dict[str, Any] = Body(...), store: RecordStore = Depends(get_record_store)):
    return {"success": True, "data": store.create(payload)}


@router.put("/{record_id}")
def update_record(
    record_id: str,
    payload: dict[str, Any] = Body(...),
    store: RecordStore = Depends(get_record_store),
):
    return {"success": True, "data": store.update(record_id, payload)}


@router.delete("/{record_id}")
def delete_record(record_id: str, store: RecordStore = Depends(get_record_store)):
    return {"success": True, "data": store.delete(record_id)}


@router.delete("")
def clear_records(store: RecordStore = Depends(get_record_store)):
    store.clear()
    return {"success": True, "message": "All data cleared successfully"}
