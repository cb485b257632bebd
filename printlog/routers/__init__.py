"""
FastAPI routers grouped by concern (records, uploads, backup/export, health).

Each module exposes an APIRouter included by ``printlog.app.create_app``.
Handlers translate HTTP calls into RecordStore/UploadService calls; errors are
turned into JSON responses by the handlers registered on the app.
"""
