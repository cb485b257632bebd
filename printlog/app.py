import logging
import os
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from printlog.core.config import Settings, get_settings
from printlog.core.errors import PrintlogError
from printlog.core.log import configure_logging
from printlog.repositories import build_storage
from printlog.repositories.storage import DocumentStorage
from printlog.routers import backup as backup_router
from printlog.routers import health as health_router
from printlog.routers import records as records_router
from printlog.routers import uploads as uploads_router
from printlog.services.record_store import RecordStore
from printlog.services.upload_service import UploadService

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request with status and latency."""

    async def dispatch(self, request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
            },
        )
        return response


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"success": False, "error": message}, status_code=status_code)


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(PrintlogError)
    async def _printlog_error(request: Request, exc: PrintlogError):
        if exc.http_status >= 500:
            logger.error(
                "%s %s failed: %s",
                request.method,
                request.url.path,
                exc.message,
                extra={"error_code": exc.code},
            )
        return _error(exc.message, exc.http_status)

    @app.exception_handler(RequestValidationError)
    async def _request_validation_error(request: Request, exc: RequestValidationError):
        return _error("Invalid request body", 400)

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return _error("Endpoint not found", 404)
        return _error(str(exc.detail), exc.status_code)

    @app.exception_handler(Exception)
    async def _unhandled_error(request: Request, exc: Exception):
        logger.exception("Server error on %s %s", request.method, request.url.path)
        return _error("Internal server error", 500)


def create_app(settings: Settings | None = None, storage: DocumentStorage | None = None) -> FastAPI:
    """Factory compatible with ``uvicorn printlog.app:create_app --factory``."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    if storage is None:
        storage = build_storage(settings)

    app = FastAPI(title="3D Printing Records API")
    app.state.settings = settings
    app.state.record_store = RecordStore(storage, strict_reads=settings.strict_reads)
    app.state.upload_service = UploadService(
        settings.uploads_dir, max_bytes=settings.max_upload_bytes, url_prefix="/uploads"
    )

    origins = list(settings.cors_origins) or ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    _register_error_handlers(app)

    app.include_router(health_router.router)
    app.include_router(records_router.router)
    app.include_router(uploads_router.router)
    app.include_router(backup_router.router)

    os.makedirs(settings.uploads_dir, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=settings.uploads_dir), name="uploads")
    if os.path.isdir(settings.public_dir):
        app.mount("/", StaticFiles(directory=settings.public_dir, html=True), name="public")

    logger.info("Document store: %s", storage.identity)
    logger.info("Uploads stored in: %s", os.path.abspath(settings.uploads_dir))
    return app
