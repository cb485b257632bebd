"""
Configuration helpers for the printlog backend.

Settings are read once from environment variables; tests reset the cache with
``get_settings.cache_clear()`` after changing the environment.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    data_file: str
    uploads_dir: str
    public_dir: str
    max_upload_bytes: int
    storage_backend: str
    database_url: str
    document_name: str
    strict_reads: bool
    cors_origins: tuple[str, ...]
    log_level: str
    port: int


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    origins = tuple(
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "*").split(",")
        if origin.strip()
    )
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        data_file=os.getenv("DATA_FILE", os.path.join("data", "records.json")),
        uploads_dir=os.getenv("UPLOADS_DIR", "uploads"),
        public_dir=os.getenv("PUBLIC_DIR", "public"),
        max_upload_bytes=_int(os.getenv("MAX_UPLOAD_BYTES", "10485760"), 10 * 1024 * 1024),
        storage_backend=(os.getenv("STORAGE_BACKEND") or "json").strip().lower(),
        database_url=os.getenv("DATABASE_URL", ""),
        document_name=os.getenv("DOCUMENT_NAME", "records"),
        strict_reads=_bool(os.getenv("STRICT_READS"), False),
        cors_origins=origins,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        port=_int(os.getenv("PORT", "3000"), 3000),
    )
