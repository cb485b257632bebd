"""
Smoke tests for the SQL document storage against a temporary SQLite database.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from printlog.core import config as core_config  # noqa: E402
from printlog.core.errors import NotFoundError  # noqa: E402
from printlog.db import models  # noqa: E402
from printlog.db import session as db_session  # noqa: E402
from printlog.repositories import build_storage  # noqa: E402
from printlog.repositories.json_codec import EMPTY_DOCUMENT  # noqa: E402
from printlog.repositories.sql_storage import SqlDocumentStorage  # noqa: E402
from printlog.services.record_store import RecordStore  # noqa: E402


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Configura um SQLite temporário e garante teardown completo."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    # limpa caches para forçar re-leitura de envs
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)

    yield db_file

    try:
        models.Base.metadata.drop_all(bind=engine)
    finally:
        engine.dispose()
        db_session.get_engine.cache_clear()
        db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]
        core_config.get_settings.cache_clear()


def test_load_before_first_save_is_empty(temp_db):
    storage = SqlDocumentStorage("records")
    storage.ensure_schema()
    assert storage.load() == EMPTY_DOCUMENT


def test_save_replaces_row_and_documents_are_isolated(temp_db):
    records = SqlDocumentStorage("records")
    other = SqlDocumentStorage("archive")
    records.ensure_schema()

    records.save(b'[{"id": "1"}]')
    records.save(b'[{"id": "2"}]')
    other.save(b"[]")

    assert records.load() == b'[{"id": "2"}]'
    assert other.load() == b"[]"
    assert records.identity != other.identity


def test_record_store_over_sql(temp_db):
    storage = SqlDocumentStorage("records")
    storage.ensure_schema()
    store = RecordStore(storage)

    created = store.create({"material": "PLA"})
    store.update(created["id"], {"material": "PETG"})
    assert store.get(created["id"])["material"] == "PETG"

    store.delete(created["id"])
    with pytest.raises(NotFoundError):
        store.delete(created["id"])
    assert store.list_all() == []


def test_build_storage_selects_sql_backend(temp_db, monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "sql")
    monkeypatch.setenv("DOCUMENT_NAME", "jobs")
    core_config.get_settings.cache_clear()

    storage = build_storage(core_config.get_settings())
    assert isinstance(storage, SqlDocumentStorage)
    assert storage.name == "jobs"
    assert storage.load() == EMPTY_DOCUMENT
