"""One-off migration script: JSON record file -> SQL documents table."""
from __future__ import annotations

import argparse
from pathlib import Path
import sys

# Garantir que o pacote seja importável quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from printlog.core.config import get_settings
from printlog.repositories.json_storage import JsonFileStorage
from printlog.repositories.sql_storage import SqlDocumentStorage
from printlog.services.record_store import RecordStore


def migrate(source: Path, document_name: str) -> int:
    if not source.exists():
        raise SystemExit(f"File not found: {source}")
    records = RecordStore(JsonFileStorage(source), strict_reads=True).list_all()
    target = SqlDocumentStorage(document_name)
    target.ensure_schema()
    return RecordStore(target).replace_all(records)


if __name__ == "__main__":
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Copy the JSON record file into DATABASE_URL")
    ap.add_argument("--source", default=settings.data_file, help="JSON record file")
    ap.add_argument("--document", default=settings.document_name, help="target document name")
    args = ap.parse_args()
    count = migrate(Path(args.source), args.document)
    print(f"{count} records migrated to SQL successfully.")
