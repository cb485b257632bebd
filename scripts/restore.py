#!/usr/bin/env python3
"""
Replace the collection with the contents of a backup file.

Uso:
  python scripts/restore.py 3d_printing_backup.json [--yes]
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Garantir que o pacote seja importável quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from printlog.services.backup_service import restore_backup
from printlog.services.record_store import open_store


def main() -> None:
    ap = argparse.ArgumentParser(description="Restore records from a backup file")
    ap.add_argument("backup", help="backup JSON produced by /api/backup or scripts/backup.py")
    ap.add_argument("--yes", action="store_true", help="do not ask for confirmation")
    args = ap.parse_args()

    path = Path(args.backup)
    if not path.exists():
        raise SystemExit(f"File not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        payload = json.load(f)

    store = open_store()
    if not args.yes:
        current = len(store.list_all())
        answer = input(f"Replace {current} existing records? [y/N] ").strip().lower()
        if answer not in {"y", "yes"}:
            raise SystemExit("Aborted")
    count = restore_backup(store, payload)
    print(f"OK: restored {count} records")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
