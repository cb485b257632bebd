#!/usr/bin/env python3
"""
Write a backup of the current collection to a file.

Uso:
  python scripts/backup.py [--out 3d_printing_backup.json]
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

from printlog.services.backup_service import BACKUP_FILENAME, build_backup
from printlog.services.record_store import open_store


def main() -> None:
    ap = argparse.ArgumentParser(description="Export a backup of all records")
    ap.add_argument("--out", default=BACKUP_FILENAME, help="destination file")
    args = ap.parse_args()

    payload = build_backup(open_store())
    out = Path(args.out)
    out.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: {payload['recordCount']} records written to {out}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
