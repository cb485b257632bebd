#!/usr/bin/env python3
"""
Add a print-job record from the command line.

Uso:
  python scripts/add_record.py material=PLA printer=MK4 --json '{"weight_g": 42}'
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

from printlog.services.record_store import open_store


def parse_fields(pairs: list[str], extra_json: str | None) -> dict:
    fields: dict = {}
    if extra_json:
        loaded = json.loads(extra_json)
        if not isinstance(loaded, dict):
            raise SystemExit("--json must be an object")
        fields.update(loaded)
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise SystemExit(f"Invalid field {pair!r}, use key=value")
        fields[key.strip()] = value
    return fields


def main() -> None:
    ap = argparse.ArgumentParser(description="Add a record to the print log")
    ap.add_argument("fields", nargs="*", help="key=value pairs (string values)")
    ap.add_argument("--json", dest="extra_json", help="JSON object merged into the record")
    args = ap.parse_args()

    fields = parse_fields(args.fields, args.extra_json)
    if not fields:
        raise SystemExit("Nothing to add")
    record = open_store().create(fields)
    print("OK: record created")
    print(f"  id: {record['id']}")
    print(f"  timestamp: {record['timestamp']}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
