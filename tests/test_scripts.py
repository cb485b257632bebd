"""
Operator scripts loaded straight from scripts/ (no package install needed).
"""
from __future__ import annotations

import importlib.util
import json
import sys
from pathlib import Path

import pytest

# Garante que o pacote seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from printlog.core import config as core_config  # noqa: E402

SCRIPTS = ROOT / "scripts"


def _load(name: str):
    spec = importlib.util.spec_from_file_location(f"scripts_{name}", SCRIPTS / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture()
def data_env(tmp_path, monkeypatch):
    data_file = tmp_path / "records.json"
    monkeypatch.setenv("DATA_FILE", str(data_file))
    monkeypatch.setenv("STORAGE_BACKEND", "json")
    core_config.get_settings.cache_clear()
    yield data_file
    core_config.get_settings.cache_clear()


@pytest.mark.parametrize("name", ["add_record", "backup", "restore", "migrate_to_sql"])
def test_scripts_import_from_their_path(name):
    module = _load(name)
    assert str(ROOT) in sys.path
    assert hasattr(module, "main") or hasattr(module, "migrate")


def test_parse_fields_merges_json_and_pairs():
    add_record = _load("add_record")
    fields = add_record.parse_fields(["material=PLA", "printer=MK4"], '{"weight_g": 42}')
    assert fields == {"weight_g": 42, "material": "PLA", "printer": "MK4"}
    with pytest.raises(SystemExit):
        add_record.parse_fields(["no-equals"], None)


def test_add_backup_restore_round_trip(data_env, tmp_path, monkeypatch, capsys):
    add_record, backup, restore = _load("add_record"), _load("backup"), _load("restore")

    monkeypatch.setattr(sys, "argv", ["add_record.py", "material=PETG"])
    add_record.main()
    out_file = tmp_path / "backup.json"
    monkeypatch.setattr(sys, "argv", ["backup.py", "--out", str(out_file)])
    backup.main()

    payload = json.loads(out_file.read_text(encoding="utf-8"))
    assert payload["recordCount"] == 1
    assert payload["data"][0]["material"] == "PETG"

    data_env.write_text("[]\n", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["restore.py", str(out_file), "--yes"])
    restore.main()

    assert json.loads(data_env.read_text(encoding="utf-8")) == payload["data"]
    assert "restored 1 records" in capsys.readouterr().out
