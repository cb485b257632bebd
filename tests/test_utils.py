from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Garante que o pacote seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from printlog.core.utils import later_timestamp, parse_timestamp, utc_now_iso  # noqa: E402


def test_utc_now_iso_has_millisecond_z_form():
    stamp = utc_now_iso()
    assert stamp.endswith("Z")
    assert len(stamp) == len("2024-05-01T10:00:00.000Z")


@pytest.mark.parametrize(
    "previous, candidate, expected",
    [
        # offset that sorts later as text but is earlier in time
        ("2024-05-01T12:00:00+02:00", "2024-05-01T11:00:00.000Z", "2024-05-01T11:00:00.000Z"),
        # microsecond precision, genuinely later than the clock
        ("2024-05-01T11:00:00.500000+00:00", "2024-05-01T11:00:00.000Z", "2024-05-01T11:00:00.500000+00:00"),
        ("2024-05-02T00:00:00.000Z", "2024-05-01T00:00:00.000Z", "2024-05-02T00:00:00.000Z"),
        (None, "2024-05-01T00:00:00.000Z", "2024-05-01T00:00:00.000Z"),
        ("zzz-not-a-date", "2024-05-01T00:00:00.000Z", "zzz-not-a-date"),
    ],
)
def test_later_timestamp(previous, candidate, expected):
    assert later_timestamp(previous, candidate) == expected


def test_parse_timestamp_variants():
    expected = datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)
    assert parse_timestamp("2024-05-01T10:00:00.000Z") == expected
    assert parse_timestamp("2024-05-01T12:00:00+02:00") == expected
    assert parse_timestamp("2024-05-01T10:00:00") == expected
    assert parse_timestamp("yesterday") is None
