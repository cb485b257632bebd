"""
Utility helpers shared across services.
"""

from datetime import datetime, timezone


def utc_now_iso() -> str:
    """
    Current instant as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` (millisecond precision, UTC).
    """
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime | None:
    """ISO-8601 string -> aware datetime (naive values are taken as UTC), or None."""
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def later_timestamp(previous: str | None, candidate: str) -> str:
    """
    Return ``candidate`` unless it is earlier than ``previous``.

    Both sides are compared as instants, so offsets and precision may differ.
    Unparseable values fall back to text order. A backwards clock step keeps
    the previous value.
    """
    if not isinstance(previous, str):
        return candidate
    prev_at, cand_at = parse_timestamp(previous), parse_timestamp(candidate)
    if prev_at is not None and cand_at is not None:
        return previous if prev_at > cand_at else candidate
    if previous > candidate:
        return previous
    return candidate
