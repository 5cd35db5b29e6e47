"""Datetime (de)serialization shared by the JSON repositories.

Stored dates may come from hand-seeded or imported records: bare dates,
naive timestamps and the JavaScript ``...Z`` suffix are all read as UTC,
so every datetime handed to the domain is timezone-aware.
"""

from __future__ import annotations

from datetime import datetime, timezone


def parse_datetime(value: str | None) -> datetime | None:
    if not value:
        return None
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_datetime(value: datetime | None) -> str | None:
    return value.isoformat() if value else None
