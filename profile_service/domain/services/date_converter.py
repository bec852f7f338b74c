from __future__ import annotations

import re
from datetime import UTC, datetime, timedelta

_DIGITS = re.compile(r"[0-9]{1,4}")

MIN_YEAR = 1900
MAX_YEAR = 9999


def convert_dmy_to_iso(value: str) -> str | None:
    """Convert a ``dd/mm/yyyy`` string to a canonical UTC timestamp string.

    Returns ``None`` when the value is not three slash-separated decimal
    numbers of at most four digits each, or when day is outside 1-31, month
    outside 1-12 or year below 1900.

    Day is not checked against the length of the month: overflowing days
    roll into the next month, so ``31/02/2020`` becomes
    ``2020-03-02T00:00:00.000Z``.
    """
    parts = value.split("/")
    if len(parts) != 3 or not all(_DIGITS.fullmatch(p) for p in parts):
        return None
    day, month, year = (int(p) for p in parts)
    if not 1 <= day <= 31 or not 1 <= month <= 12 or not MIN_YEAR <= year <= MAX_YEAR:
        return None
    date = datetime(year, month, 1, tzinfo=UTC) + timedelta(days=day - 1)
    return format_timestamp(date)


def format_timestamp(value: datetime) -> str:
    """Render an instant as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
