from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Any, Optional

from ..core.constants import DATE_FORMAT
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def as_date(value: date | datetime) -> date:
    """Truncate a datetime to its calendar date (midnight)."""
    if isinstance(value, datetime):
        return value.date()
    return value


def normalize_date_key(value: Any) -> Optional[str]:
    """Canonical ``YYYY-MM-DD`` key for a record date, or None.

    The upstream sometimes wraps the date as ``{"value": "2025-03-01"}``.
    Anything that does not parse as a calendar date yields None.
    """
    if isinstance(value, dict):
        value = value.get("value")
    elif value is not None and not isinstance(value, (str, date)) and hasattr(value, "value"):
        value = value.value

    if isinstance(value, (date, datetime)):
        return as_date(value).strftime(DATE_FORMAT)
    if not isinstance(value, str):
        return None

    text = value.strip()
    if len(text) > 10 and text[10] in "T ":
        text = text[:10]
    try:
        return parse_iso_date(text).strftime(DATE_FORMAT)
    except ValueError:
        return None


def check_year_month(year: int, month: int) -> None:
    if not 1 <= int(month) <= 12:
        raise ValidationError(f"Invalid month: {month}")
    if not 1 <= int(year) <= 9999:
        raise ValidationError(f"Invalid year: {year}")


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def leading_blanks(year: int, month: int) -> int:
    """Blank cells before the 1st in a Sunday-first week."""
    return (date(year, month, 1).weekday() + 1) % 7


def month_anchor(year: int, month: int) -> str:
    """The ``YYYY-MM-01`` string the history API expects."""
    return f"{year:04d}-{month:02d}-01"


def parse_month_anchor(value: str) -> tuple[int, int]:
    """Parse ``YYYY-MM-01`` (or ``YYYY-MM``) into (year, month)."""
    text = (value or "").strip()
    if len(text) == 7:
        text = f"{text}-01"
    try:
        d = parse_iso_date(text)
    except ValueError:
        raise ValidationError(f"Invalid month: {value!r}, expected YYYY-MM-01") from None
    return d.year, d.month


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move (year, month) by ``delta`` months, wrapping across years."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1
