"""Column conversion helpers shared by the SQLite stores."""

import uuid
from datetime import date, datetime


def new_id() -> str:
    return uuid.uuid4().hex


def parse_datetime(value: str | None, default: datetime | None = None) -> datetime | None:
    """Parse an ISO timestamp column, returning ``default`` if empty or malformed."""
    if value:
        try:
            return datetime.fromisoformat(value)
        except (ValueError, TypeError):
            pass
    return default


def parse_date(value: str | None, default: date | None = None) -> date | None:
    if value:
        try:
            return date.fromisoformat(value[:10])
        except (ValueError, TypeError):
            pass
    return default


def placeholders(values: list) -> str:
    """``?, ?, ?`` for an IN clause."""
    return ", ".join("?" for _ in values)
