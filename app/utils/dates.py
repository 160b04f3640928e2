"""
Exercise Tracker API - Date Helpers.

Parsing of client-supplied date strings and the human-readable date format
used in exercise responses. All datetimes are naive UTC, matching what the
Mongo driver returns on read.
"""

from datetime import datetime, timezone
from typing import Optional

# Extra formats accepted after ISO 8601, e.g. "Mon Jan 01 2024" (the format we
# emit) and "January 1, 2024".
_FALLBACK_FORMATS = (
    "%a %b %d %Y",
    "%b %d %Y",
    "%B %d %Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%Y/%m/%d",
)


def utcnow() -> datetime:
    """Current time as a naive UTC datetime."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def parse_date(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a client-supplied date string.

    Date-only strings resolve to midnight UTC. Timezone-aware values are
    converted to UTC.

    Args:
        value: Raw string from a form field or query parameter.

    Returns:
        Naive UTC datetime, or None when the value is empty.

    Raises:
        ValueError: If the string is not a recognised date.
    """
    if value is None:
        return None
    text = value.strip()
    if not text:
        return None

    iso_text = text[:-1] + "+00:00" if text.endswith("Z") else text
    try:
        return _to_naive_utc(datetime.fromisoformat(iso_text))
    except ValueError:
        pass

    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    raise ValueError(f"Invalid date: {value!r}")


def format_date(value: datetime) -> str:
    """Format a datetime as e.g. "Mon Jan 01 2024"."""
    return value.strftime("%a %b %d %Y")
