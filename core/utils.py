"""Utility functions for the application."""

from datetime import UTC, datetime
from typing import Any

from core.log import get_logger

logger = get_logger(__name__)

# Fallback formats accepted in addition to ISO 8601
DATE_FORMATS = (
    "%Y",
    "%Y-%m",
    "%Y/%m/%d",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
)


def get_current_timestamp() -> str:
    """Get current timestamp in ISO8601 format."""
    return datetime.now(UTC).isoformat()


def format_timestamp(value: datetime) -> str:
    """Render a datetime as a UTC ISO8601 string."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat()


def parse_datetime(value: Any) -> datetime | None:
    """Parse a date-like value into an aware UTC datetime.

    Accepts ISO8601 dates and date-times (a trailing ``Z`` included), a few
    human-readable date formats, and epoch milliseconds. Naive values are
    taken as UTC.

    Returns:
        Parsed datetime, or None if the value cannot be parsed
    """
    if isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=UTC)
        except (OverflowError, OSError, ValueError):
            logger.warning(f"Epoch value out of range: {value}")
            return None

    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    parsed: datetime | None = None
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        for date_format in DATE_FORMATS:
            try:
                parsed = datetime.strptime(text, date_format)
                break
            except ValueError:
                continue

    if parsed is None:
        logger.warning(f"Could not parse date: {value}")
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)
