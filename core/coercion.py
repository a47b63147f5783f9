"""Coercion and validation rules applied to client-supplied fields.

The web client is written in JavaScript, so loosely-typed fields follow
JavaScript's ``Boolean(x)`` and ``Number(x)`` conversions. A client that
sends ``"yes"``, ``0`` or ``null`` gets the same stored value it would
compute locally.
"""

import math
from typing import Any

from core.constants import (
    ERROR_INVALID_FINISHED_DATE,
    ERROR_INVALID_GENRES,
    ERROR_INVALID_LOCALE,
    ERROR_INVALID_SORTING,
    ERROR_INVALID_STATUS,
    ERROR_INVALID_TITLE,
    MAX_GENRES,
    MAX_INDEX,
    MAX_RATING,
    MAX_SORT_CLAUSES,
    MIN_INDEX,
    MIN_RATING,
)
from core.exceptions import InvalidFieldError
from core.types import BookStatus, Locale
from core.utils import format_timestamp, parse_datetime

# JavaScript's Number() understands these spellings of infinity
_INFINITY_LITERALS = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def to_boolean(value: Any) -> bool:
    """Coerce a value with JavaScript truthiness.

    Unlike Python, empty lists and dicts are truthy.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return True


def to_number(value: Any) -> float:
    """Coerce a value the way JavaScript's ``Number(x)`` does.

    Returns NaN for values that have no numeric reading.
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return _int_to_float(value)
    if isinstance(value, str):
        return _string_to_number(value)
    if isinstance(value, list):
        if not value:
            return 0.0
        if len(value) == 1 and not isinstance(value[0], (bool, dict)):
            return to_number(value[0])
    return math.nan


def _int_to_float(value: int | float) -> float:
    # Integers beyond the float range read as infinity, like Number(x)
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _string_to_number(text: str) -> float:
    text = text.strip()
    if not text:
        return 0.0
    if text in _INFINITY_LITERALS:
        return _INFINITY_LITERALS[text]
    if "_" in text or text.lower().lstrip("+-") in ("inf", "infinity", "nan"):
        return math.nan

    lowered = text.lower()
    if lowered.startswith(("0x", "0o", "0b")):
        try:
            return _int_to_float(int(text, 0))
        except ValueError:
            return math.nan

    try:
        return float(text)
    except ValueError:
        return math.nan


def to_finite_number(value: Any) -> float:
    """``Number(x)``, falling back to 0 when the result is not finite."""
    number = to_number(value)
    return number if math.isfinite(number) else 0.0


def coerce_rating(value: Any) -> float:
    """Coerce a rating to a finite number within the allowed range."""
    return min(MAX_RATING, max(MIN_RATING, to_finite_number(value)))


def coerce_index(value: Any) -> int:
    """Coerce a manual ordering index to an integer.

    Values outside the 64-bit range of an SQLite INTEGER become 0.
    """
    index = int(to_finite_number(value))
    return index if MIN_INDEX <= index <= MAX_INDEX else 0


def parse_finished_date(value: Any) -> str | None:
    """Normalize a finished date.

    Falsy values clear the date. Anything else must parse as a date or as
    epoch milliseconds.

    Raises:
        InvalidFieldError: If the value cannot be parsed
    """
    if not to_boolean(value):
        return None

    # new Date(true) is one millisecond after the epoch
    parsed = parse_datetime(int(value) if isinstance(value, bool) else value)
    if parsed is None:
        raise InvalidFieldError(
            ERROR_INVALID_FINISHED_DATE, f"Could not parse finishedDate: {value!r}"
        )
    return format_timestamp(parsed)


def validate_title(value: Any) -> str:
    """Ensure a title is a non-empty string."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidFieldError(ERROR_INVALID_TITLE, "Title must be a non-empty string")
    return value


def validate_status(value: Any) -> BookStatus:
    """Ensure a status is one of the known reading states."""
    try:
        return BookStatus(value)
    except ValueError:
        raise InvalidFieldError(
            ERROR_INVALID_STATUS,
            f"Status must be one of: {[status.value for status in BookStatus]}",
        )


def validate_locale(value: Any) -> Locale:
    """Ensure a locale is exactly one of the supported codes."""
    if not isinstance(value, str):
        raise InvalidFieldError(ERROR_INVALID_LOCALE, "Locale must be a string")
    try:
        return Locale(value)
    except ValueError:
        raise InvalidFieldError(
            ERROR_INVALID_LOCALE,
            f"Locale must be one of: {[locale.value for locale in Locale]}",
        )


def normalize_sorting(value: Any) -> list[dict[str, Any]]:
    """Normalize sort clauses.

    Items without a string ``id`` are dropped, ``desc`` is coerced to a
    boolean, and at most ``MAX_SORT_CLAUSES`` clauses are kept.

    Raises:
        InvalidFieldError: If the value is not a list
    """
    if not isinstance(value, list):
        raise InvalidFieldError(ERROR_INVALID_SORTING, "booksSorting must be a list")

    clauses = [
        {"id": item["id"], "desc": to_boolean(item.get("desc"))}
        for item in value
        if isinstance(item, dict) and isinstance(item.get("id"), str)
    ]
    return clauses[:MAX_SORT_CLAUSES]


def normalize_genres(value: Any) -> list[str]:
    """Normalize a genre suggestion list.

    Non-strings are dropped, entries are trimmed, empties dropped and
    duplicates removed before capping at ``MAX_GENRES``.

    Raises:
        InvalidFieldError: If the value is not a list
    """
    if not isinstance(value, list):
        raise InvalidFieldError(ERROR_INVALID_GENRES, "genres must be a list")

    trimmed = (genre.strip() for genre in value if isinstance(genre, str))
    unique = dict.fromkeys(genre for genre in trimmed if genre)
    return list(unique)[:MAX_GENRES]
