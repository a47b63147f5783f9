"""Filtering and sorting of the books table."""

from typing import Any

from core.types import JSONRecord

SEARCHABLE_FIELDS = ("title", "author", "genre", "language", "comment")


def filter_books(books: list[JSONRecord], query: str) -> list[JSONRecord]:
    """Keep books whose text fields contain ``query``, ignoring case."""
    needle = query.strip().casefold()
    if not needle:
        return list(books)

    return [
        book
        for book in books
        if any(
            isinstance(book.get(field), str) and needle in book[field].casefold()
            for field in SEARCHABLE_FIELDS
        )
    ]


def _sort_key(value: Any) -> tuple[int, Any]:
    if isinstance(value, bool):
        return (0, int(value))
    if isinstance(value, (int, float)):
        return (0, value)
    return (1, str(value).casefold())


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


def sort_books(
    books: list[JSONRecord], sorting: list[dict[str, Any]]
) -> list[JSONRecord]:
    """Stable multi-key sort, first clause most significant.

    Books missing a value sort last for that clause, whatever its direction.
    """
    result = list(books)
    for clause in reversed(sorting):
        column = clause.get("id")
        if not isinstance(column, str):
            continue
        present = [book for book in result if not _is_missing(book.get(column))]
        missing = [book for book in result if _is_missing(book.get(column))]
        present.sort(
            key=lambda book: _sort_key(book[column]),
            reverse=bool(clause.get("desc")),
        )
        result = present + missing
    return result
