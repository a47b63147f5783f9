"""Book API endpoints router."""

from fastapi import APIRouter, status

from api.dependencies import BookServiceDep, CurrentUser, DBSession, current_user_id
from api.literals import BOOKS_BASE_PATH
from core.exceptions import NotFoundError
from core.models.api.requests import BookCreateRequest, BookPatchRequest
from core.models.api.responses import BookResponse, OkResponse

router = APIRouter(prefix=BOOKS_BASE_PATH, tags=["books"])


def parse_book_id(book_id: str) -> int:
    """Parse a path ID. Anything that is not a positive integer is unknown."""
    if not book_id.isdigit():
        raise NotFoundError(f"Book {book_id} not found")
    return int(book_id)


@router.get("", response_model=list[BookResponse])
async def list_books(
    user: CurrentUser, db: DBSession, book_service: BookServiceDep
) -> list[BookResponse]:
    """List the caller's books, newest first."""
    return book_service.list_books(db, current_user_id(user))


@router.post("", response_model=BookResponse, status_code=status.HTTP_201_CREATED)
async def create_book(
    data: BookCreateRequest,
    user: CurrentUser,
    db: DBSession,
    book_service: BookServiceDep,
) -> BookResponse:
    """Create a book at the end of the caller's manual ordering.

    Raises:
        InvalidFieldError: 400 with the failing field's error code
    """
    return book_service.create_book(db, current_user_id(user), data)


@router.patch("/{book_id}", response_model=BookResponse)
async def patch_book(
    book_id: str,
    patch: BookPatchRequest,
    user: CurrentUser,
    db: DBSession,
    book_service: BookServiceDep,
) -> BookResponse:
    """Partially update one of the caller's books.

    Raises:
        InvalidFieldError: 400, nothing is applied
        NotFoundError: 404 if the book is missing or owned by someone else
    """
    return book_service.patch_book(
        db, current_user_id(user), parse_book_id(book_id), patch
    )


@router.delete("/{book_id}", response_model=OkResponse)
async def delete_book(
    book_id: str,
    user: CurrentUser,
    db: DBSession,
    book_service: BookServiceDep,
) -> OkResponse:
    """Permanently delete one of the caller's books."""
    book_service.delete_book(db, current_user_id(user), parse_book_id(book_id))
    return OkResponse()
