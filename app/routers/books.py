"""
Books Router

CRUD endpoints for books. Every route sits behind the bearer-token gate.
BearerGateRoute checks the token before the body is parsed, and the
router-level dependency documents the scheme and guards store access.

Error mapping (handlers registered in app/main.py):
- missing/invalid token  → 401
- invalid request body   → 422
- unknown book id        → 404
- database failure       → 500 with the failure message
"""

import logging

from fastapi import APIRouter, Depends, status

from app.dependencies import BearerGateRoute, BookStoreDep, CurrentIdentity, require_identity
from app.schemas import BookCreate, BookResponse, BookUpdate, MessageResponse

logger = logging.getLogger(__name__)

# =============================================================================
# Router Configuration
# =============================================================================
router = APIRouter(
    prefix="/books",
    tags=["Books"],
    dependencies=[Depends(require_identity)],
    route_class=BearerGateRoute,
    responses={
        401: {"description": "Missing or invalid bearer token"},
        500: {"description": "Store failure"},
    },
)

NOT_FOUND_RESPONSE = {404: {"description": "Book not found"}}


# =============================================================================
# CRUD Endpoints
# =============================================================================

@router.get(
    "",
    response_model=list[BookResponse],
    summary="Get all books",
    description="Returns every book in the store's natural order.",
)
def list_books(store: BookStoreDep) -> list[BookResponse]:
    """
    List all books.

    No pagination, filtering or sorting parameters: the whole collection
    is returned in insertion order.
    """
    return [BookResponse.model_validate(book) for book in store.find_all()]


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
    description="Retrieve a single book by its ID.",
    responses=NOT_FOUND_RESPONSE,
)
def get_book(book_id: int, store: BookStoreDep) -> BookResponse:
    """
    Get a single book by its ID.

    Raises:
        BookNotFoundError: 404 if book not found
    """
    return BookResponse.model_validate(store.get(book_id))


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a new book",
    description="Create a new book entry. The id is assigned by the store.",
)
def create_book(
    book_data: BookCreate,
    store: BookStoreDep,
    identity: CurrentIdentity,
) -> BookResponse:
    """
    Create a new book.

    Args:
        book_data: Validated book data from request body
        store: Book store (injected)
        identity: Caller identity from the bearer token

    Returns:
        Created book including its id
    """
    book = store.create(book_data)
    logger.debug(f"Book {book.id} created by {identity.subject}")
    return BookResponse.model_validate(book)


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    summary="Update a book",
    description="Replace title, author and publishedYear of a book.",
    responses=NOT_FOUND_RESPONSE,
)
def update_book(
    book_id: int,
    book_data: BookUpdate,
    store: BookStoreDep,
) -> BookResponse:
    """
    Update an existing book.

    PUT semantics: all three fields are replaced.

    Raises:
        BookNotFoundError: 404 if book not found
    """
    book = store.update(book_id, book_data)
    return BookResponse.model_validate(book)


@router.delete(
    "/{book_id}",
    response_model=MessageResponse,
    summary="Delete a book",
    description="Permanently remove a book by ID.",
    responses=NOT_FOUND_RESPONSE,
)
def delete_book(
    book_id: int,
    store: BookStoreDep,
    identity: CurrentIdentity,
) -> MessageResponse:
    """
    Delete a book.

    Returns a confirmation message with 200.

    Raises:
        BookNotFoundError: 404 if book not found
    """
    store.delete(book_id)
    logger.debug(f"Book {book_id} deleted by {identity.subject}")
    return MessageResponse(message="Book deleted successfully")
