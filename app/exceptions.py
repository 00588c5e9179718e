"""
Application Exceptions

Exception Hierarchy:
    BooksAPIError (base)
    ├── BookNotFoundError  → 404 Not Found
    ├── StoreError         → 500 Internal Server Error
    └── AuthError          → 401 Unauthorized

Services raise these without knowing about HTTP. The handlers registered
in app/main.py translate them into JSON responses with the right status.
"""

from typing import Any, Dict, Optional


class BooksAPIError(Exception):
    """
    Base exception for all Books API errors.

    Attributes:
        message: Human-readable description
        context: Extra debug info (logged, not returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class BookNotFoundError(BooksAPIError):
    """Raised when no book record matches the requested id."""

    def __init__(self, book_id: int):
        self.book_id = book_id
        super().__init__(
            message=f"Book with id {book_id} not found",
            context={"book_id": book_id},
        )


class StoreError(BooksAPIError):
    """
    Raised when the underlying database rejects an operation.

    The message carries the database driver's description of the failure;
    it is echoed to clients when settings.expose_error_details is on.
    """

    def __init__(self, message: str, operation: Optional[str] = None):
        ctx = {"operation": operation} if operation else {}
        super().__init__(message=message, context=ctx)
        self.operation = operation


class AuthError(BooksAPIError):
    """Raised when a bearer credential is missing, malformed, or invalid."""

    def __init__(self, message: str = "Could not validate credentials"):
        super().__init__(message=message)
