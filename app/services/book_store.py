"""
Book Store

The persistence layer for Book records. Routers never touch the session
directly; every read and write goes through BookStore.

Contract:
- find_all() -> list[Book]
- find_by_id(id) -> Book | None
- get(id) -> Book                (BookNotFoundError if absent)
- create(fields) -> Book         (id assigned by the database)
- update(id, fields) -> Book     (BookNotFoundError if absent)
- delete(id) -> None             (BookNotFoundError if absent)

Each write is committed on its own, so a record's fields are never
partially written. Database failures roll the session back and are
re-raised as StoreError carrying the driver's message.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.exceptions import BookNotFoundError, StoreError
from app.models import Book
from app.schemas import BookCreate, BookUpdate

logger = logging.getLogger(__name__)


class BookStore:
    """
    Data access for the books table, bound to one database session.

    Usage:
        store = BookStore(db)
        book = store.create(BookCreate(title="Dune", author="Frank Herbert", publishedYear=1965))
        store.delete(book.id)
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------
    def find_all(self) -> list[Book]:
        """Return every book in the store's natural (insertion) order."""
        stmt = select(Book).order_by(Book.id)
        try:
            return list(self.db.execute(stmt).scalars().all())
        except SQLAlchemyError as e:
            raise self._failure("find_all", e) from e

    def find_by_id(self, book_id: int) -> Book | None:
        stmt = select(Book).where(Book.id == book_id)
        try:
            return self.db.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise self._failure("find_by_id", e) from e

    def get(self, book_id: int) -> Book:
        """
        Get a book by ID or raise BookNotFoundError.

        Raises:
            BookNotFoundError: if no record has this id
        """
        book = self.find_by_id(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return book

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------
    def create(self, fields: BookCreate) -> Book:
        """
        Insert a new book and return it with its generated id.

        Args:
            fields: Validated title, author and published year

        Returns:
            The persisted Book
        """
        book = Book(**fields.model_dump())
        try:
            self.db.add(book)
            self.db.commit()
            self.db.refresh(book)
        except SQLAlchemyError as e:
            raise self._failure("create", e) from e

        logger.info(f"Created book {book.id}: '{book.title}'")
        return book

    def update(self, book_id: int, fields: BookUpdate) -> Book:
        """
        Replace title, author and published year of an existing book.

        The id is never modified.

        Raises:
            BookNotFoundError: if no record has this id
        """
        book = self.get(book_id)
        for field, value in fields.model_dump().items():
            setattr(book, field, value)

        try:
            self.db.commit()
            self.db.refresh(book)
        except SQLAlchemyError as e:
            raise self._failure("update", e) from e

        logger.info(f"Updated book {book_id}")
        return book

    def delete(self, book_id: int) -> None:
        """
        Permanently remove a book. Other records are untouched.

        Raises:
            BookNotFoundError: if no record has this id
        """
        book = self.get(book_id)
        try:
            self.db.delete(book)
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._failure("delete", e) from e

        logger.info(f"Deleted book {book_id}")

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------
    def _failure(self, operation: str, error: SQLAlchemyError) -> StoreError:
        """Roll back the session and wrap a database error."""
        self.db.rollback()
        orig = getattr(error, "orig", None)
        message = str(orig) if orig is not None else str(error)
        logger.error(f"Book store {operation} failed: {message}")
        return StoreError(message, operation=operation)
