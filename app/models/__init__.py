"""
SQLAlchemy Models Package

This package contains the database models for the Books API.

Import all models here to:
1. Make them available as: from app.models import Book
2. Ensure Alembic discovers them for migrations
"""

from app.models.book import Book

__all__ = [
    "Book",
]
