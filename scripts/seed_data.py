#!/usr/bin/env python3
"""
Database Seed Script

Populates the books table with sample data for development.

USAGE:
    # From the project root with the virtualenv activated
    python scripts/seed_data.py
    python scripts/seed_data.py --keep   # add to existing rows instead of clearing
"""

import argparse
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from app.config import get_settings
from app.database import SessionLocal, create_tables
from app.models import Book

BOOKS_DATA = [
    {"title": "The Great Gatsby", "author": "F. Scott Fitzgerald", "published_year": 1925},
    {"title": "Dune", "author": "Frank Herbert", "published_year": 1965},
    {"title": "1984", "author": "George Orwell", "published_year": 1949},
    {"title": "Pride and Prejudice", "author": "Jane Austen", "published_year": 1813},
    {"title": "The Hobbit", "author": "J.R.R. Tolkien", "published_year": 1937},
    {"title": "Foundation", "author": "Isaac Asimov", "published_year": 1951},
]


def clear_data(db: Session) -> None:
    """Clear all existing books from the database."""
    print("Clearing existing data...")
    db.execute(delete(Book))
    db.commit()
    print("Data cleared.")


def create_books(db: Session) -> list[Book]:
    """Create sample books."""
    print("Creating books...")

    books = [Book(**data) for data in BOOKS_DATA]
    db.add_all(books)
    db.commit()
    for book in books:
        db.refresh(book)

    print(f"Created {len(books)} books.")
    return books


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    settings = get_settings()

    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()
    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        books = create_books(db)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print(f"\n  - Books: {len(books)}")
        print(f"\nYou can now access the API at http://localhost:{settings.port}{settings.api_prefix}/books")
        print(f"API documentation at http://localhost:{settings.port}/api-docs")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the books table with sample data")
    parser.add_argument(
        "--keep",
        action="store_true",
        help="Keep existing rows instead of clearing the table first",
    )
    args = parser.parse_args()
    seed_database(clear_existing=not args.keep)


if __name__ == "__main__":
    main()
