"""
Widget Exceptions

Exception Hierarchy:
    TodoError (base)
    ├── SeedFetchError  → seed feed unreachable or returned bad data
    └── StorageError    → local storage file cannot be read or written
"""


class TodoError(Exception):
    """Base exception for all widget errors."""

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(self.message)


class SeedFetchError(TodoError):
    """Raised when the remote seed feed cannot provide tasks."""


class StorageError(TodoError):
    """Raised when local storage cannot be read or written."""
