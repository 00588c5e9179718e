"""
Test Suite for the Books API and the task list widget

Test Organization:
- conftest.py: Shared fixtures (test database, client, auth header, storage)
- test_books.py: /api/v1/books endpoints
- test_auth.py: bearer token verification and the auth gate
- test_book_store.py: BookStore reads, writes and failure handling
- test_main.py: root, health, OpenAPI description, settings
- test_todo_state.py: task list update function and filters
- test_todo_persistence.py: local storage, persistence bridge, store owner
- test_todo_seed.py: seed feed client (httpx mocked)
- test_todo_view.py: text view and command line

Running Tests:
    # Run all tests
    pytest

    # Run specific file
    pytest tests/test_books.py

    # Run with verbose output
    pytest -v
"""
