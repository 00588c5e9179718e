"""
Services Package

This package contains business logic that is:
- Separate from HTTP handling (routers)
- Easier to test in isolation

Current services:
- book_store.py: persistence of Book records through the ORM
- security.py: bearer token verification (and local token signing)
"""
