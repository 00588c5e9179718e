"""
Books API Application Package

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy database connection and session management
- exceptions.py: Application exception hierarchy
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection (db session, book store, bearer gate)
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Book store and token verification
"""

__version__ = "1.0.0"
