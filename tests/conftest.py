"""
pytest Fixtures

Shared fixtures for both deployable units:

Books API
- engine: SQLite in-memory engine (session scope)
- db_session: per-test session inside a transaction that is rolled back
- client: TestClient with get_db overridden to use db_session
- auth_headers: a valid "Authorization: Bearer ..." header
- sample_book / multiple_books: test data

Task list widget
- storage: LocalStorage in a temporary directory
- make_bridge: factory for PersistenceBridge with a custom seed source
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["SECRET_KEY"] = "test-secret-key-for-unit-tests-at-least-32-characters-long"
os.environ["DATABASE_URL"] = "sqlite://"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import Book
from app.services.security import create_access_token
from todo.bridge import PersistenceBridge
from todo.storage import LocalStorage

# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory: fast, isolated, no external database needed.


@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the connection alive for the entire session.
    Without it, SQLite in-memory database would disappear between connections.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session is wrapped in a transaction that's rolled back,
    ensuring test isolation without needing to recreate tables.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    We override the get_db dependency to use our test session.
    """

    def override_get_db():
        """Provide test database session instead of real one."""
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# AUTH FIXTURES
# =============================================================================
@pytest.fixture
def auth_token() -> str:
    """A valid access token for subject 'alice'."""
    return create_access_token({"sub": "alice"})


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {auth_token}"}


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def sample_book(db_session: Session) -> Book:
    """Create a sample book for testing."""
    book = Book(
        title="The Great Gatsby",
        author="F. Scott Fitzgerald",
        published_year=1925,
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def multiple_books(db_session: Session) -> list[Book]:
    """Create several books."""
    books = [
        Book(title=f"Test Book {i + 1}", author=f"Author {i + 1}", published_year=1990 + i)
        for i in range(5)
    ]
    db_session.add_all(books)
    db_session.commit()
    for book in books:
        db_session.refresh(book)
    return books


# =============================================================================
# TASK LIST WIDGET FIXTURES
# =============================================================================
@pytest.fixture
def storage(tmp_path) -> LocalStorage:
    """Local storage backed by a file in a temporary directory."""
    return LocalStorage(tmp_path / "local_storage.json")


@pytest.fixture
def make_bridge(storage: LocalStorage):
    """
    Build a PersistenceBridge over the temporary storage.

    Usage:
        bridge = make_bridge(seed=some_async_callable)
    """

    def _make(seed=None) -> PersistenceBridge:
        return PersistenceBridge(storage, key="todos", seed=seed)

    return _make
