import os

# Point the app at an in-memory database before anything imports settings
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["AUTO_CREATE_SCHEMA"] = "false"

import pytest
import uuid
from fastapi.testclient import TestClient

from app.main import app
from app.db.session import engine, SessionLocal
from app.models.base import Base
from app.models import Author, Book


@pytest.fixture(autouse=True)
def setup_test_database():
    """Create all tables before each test and drop them afterwards."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    """Create a fresh database session for each test."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def test_client():
    """Create a test client for FastAPI app."""
    return TestClient(app)


@pytest.fixture
def api_prefix():
    from app.core.config import settings
    return settings.API_V1_STR


@pytest.fixture
def sample_author(test_client, api_prefix):
    """Create a sample author through the API."""
    unique_suffix = uuid.uuid4().hex[:6]
    author_data = {
        "firstName": f"first{unique_suffix}",
        "lastName": f"last{unique_suffix}",
    }

    response = test_client.post(f"{api_prefix}/authors", json=author_data)

    assert response.status_code == 201, f"Failed to create sample author: {response.text}"
    return response.json()


@pytest.fixture
def sample_book(test_client, api_prefix, sample_author):
    """Create a sample book for the sample author through the API."""
    book_data = {
        "title": f"Test Book {uuid.uuid4().hex[:6]}",
        "publicationYear": 2020,
        "authorId": sample_author["id"],
    }

    response = test_client.post(f"{api_prefix}/books", json=book_data)

    assert response.status_code == 201, f"Failed to create sample book: {response.text}"
    return response.json()


# Fixtures for repository and service tests that need SQLAlchemy model objects
@pytest.fixture
def sample_author_model(db_session):
    """Create a sample author model."""
    author = Author(first_name="Ursula", last_name="Le Guin")
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def sample_book_model(db_session, sample_author_model):
    """Create a sample book model owned by the sample author."""
    book = Book(
        title="The Dispossessed",
        publication_year=1974,
        author_id=sample_author_model.id,
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def headers_with_correlation():
    """HTTP headers with correlation ID."""
    return {"X-Request-ID": str(uuid.uuid4())}
