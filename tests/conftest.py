"""
Shared pytest fixtures and configuration
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

import antique_store.models  # noqa: F401 - register models on Base.metadata
from antique_store.database import Base, get_db
from antique_store.main import app
from antique_store.utils.rate_limit import limiter


@pytest.fixture
def db_path(tmp_path):
    """
    Create a fresh SQLite file database for each test.
    Tables are created with a sync engine so async fixtures and the
    TestClient event loop never share a connection.
    """
    path = tmp_path / "test_antique_store.db"
    engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(bind=engine)
    engine.dispose()
    return path


@pytest.fixture
def session_factory(db_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db(session_factory):
    """Async session for calling services directly."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def client(session_factory):
    """
    Create a test client with overridden database dependency.
    """
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def disable_rate_limit():
    """Rate limiting is off unless a test turns it on."""
    limiter.enabled = False
    limiter.reset()
    yield
    limiter.enabled = False


@pytest.fixture
def vase_payload():
    return {
        "name": "Vase",
        "description": "Hand-painted porcelain vase",
        "year": None,
        "origin": "Delft",
        "price": 75.00,
        "availability_status": "available",
        "category": "Ceramics",
        "condition": "good",
        "dimensions": "30cm x 12cm",
        "material": "Porcelain",
        "main_image_url": "https://images.example.com/vase.jpg",
    }
