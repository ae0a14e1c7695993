import contextlib

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from src.main import app
from src.models import BaseModel

# Importing the ORM modules registers their tables on the shared metadata.
from src.events.repository import orm_models as _events_orm  # noqa: F401
from src.invitees.repository import orm_models as _invitees_orm  # noqa: F401
from src.rsvp.repository import orm_models as _rsvp_orm  # noqa: F401

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def async_session():
    """Create an isolated in-memory database session."""
    test_engine = create_async_engine(TEST_DATABASE_URL, echo=False)
    async with test_engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    session_factory = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    async with session_factory() as session:
        yield session

    await test_engine.dispose()


@pytest.fixture(scope="function")
def client_factory():
    """Build a test client with the given dependency overrides applied."""

    @contextlib.asynccontextmanager
    async def factory(overrides: dict | None = None):
        app.dependency_overrides.update(overrides or {})
        transport = ASGITransport(app=app)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as ac:
                yield ac
        finally:
            app.dependency_overrides.clear()

    return factory


@pytest_asyncio.fixture(scope="function")
async def client(client_factory):
    """Create a test client without overrides."""
    async with client_factory() as ac:
        yield ac
