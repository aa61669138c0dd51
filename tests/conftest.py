"""
Shared fixtures.

Each test gets its own SQLite database file (via aiosqlite) with the schema
created from the models. The app's session and settings dependencies are
overridden to use it.
"""
import os

# The module-level app in api.main reads settings on import
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from collections.abc import AsyncGenerator, Awaitable, Callable  # noqa: E402
from pathlib import Path  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import func, select  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from api.main import create_app  # noqa: E402
from core.config import Settings, get_settings  # noqa: E402
from db.session import get_async_session  # noqa: E402
from models import ApiKey, Base  # noqa: E402

TEST_API_KEY = "test-api-key"


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, database_url="sqlite+aiosqlite://")


@pytest.fixture
async def db_engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine]:
    """Engine for a fresh database file with all tables created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'bookmarks.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test database."""
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession]:
    """Session for seeding and inspecting the test database directly."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
    settings: Settings,
) -> AsyncGenerator[AsyncClient]:
    """HTTP client for the app, wired to the test database."""
    app = create_app(settings)

    async def override_get_async_session() -> AsyncGenerator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_async_session] = override_get_async_session
    app.dependency_overrides[get_settings] = lambda: settings

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
async def api_key(db_session: AsyncSession) -> str:
    """Store an API key and return its value."""
    db_session.add(ApiKey(key_value=TEST_API_KEY, company="Test Company"))
    await db_session.commit()
    return TEST_API_KEY


@pytest.fixture
def count_rows(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[[type[Base]], Awaitable[int]]:
    """Return an async function counting the rows stored for a model."""
    async def _count(model: type[Base]) -> int:
        async with session_factory() as session:
            result = await session.execute(select(func.count()).select_from(model))
            return result.scalar_one()

    return _count

