"""Shared fixtures: a throwaway SQLite store and an in-process HTTP client."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from config import Settings, get_settings
from database import get_db, init_db, make_engine
from main import app
from tests.utils import DEFAULT_IMAGE


@pytest.fixture
async def engine(tmp_path):
    """A fresh database file per test, schema created."""
    eng = make_engine(f"sqlite+aiosqlite:///{tmp_path / 'store.db'}")
    await init_db(eng)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def genres_file(tmp_path):
    path = tmp_path / "genres.txt"
    path.write_text("Fiction\nSciFi\nMystery", encoding="utf-8")
    return path


@pytest.fixture
def settings(genres_file):
    return Settings(GENRES_FILE=str(genres_file), DEFAULT_IMAGE=DEFAULT_IMAGE)


@pytest.fixture
async def client(session_factory, settings):
    """HTTP client wired to the test database and settings."""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: settings
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
