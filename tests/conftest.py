"""
tests/conftest.py
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import AsyncGenerator, Awaitable, Callable, Dict

# Must be set before inkwell.config builds its Settings
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from inkwell.auth.utils import create_session_token
from inkwell.database import Base, get_db
from inkwell.main import app
from inkwell.users.models import User


@pytest_asyncio.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """A fresh SQLite file per test, schema created from the ORM metadata."""
    db_engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.sqlite3'}")
    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield db_engine
    await db_engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """A session for arranging and inspecting rows directly."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[httpx.AsyncClient, None]:
    """
    HTTP client bound to the real app with `get_db` pointed at the test database.

    Yields:
        `httpx.AsyncClient`
    """
    async def _get_test_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _get_test_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(session_factory) -> Callable[..., Awaitable[int]]:
    """Insert a user row directly (skips bcrypt) and return its id."""
    async def _make_user(name: str = "Ada", email: str | None = None, **extra) -> int:
        async with session_factory() as session:
            user = User(
                name=name,
                email=email or f"{name.lower().replace(' ', '.')}@inkwell.dev",
                hashed_password="not-a-real-hash",
                **extra,
            )
            session.add(user)
            await session.commit()
            return user.id

    return _make_user


@pytest.fixture
def auth_headers() -> Callable[[int], Dict[str, str]]:
    """Bearer headers carrying a session for the given user id."""
    def _auth_headers(user_id: int) -> Dict[str, str]:
        return {"Authorization": f"Bearer {create_session_token(user_id)}"}

    return _auth_headers


@pytest.fixture
def make_post(client: httpx.AsyncClient, auth_headers):
    """Create a post through the API and return its JSON body."""
    async def _make_post(author_id: int, title: str = "My First Post", content: str = "hello world", **extra) -> dict:
        payload = {"title": title, "content": content, **extra}
        response = await client.post("/posts", json=payload, headers=auth_headers(author_id))
        assert response.status_code == 200, response.text
        return response.json()

    return _make_post


@pytest.fixture
def words() -> Callable[[int], str]:
    """Content made of exactly *n* whitespace-separated words."""
    def _words(n: int) -> str:
        return " ".join(f"word{i}" for i in range(n))

    return _words
