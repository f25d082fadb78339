"""Service test fixtures — async DB, FastAPI test client, fake repositories.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness probe sees the test engine
    - FakePostRepository records every collaborator call for precedence checks

Design Decisions:
    - SQLite in-memory with StaticPool: one connection shared by every session,
      otherwise each connection would see its own empty database
    - Fake repository over AsyncMock for behavior tests: state survives across calls
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from blog_api.db.base import Base
from blog_api.infrastructure.database import DatabaseSessionManager, get_db
import blog_api.infrastructure.database as db_module
import blog_api.models  # noqa: F401
from blog_api.main import app


class FakePostRepository:
    """In-memory PostRepository. insert returns whatever insert_mode dictates."""

    def __init__(self, insert_mode: str = "id"):
        self.posts: dict[int, dict] = {}
        self.comments: dict[int, list[dict]] = {}
        self.calls: list[str] = []
        self.insert_mode = insert_mode
        self.failures: dict[str, Exception] = {}
        self.update_result: object | None = None
        self._next_id = 1

    def fail_on(self, method: str, exc: Exception) -> None:
        self.failures[method] = exc

    def _record(self, method: str) -> None:
        self.calls.append(method)
        if method in self.failures:
            raise self.failures[method]

    @staticmethod
    def _key(post_id) -> int | None:
        try:
            return int(post_id)
        except (TypeError, ValueError):
            return None

    async def find_all(self):
        self._record("find_all")
        return [dict(p) for p in self.posts.values()]

    async def find_by_id(self, post_id):
        self._record("find_by_id")
        post = self.posts.get(self._key(post_id))
        return dict(post) if post else None

    async def insert(self, fields):
        self._record("insert")
        post = {"id": self._next_id, **fields}
        self.posts[self._next_id] = post
        self._next_id += 1
        if self.insert_mode == "id":
            return post["id"]
        if self.insert_mode == "id_list":
            return [post["id"]]
        if self.insert_mode == "partial":
            return {"id": post["id"]}
        return dict(post)

    async def update(self, post_id, fields):
        self._record("update")
        if self.update_result is not None:
            return self.update_result
        key = self._key(post_id)
        if key not in self.posts:
            return 0
        self.posts[key].update(fields)
        return 1

    async def remove(self, post_id):
        self._record("remove")
        self.comments.pop(self._key(post_id), None)
        return 1 if self.posts.pop(self._key(post_id), None) else 0

    async def find_comments_by_post_id(self, post_id):
        self._record("find_comments_by_post_id")
        return list(self.comments.get(self._key(post_id), []))


@pytest.fixture
def fake_repo():
    return FakePostRepository()


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory

    async def override_get_db():
        async with fake_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def repo_factory():
    """Build a FakePostRepository with a chosen insert return shape."""
    return FakePostRepository
