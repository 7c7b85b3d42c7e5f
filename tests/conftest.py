"""Shared fixtures: temporary SQLite database, stub identity, HTTP client."""

from types import SimpleNamespace
from typing import Any, Optional

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.db import Database
from app.core.security import create_access_token
from app.db.repositories.post_repository import PostRepository
from app.domains.posts.services import PostService
from app.main import create_app

TEST_JWT_SECRET = "test_secret_for_blog_tests_that_is_long_enough"


class StubIdentityResolver:
    """Reads the caller from ``request.user_id``; ``None`` means anonymous."""

    async def resolve(self, request: Any) -> Optional[str]:
        return getattr(request, "user_id", None)


def as_user(user_id: Optional[str]) -> SimpleNamespace:
    return SimpleNamespace(user_id=user_id)


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test_blog.db'}",
        jwt_secret=TEST_JWT_SECRET,
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def database(settings):
    db = Database(settings.database_url)
    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def session(database):
    async with database.sessionmaker() as session:
        yield session


@pytest.fixture
def repository(session):
    return PostRepository(session)


@pytest.fixture
def service(repository):
    return PostService(repository, StubIdentityResolver())


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(settings):
    def _headers(user_id: str) -> dict:
        token = create_access_token({"sub": user_id}, settings)
        return {"Authorization": f"Bearer {token}"}
    return _headers
