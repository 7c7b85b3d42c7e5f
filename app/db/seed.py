"""
Seed the database with a few sample posts for one user.

Usage::

    python -m app.db.seed [user_id]

Prints a bearer token for that user so the seeded posts can be fetched
from a locally running server.
"""

import asyncio
import logging
import sys

from app.core.config import settings
from app.core.db import Database
from app.core.logging import setup_logging
from app.core.security import create_access_token
from app.db.repositories.post_repository import PostRepository

logger = logging.getLogger(__name__)

DEFAULT_USER_ID = "user_demo"

SAMPLE_POSTS = [
    (
        "Welcome to My Blog",
        "This is my first blog post. I'm excited to share my thoughts and "
        "experiences here.\n\nStay tuned for more content!",
    ),
    (
        "Building with FastAPI",
        "FastAPI is a pleasant framework for small services:\n\n"
        "- Dependency injection\n- Pydantic models\n- Async all the way down",
    ),
    (
        "Database Integration",
        "SQLAlchemy's async engine works with both SQLite and PostgreSQL.\n\n"
        "Switching between them is a matter of changing DATABASE_URL.",
    ),
]


async def seed(user_id: str) -> int:
    database = Database(settings.database_url, echo=settings.sql_echo)
    try:
        await database.create_all()
        async with database.sessionmaker() as session:
            repository = PostRepository(session)
            for title, content in SAMPLE_POSTS:
                post = await repository.create(title=title, content=content, user_id=user_id)
                logger.info(f"Created post: {post.title}")
    finally:
        await database.dispose()
    return len(SAMPLE_POSTS)


def main() -> None:
    setup_logging(settings.log_level)
    user_id = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_USER_ID

    count = asyncio.run(seed(user_id))
    logger.info(f"Seeding completed: {count} posts for {user_id}")

    token = create_access_token({"sub": user_id}, settings)
    print(f"Authorization: Bearer {token}")


if __name__ == "__main__":
    main()
