from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import and_, delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.post import Post as PostModel
from app.domains.posts.entities import Post

# Поля, по которым допускается фильтрация и сортировка
FILTERABLE_FIELDS = ("id", "user_id", "title", "content", "created_at", "updated_at")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PostRepository:
    """Репозиторий для работы с постами"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, title: str, content: str, user_id: str) -> Post:
        """Создание нового поста"""
        now = utcnow()
        db_post = PostModel(
            title=title,
            content=content,
            user_id=user_id,
            created_at=now,
            updated_at=now
        )

        self.session.add(db_post)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise
        await self.session.refresh(db_post)
        return self._to_domain(db_post)

    async def find_one(self, filters: Dict[str, Any]) -> Optional[Post]:
        """Получение одного поста по условиям"""
        result = await self.session.execute(
            select(PostModel)
            .where(self._where(filters))
            .limit(1)
            .execution_options(populate_existing=True)
        )
        db_post = result.scalar_one_or_none()
        return self._to_domain(db_post) if db_post else None

    async def find_many(
        self,
        filters: Dict[str, Any],
        order_by: Sequence[str] = ("-created_at",)
    ) -> List[Post]:
        """Получение постов по условиям; "-" перед полем означает убывание"""
        query = (
            select(PostModel)
            .where(self._where(filters))
            .execution_options(populate_existing=True)
        )
        for key in order_by:
            descending = key.startswith("-")
            column = self._column(key.lstrip("-"))
            query = query.order_by(column.desc() if descending else column.asc())

        result = await self.session.execute(query)
        return [self._to_domain(post) for post in result.scalars().all()]

    async def update_many(self, filters: Dict[str, Any], values: Dict[str, Any]) -> int:
        """Обновление постов по условиям, возвращает число затронутых строк"""
        for key in values:
            self._column(key)
        # updated_at обновляется при каждом изменении
        values = {**values, "updated_at": values.get("updated_at") or utcnow()}

        stmt = (
            update(PostModel)
            .where(self._where(filters))
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise
        return result.rowcount

    async def delete_many(self, filters: Dict[str, Any]) -> int:
        """Удаление постов по условиям, возвращает число удаленных строк"""
        stmt = (
            delete(PostModel)
            .where(self._where(filters))
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount

    def _column(self, name: str):
        if name not in FILTERABLE_FIELDS:
            raise ValueError(f"Unknown post field: {name}")
        return getattr(PostModel, name)

    def _where(self, filters: Dict[str, Any]):
        # Пустой фильтр не допускается: все операции ограничены владельцем
        if not filters:
            raise ValueError("At least one filter is required")
        return and_(*(self._column(name) == value for name, value in filters.items()))

    def _to_domain(self, db_post: PostModel) -> Post:
        """Преобразование модели БД в доменную сущность"""
        return Post(
            id=db_post.id,
            title=db_post.title,
            content=db_post.content,
            user_id=db_post.user_id,
            created_at=db_post.created_at,
            updated_at=db_post.updated_at
        )
