import logging
from typing import Any, Dict, List, Optional, Union

from app.core.auth import IdentityResolver
from app.core.errors import Err, ErrorKind, Ok, PostConsistencyError, Result
from app.db.repositories.post_repository import PostRepository
from app.domains.posts.entities import Post
from app.domains.posts.validation import (
    ValidationError, ValidationFailed,
    validate_and_sanitize_id, validate_and_sanitize_post_data
)

logger = logging.getLogger(__name__)

POST_ID_FIELD = "postId"


class PostService:
    """Сервис для работы с постами текущего пользователя"""

    def __init__(self, repository: PostRepository, identity_resolver: IdentityResolver):
        self.repository = repository
        self.identity_resolver = identity_resolver

    async def _resolve_user(self, request: Any) -> Union[str, Err]:
        """Определение владельца запроса"""
        if request is None:
            return Err(ErrorKind.NO_REQUEST)

        user_id = await self.identity_resolver.resolve(request)
        if not user_id:
            return Err(ErrorKind.UNAUTHORIZED)

        return user_id

    async def list_posts(self, request: Any) -> Result[List[Post]]:
        """Получение всех постов пользователя, новые первыми"""
        user_id = await self._resolve_user(request)
        if isinstance(user_id, Err):
            return user_id

        logger.info(f"Fetching posts for user {user_id}")

        posts = await self.repository.find_many(
            {"user_id": user_id},
            order_by=("-created_at",)
        )
        return Ok(posts)

    async def get_post(self, request: Any, post_id: Any) -> Result[Post]:
        """Получение поста по идентификатору"""
        user_id = await self._resolve_user(request)
        if isinstance(user_id, Err):
            return user_id

        logger.info(f"Fetching post {post_id!r} for user {user_id}")

        try:
            validated_id = validate_and_sanitize_id(post_id, POST_ID_FIELD)
        except ValidationFailed as exc:
            return Err.validation(exc.errors)

        post = await self.repository.find_one({"id": validated_id, "user_id": user_id})
        if post is None:
            return Err(ErrorKind.NOT_FOUND)

        return Ok(post)

    async def create_post(self, request: Any, title: Any, content: Any) -> Result[Post]:
        """Создание нового поста"""
        user_id = await self._resolve_user(request)
        if isinstance(user_id, Err):
            return user_id

        logger.info(f"Creating post for user {user_id}")

        try:
            data = validate_and_sanitize_post_data(title, content)
        except ValidationFailed as exc:
            logger.info(f"Rejected post for user {user_id}: {exc}")
            return Err.validation(exc.errors)

        post = await self.repository.create(
            title=data.title,
            content=data.content,
            user_id=user_id
        )
        logger.info(f"Created post {post.id} for user {user_id}")
        return Ok(post)

    async def update_post(
        self,
        request: Any,
        post_id: Any,
        title: Any,
        content: Any
    ) -> Result[Post]:
        """Обновление заголовка и содержимого поста"""
        user_id = await self._resolve_user(request)
        if isinstance(user_id, Err):
            return user_id

        logger.info(f"Updating post {post_id!r} for user {user_id}")

        # Ошибки по полям поста и по идентификатору возвращаются вместе
        errors: List[ValidationError] = []
        data = None
        validated_id: Optional[str] = None
        try:
            data = validate_and_sanitize_post_data(title, content)
        except ValidationFailed as exc:
            errors.extend(exc.errors)
        try:
            validated_id = validate_and_sanitize_id(post_id, POST_ID_FIELD)
        except ValidationFailed as exc:
            errors.extend(exc.errors)

        if errors:
            return Err.validation(errors)

        owned: Dict[str, Any] = {"id": validated_id, "user_id": user_id}
        updated = await self.repository.update_many(
            owned,
            {"title": data.title, "content": data.content}
        )
        if updated == 0:
            return Err(ErrorKind.NOT_FOUND)

        post = await self.repository.find_one(owned)
        if post is None:
            raise PostConsistencyError(
                f"Post {validated_id} disappeared right after it was updated"
            )

        return Ok(post)

    async def delete_post(self, request: Any, post_id: Any) -> Result[Dict[str, bool]]:
        """Удаление поста"""
        user_id = await self._resolve_user(request)
        if isinstance(user_id, Err):
            return user_id

        logger.info(f"Deleting post {post_id!r} for user {user_id}")

        try:
            validated_id = validate_and_sanitize_id(post_id, POST_ID_FIELD)
        except ValidationFailed as exc:
            return Err.validation(exc.errors)

        deleted = await self.repository.delete_many({"id": validated_id, "user_id": user_id})
        if deleted == 0:
            return Err(ErrorKind.NOT_FOUND)

        return Ok({"success": True})
