from typing import Any, List, Tuple

from fastapi import APIRouter, Body, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.http.errors import unwrap
from app.core.auth import IdentityResolver, get_identity_resolver
from app.core.db import get_db
from app.db.repositories.post_repository import PostRepository
from app.domains.posts.schemas import DeleteResponse, ErrorResponse, PostPayload, PostResponse
from app.domains.posts.services import PostService

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
}

router = APIRouter(prefix="/posts", tags=["posts"], responses=ERROR_RESPONSES)


def get_post_service(
    db: AsyncSession = Depends(get_db),
    identity_resolver: IdentityResolver = Depends(get_identity_resolver)
) -> PostService:
    return PostService(PostRepository(db), identity_resolver)


def _post_fields(body: Any) -> Tuple[Any, Any]:
    """Извлечение полей поста из тела запроса любой формы"""
    # Проверку полей выполняет сервис уже после определения пользователя
    payload = PostPayload.model_validate(body) if isinstance(body, dict) else PostPayload()
    return payload.title, payload.content


@router.get("", response_model=List[PostResponse])
async def list_posts(
    request: Request,
    service: PostService = Depends(get_post_service)
):
    """Список постов текущего пользователя"""
    posts = unwrap(await service.list_posts(request))
    return [PostResponse.model_validate(post) for post in posts]


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: str,
    request: Request,
    service: PostService = Depends(get_post_service)
):
    """Получение поста по идентификатору"""
    post = unwrap(await service.get_post(request, post_id))
    return PostResponse.model_validate(post)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: Request,
    body: Any = Body(None),
    service: PostService = Depends(get_post_service)
):
    """Создание нового поста"""
    post = unwrap(await service.create_post(request, *_post_fields(body)))
    return PostResponse.model_validate(post)


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: str,
    request: Request,
    body: Any = Body(None),
    service: PostService = Depends(get_post_service)
):
    """Обновление поста"""
    post = unwrap(
        await service.update_post(request, post_id, *_post_fields(body))
    )
    return PostResponse.model_validate(post)


@router.delete("/{post_id}", response_model=DeleteResponse)
async def delete_post(
    post_id: str,
    request: Request,
    service: PostService = Depends(get_post_service)
):
    """Удаление поста"""
    return unwrap(await service.delete_post(request, post_id))
