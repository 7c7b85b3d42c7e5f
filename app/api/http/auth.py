from fastapi import APIRouter, Depends, Request

from app.api.http.errors import to_http_exception
from app.core.auth import IdentityResolver, get_identity_resolver
from app.core.errors import Err, ErrorKind
from app.domains.identity.schemas import CurrentUserResponse

router = APIRouter(prefix="/auth", tags=["authentication"])


async def get_current_user_id(
    request: Request,
    identity_resolver: IdentityResolver = Depends(get_identity_resolver)
) -> str:
    """Зависимость для получения идентификатора текущего пользователя"""
    user_id = await identity_resolver.resolve(request)
    if not user_id:
        raise to_http_exception(Err(ErrorKind.UNAUTHORIZED))
    return user_id


@router.get("/me", response_model=CurrentUserResponse)
async def get_current_user_info(user_id: str = Depends(get_current_user_id)):
    """Информация о текущем пользователе"""
    return CurrentUserResponse(user_id=user_id)
