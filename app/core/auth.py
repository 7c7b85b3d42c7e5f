import logging
from typing import Any, Optional, Protocol

from fastapi import Request

from app.core.config import Settings
from app.core.security import extract_token_from_header, verify_token

logger = logging.getLogger(__name__)


class IdentityResolver(Protocol):
    async def resolve(self, request: Any) -> Optional[str]:
        ...


class BearerTokenIdentityResolver:
    """Определение владельца запроса по JWT в заголовке Authorization"""

    def __init__(self, settings: Settings):
        self.settings = settings

    async def resolve(self, request: Request) -> Optional[str]:
        token = extract_token_from_header(request.headers.get("Authorization"))
        if not token:
            return None

        payload = verify_token(token, self.settings)
        if payload is None:
            logger.info("Rejected bearer token that failed verification")
            return None

        user_id = payload.get("sub")
        if not isinstance(user_id, str) or not user_id.strip():
            return None

        return user_id


def get_identity_resolver(request: Request) -> IdentityResolver:
    return request.app.state.identity_resolver
