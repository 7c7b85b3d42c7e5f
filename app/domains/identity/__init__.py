from app.domains.identity.schemas import CurrentUserResponse

__all__ = [
    "CurrentUserResponse",
]
