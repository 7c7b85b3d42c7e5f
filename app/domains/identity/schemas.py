from pydantic import BaseModel


class CurrentUserResponse(BaseModel):
    """Схема для ответа с данными текущего пользователя"""
    user_id: str
