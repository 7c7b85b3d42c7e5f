from datetime import datetime
from typing import Any, List

from pydantic import BaseModel, ConfigDict


class PostPayload(BaseModel):
    """Непроверенные данные поста из запроса"""
    # Типы намеренно не ограничены: проверку выполняет слой валидации
    title: Any = None
    content: Any = None


class PostResponse(BaseModel):
    """Схема для ответа с данными поста"""
    id: str
    title: str
    content: str
    user_id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class DeleteResponse(BaseModel):
    success: bool = True


class FieldErrorResponse(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    """Тело ошибки, возвращаемое клиенту"""
    error: str
    message: str
    errors: List[FieldErrorResponse] = []
