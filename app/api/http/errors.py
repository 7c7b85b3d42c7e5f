from typing import TypeVar

from fastapi import HTTPException

from app.core.errors import Err, ErrorKind, Result

T = TypeVar("T")

STATUS_CODES = {
    ErrorKind.NO_REQUEST: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION_FAILED: 422,
}


def to_http_exception(error: Err) -> HTTPException:
    """Преобразование ошибки сервиса в HTTP ответ"""
    detail = {
        "error": error.kind.value,
        "message": error.message,
        "errors": [{"field": e.field, "message": e.message} for e in error.errors],
    }
    headers = None
    if error.kind is ErrorKind.UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return HTTPException(status_code=STATUS_CODES[error.kind], detail=detail, headers=headers)


def unwrap(result: Result[T]) -> T:
    if isinstance(result, Err):
        raise to_http_exception(result)
    return result.value
