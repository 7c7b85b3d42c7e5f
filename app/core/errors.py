import enum
from dataclasses import dataclass, field
from typing import Generic, List, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationError:
    """Ошибка проверки одного поля"""
    field: str
    message: str


class ErrorKind(str, enum.Enum):
    NO_REQUEST = "NO_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    NOT_FOUND = "NOT_FOUND"
    # Зарезервировано: чужие посты отдаются как NOT_FOUND
    FORBIDDEN = "FORBIDDEN"


SERVER_ERRORS = {
    ErrorKind.NO_REQUEST: "No request found",
    ErrorKind.UNAUTHORIZED: "Unauthorized",
    ErrorKind.VALIDATION_FAILED: "Validation failed",
    ErrorKind.NOT_FOUND: "Resource not found",
    ErrorKind.FORBIDDEN: "Access denied",
}


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    errors: List[ValidationError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return SERVER_ERRORS[self.kind]

    @classmethod
    def validation(cls, errors: List[ValidationError]) -> "Err":
        return cls(ErrorKind.VALIDATION_FAILED, list(errors))


Result = Union[Ok[T], Err]


class PostConsistencyError(RuntimeError):
    """Пост не найден при повторном чтении сразу после успешного обновления"""
