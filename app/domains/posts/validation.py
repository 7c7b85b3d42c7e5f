"""
Server-side validation for post payloads.

Everything that arrives from a client is untrusted: fields may be missing,
``None``, or of the wrong type. The ``validate_*`` functions never raise;
they return the list of problems found so the caller can report every
offending field at once. The ``validate_and_sanitize_*`` functions raise
``ValidationFailed`` carrying that list, or return trimmed values that are
safe to persist.
"""

from dataclasses import dataclass
from typing import Any, List, Optional

from app.core.errors import ValidationError

TITLE_MAX_LENGTH = 100
CONTENT_MAX_LENGTH = 5000


class ValidationFailed(Exception):
    """Ошибка валидации с полным списком ошибок по полям"""

    def __init__(self, errors: List[ValidationError]):
        self.errors = list(errors)
        details = ", ".join(f"{e.field}: {e.message}" for e in self.errors)
        super().__init__(f"Validation failed: {details}")


@dataclass(frozen=True)
class SanitizedPost:
    title: str
    content: str


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def validate_string_field(
    value: Any,
    field_name: str,
    required: bool = False,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None
) -> List[ValidationError]:
    """Проверка строкового поля на наличие, тип и длину"""
    errors: List[ValidationError] = []

    if required and _is_blank(value):
        errors.append(ValidationError(field_name, "is required"))
        return errors

    if _is_blank(value):
        return errors

    if not isinstance(value, str):
        errors.append(ValidationError(field_name, "must be a string"))
        return errors

    trimmed = value.strip()

    if min_length is not None and len(trimmed) < min_length:
        errors.append(
            ValidationError(field_name, f"must be at least {min_length} characters long")
        )

    if max_length is not None and len(trimmed) > max_length:
        errors.append(
            ValidationError(field_name, f"must not exceed {max_length} characters")
        )

    return errors


def validate_post_data(title: Any, content: Any) -> List[ValidationError]:
    """Проверка заголовка и содержимого поста"""
    errors = validate_string_field(
        title, "title", required=True, min_length=1, max_length=TITLE_MAX_LENGTH
    )
    errors.extend(
        validate_string_field(
            content, "content", required=False, max_length=CONTENT_MAX_LENGTH
        )
    )
    return errors


def validate_and_sanitize_post_data(title: Any, content: Any) -> SanitizedPost:
    """Проверка и очистка данных поста"""
    errors = validate_post_data(title, content)

    if errors:
        raise ValidationFailed(errors)

    return SanitizedPost(
        title=title.strip() if isinstance(title, str) else "",
        content=content.strip() if isinstance(content, str) else "",
    )


def validate_id(value: Any, field_name: str = "id") -> List[ValidationError]:
    """Проверка идентификатора"""
    if _is_blank(value):
        return [ValidationError(field_name, "is required")]

    if not isinstance(value, str):
        return [ValidationError(field_name, "must be a string")]

    if not value.strip():
        return [ValidationError(field_name, "cannot be empty")]

    return []


def validate_and_sanitize_id(value: Any, field_name: str = "id") -> str:
    """Проверка и очистка идентификатора"""
    errors = validate_id(value, field_name)

    if errors:
        raise ValidationFailed(errors)

    return value.strip()
