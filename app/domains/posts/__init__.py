from app.domains.posts.entities import Post
from app.domains.posts.schemas import (
    PostPayload, PostResponse, DeleteResponse, FieldErrorResponse, ErrorResponse
)
from app.domains.posts.validation import (
    ValidationError, ValidationFailed, SanitizedPost,
    validate_string_field, validate_post_data, validate_and_sanitize_post_data,
    validate_id, validate_and_sanitize_id
)

__all__ = [
    "Post",
    "PostPayload", "PostResponse", "DeleteResponse", "FieldErrorResponse", "ErrorResponse",
    "ValidationError", "ValidationFailed", "SanitizedPost",
    "validate_string_field", "validate_post_data", "validate_and_sanitize_post_data",
    "validate_id", "validate_and_sanitize_id"
]
