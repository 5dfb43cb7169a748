from __future__ import annotations

from typing import Any

from jobmatch.core.errors import RequestValidationFailed
from jobmatch.normalize.sanitize import validate_text_length

MIN_TEXT_LENGTH = 10
MAX_TEXT_LENGTH = 50000


def require_text(
    value: Any,
    *,
    field: str,
    message: str,
    min_length: int = MIN_TEXT_LENGTH,
    max_length: int = MAX_TEXT_LENGTH,
) -> str:
    if not value or not isinstance(value, str) or not value.strip():
        raise RequestValidationFailed(message, errors=[f"Field '{field}' is required"])
    if not validate_text_length(value, min_length, max_length):
        raise RequestValidationFailed(
            "Validation failed",
            errors=[f"Field '{field}' must be between {min_length} and {max_length} characters"],
        )
    return value


def optional_text(value: Any, *, field: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise RequestValidationFailed("Validation failed", errors=[f"Field '{field}' must be a string"])
    return value
