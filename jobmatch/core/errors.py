from __future__ import annotations

from fastapi import status


class AppError(RuntimeError):
    """Base error carrying the HTTP status the API layer should answer with."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code

    @property
    def message(self) -> str:
        return str(self)


class RequestValidationFailed(AppError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = list(errors or [])


class ConfigurationError(AppError):
    pass


class LLMError(AppError):
    pass


class LLMAuthError(LLMError):
    pass


class LLMBadRequestError(LLMError):
    pass


class LLMRetryExhaustedError(LLMError):
    def __init__(self, message: str, *, attempts: int, last_error: BaseException | None = None):
        super().__init__(message)
        self.attempts = attempts
        self.last_error = last_error


class MalformedResponseError(LLMError):
    pass


class AnalysisError(AppError):
    pass
