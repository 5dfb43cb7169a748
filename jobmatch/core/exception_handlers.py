from __future__ import annotations

import logging
import traceback
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from jobmatch.core.config import Settings, settings
from jobmatch.core.errors import AppError, RequestValidationFailed

logger = logging.getLogger("jobmatch.errors")

GENERIC_SERVER_ERROR = "Internal server error"


def error_payload(
    message: str,
    status_code: int,
    *,
    exc: BaseException | None = None,
    errors: list[str] | None = None,
    cfg: Settings = settings,
) -> dict[str, Any]:
    if status_code >= 500 and cfg.is_production:
        message = GENERIC_SERVER_ERROR
    body: dict[str, Any] = {"message": message or GENERIC_SERVER_ERROR, "statusCode": status_code}
    if errors:
        body["errors"] = errors
    if exc is not None and cfg.is_development:
        body["error"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return body


def _format_validation_errors(exc: RequestValidationError) -> list[str]:
    messages: list[str] = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        field = ".".join(loc) or "body"
        messages.append(f"Field '{field}' {err.get('msg', 'is invalid')}")
    return messages


def register_exception_handlers(app: FastAPI, cfg: Settings = settings) -> None:
    async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(
                "request_failed method=%s path=%s status=%s: %s",
                request.method,
                request.url.path,
                exc.status_code,
                exc,
                exc_info=exc,
            )
        else:
            logger.warning("request_rejected path=%s status=%s: %s", request.url.path, exc.status_code, exc)
        errors = exc.errors if isinstance(exc, RequestValidationFailed) else None
        body = error_payload(
            str(exc),
            exc.status_code,
            exc=exc if exc.status_code >= 500 else None,
            errors=errors,
            cfg=cfg,
        )
        return JSONResponse(status_code=exc.status_code, content=body)

    async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = _format_validation_errors(exc)
        logger.warning("request_rejected path=%s status=400 errors=%s", request.url.path, errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_payload("Validation failed", status.HTTP_400_BAD_REQUEST, errors=errors, cfg=cfg),
        )

    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            message = "Route not found"
        else:
            message = str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_payload(message, exc.status_code, cfg=cfg),
            headers=getattr(exc, "headers", None),
        )

    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("request_crashed method=%s path=%s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_payload(str(exc), status.HTTP_500_INTERNAL_SERVER_ERROR, exc=exc, cfg=cfg),
        )

    app.add_exception_handler(AppError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected)
