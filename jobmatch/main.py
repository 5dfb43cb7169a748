import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import sentry_sdk

from jobmatch.api.health import router as health_router
from jobmatch.api.preprocess import router as preprocess_router
from jobmatch.api.analyze import router as analyze_router
from jobmatch.core.cors import cors_allow_credentials, cors_allow_origin_regex, cors_allowed_origins
from jobmatch.core.config import settings
from jobmatch.core.exception_handlers import register_exception_handlers
from jobmatch.core.lifespan import lifespan
from jobmatch.core.request_logging import BodySizeLimitMiddleware, RequestLoggingMiddleware

logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn, environment=settings.environment)

app = FastAPI(title="Job Match API", version="0.1.0", lifespan=lifespan)

app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.max_body_bytes)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allowed_origins(),
    allow_origin_regex=cors_allow_origin_regex(),
    allow_credentials=cors_allow_credentials(),
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)
register_exception_handlers(app)

app.include_router(health_router, tags=["Health"])
app.include_router(preprocess_router, prefix="/api", tags=["Preprocess"])
app.include_router(analyze_router, prefix="/api", tags=["Analyze"])
