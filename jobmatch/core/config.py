from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    openai_api_key: str | None
    openai_model: str
    openai_base_url: str | None
    openai_timeout_s: float
    openai_max_attempts: int
    openai_retry_base_ms: int
    environment: str
    log_level: str
    sentry_dsn: str | None
    cors_origins: tuple[str, ...]
    cors_allow_origin_regex: str | None
    max_body_bytes: int

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


def load_settings() -> Settings:
    return Settings(
        openai_api_key=(_get_env("OPENAI_API_KEY") or "").strip() or None,
        openai_model=(_get_env("OPENAI_MODEL") or _get_env("AI_MODEL", "gpt-4o-mini") or "gpt-4o-mini").strip(),
        openai_base_url=(_get_env("OPENAI_BASE_URL") or "").strip() or None,
        openai_timeout_s=_get_env_float("OPENAI_TIMEOUT_S", 60.0),
        openai_max_attempts=max(1, _get_env_int("OPENAI_MAX_ATTEMPTS", 3)),
        openai_retry_base_ms=max(0, _get_env_int("OPENAI_RETRY_BASE_MS", 1000)),
        environment=(_get_env("ENVIRONMENT") or _get_env("NODE_ENV", "development") or "development").strip().lower(),
        log_level=(_get_env("LOG_LEVEL", "INFO") or "INFO").upper(),
        sentry_dsn=_get_env("SENTRY_DSN"),
        cors_origins=_get_env_list("CORS_ORIGINS", ["*"]),
        cors_allow_origin_regex=_get_env("CORS_ALLOW_ORIGIN_REGEX", r"^chrome-extension://.*$"),
        max_body_bytes=_get_env_int("MAX_BODY_BYTES", 10 * 1024 * 1024),
    )


settings = load_settings()
