from __future__ import annotations

import os
from dataclasses import dataclass

from jobmatch.core.config import Settings


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    api_key: str | None = None
    base_url: str | None = None
    timeout_s: float = 60.0
    max_attempts: int = 3
    retry_base_ms: int = 1000


def load_ai_config(cfg: Settings) -> AIConfig:
    provider = os.getenv("AI_PROVIDER", "openai").strip().lower()
    return AIConfig(
        provider=provider,
        model=cfg.openai_model,
        api_key=cfg.openai_api_key,
        base_url=cfg.openai_base_url,
        timeout_s=cfg.openai_timeout_s,
        max_attempts=cfg.openai_max_attempts,
        retry_base_ms=cfg.openai_retry_base_ms,
    )
