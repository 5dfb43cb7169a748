from __future__ import annotations

from jobmatch.core.config import Settings, settings


def cors_allowed_origins(cfg: Settings = settings) -> list[str]:
    return list(cfg.cors_origins)


def cors_allow_origin_regex(cfg: Settings = settings) -> str | None:
    if "*" in cfg.cors_origins:
        return None
    regex = (cfg.cors_allow_origin_regex or "").strip()
    return regex or None


def cors_allow_credentials(cfg: Settings = settings) -> bool:
    # Browsers reject a wildcard origin combined with credentials.
    return "*" not in cfg.cors_origins
