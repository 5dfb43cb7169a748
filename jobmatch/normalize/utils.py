from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from jobmatch.core.errors import MalformedResponseError


def strip_code_fences(text: str) -> str:
    t = (text or "").strip()
    if t.startswith("```"):
        lines = t.splitlines()
        lines = lines[1:] if lines else lines
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        t = "\n".join(lines).strip()
    return t


def load_json_object(raw: str, *, what: str = "response") -> dict[str, Any]:
    try:
        parsed = json.loads(strip_code_fences(raw))
    except (TypeError, ValueError) as exc:
        raise MalformedResponseError(f"Malformed JSON in {what}: {exc}") from exc
    if not isinstance(parsed, dict):
        raise MalformedResponseError(f"Expected a JSON object in {what}, got {type(parsed).__name__}")
    return parsed


def schema_error(exc: ValidationError, *, what: str) -> MalformedResponseError:
    return MalformedResponseError(f"Unexpected {what} shape: {exc.error_count()} invalid field(s)")
