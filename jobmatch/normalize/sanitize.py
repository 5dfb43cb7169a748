from __future__ import annotations

import re
from typing import Any

MAX_SANITIZED_CHARS = 6000

_EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
_PHONE_RE = re.compile(r"\b(?:\+?1[-.\s]?)?\(?[0-9]{3}\)?[-.\s]?[0-9]{3}[-.\s]?[0-9]{4}\b")
_CARD_RE = re.compile(r"\b[0-9]{4}[\s-]?[0-9]{4}[\s-]?[0-9]{4}[\s-]?[0-9]{4}\b")
_WHITESPACE_RE = re.compile(r"\s+")
_NON_ASCII_RE = re.compile(r"[^\x00-\x7F]+")
_CONTROL_RE = re.compile(r"[\x00-\x1F\x7F]")


def sanitize_text(text: Any) -> str:
    """Strip contact details and card numbers, normalize whitespace, keep printable ASCII.

    Anything that is not a non-empty string sanitizes to ``""``.
    """
    if not text or not isinstance(text, str):
        return ""

    sanitized = _EMAIL_RE.sub("[email]", text)
    sanitized = _PHONE_RE.sub("[phone]", sanitized)
    sanitized = _CARD_RE.sub("[card]", sanitized)

    sanitized = sanitized.strip()
    sanitized = _WHITESPACE_RE.sub(" ", sanitized)
    sanitized = _NON_ASCII_RE.sub(" ", sanitized)
    sanitized = _CONTROL_RE.sub("", sanitized)

    return sanitized[:MAX_SANITIZED_CHARS]


def validate_text_length(text: Any, min_length: int = 10, max_length: int = 50000) -> bool:
    sanitized = sanitize_text(text)
    return min_length <= len(sanitized) <= max_length
