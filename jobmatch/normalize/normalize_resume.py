from __future__ import annotations

import logging

from pydantic import ValidationError

from jobmatch.core.errors import MalformedResponseError
from jobmatch.schemas.normalized import StructuredResume

from .utils import load_json_object

logger = logging.getLogger(__name__)

FALLBACK_SUMMARY_CHARS = 1000


def fallback_resume(sanitized_input: str) -> StructuredResume:
    return StructuredResume(summary=(sanitized_input or "")[:FALLBACK_SUMMARY_CHARS])


def normalize_structured_resume(raw: str, sanitized_input: str) -> StructuredResume:
    """Parse the resume extraction; unusable output degrades to ``fallback_resume``."""
    try:
        data = load_json_object(raw, what="resume extraction")
        return StructuredResume.model_validate(data)
    except (MalformedResponseError, ValidationError) as exc:
        logger.warning("resume_parse_fallback input_len=%s: %s", len(sanitized_input or ""), exc)
        return fallback_resume(sanitized_input)
