from __future__ import annotations

from pydantic import ValidationError

from jobmatch.schemas.normalized import StructuredJD

from .utils import load_json_object, schema_error


def normalize_structured_jd(raw: str) -> StructuredJD:
    data = load_json_object(raw, what="job description extraction")
    try:
        return StructuredJD.model_validate(data)
    except ValidationError as exc:
        raise schema_error(exc, what="job description") from exc
