from __future__ import annotations

from pydantic import ValidationError

from jobmatch.schemas.normalized import TailoredResume

from .utils import load_json_object, schema_error


def empty_tailored_resume() -> TailoredResume:
    return TailoredResume()


def normalize_tailored_resume(raw: str) -> TailoredResume:
    data = load_json_object(raw, what="tailored resume")
    try:
        return TailoredResume.model_validate(data)
    except ValidationError as exc:
        raise schema_error(exc, what="tailored resume") from exc
