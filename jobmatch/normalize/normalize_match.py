from __future__ import annotations

from pydantic import ValidationError

from jobmatch.schemas.normalized import MatchAnalysis

from .utils import load_json_object, schema_error


def normalize_match_analysis(raw: str) -> MatchAnalysis:
    data = load_json_object(raw, what="match analysis")
    try:
        return MatchAnalysis.model_validate(data)
    except ValidationError as exc:
        raise schema_error(exc, what="match analysis") from exc
