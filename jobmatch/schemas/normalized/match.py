from __future__ import annotations

import math
from typing import Any

from pydantic import Field, field_validator

from .base import WireModel
from .jd import StructuredJD
from .metadata import JobMetadataResponse
from .tailored import TailoredResume


def clamp_score(value: Any) -> int:
    """Coerce a model-reported score to an integer in [0, 100]; garbage becomes 0."""
    if isinstance(value, bool):
        return 0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if math.isnan(number):
        return 0
    if math.isinf(number):
        return 100 if number > 0 else 0
    return max(0, min(100, int(round(number))))


class MatchAnalysis(WireModel):
    match_score: int = 0
    matched_skills: list[str] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    sample_bullets: list[str] = Field(default_factory=list)
    summary: str = ""

    @field_validator("match_score", mode="before")
    @classmethod
    def _clamp_match_score(cls, value: Any) -> int:
        return clamp_score(value)


class AnalysisResult(MatchAnalysis):
    structured_jd: StructuredJD = Field(default_factory=StructuredJD, alias="structuredJD")
    tailored_resume: TailoredResume = Field(default_factory=TailoredResume)
    job_metadata: JobMetadataResponse | None = None
