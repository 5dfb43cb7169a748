from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from jobmatch.schemas.normalized import StructuredJD, StructuredResume


class PreprocessJDRequest(BaseModel):
    jd: Any = None


class PreprocessJDResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    structured_jd: StructuredJD = Field(alias="structuredJD")


class PreprocessResumeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resume_text: Any = Field(default=None, alias="resumeText")


class PreprocessResumeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    structured_resume: StructuredResume = Field(alias="structuredResume")


class AnalyzeRequest(BaseModel):
    """Either ``resume`` (raw text) or ``structuredResume`` must accompany ``jd``.

    ``jobMetadata`` is the raw HTML of the job posting page and is only used
    together with ``structuredResume``.
    """

    model_config = ConfigDict(populate_by_name=True)

    jd: Any = None
    resume: Any = None
    structured_resume: StructuredResume | None = Field(default=None, alias="structuredResume")
    job_metadata: Any = Field(default=None, alias="jobMetadata")


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    uptime: float


class ErrorResponse(BaseModel):
    message: str
    statusCode: int
    error: str | None = None
    errors: list[str] | None = None
