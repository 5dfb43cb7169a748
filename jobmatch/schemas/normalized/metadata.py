from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import WireModel


class CompanyMetadata(WireModel):
    name: str = ""
    logo: str = ""
    linkedin_url: str = ""


class JobPostingMetadata(WireModel):
    title: str = ""
    location: str = ""
    employment_type: str = ""
    apply_url: str = ""
    posted: str = ""
    applicants: str = ""
    promoted_by: str = ""
    responses_managed: str = ""


class ParsedJobMetadata(WireModel):
    company: CompanyMetadata = Field(default_factory=CompanyMetadata)
    job: JobPostingMetadata = Field(default_factory=JobPostingMetadata)


class JobMetadataResponse(WireModel):
    company_linked_in_url: str = ""
    company_logo_url: str = ""
    company_name: str = ""
    job_title: str = ""
    location: str = ""
    salary: str = ""
    posted_date: str = ""
    application_deadline: str = ""
    job_type: str = ""
    remote: str = ""
    apply_url: str = ""
    applicants: str = ""
    promoted_by: str = ""
    responses_managed: str = ""
    benefits: list[str] = Field(default_factory=list)
    additional_info: dict[str, Any] = Field(default_factory=dict)
