from __future__ import annotations

from pydantic import Field

from .base import WireModel


class StructuredJD(WireModel):
    title: str = ""
    company: str = ""
    location: str = ""
    employment_type: str = ""
    experience_level: str = ""
    education_requirements: list[str] = Field(default_factory=list)
    domain: str = ""
    responsibilities: list[str] = Field(default_factory=list)
    must_have_skills: list[str] = Field(default_factory=list)
    nice_to_have_skills: list[str] = Field(default_factory=list)
    technologies: list[str] = Field(default_factory=list)
    summary: str = ""
