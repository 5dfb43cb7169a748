from __future__ import annotations

from pydantic import Field

from .base import WireModel


class TailoredExperience(WireModel):
    role: str = ""
    company: str = ""
    bullets: list[str] = Field(default_factory=list)


class TailoredProject(WireModel):
    name: str = ""
    description: str = ""
    bullets: list[str] = Field(default_factory=list)


class TailoredResume(WireModel):
    tailored_summary: str = ""
    tailored_skills: list[str] = Field(default_factory=list)
    tailored_experience: list[TailoredExperience] = Field(default_factory=list)
    tailored_projects: list[TailoredProject] = Field(default_factory=list)
    cover_letter_highlights: list[str] = Field(default_factory=list)
