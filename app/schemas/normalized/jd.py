from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class JDRequirements(BaseModel):
    model_config = ConfigDict(frozen=True)

    required: tuple[str, ...] = ()
    preferred: tuple[str, ...] = ()


class JDSkills(BaseModel):
    model_config = ConfigDict(frozen=True)

    technical: tuple[str, ...] = ()


class JDDocument(BaseModel):
    """Normalized job description. ``None`` means the extractor did not provide the field."""

    model_config = ConfigDict(frozen=True)

    document_type: Literal["jd"] = "jd"
    job_title: str | None = None
    company: str | None = None
    location: str | None = None
    summary: str | None = None
    employment_type: str | None = None
    compensation: str | None = None
    responsibilities: tuple[str, ...] = ()
    requirements: JDRequirements = Field(default_factory=JDRequirements)
    skills: JDSkills = Field(default_factory=JDSkills)
