from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class PersonalInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    summary: str | None = None
    linkedin: str | None = None
    github: str | None = None


class ExperienceEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str | None = None
    company: str | None = None
    dates: str | None = None
    description: str | None = None


class EducationEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    degree: str | None = None
    institution: str | None = None
    year: str | None = None


class CVSkills(BaseModel):
    model_config = ConfigDict(frozen=True)

    technical: tuple[str, ...] = ()
    soft: tuple[str, ...] = ()


class CVDocument(BaseModel):
    """Normalized CV. ``None`` means the extractor did not provide the field."""

    model_config = ConfigDict(frozen=True)

    document_type: Literal["cv"] = "cv"
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    experience: tuple[ExperienceEntry, ...] = ()
    education: tuple[EducationEntry, ...] = ()
    skills: CVSkills = Field(default_factory=CVSkills)
    certifications: tuple[str, ...] = ()
