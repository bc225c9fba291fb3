from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.schemas.normalized import (
    CVDocument,
    CVSkills,
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
)

from .utils import as_mapping, as_sequence, clean_text, pick, text_items, unique_items


def _dates_text(entry: Mapping[str, Any]) -> str | None:
    explicit = clean_text(pick(entry, "dates", "duration", "period"))
    if explicit is not None:
        return explicit

    start = clean_text(pick(entry, "startDate", "start_date", "start"))
    end = clean_text(pick(entry, "endDate", "end_date", "end"))
    if end is None and entry.get("current") is True:
        end = "Present"
    if start and end:
        return f"{start} - {end}"
    return start if start is not None else end


def _normalize_personal_info(payload: Mapping[str, Any]) -> PersonalInfo:
    info = as_mapping(pick(payload, "personalInfo", "personal_info"))
    summary = pick(info, "summary")
    if summary is None:
        summary = pick(payload, "summary", "objective")

    return PersonalInfo(
        name=clean_text(pick(info, "name", "fullName", "full_name")),
        email=clean_text(pick(info, "email")),
        phone=clean_text(pick(info, "phone", "phoneNumber", "phone_number")),
        location=clean_text(pick(info, "location", "address")),
        summary=clean_text(summary),
        linkedin=clean_text(pick(info, "linkedin", "linkedIn", "linkedin_url")),
        github=clean_text(pick(info, "github", "gitHub", "github_url")),
    )


def _normalize_experience(value: Any) -> tuple[ExperienceEntry, ...]:
    entries: list[ExperienceEntry] = []
    for raw in as_sequence(value, entries=True):
        entry = as_mapping(raw)
        if not entry and isinstance(raw, str):
            # A bare string entry carries only free text.
            text = clean_text(raw)
            if text:
                entries.append(ExperienceEntry(description=text))
            continue
        entries.append(
            ExperienceEntry(
                title=clean_text(pick(entry, "title", "position", "role")),
                company=clean_text(pick(entry, "company", "employer", "organization")),
                dates=_dates_text(entry),
                description=clean_text(pick(entry, "description", "summary")),
            )
        )
    return tuple(entries)


def _normalize_education(value: Any) -> tuple[EducationEntry, ...]:
    entries: list[EducationEntry] = []
    for raw in as_sequence(value, entries=True):
        entry = as_mapping(raw)
        if not entry and isinstance(raw, str):
            text = clean_text(raw)
            if text:
                entries.append(EducationEntry(degree=text))
            continue
        entries.append(
            EducationEntry(
                degree=clean_text(pick(entry, "degree", "qualification")),
                institution=clean_text(pick(entry, "institution", "school", "university")),
                year=clean_text(pick(entry, "year", "endDate", "end_date", "graduationYear")),
            )
        )
    return tuple(entries)


def _normalize_skills(value: Any) -> CVSkills:
    if isinstance(value, (list, tuple, str)):
        # Flat skill lists from the extractor are treated as technical skills.
        return CVSkills(technical=unique_items(text_items(value)))
    skills = as_mapping(value)
    return CVSkills(
        technical=unique_items(text_items(pick(skills, "technical", "hard"))),
        soft=unique_items(text_items(pick(skills, "soft"))),
    )


def normalize_resume(payload: Mapping[str, Any] | None) -> CVDocument:
    data = as_mapping(payload)
    return CVDocument(
        personal_info=_normalize_personal_info(data),
        experience=_normalize_experience(pick(data, "experience", "workExperience", "work_experience")),
        education=_normalize_education(pick(data, "education")),
        skills=_normalize_skills(pick(data, "skills")),
        certifications=text_items(pick(data, "certifications"), entries=True),
    )
