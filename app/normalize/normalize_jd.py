from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.schemas.normalized import JDDocument, JDRequirements, JDSkills

from .utils import as_mapping, clean_text, pick, text_items, unique_items


def _compensation_text(value: Any) -> str | None:
    if not isinstance(value, Mapping):
        return clean_text(value)

    low = clean_text(pick(value, "min", "from"))
    high = clean_text(pick(value, "max", "to"))
    amount = "-".join(part for part in (low, high) if part)
    parts = [
        amount,
        clean_text(pick(value, "currency")) or "",
        clean_text(pick(value, "period")) or "",
    ]
    return " ".join(part for part in parts if part)


def _normalize_requirements(value: Any) -> JDRequirements:
    if not isinstance(value, Mapping):
        # A flat requirement list has no priority split; treat it as required.
        return JDRequirements(required=text_items(value))
    return JDRequirements(
        required=text_items(pick(value, "required", "must", "mustHave", "must_have")),
        preferred=text_items(pick(value, "preferred", "nice", "niceToHave", "nice_to_have")),
    )


def _normalize_skills(value: Any) -> JDSkills:
    if not isinstance(value, Mapping):
        return JDSkills(technical=unique_items(text_items(value)))
    return JDSkills(technical=unique_items(text_items(pick(value, "technical", "hard"))))


def normalize_jd(payload: Mapping[str, Any] | None) -> JDDocument:
    data = as_mapping(payload)
    return JDDocument(
        job_title=clean_text(pick(data, "jobTitle", "job_title", "title")),
        company=clean_text(pick(data, "company", "companyName", "company_name")),
        location=clean_text(pick(data, "location")),
        summary=clean_text(pick(data, "summary", "description")),
        employment_type=clean_text(pick(data, "employmentType", "employment_type")),
        compensation=_compensation_text(pick(data, "compensation", "salary")),
        responsibilities=text_items(pick(data, "responsibilities"), entries=True),
        requirements=_normalize_requirements(pick(data, "requirements")),
        skills=_normalize_skills(pick(data, "skills")),
    )
