from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Importance = Literal["critical", "recommended", "optional"]
Difficulty = Literal["easy", "medium", "hard"]
DocumentType = Literal["cv", "jd"]
Category = Literal[
    "personal-info",
    "contact-info",
    "experience",
    "education",
    "skills",
    "summary",
    "achievements",
]

IMPORTANCE_ORDER: tuple[Importance, ...] = ("critical", "recommended", "optional")
DIFFICULTY_RANK: dict[str, int] = {"easy": 0, "medium": 1, "hard": 2}


class MissingField(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    field: str
    category: Category
    importance: Importance
    reason: str
    impact_on_score: int = Field(ge=0)
    estimated_time: str
    example: str | None = None
    templates: tuple[str, ...] = ()


class PriorityAction(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    difficulty: Difficulty
    estimated_time: str
    impact_score: int = Field(ge=0)


class MissingDataAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    document_type: DocumentType
    critical: tuple[MissingField, ...] = ()
    recommended: tuple[MissingField, ...] = ()
    optional: tuple[MissingField, ...] = ()
    priority_actions: tuple[PriorityAction, ...] = ()
    overall_score: int = Field(ge=0, le=100)
    catalog_version: str
