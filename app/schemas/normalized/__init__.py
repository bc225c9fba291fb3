from typing import Annotated, Union

from pydantic import Field

from .analysis import (
    DIFFICULTY_RANK,
    IMPORTANCE_ORDER,
    Category,
    Difficulty,
    DocumentType,
    Importance,
    MissingDataAnalysis,
    MissingField,
    PriorityAction,
)
from .jd import JDDocument, JDRequirements, JDSkills
from .resume import CVDocument, CVSkills, EducationEntry, ExperienceEntry, PersonalInfo

ExtractedDocument = Annotated[Union[CVDocument, JDDocument], Field(discriminator="document_type")]

__all__ = [
    "PersonalInfo",
    "ExperienceEntry",
    "EducationEntry",
    "CVSkills",
    "CVDocument",
    "JDRequirements",
    "JDSkills",
    "JDDocument",
    "ExtractedDocument",
    "Category",
    "Importance",
    "Difficulty",
    "DocumentType",
    "IMPORTANCE_ORDER",
    "DIFFICULTY_RANK",
    "MissingField",
    "PriorityAction",
    "MissingDataAnalysis",
]
