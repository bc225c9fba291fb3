from __future__ import annotations

from collections.abc import Iterable

from app.schemas.normalized import MissingField

MAX_SCORE = 100


def aggregate_score(fields: Iterable[MissingField]) -> int:
    """Completeness score: 100 minus every emitted penalty, clamped at 0."""
    deduction = sum(field.impact_on_score for field in fields)
    return max(0, MAX_SCORE - deduction)
