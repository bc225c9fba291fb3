from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from app.schemas.normalized import IMPORTANCE_ORDER, CVDocument, ExtractedDocument, JDDocument, MissingField

from .catalog import Check, FieldCheck, format_minutes
from .cv_catalog import CV_CATALOG
from .jd_catalog import JD_CATALOG


@dataclass(frozen=True)
class Finding:
    """A failed check together with the ``MissingField`` it produced."""

    check: Check
    field: MissingField


def catalog_for(document: ExtractedDocument) -> tuple[Check, ...]:
    if isinstance(document, CVDocument):
        return CV_CATALOG
    if isinstance(document, JDDocument):
        return JD_CATALOG
    raise TypeError(f"Unsupported document model: {type(document).__name__}")


def _missing_field(check: Check, *, field_id: str, path: str) -> MissingField:
    return MissingField(
        id=field_id,
        field=path,
        category=check.category,
        importance=check.importance,
        reason=check.reason,
        impact_on_score=check.penalty,
        estimated_time=format_minutes(check.minutes),
        example=check.example,
        templates=check.templates,
    )


def _run_check(check: Check, document: ExtractedDocument) -> Iterator[Finding]:
    if isinstance(check, FieldCheck):
        if not check.present(document):
            yield Finding(check, _missing_field(check, field_id=check.id, path=check.field))
        return

    for index, entry in enumerate(check.entries(document)):
        if not check.present(entry):
            path = check.path(index)
            yield Finding(check, _missing_field(check, field_id=path, path=path))


def evaluate_completeness(document: ExtractedDocument) -> tuple[Finding, ...]:
    """Run the document's catalog and return findings grouped critical, recommended, optional.

    Inside a tier findings keep catalog order; entry checks emit in sequence-index order.
    """
    findings = [finding for check in catalog_for(document) for finding in _run_check(check, document)]
    return tuple(
        finding
        for importance in IMPORTANCE_ORDER
        for finding in findings
        if finding.field.importance == importance
    )


def fields_by_importance(findings: tuple[Finding, ...]) -> dict[str, tuple[MissingField, ...]]:
    return {
        importance: tuple(f.field for f in findings if f.field.importance == importance)
        for importance in IMPORTANCE_ORDER
    }
