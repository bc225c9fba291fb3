from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from app.missing_data import (
    CATALOG_VERSION,
    CV_CATALOG,
    JD_CATALOG,
    FieldCheck,
    aggregate_score,
    evaluate_completeness,
    fields_by_importance,
    format_minutes,
    rank_priority_actions,
)
from app.normalize.document import InvalidDocumentType, normalize_document
from app.schemas.documents import CatalogEntry, CatalogResponse
from app.schemas.normalized import ExtractedDocument, MissingDataAnalysis

logger = logging.getLogger(__name__)

_CATALOGS = {"cv": CV_CATALOG, "jd": JD_CATALOG}


def analyze_document(
    document: ExtractedDocument,
    *,
    max_actions: int | None = None,
) -> MissingDataAnalysis:
    findings = evaluate_completeness(document)
    grouped = fields_by_importance(findings)
    return MissingDataAnalysis(
        document_type=document.document_type,
        critical=grouped["critical"],
        recommended=grouped["recommended"],
        optional=grouped["optional"],
        priority_actions=rank_priority_actions(findings, max_actions=max_actions),
        overall_score=aggregate_score(finding.field for finding in findings),
        catalog_version=CATALOG_VERSION,
    )


def analyze_missing_data(
    payload: Mapping[str, Any] | None,
    document_type: str,
    *,
    max_actions: int | None = None,
) -> MissingDataAnalysis:
    try:
        document = normalize_document(payload, document_type)
    except InvalidDocumentType as exc:
        logger.warning("missing_data_invalid_document_type type=%r", exc.document_type)
        raise

    analysis = analyze_document(document, max_actions=max_actions)
    logger.info(
        "missing_data_analysis type=%s critical=%s recommended=%s optional=%s score=%s actions=%s catalog=%s",
        analysis.document_type,
        len(analysis.critical),
        len(analysis.recommended),
        len(analysis.optional),
        analysis.overall_score,
        len(analysis.priority_actions),
        analysis.catalog_version,
    )
    return analysis


def describe_catalog(document_type: str) -> CatalogResponse:
    catalog = _CATALOGS.get(document_type)
    if catalog is None:
        raise InvalidDocumentType(document_type)
    return CatalogResponse(
        document_type=document_type,
        catalog_version=CATALOG_VERSION,
        entries=[
            CatalogEntry(
                id=check.id,
                field=check.field if isinstance(check, FieldCheck) else f"{check.sequence}[].{check.field}",
                category=check.category,
                importance=check.importance,
                penalty=check.penalty,
                estimated_time=format_minutes(check.minutes),
                action=check.action,
                per_entry=not isinstance(check, FieldCheck),
            )
            for check in catalog
        ],
    )
