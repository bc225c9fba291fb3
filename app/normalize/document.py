from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from app.schemas.normalized import ExtractedDocument

from .normalize_jd import normalize_jd
from .normalize_resume import normalize_resume

SUPPORTED_DOCUMENT_TYPES = ("cv", "jd")


class InvalidDocumentType(ValueError):
    def __init__(self, document_type: object, *, status_code: int = 422):
        super().__init__(
            f"Unsupported document type {document_type!r}; expected one of: {', '.join(SUPPORTED_DOCUMENT_TYPES)}"
        )
        self.document_type = document_type
        self.status_code = status_code


_NORMALIZERS: dict[str, Callable[[Mapping[str, Any] | None], ExtractedDocument]] = {
    "cv": normalize_resume,
    "jd": normalize_jd,
}


def normalize_document(payload: Mapping[str, Any] | None, document_type: str) -> ExtractedDocument:
    normalizer = _NORMALIZERS.get(document_type) if isinstance(document_type, str) else None
    if normalizer is None:
        raise InvalidDocumentType(document_type)
    return normalizer(payload)
