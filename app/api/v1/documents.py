import logging

from fastapi import APIRouter, HTTPException, Request

from app.core.config import settings
from app.core.rate_limit import rate_limit
from app.normalize.document import InvalidDocumentType
from app.schemas.documents import CatalogResponse, MissingDataRequest
from app.schemas.normalized import MissingDataAnalysis
from app.services.missing_data_service import analyze_missing_data, describe_catalog

logger = logging.getLogger(__name__)

router = APIRouter()


def _raise_document_type_error(exc: InvalidDocumentType) -> None:
    logger.warning("documents_rejected_type type=%r", exc.document_type)
    raise HTTPException(status_code=exc.status_code, detail="Unsupported document type.") from exc


@router.post("/documents/missing-data", response_model=MissingDataAnalysis)
@rate_limit()
async def documents_missing_data(request: Request, payload: MissingDataRequest):
    _ = request
    max_actions = payload.max_actions or settings.max_priority_actions
    try:
        return analyze_missing_data(payload.data, payload.document_type, max_actions=max_actions)
    except InvalidDocumentType as exc:
        _raise_document_type_error(exc)


@router.get("/documents/catalog/{document_type}", response_model=CatalogResponse)
@rate_limit()
async def documents_catalog(request: Request, document_type: str):
    _ = request
    try:
        return describe_catalog(document_type)
    except InvalidDocumentType as exc:
        _raise_document_type_error(exc)
