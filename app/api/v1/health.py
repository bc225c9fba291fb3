from fastapi import APIRouter

from app.missing_data import CATALOG_VERSION

router = APIRouter()

@router.get("/health", summary="Health Check", description="Check the health status of the application.")
async def health_check():
    return {"status": "healthy", "catalog_version": CATALOG_VERSION}
