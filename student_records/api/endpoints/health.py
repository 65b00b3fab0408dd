"""Health check endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from student_records.core.dependencies import AppSettings, get_upload_service
from student_records.schemas.common import UploadsHealthResponse
from student_records.services.upload import UploadService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
def health_check(settings: AppSettings):
    """Health check endpoint for load balancers and monitoring."""
    return {
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


@router.get("/uploads", response_model=UploadsHealthResponse, response_model_exclude_none=True)
def uploads_health(
    service: Annotated[UploadService, Depends(get_upload_service)],
):
    """Verify the uploads folder exists, creating it if needed."""
    try:
        path = service.ensure_uploads_root()
    except OSError as e:
        logger.error(f"[UPLOADS HEALTH] Uploads folder unavailable: {e}")
        return JSONResponse(
            status_code=500,
            content={"ok": False, "error": str(e)},
        )
    return UploadsHealthResponse(ok=True, path=str(path))
