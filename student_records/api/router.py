"""Main API router aggregating all module routers."""

from fastapi import APIRouter

from student_records.api.endpoints import health, students, uploads
from student_records.schemas.common import ErrorResponse

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Validation error"},
    500: {"model": ErrorResponse, "description": "Store error"},
}

api_router = APIRouter()

api_router.include_router(
    health.router,
    prefix="/health",
    tags=["Health"],
)

api_router.include_router(
    students.router,
    prefix="/students",
    tags=["Students"],
    responses=ERROR_RESPONSES,
)

api_router.include_router(
    uploads.router,
    prefix="/upload",
    tags=["Uploads"],
    responses=ERROR_RESPONSES,
)
