"""Marksheet upload endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile

from student_records.core.dependencies import AppSettings, get_upload_service
from student_records.schemas.upload import UploadResponse
from student_records.services.upload import UploadService

router = APIRouter()


@router.post("/{roll_number}", response_model=UploadResponse)
def upload_marksheet(
    roll_number: int,
    service: Annotated[UploadService, Depends(get_upload_service)],
    settings: AppSettings,
    file: UploadFile | None = File(None),
):
    """
    Upload an Excel marksheet for a student.

    The file is stored under `<uploads-root>/<roll_number>/` and its path is
    saved on the student record. Only `.xlsx`/`.xls` files up to
    `MAX_UPLOAD_SIZE_MB` are accepted.
    """
    file_name = None
    content_type = None
    content = None
    if file is not None:
        file_name = file.filename
        content_type = file.content_type
        # One byte past the cap is enough to detect an oversized file
        content = file.file.read(settings.max_upload_size_bytes + 1)

    result = service.upload_marksheet(roll_number, file_name, content_type, content)
    return UploadResponse(message="File uploaded and path saved", path=result.path)
