"""Upload schemas."""

from student_records.schemas.common import BaseSchema, SuccessResponse


class MarksheetUpload(BaseSchema):
    """Where an uploaded marksheet ended up."""

    roll_number: int
    file_name: str
    stored_path: str
    path: str


class UploadResponse(SuccessResponse):
    """Marksheet upload response."""

    path: str
