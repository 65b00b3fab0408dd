"""Student schemas."""

from pydantic import ConfigDict, Field

from student_records.schemas.common import BaseSchema


class StudentCreate(BaseSchema):
    """Student creation payload.

    Names are optional here so that a missing name is reported by the
    service as a validation error rather than a schema error.
    """

    first_name: str | None = Field(None, alias="firstName", max_length=255)
    last_name: str | None = Field(None, alias="lastName", max_length=255)
    marks_file_path: str | None = Field(None, alias="marksFilePath", max_length=1024)


class StudentResponse(BaseSchema):
    """Student row as returned to clients.

    Values are passed through as stored, and columns beyond the four known
    ones are returned unchanged.
    """

    model_config = ConfigDict(extra="allow", str_strip_whitespace=False)

    roll_number: int = Field(..., alias="RollNumber")
    first_name: str = Field(..., alias="FirstName")
    last_name: str = Field(..., alias="LastName")
    marks_file_path: str = Field("", alias="MarksFilePath")


class StudentCreatedResponse(BaseSchema):
    """Result of creating a student."""

    success: bool = True
    student: StudentResponse
