"""Student record endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from student_records.core.dependencies import get_student_service
from student_records.schemas.student import (
    StudentCreate,
    StudentCreatedResponse,
    StudentResponse,
)
from student_records.services.student import StudentService

router = APIRouter()


@router.get("", response_model=list[StudentResponse])
def list_students(
    service: Annotated[StudentService, Depends(get_student_service)],
):
    """List all students ordered by roll number."""
    return service.list_students()


@router.post("", response_model=StudentCreatedResponse)
def create_student(
    request: StudentCreate,
    service: Annotated[StudentService, Depends(get_student_service)],
):
    """
    Create a student.

    `firstName` and `lastName` are required; `marksFilePath` defaults to an
    empty path.
    """
    student = service.create_student(request)
    return StudentCreatedResponse(student=student)
