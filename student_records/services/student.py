"""Student record service."""

import logging
from typing import Any

from student_records.core import statements
from student_records.core.exceptions import StoreError, ValidationError
from student_records.core.store import StoreGateway
from student_records.schemas.student import StudentCreate, StudentResponse

logger = logging.getLogger(__name__)


def normalize_marks_path(path: str | None, uploads_folder: str) -> str:
    """Turn a stored marksheet path into a browser-safe web path.

    Backslashes become forward slashes, and a relative path under the
    uploads folder gains a leading slash. Empty paths stay empty.
    """
    if not path:
        return ""
    path = path.replace("\\", "/")
    if not path.startswith("/") and path.lower().startswith(f"{uploads_folder.lower()}/"):
        path = f"/{path}"
    return path


class StudentService:
    """Student record listing and creation."""

    def __init__(self, store: StoreGateway, uploads_folder: str):
        self.store = store
        self.uploads_folder = uploads_folder

    def _to_response(self, row: dict[str, Any]) -> StudentResponse:
        row = dict(row)
        row["MarksFilePath"] = normalize_marks_path(row.get("MarksFilePath"), self.uploads_folder)
        return StudentResponse.model_validate(row)

    def list_students(self) -> list[StudentResponse]:
        """List every student ordered by roll number."""
        try:
            rows = self.store.execute(statements.SELECT_ALL_STUDENTS)
        except StoreError as e:
            logger.error(f"[LIST STUDENTS] Store error: {e.store_error}")
            raise e.with_message("Error fetching students") from e

        logger.debug(f"[LIST STUDENTS] Fetched {len(rows)} rows")
        return [self._to_response(row) for row in rows]

    def create_student(self, request: StudentCreate) -> StudentResponse:
        """
        Create a student and return the stored row.

        The insert and the read-back share one transaction. The row is read
        back by its generated roll number, or as the highest roll number
        when the store does not report generated keys.
        """
        if not request.first_name or not request.last_name:
            raise ValidationError(
                "FirstName and LastName are required",
                details={"fields": ["firstName", "lastName"]},
            )

        params = {
            "first_name": request.first_name,
            "last_name": request.last_name,
            "marks_file_path": request.marks_file_path or "",
        }
        try:
            with self.store.transaction() as tx:
                roll_number = tx.insert(statements.INSERT_STUDENT, params, key="RollNumber")
                if roll_number is None:
                    logger.warning("[CREATE STUDENT] Store reported no generated key; reading back latest row")
                    rows = tx.execute(statements.SELECT_LATEST_STUDENT)
                else:
                    rows = tx.execute(
                        statements.SELECT_STUDENT_BY_ROLL,
                        {"roll_number": int(roll_number)},
                    )
        except StoreError as e:
            logger.error(f"[CREATE STUDENT] Store error: {e.store_error}")
            raise e.with_message("Error creating student") from e

        if not rows:
            logger.error("[CREATE STUDENT] Inserted row could not be read back")
            raise StoreError("Error creating student", store_error="Inserted row not found")

        student = self._to_response(rows[0])
        logger.info(f"[CREATE STUDENT] Created student {student.roll_number}")
        return student
