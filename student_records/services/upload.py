"""Marksheet upload service."""

import logging
import re
import time
from pathlib import Path

from student_records.core import statements
from student_records.core.config import Settings
from student_records.core.exceptions import InternalError, StoreError, UploadError
from student_records.core.store import StoreGateway
from student_records.schemas.upload import MarksheetUpload

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def safe_file_name(original: str) -> str:
    """Base name of ``original`` with unsafe characters replaced by ``_``."""
    base = re.split(r"[\\/]", original)[-1]
    name = _UNSAFE_CHARS.sub("_", base)
    if not name.strip("."):
        return f"upload_{int(time.time() * 1000)}.xlsx"
    return name


class UploadService:
    """Stores marksheets under the uploads root and records their path."""

    def __init__(self, store: StoreGateway, settings: Settings):
        self.store = store
        self.settings = settings

    def is_excel(self, file_name: str, content_type: str | None) -> bool:
        """Accept a declared Excel MIME type or an Excel file extension."""
        if content_type in self.settings.ALLOWED_CONTENT_TYPES:
            return True
        lowered = file_name.lower()
        return any(lowered.endswith(ext) for ext in self.settings.ALLOWED_EXTENSIONS)

    def validate(
        self,
        file_name: str | None,
        content_type: str | None,
        content: bytes | None,
    ) -> None:
        """Reject absent, oversized or non-Excel files."""
        if not file_name or content is None:
            raise UploadError("No file uploaded")

        if len(content) > self.settings.max_upload_size_bytes:
            raise UploadError(
                f"File size exceeds {self.settings.MAX_UPLOAD_SIZE_MB}MB limit",
                details={"max_size_bytes": self.settings.max_upload_size_bytes},
            )

        if not self.is_excel(file_name, content_type):
            raise UploadError(
                "Only Excel files are allowed",
                details={"file_name": file_name, "content_type": content_type},
            )

    def upload_marksheet(
        self,
        roll_number: int,
        file_name: str | None,
        content_type: str | None,
        content: bytes | None,
    ) -> MarksheetUpload:
        """
        Save a marksheet for a student and record its path.

        The file is written before the record is updated. If the update
        fails the file is left on disk.
        """
        logger.info(f"[MARKSHEET UPLOAD] Starting upload for roll number {roll_number}: {file_name}")
        self.validate(file_name, content_type, content)
        roll_number = int(roll_number)

        name = safe_file_name(file_name)
        folder = self.settings.uploads_path / str(roll_number)
        destination = folder / name
        try:
            folder.mkdir(parents=True, exist_ok=True)
            destination.write_bytes(content)
        except OSError as e:
            logger.error(f"[MARKSHEET UPLOAD] Could not write {destination}: {e}")
            raise InternalError("Upload failed", details={"file_name": name}) from e
        logger.debug(f"[MARKSHEET UPLOAD] Wrote {len(content)} bytes to {destination}")

        stored_path = f"{self.settings.uploads_folder_name}/{roll_number}/{name}"
        try:
            with self.store.transaction() as tx:
                tx.execute(
                    statements.UPDATE_MARKS_PATH,
                    {"marks_file_path": stored_path, "roll_number": roll_number},
                )
                if not tx.execute(statements.SELECT_STUDENT_BY_ROLL, {"roll_number": roll_number}):
                    logger.warning(f"[MARKSHEET UPLOAD] No student with roll number {roll_number}; path not recorded")
        except StoreError as e:
            logger.error(f"[MARKSHEET UPLOAD] Store error for roll number {roll_number}: {e.store_error}")
            raise e.with_message("Upload failed") from e

        logger.info(f"[MARKSHEET UPLOAD] Recorded {stored_path} for roll number {roll_number}")
        return MarksheetUpload(
            roll_number=roll_number,
            file_name=name,
            stored_path=stored_path,
            path=f"{self.settings.MARKSHEETS_URL_PREFIX}/{roll_number}/{name}",
        )

    def ensure_uploads_root(self) -> Path:
        """Create the uploads root if it does not exist yet."""
        path = self.settings.uploads_path
        path.mkdir(parents=True, exist_ok=True)
        return path
