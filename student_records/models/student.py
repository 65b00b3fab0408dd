"""Student model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from student_records.core.database import Base


class Student(Base):
    """Student record with the path of its latest uploaded marksheet.

    Column names match the ``Students`` table queried by the raw statements
    in :mod:`student_records.core.statements`.
    """

    __tablename__ = "Students"

    roll_number: Mapped[int] = mapped_column(
        "RollNumber",
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    first_name: Mapped[str] = mapped_column("FirstName", String(255), nullable=False)
    last_name: Mapped[str] = mapped_column("LastName", String(255), nullable=False)
    marks_file_path: Mapped[str | None] = mapped_column(
        "MarksFilePath",
        String(1024),
        nullable=True,
        default="",
        server_default="",
    )

    def __repr__(self) -> str:
        return f"<Student(roll_number={self.roll_number}, name={self.first_name} {self.last_name})>"
