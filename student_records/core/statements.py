"""SQL statement templates and literal escaping.

Statements are written with ``:name`` bind markers. They are bound by the
driver unless the store is configured for inline literals, in which case
:func:`inline_params` renders them as plain SQL text.
"""

import re
from collections.abc import Mapping
from typing import Any

SELECT_ALL_STUDENTS = "SELECT * FROM Students ORDER BY RollNumber"

INSERT_STUDENT = (
    "INSERT INTO Students (FirstName, LastName, MarksFilePath) "
    "VALUES (:first_name, :last_name, :marks_file_path)"
)

SELECT_STUDENT_BY_ROLL = "SELECT * FROM Students WHERE RollNumber = :roll_number"

# Portable form of "SELECT TOP 1 * ... ORDER BY RollNumber DESC"
SELECT_LATEST_STUDENT = (
    "SELECT * FROM Students "
    "WHERE RollNumber = (SELECT MAX(RollNumber) FROM Students)"
)

UPDATE_MARKS_PATH = (
    "UPDATE Students SET MarksFilePath = :marks_file_path "
    "WHERE RollNumber = :roll_number"
)

# ":name" but not the second colon of a "::type" cast
_BIND_MARKER = re.compile(r"(?<!:):([A-Za-z_]\w*)")


def sql_literal(value: Any) -> str:
    """Render a value as a single-quoted SQL literal, or NULL for None."""
    if value is None:
        return "NULL"
    return "'" + str(value).replace("'", "''") + "'"


def inline_params(sql: str, params: Mapping[str, Any] | None = None) -> str:
    """Replace every bind marker in ``sql`` with an escaped literal.

    Integers are emitted bare so numeric keys compare as numbers. A marker
    with no matching parameter raises ``KeyError``.
    """
    params = params or {}

    def render(match: re.Match) -> str:
        value = params[match.group(1)]
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return sql_literal(value)

    return _BIND_MARKER.sub(render, sql)
