import pytest

from student_records.core.statements import (
    SELECT_LATEST_STUDENT,
    UPDATE_MARKS_PATH,
    inline_params,
    sql_literal,
)


class TestSqlLiteral:
    def test_none_is_null(self):
        assert sql_literal(None) == "NULL"

    def test_plain_text_is_quoted(self):
        assert sql_literal("Asha") == "'Asha'"

    def test_single_quotes_are_doubled(self):
        assert sql_literal("O'Brien") == "'O''Brien'"

    def test_injection_attempt_stays_one_literal(self):
        literal = sql_literal("x'); DROP TABLE Students; --")
        assert literal == "'x''); DROP TABLE Students; --'"
        # Only the wrapping quotes are unpaired
        assert literal[1:-1].replace("''", "").count("'") == 0

    def test_non_text_values_are_coerced(self):
        assert sql_literal(42) == "'42'"
        assert sql_literal(1.5) == "'1.5'"

    def test_empty_string(self):
        assert sql_literal("") == "''"


class TestInlineParams:
    def test_update_statement(self):
        sql = inline_params(UPDATE_MARKS_PATH, {"marks_file_path": "Marksheets/7/a.xlsx", "roll_number": 7})
        assert sql == (
            "UPDATE Students SET MarksFilePath = 'Marksheets/7/a.xlsx' "
            "WHERE RollNumber = 7"
        )

    def test_booleans_are_not_treated_as_numbers(self):
        assert inline_params("SELECT :flag", {"flag": True}) == "SELECT 'True'"

    def test_none_renders_null(self):
        assert inline_params("SELECT :value", {"value": None}) == "SELECT NULL"

    def test_value_markers_are_not_expanded(self):
        sql = inline_params("SELECT :a, :b", {"a": ":b", "b": "x"})
        assert sql == "SELECT ':b', 'x'"

    def test_casts_are_left_alone(self):
        assert inline_params("SELECT :a::text", {"a": "x"}) == "SELECT 'x'::text"

    def test_statement_without_markers(self):
        assert inline_params(SELECT_LATEST_STUDENT) == SELECT_LATEST_STUDENT

    def test_missing_parameter(self):
        with pytest.raises(KeyError):
            inline_params("SELECT :missing", {})
