"""Tests for parse_enum."""

import pytest

from learnpath.application.common.parsing import parse_enum
from learnpath.domain.assessment.entities.quiz_question import QuestionType
from learnpath.domain.curriculum.entities.lesson import LessonType
from learnpath.domain.progress.entities.enrollment import EnrollmentStatus


class TestParseEnum:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Completed", EnrollmentStatus.COMPLETED),
            ("completed", EnrollmentStatus.COMPLETED),
            (" Dropped ", EnrollmentStatus.DROPPED),
            ("ACTIVE", EnrollmentStatus.ACTIVE),
            (EnrollmentStatus.ACTIVE, EnrollmentStatus.ACTIVE),
        ],
    )
    def test_accepts_values_and_names(self, raw: object, expected: EnrollmentStatus) -> None:
        result = parse_enum(EnrollmentStatus, raw, field="status")
        assert result.is_success
        assert result.unwrap() is expected

    def test_matches_member_name_with_underscore(self) -> None:
        result = parse_enum(QuestionType, "multiple_choice", field="question_type")
        assert result.unwrap() is QuestionType.MULTIPLE_CHOICE

    @pytest.mark.parametrize("raw", ["Student", "", None, 3])
    def test_unknown_value_is_failure(self, raw: object) -> None:
        result = parse_enum(LessonType, raw, field="lesson_type")

        assert result.is_failure
        error = result.unwrap_error()
        assert error.field == "lesson_type"
        assert "Allowed values: Text, Video, Quiz" in error.message

    def test_failure_has_no_default(self) -> None:
        result = parse_enum(EnrollmentStatus, "Paused", field="status")
        assert result.is_failure
        with pytest.raises(ValueError):
            result.unwrap()
