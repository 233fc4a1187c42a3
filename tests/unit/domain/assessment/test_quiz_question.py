"""Tests for the QuizQuestion entity and its option rules."""

from datetime import UTC, datetime

import pytest

from learnpath.domain.assessment.entities.quiz_attempt import QuizAttempt
from learnpath.domain.assessment.entities.quiz_question import (
    QuestionType,
    QuizOption,
    QuizQuestion,
)
from learnpath.domain.common.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    InvariantViolationError,
    ValidationError,
)
from learnpath.domain.common.value_objects import (
    LessonId,
    QuizAttemptId,
    QuizOptionId,
    QuizQuestionId,
    UserId,
)


def _make_question(
    correct: list[bool], question_type: QuestionType = QuestionType.SINGLE_CHOICE
) -> QuizQuestion:
    question_id = QuizQuestionId(1)
    return QuizQuestion.create_with_id(
        id=question_id,
        lesson_id=LessonId(1),
        text="Pick one",
        order_index=1,
        question_type=question_type,
        options=[
            QuizOption.create_with_id(
                id=QuizOptionId(n),
                question_id=question_id,
                text=f"Option {n}",
                is_correct=is_correct,
            )
            for n, is_correct in enumerate(correct, start=1)
        ],
    )


def _correctness(question: QuizQuestion) -> list[bool]:
    return [o.is_correct for o in question.options]


class TestQuizQuestion:
    def test_create_uses_placeholder_text(self) -> None:
        question = QuizQuestion.create(LessonId(1), None, order_index=1)
        assert question.text == "New Question"
        assert question.id.is_transient()

    def test_empty_text_is_rejected(self) -> None:
        question = _make_question([True, False])
        with pytest.raises(ValidationError):
            question.update_text("   ")

    def test_add_option_placeholder(self) -> None:
        question = _make_question([True, False])
        option = question.add_option(None)
        assert option.text == "New Option"
        assert option.id.is_transient()
        assert option.question_id == question.id

    def test_add_correct_option_is_exclusive_on_single_choice(self) -> None:
        question = _make_question([True, False])
        question.add_option("New right", is_correct=True)
        assert _correctness(question) == [False, False, True]

    def test_add_correct_option_keeps_others_on_multiple_choice(self) -> None:
        question = _make_question([True, False], QuestionType.MULTIPLE_CHOICE)
        question.add_option("Also right", is_correct=True)
        assert _correctness(question) == [True, False, True]

    def test_mark_correct_single_choice(self) -> None:
        question = _make_question([True, False, False])
        question.mark_correct(QuizOptionId(3))
        assert _correctness(question) == [False, False, True]

    def test_get_foreign_option(self) -> None:
        question = _make_question([True, False])
        with pytest.raises(EntityNotFoundError):
            question.get_option(QuizOptionId(99))

    def test_remove_option_requires_more_than_two(self) -> None:
        question = _make_question([True, False])
        with pytest.raises(BusinessRuleViolationError) as exc_info:
            question.remove_option(QuizOptionId(2))
        assert exc_info.value.rule == "min_options"
        assert len(question.options) == 2

    def test_remove_last_correct_option(self) -> None:
        question = _make_question([True, False, False])
        with pytest.raises(BusinessRuleViolationError) as exc_info:
            question.remove_option(QuizOptionId(1))
        assert exc_info.value.rule == "last_correct_option"

    def test_remove_one_of_two_correct(self) -> None:
        question = _make_question([True, True, False], QuestionType.MULTIPLE_CHOICE)
        question.remove_option(QuizOptionId(1))
        assert [o.id.value for o in question.options] == [2, 3]

    def test_toggle_single_choice_is_rejected(self) -> None:
        question = _make_question([True, False])
        with pytest.raises(BusinessRuleViolationError):
            question.toggle_correct(QuizOptionId(2))

    def test_toggle_multiple_choice(self) -> None:
        question = _make_question([True, False], QuestionType.MULTIPLE_CHOICE)
        assert question.toggle_correct(QuizOptionId(2)) is True
        assert question.toggle_correct(QuizOptionId(1)) is False
        assert _correctness(question) == [False, True]

    def test_update_option_false_only_touches_that_option(self) -> None:
        question = _make_question([True, True, False], QuestionType.MULTIPLE_CHOICE)
        question.update_option(QuizOptionId(1), None, is_correct=False)
        assert _correctness(question) == [False, True, False]
        assert question.options[0].text == "Option 1"

    def test_update_option_cannot_unmark_only_correct(self) -> None:
        question = _make_question([True, False])
        with pytest.raises(BusinessRuleViolationError) as exc_info:
            question.update_option(QuizOptionId(1), "Renamed", is_correct=False)
        assert exc_info.value.rule == "last_correct_option"
        assert _correctness(question) == [True, False]
        assert question.options[0].text == "Option 1"

    def test_toggle_cannot_unmark_last_correct(self) -> None:
        question = _make_question([True, False, False], QuestionType.MULTIPLE_CHOICE)
        with pytest.raises(BusinessRuleViolationError) as exc_info:
            question.toggle_correct(QuizOptionId(1))
        assert exc_info.value.rule == "last_correct_option"
        assert _correctness(question) == [True, False, False]


class TestChangeType:
    def test_to_single_choice_keeps_nominated(self) -> None:
        question = _make_question([True, True, False], QuestionType.MULTIPLE_CHOICE)
        question.change_type(QuestionType.SINGLE_CHOICE, keep_correct=QuizOptionId(2))
        assert _correctness(question) == [False, True, False]

    def test_to_single_choice_keeps_first_correct(self) -> None:
        question = _make_question([False, True, True], QuestionType.MULTIPLE_CHOICE)
        question.change_type(QuestionType.SINGLE_CHOICE)
        assert _correctness(question) == [False, True, False]

    def test_foreign_nomination_falls_back_to_first_correct(self) -> None:
        question = _make_question([True, True], QuestionType.MULTIPLE_CHOICE)
        question.change_type(QuestionType.SINGLE_CHOICE, keep_correct=QuizOptionId(42))
        assert _correctness(question) == [True, False]

    def test_to_multiple_choice_keeps_correctness(self) -> None:
        question = _make_question([False, True])
        question.change_type(QuestionType.MULTIPLE_CHOICE)
        assert question.question_type is QuestionType.MULTIPLE_CHOICE
        assert _correctness(question) == [False, True]


class TestQuizAttempt:
    def _attempt(self, score: int, total: int, passed: bool) -> QuizAttempt:
        now = datetime(2024, 3, 1, tzinfo=UTC)
        return QuizAttempt.create_with_id(
            id=QuizAttemptId(1),
            lesson_id=LessonId(1),
            user_id=UserId(1),
            started_at=now,
            completed_at=now,
            score=score,
            total_questions=total,
            passed=passed,
            answers=[],
        )

    def test_score_percentage(self) -> None:
        assert self._attempt(2, 3, False).score_percentage == 66.7
        assert self._attempt(0, 0, False).score_percentage == 0

    def test_score_above_total(self) -> None:
        with pytest.raises(InvariantViolationError):
            self._attempt(4, 3, True)

    def test_empty_attempt_cannot_pass(self) -> None:
        with pytest.raises(InvariantViolationError):
            self._attempt(0, 0, True)
