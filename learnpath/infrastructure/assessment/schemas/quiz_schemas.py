"""Pydantic schemas for quiz submission payload validation."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from learnpath.application.common.result import Failure, Result, Success
from learnpath.domain.assessment.entities.quiz_submission import QuizSubmission
from learnpath.domain.common.exceptions import ValidationError
from learnpath.domain.common.value_objects import LessonId


class QuizAnswerRequest(BaseModel):
    """Selected options for one question."""

    question_id: int = Field(..., gt=0, description="ID of the answered question")
    selected_option_ids: list[int] = Field(
        default_factory=list, description="IDs of the selected options; empty when unanswered"
    )


class QuizSubmissionRequest(BaseModel):
    """Schema for submitting a quiz."""

    lesson_id: int = Field(..., gt=0, description="ID of the quiz lesson")
    answers: list[QuizAnswerRequest] = Field(
        default_factory=list, description="Answers; questions left out count as unanswered"
    )

    @model_validator(mode="after")
    def reject_duplicate_questions(self) -> "QuizSubmissionRequest":
        """Each question may be answered once."""
        seen: set[int] = set()
        for answer in self.answers:
            if answer.question_id in seen:
                msg = f"Question {answer.question_id} is answered more than once"
                raise ValueError(msg)
            seen.add(answer.question_id)
        return self

    def to_domain(self) -> QuizSubmission:
        return QuizSubmission(
            lesson_id=LessonId(self.lesson_id),
            selections={
                answer.question_id: tuple(answer.selected_option_ids) for answer in self.answers
            },
        )


def parse_quiz_submission(
    payload: Mapping[str, Any],
) -> "Result[QuizSubmission, ValidationError]":
    """
    Validate a raw submission payload.

    Args:
        payload: Decoded request body

    Returns:
        Success with the domain submission, or Failure with a ValidationError
        describing the first problem
    """
    try:
        request = QuizSubmissionRequest.model_validate(payload)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "body"
        return Failure(ValidationError(f"Malformed quiz submission: {first['msg']}", field=field))
    return Success(request.to_domain())
