"""Assessment context schemas."""

from learnpath.infrastructure.assessment.schemas.quiz_schemas import (
    QuizAnswerRequest,
    QuizSubmissionRequest,
    parse_quiz_submission,
)

__all__ = [
    "QuizAnswerRequest",
    "QuizSubmissionRequest",
    "parse_quiz_submission",
]
