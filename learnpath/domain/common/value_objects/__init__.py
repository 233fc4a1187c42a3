"""Common value objects shared across all domain modules."""

from .ids import (
    CourseId,
    EnrollmentId,
    LessonId,
    LessonProgressId,
    ModuleId,
    QuizAttemptId,
    QuizOptionId,
    QuizQuestionId,
    UserId,
)
from .sibling_position import SiblingPosition

__all__ = [
    # IDs
    "CourseId",
    "EnrollmentId",
    "LessonId",
    "LessonProgressId",
    "ModuleId",
    "QuizAttemptId",
    "QuizOptionId",
    "QuizQuestionId",
    "UserId",
    # Ordering
    "SiblingPosition",
]
