"""Quiz attempt entity: the record of one submission."""

from dataclasses import dataclass, field
from datetime import datetime

from learnpath.domain.common.entity import Entity
from learnpath.domain.common.exceptions import InvariantViolationError
from learnpath.domain.common.value_object import ValueObject
from learnpath.domain.common.value_objects import (
    LessonId,
    QuizAttemptId,
    QuizOptionId,
    QuizQuestionId,
    UserId,
)


@dataclass(frozen=True)
class QuizAnswer(ValueObject):
    """
    One stored answer row.

    There is one row per selected option; a question left unanswered gets a
    single row with ``selected_option_id=None``. ``is_correct`` repeats the
    verdict of the whole question on every row of that question.
    """

    question_id: QuizQuestionId
    selected_option_id: QuizOptionId | None
    is_correct: bool


@dataclass
class QuizAttempt(Entity[QuizAttemptId]):
    """
    Scored submission of a quiz by a user.

    Business Rules:
    - 0 <= score <= total_questions
    - An attempt with total_questions == 0 is never passed
    """

    id: QuizAttemptId
    lesson_id: LessonId
    user_id: UserId
    started_at: datetime
    completed_at: datetime | None
    score: int
    total_questions: int
    passed: bool
    answers: list[QuizAnswer] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.score < 0 or self.score > self.total_questions:
            raise InvariantViolationError(
                "QuizAttempt",
                f"score {self.score} must be within 0..{self.total_questions}",
            )
        if self.passed and self.total_questions == 0:
            raise InvariantViolationError("QuizAttempt", "an empty quiz cannot be passed")

    @property
    def score_percentage(self) -> float:
        if self.total_questions == 0:
            return 0
        return round(self.score / self.total_questions * 100, 1)

    @classmethod
    def record(
        cls,
        lesson_id: LessonId,
        user_id: UserId,
        started_at: datetime,
        completed_at: datetime,
        score: int,
        total_questions: int,
        passed: bool,
        answers: list[QuizAnswer],
    ) -> "QuizAttempt":
        """Create a new attempt (ID will be 0 until persisted)."""
        return cls(
            id=QuizAttemptId.generate(),
            lesson_id=lesson_id,
            user_id=user_id,
            started_at=started_at,
            completed_at=completed_at,
            score=score,
            total_questions=total_questions,
            passed=passed,
            answers=list(answers),
        )

    @classmethod
    def create_with_id(
        cls,
        id: QuizAttemptId,
        lesson_id: LessonId,
        user_id: UserId,
        started_at: datetime,
        completed_at: datetime | None,
        score: int,
        total_questions: int,
        passed: bool,
        answers: list[QuizAnswer],
    ) -> "QuizAttempt":
        """Reconstitute an attempt from persistence."""
        return cls(
            id=id,
            lesson_id=lesson_id,
            user_id=user_id,
            started_at=started_at,
            completed_at=completed_at,
            score=score,
            total_questions=total_questions,
            passed=passed,
            answers=answers,
        )
