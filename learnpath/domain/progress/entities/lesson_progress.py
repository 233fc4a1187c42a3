"""Lesson progress entity: per-user completion state of one lesson."""

from dataclasses import dataclass
from datetime import datetime

from learnpath.domain.common.entity import Entity
from learnpath.domain.common.exceptions import InvariantViolationError
from learnpath.domain.common.value_objects import LessonId, LessonProgressId, UserId


@dataclass
class LessonProgress(Entity[LessonProgressId]):
    """
    Progress record of a user on a lesson.

    Business Rules:
    - At most one record per (user, lesson) (enforced at repository level)
    - is_completed is True exactly when completed_at is set
    - Starting never overwrites an existing record
    """

    id: LessonProgressId
    user_id: UserId
    lesson_id: LessonId
    started_at: datetime | None = None
    completed_at: datetime | None = None
    is_completed: bool = False

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.is_completed != (self.completed_at is not None):
            raise InvariantViolationError(
                "LessonProgress", "is_completed must match completed_at being set"
            )

    def mark_completed(self, now: datetime) -> bool:
        """
        Mark the lesson completed.

        Returns:
            True if the state changed, False if it was already completed
        """
        if self.is_completed:
            return False
        self.is_completed = True
        self.completed_at = now
        if self.started_at is None:
            self.started_at = now
        return True

    def mark_incomplete(self) -> None:
        self.is_completed = False
        self.completed_at = None

    @classmethod
    def start(cls, user_id: UserId, lesson_id: LessonId, now: datetime) -> "LessonProgress":
        """Create a started, not yet completed record."""
        return cls(
            id=LessonProgressId.generate(),
            user_id=user_id,
            lesson_id=lesson_id,
            started_at=now,
        )

    @classmethod
    def completed(
        cls,
        user_id: UserId,
        lesson_id: LessonId,
        now: datetime,
        started_at: datetime | None = None,
    ) -> "LessonProgress":
        """Create a record that is completed from the start."""
        return cls(
            id=LessonProgressId.generate(),
            user_id=user_id,
            lesson_id=lesson_id,
            started_at=started_at or now,
            completed_at=now,
            is_completed=True,
        )

    @classmethod
    def create_with_id(
        cls,
        id: LessonProgressId,
        user_id: UserId,
        lesson_id: LessonId,
        started_at: datetime | None,
        completed_at: datetime | None,
        is_completed: bool,
    ) -> "LessonProgress":
        """Reconstitute a progress record from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            lesson_id=lesson_id,
            started_at=started_at,
            completed_at=completed_at,
            is_completed=is_completed,
        )
