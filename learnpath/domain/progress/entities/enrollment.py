"""Enrollment entity and its completion state machine."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from learnpath.domain.common.entity import Entity
from learnpath.domain.common.exceptions import InvariantViolationError
from learnpath.domain.common.value_objects import CourseId, EnrollmentId, UserId


class EnrollmentStatus(str, Enum):
    """Course enrollment status."""

    ACTIVE = "Active"
    COMPLETED = "Completed"
    DROPPED = "Dropped"


@dataclass
class Enrollment(Entity[EnrollmentId]):
    """
    Enrollment of a user in a course.

    State machine:
        ACTIVE --complete()--> COMPLETED        (last lesson completed)
        COMPLETED --reopen()--> ACTIVE          (lesson uncompleted, content added)
        any --override(COMPLETED)--> COMPLETED  (administrative)
        any --override(other)--> other          (administrative)

    DROPPED is only entered or left through override().

    Business Rules:
    - completion_date is set exactly when status is COMPLETED
    """

    id: EnrollmentId
    user_id: UserId
    course_id: CourseId
    enrolled_at: datetime
    status: EnrollmentStatus = EnrollmentStatus.ACTIVE
    completion_date: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if (self.status is EnrollmentStatus.COMPLETED) != (self.completion_date is not None):
            raise InvariantViolationError(
                "Enrollment", "completion_date must be set exactly when status is Completed"
            )

    @property
    def is_completed(self) -> bool:
        return self.status is EnrollmentStatus.COMPLETED

    def complete(self, now: datetime) -> bool:
        """
        Transition to COMPLETED after the last lesson was completed.

        Returns:
            True if the status changed; only ACTIVE enrollments complete
        """
        if self.status is not EnrollmentStatus.ACTIVE:
            return False
        self.status = EnrollmentStatus.COMPLETED
        self.completion_date = now
        return True

    def reopen(self) -> bool:
        """
        Revert a COMPLETED enrollment to ACTIVE.

        Returns:
            True if the status changed
        """
        if not self.is_completed:
            return False
        self.status = EnrollmentStatus.ACTIVE
        self.completion_date = None
        return True

    def override(self, status: EnrollmentStatus, now: datetime) -> None:
        """Set the status directly, bypassing lesson-driven transitions."""
        self.status = status
        self.completion_date = now if status is EnrollmentStatus.COMPLETED else None

    @classmethod
    def create(cls, user_id: UserId, course_id: CourseId, now: datetime) -> "Enrollment":
        """Create a new ACTIVE enrollment (ID will be 0 until persisted)."""
        return cls(
            id=EnrollmentId.generate(),
            user_id=user_id,
            course_id=course_id,
            enrolled_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: EnrollmentId,
        user_id: UserId,
        course_id: CourseId,
        enrolled_at: datetime,
        status: EnrollmentStatus,
        completion_date: datetime | None,
    ) -> "Enrollment":
        """Reconstitute an enrollment from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            course_id=course_id,
            enrolled_at=enrolled_at,
            status=status,
            completion_date=completion_date,
        )
