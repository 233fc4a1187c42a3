"""
Application service propagating lesson completion to enrollments.

Shared by every use case that changes lesson completion or course content.
It never commits: the calling use case owns the unit of work, so a quiz
pass, a lesson completion and the resulting enrollment transition land in
one transaction.
"""

from datetime import datetime

import structlog

from learnpath.application.curriculum.protocols.lesson_repository import (
    LessonRepositoryProtocol,
)
from learnpath.application.ports.clock import ClockProtocol
from learnpath.application.progress.protocols.enrollment_repository import (
    EnrollmentRepositoryProtocol,
)
from learnpath.application.progress.protocols.lesson_progress_repository import (
    LessonProgressRepositoryProtocol,
)
from learnpath.domain.common.value_objects.ids import CourseId, LessonId, UserId
from learnpath.domain.progress.entities.enrollment import Enrollment, EnrollmentStatus
from learnpath.domain.progress.entities.lesson_progress import LessonProgress
from learnpath.domain.progress.services.progress_calculator import ProgressCalculator
from learnpath.exceptions import BadRequestError

logger = structlog.get_logger(__name__)


class ProgressPropagator:
    """Keeps lesson progress and enrollment status consistent."""

    def __init__(
        self,
        lesson_progress_repository: LessonProgressRepositoryProtocol,
        enrollment_repository: EnrollmentRepositoryProtocol,
        lesson_repository: LessonRepositoryProtocol,
        clock: ClockProtocol,
    ) -> None:
        self.lesson_progress_repository = lesson_progress_repository
        self.enrollment_repository = enrollment_repository
        self.lesson_repository = lesson_repository
        self.clock = clock

    def start_lesson(self, user_id: UserId, lesson_id: LessonId) -> LessonProgress:
        """Create a started record unless one already exists."""
        existing = self.lesson_progress_repository.find_by_user_and_lesson(user_id, lesson_id)
        if existing:
            return existing

        progress = self.lesson_progress_repository.save(
            LessonProgress.start(user_id, lesson_id, self.clock.now())
        )
        logger.info("lesson_started", user_id=user_id.value, lesson_id=lesson_id.value)
        return progress

    def complete_lesson(
        self,
        user_id: UserId,
        lesson_id: LessonId,
        course_id: CourseId,
        started_at: datetime | None = None,
    ) -> LessonProgress:
        """
        Mark a lesson completed and complete the enrollment if it was the last one.

        Args:
            user_id: The learner
            lesson_id: The lesson being completed
            course_id: The course owning the lesson
            started_at: Start time for a record created by this call
                (defaults to now)

        Returns:
            The completed progress record
        """
        now = self.clock.now()
        progress = self.lesson_progress_repository.find_by_user_and_lesson(user_id, lesson_id)
        if progress is None:
            progress = LessonProgress.completed(user_id, lesson_id, now, started_at=started_at)
            progress = self.lesson_progress_repository.save(progress)
        elif progress.mark_completed(now):
            progress = self.lesson_progress_repository.save(progress)

        logger.info(
            "lesson_completed",
            user_id=user_id.value,
            lesson_id=lesson_id.value,
            course_id=course_id.value,
        )
        self._complete_enrollment_if_finished(user_id, course_id, now)
        return progress

    def uncomplete_lesson(
        self, user_id: UserId, lesson_id: LessonId, course_id: CourseId
    ) -> LessonProgress:
        """
        Clear a lesson's completion and reopen a Completed enrollment.

        Raises:
            BadRequestError: If the lesson is not marked as completed
        """
        progress = self.lesson_progress_repository.find_by_user_and_lesson(user_id, lesson_id)
        if progress is None or not progress.is_completed:
            raise BadRequestError("Lesson is not marked as completed")

        progress.mark_incomplete()
        progress = self.lesson_progress_repository.save(progress)

        enrollment = self.enrollment_repository.find_by_user_and_course(user_id, course_id)
        if enrollment and enrollment.reopen():
            self.enrollment_repository.save(enrollment)
            logger.info(
                "enrollment_reopened",
                user_id=user_id.value,
                course_id=course_id.value,
                reason="lesson_uncompleted",
            )

        logger.info("lesson_uncompleted", user_id=user_id.value, lesson_id=lesson_id.value)
        return progress

    def reopen_completed_enrollments(self, course_id: CourseId) -> int:
        """
        Revert every Completed enrollment of the course to Active.

        Called after content was added: the lesson count grew, so a stored
        100% no longer holds for anyone.

        Returns:
            Number of reopened enrollments
        """
        reopened = 0
        for enrollment in self.enrollment_repository.find_completed_by_course(course_id):
            if enrollment.reopen():
                self.enrollment_repository.save(enrollment)
                reopened += 1

        if reopened:
            logger.info(
                "enrollments_reopened",
                course_id=course_id.value,
                count=reopened,
                reason="content_added",
            )
        return reopened

    def override_enrollment(self, enrollment: Enrollment, status: EnrollmentStatus) -> Enrollment:
        """
        Set the enrollment status directly.

        COMPLETED forward-fills a completed progress record for every lesson
        of the course. Other statuses leave lesson progress untouched.
        """
        now = self.clock.now()
        if status is EnrollmentStatus.COMPLETED:
            filled = self._forward_fill(enrollment.user_id, enrollment.course_id, now)
            logger.info(
                "lesson_progress_forward_filled",
                user_id=enrollment.user_id.value,
                course_id=enrollment.course_id.value,
                count=filled,
            )

        previous = enrollment.status
        enrollment.override(status, now)
        enrollment = self.enrollment_repository.save(enrollment)
        logger.info(
            "enrollment_status_overridden",
            user_id=enrollment.user_id.value,
            course_id=enrollment.course_id.value,
            previous_status=previous.value,
            status=status.value,
        )
        return enrollment

    def _forward_fill(self, user_id: UserId, course_id: CourseId, now: datetime) -> int:
        filled = 0
        for lesson in self.lesson_repository.find_by_course(course_id):
            progress = self.lesson_progress_repository.find_by_user_and_lesson(user_id, lesson.id)
            if progress is None:
                self.lesson_progress_repository.save(
                    LessonProgress.completed(user_id, lesson.id, now)
                )
                filled += 1
            elif progress.mark_completed(now):
                self.lesson_progress_repository.save(progress)
                filled += 1
        return filled

    def _complete_enrollment_if_finished(
        self, user_id: UserId, course_id: CourseId, now: datetime
    ) -> None:
        enrollment = self.enrollment_repository.find_by_user_and_course(user_id, course_id)
        if enrollment is None or enrollment.status is not EnrollmentStatus.ACTIVE:
            return

        total = self.lesson_repository.count_by_course(course_id)
        completed = self.lesson_progress_repository.count_completed_in_course(user_id, course_id)
        if not ProgressCalculator.has_completed_all(completed, total):
            return

        enrollment.complete(now)
        self.enrollment_repository.save(enrollment)
        logger.info(
            "enrollment_completed",
            user_id=user_id.value,
            course_id=course_id.value,
            total_lessons=total,
        )
