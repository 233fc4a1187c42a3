"""Use case for the enrollment lifecycle."""

import structlog

from learnpath.application.assessment.protocols.quiz_attempt_repository import (
    QuizAttemptRepositoryProtocol,
)
from learnpath.application.common.access import CourseAccess
from learnpath.application.common.parsing import parse_enum
from learnpath.application.common.unit_of_work import UnitOfWork
from learnpath.application.curriculum.protocols.course_repository import (
    CourseRepositoryProtocol,
)
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
from learnpath.application.progress.services.progress_propagator import ProgressPropagator
from learnpath.domain.common.value_objects.ids import CourseId, UserId
from learnpath.domain.progress.entities.enrollment import Enrollment, EnrollmentStatus
from learnpath.exceptions import (
    BadRequestError,
    CourseNotFoundError,
    EnrollmentNotFoundError,
    ForbiddenError,
)

logger = structlog.get_logger(__name__)


class EnrollmentUseCase:
    """Use case for enrolling, status overrides and unenrolling."""

    def __init__(
        self,
        course_repository: CourseRepositoryProtocol,
        lesson_repository: LessonRepositoryProtocol,
        lesson_progress_repository: LessonProgressRepositoryProtocol,
        enrollment_repository: EnrollmentRepositoryProtocol,
        quiz_attempt_repository: QuizAttemptRepositoryProtocol,
        progress_propagator: ProgressPropagator,
        clock: ClockProtocol,
        uow: UnitOfWork,
    ) -> None:
        self.course_repository = course_repository
        self.lesson_repository = lesson_repository
        self.lesson_progress_repository = lesson_progress_repository
        self.enrollment_repository = enrollment_repository
        self.quiz_attempt_repository = quiz_attempt_repository
        self.progress_propagator = progress_propagator
        self.clock = clock
        self.uow = uow

    def enroll(self, user_id: int, course_id: int) -> Enrollment:
        """
        Enroll a user in a course with status Active.

        Raises:
            CourseNotFoundError: If the course is not found
            BadRequestError: If the user is already enrolled
        """
        user_id_vo = UserId(user_id)
        course_id_vo = CourseId(course_id)
        with self.uow:
            if not self.course_repository.find_by_id(course_id_vo):
                raise CourseNotFoundError(course_id)
            if self.enrollment_repository.find_by_user_and_course(user_id_vo, course_id_vo):
                raise BadRequestError("Already enrolled in this course")

            enrollment = self.enrollment_repository.save(
                Enrollment.create(user_id_vo, course_id_vo, self.clock.now())
            )
            self.uow.commit()

        logger.info("user_enrolled", user_id=user_id, course_id=course_id)
        return enrollment

    def update_status(
        self, user_id: int, course_id: int, status: str, access: CourseAccess
    ) -> Enrollment:
        """
        Administratively set an enrollment's status.

        Completed forward-fills completed progress for every lesson of the
        course; any other status only clears the completion date.

        Args:
            user_id: ID of the enrolled user
            course_id: ID of the course
            status: "Active", "Completed" or "Dropped"
            access: Caller's access to the course

        Returns:
            Updated enrollment domain entity

        Raises:
            ForbiddenError: If the caller is neither instructor nor admin
            BadRequestError: If the status is unknown
            EnrollmentNotFoundError: If the user is not enrolled
        """
        if not access.can_edit:
            raise ForbiddenError("Only instructors and admins can change enrollment status")

        parsed = parse_enum(EnrollmentStatus, status, field="status")
        if parsed.is_failure:
            raise BadRequestError(parsed.unwrap_error().message)

        with self.uow:
            enrollment = self._get_enrollment(user_id, course_id)
            enrollment = self.progress_propagator.override_enrollment(enrollment, parsed.unwrap())
            self.uow.commit()

        return enrollment

    def delete_enrollment(self, user_id: int, course_id: int) -> None:
        """
        Remove an enrollment with the user's progress and quiz attempts in the course.

        Raises:
            EnrollmentNotFoundError: If the user is not enrolled
        """
        user_id_vo = UserId(user_id)
        course_id_vo = CourseId(course_id)
        with self.uow:
            enrollment = self._get_enrollment(user_id, course_id)
            lessons = self.lesson_repository.find_by_course(course_id_vo)
            lesson_ids = [lesson.id for lesson in lessons]
            progress_count = self.lesson_progress_repository.delete_by_user_and_course(
                user_id_vo, course_id_vo
            )
            attempt_count = self.quiz_attempt_repository.delete_by_user_and_lessons(
                user_id_vo, lesson_ids
            )
            self.enrollment_repository.delete(enrollment.id)
            self.uow.commit()

        logger.info(
            "enrollment_deleted",
            user_id=user_id,
            course_id=course_id,
            progress_records=progress_count,
            quiz_attempts=attempt_count,
        )

    def _get_enrollment(self, user_id: int, course_id: int) -> Enrollment:
        enrollment = self.enrollment_repository.find_by_user_and_course(
            UserId(user_id), CourseId(course_id)
        )
        if not enrollment:
            raise EnrollmentNotFoundError(user_id, course_id)
        return enrollment
