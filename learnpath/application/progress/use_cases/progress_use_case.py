"""Use case for lesson progress and course progress views."""

import structlog

from learnpath.application.common.access import CourseAccess
from learnpath.application.common.unit_of_work import UnitOfWork
from learnpath.application.curriculum.protocols.course_repository import (
    CourseRepositoryProtocol,
)
from learnpath.application.curriculum.protocols.lesson_repository import (
    LessonRepositoryProtocol,
)
from learnpath.application.curriculum.protocols.module_repository import (
    ModuleRepositoryProtocol,
)
from learnpath.application.progress.protocols.enrollment_repository import (
    EnrollmentRepositoryProtocol,
)
from learnpath.application.progress.protocols.lesson_progress_repository import (
    LessonProgressRepositoryProtocol,
)
from learnpath.application.progress.services.progress_propagator import ProgressPropagator
from learnpath.domain.common.value_objects.ids import CourseId, LessonId, UserId
from learnpath.domain.curriculum.entities.course import Course
from learnpath.domain.progress.entities.lesson_progress import LessonProgress
from learnpath.domain.progress.services.progress_calculator import (
    CourseProgressSummary,
    ProgressCalculator,
)
from learnpath.exceptions import CourseNotFoundError, ForbiddenError, LessonNotFoundError

logger = structlog.get_logger(__name__)


class ProgressUseCase:
    """Use case for starting, completing and uncompleting lessons."""

    def __init__(
        self,
        course_repository: CourseRepositoryProtocol,
        module_repository: ModuleRepositoryProtocol,
        lesson_repository: LessonRepositoryProtocol,
        lesson_progress_repository: LessonProgressRepositoryProtocol,
        enrollment_repository: EnrollmentRepositoryProtocol,
        progress_propagator: ProgressPropagator,
        progress_calculator: ProgressCalculator,
        uow: UnitOfWork,
    ) -> None:
        self.course_repository = course_repository
        self.module_repository = module_repository
        self.lesson_repository = lesson_repository
        self.lesson_progress_repository = lesson_progress_repository
        self.enrollment_repository = enrollment_repository
        self.progress_propagator = progress_propagator
        self.progress_calculator = progress_calculator
        self.uow = uow

    def start_lesson(self, user_id: int, lesson_id: int, access: CourseAccess) -> LessonProgress:
        """
        Record that a learner opened a lesson. Idempotent.

        Raises:
            LessonNotFoundError: If the lesson is not found
            ForbiddenError: If the caller cannot view the course
        """
        lesson_id_vo = LessonId(lesson_id)
        with self.uow:
            self._require_course_of(lesson_id_vo)
            self._require_view(access)
            progress = self.progress_propagator.start_lesson(UserId(user_id), lesson_id_vo)
            self.uow.commit()
        return progress

    def complete_lesson(self, user_id: int, lesson_id: int, access: CourseAccess) -> LessonProgress:
        """
        Mark a lesson completed; completes the enrollment after the last lesson.

        Raises:
            LessonNotFoundError: If the lesson is not found
            ForbiddenError: If the caller cannot view the course
        """
        lesson_id_vo = LessonId(lesson_id)
        with self.uow:
            course_id = self._require_course_of(lesson_id_vo)
            self._require_view(access)
            progress = self.progress_propagator.complete_lesson(
                UserId(user_id), lesson_id_vo, course_id
            )
            self.uow.commit()
        return progress

    def uncomplete_lesson(
        self, user_id: int, lesson_id: int, access: CourseAccess
    ) -> LessonProgress:
        """
        Clear a lesson's completion; reopens a Completed enrollment.

        Raises:
            LessonNotFoundError: If the lesson is not found
            ForbiddenError: If the caller cannot view the course
            BadRequestError: If the lesson is not marked as completed
        """
        lesson_id_vo = LessonId(lesson_id)
        with self.uow:
            course_id = self._require_course_of(lesson_id_vo)
            self._require_view(access)
            progress = self.progress_propagator.uncomplete_lesson(
                UserId(user_id), lesson_id_vo, course_id
            )
            self.uow.commit()
        return progress

    def get_course_progress(
        self, user_id: int, course_id: int, access: CourseAccess
    ) -> CourseProgressSummary:
        """
        Get a learner's progress through a course with a per-module breakdown.

        Raises:
            CourseNotFoundError: If the course is not found
            ForbiddenError: If the caller cannot view the course
        """
        course = self.course_repository.find_by_id(CourseId(course_id))
        if not course:
            raise CourseNotFoundError(course_id)
        self._require_view(access)
        return self._summarize(UserId(user_id), course)

    def get_progress_overview(self, user_id: int) -> list[CourseProgressSummary]:
        """Get progress for every course the user is enrolled in."""
        user_id_vo = UserId(user_id)
        summaries = []
        for enrollment in self.enrollment_repository.find_by_user(user_id_vo):
            course = self.course_repository.find_by_id(enrollment.course_id)
            if course:
                summaries.append(self._summarize(user_id_vo, course))
        return summaries

    def _summarize(self, user_id: UserId, course: Course) -> CourseProgressSummary:
        return self.progress_calculator.summarize_course(
            course,
            self.module_repository.find_by_course(course.id),
            self.lesson_repository.find_by_course(course.id),
            self.lesson_progress_repository.find_by_user_and_course(user_id, course.id),
        )

    def _require_course_of(self, lesson_id: LessonId) -> CourseId:
        course_id = self.lesson_repository.find_course_id(lesson_id)
        if course_id is None:
            raise LessonNotFoundError(lesson_id.value)
        return course_id

    @staticmethod
    def _require_view(access: CourseAccess) -> None:
        if not access.can_view:
            raise ForbiddenError("You must be enrolled in this course to track progress")
