"""Use case for lesson operations."""

import structlog

from learnpath.application.common.access import CourseAccess
from learnpath.application.common.parsing import parse_enum
from learnpath.application.common.unit_of_work import UnitOfWork
from learnpath.application.curriculum.protocols.lesson_repository import (
    LessonRepositoryProtocol,
)
from learnpath.application.curriculum.protocols.module_repository import (
    ModuleRepositoryProtocol,
)
from learnpath.application.progress.services.progress_propagator import ProgressPropagator
from learnpath.domain.common.exceptions import ValidationError
from learnpath.domain.common.value_objects.ids import LessonId, ModuleId
from learnpath.domain.curriculum.entities.lesson import Lesson, LessonType
from learnpath.domain.curriculum.services.order_index_service import (
    OrderIndexOutOfRangeError,
    OrderIndexService,
)
from learnpath.exceptions import (
    BadRequestError,
    ConflictError,
    CourseModuleNotFoundError,
    ForbiddenError,
    LessonNotFoundError,
)

logger = structlog.get_logger(__name__)


class LessonUseCase:
    """Use case for creating, editing, reordering and deleting lessons."""

    def __init__(
        self,
        module_repository: ModuleRepositoryProtocol,
        lesson_repository: LessonRepositoryProtocol,
        progress_propagator: ProgressPropagator,
        uow: UnitOfWork,
    ) -> None:
        self.module_repository = module_repository
        self.lesson_repository = lesson_repository
        self.progress_propagator = progress_propagator
        self.uow = uow

    def create_lesson(
        self,
        module_id: int,
        title: str,
        access: CourseAccess,
        lesson_type: str | None = None,
        content: str | None = None,
    ) -> Lesson:
        """
        Append a lesson to a module.

        Adding content reopens every Completed enrollment of the course.

        Args:
            module_id: ID of the module
            title: Lesson title
            access: Caller's access to the course
            lesson_type: "Text", "Video" or "Quiz"; Text when omitted
            content: Lesson body

        Returns:
            Created lesson domain entity

        Raises:
            ForbiddenError: If the caller cannot edit the course
            CourseModuleNotFoundError: If the module is not found
            BadRequestError: If the title is empty or the type is unknown
        """
        if not access.can_edit:
            raise ForbiddenError("Only instructors and admins can add lessons")

        parsed_type = self._parse_type(lesson_type) if lesson_type is not None else LessonType.TEXT
        module_id_vo = ModuleId(module_id)
        with self.uow:
            module = self.module_repository.find_by_id(module_id_vo)
            if not module:
                raise CourseModuleNotFoundError(module_id)

            siblings = self.lesson_repository.find_by_module(module_id_vo)
            order_index = OrderIndexService.append(lesson.position for lesson in siblings)
            try:
                lesson = Lesson.create(module_id_vo, title, parsed_type, order_index, content)
            except ValidationError as e:
                raise BadRequestError(e.message) from e

            lesson = self.lesson_repository.save(lesson)
            self.progress_propagator.reopen_completed_enrollments(module.course_id)
            self.uow.commit()

        logger.info(
            "lesson_created",
            lesson_id=lesson.id.value,
            module_id=module_id,
            course_id=module.course_id.value,
            lesson_type=lesson.lesson_type.value,
        )
        return lesson

    def update_lesson(
        self,
        lesson_id: int,
        access: CourseAccess,
        title: str | None = None,
        content: str | None = None,
        lesson_type: str | None = None,
        order_index: int | None = None,
    ) -> Lesson:
        """
        Edit a lesson and/or move it within its module.

        Args:
            lesson_id: ID of the lesson
            access: Caller's access to the course
            title: New title, unchanged when None
            content: New body, unchanged when None
            lesson_type: New type, unchanged when None
            order_index: New position (1-based), unchanged when None

        Returns:
            Updated lesson domain entity

        Raises:
            ForbiddenError: If the caller cannot edit the course
            LessonNotFoundError: If the lesson is not found
            BadRequestError: If the title is empty or the type is unknown
            ConflictError: If order_index is outside 1..N
        """
        if not access.can_edit:
            raise ForbiddenError("Only instructors and admins can edit lessons")

        parsed_type = self._parse_type(lesson_type) if lesson_type is not None else None
        lesson_id_vo = LessonId(lesson_id)
        with self.uow:
            lesson = self.lesson_repository.find_by_id(lesson_id_vo)
            if not lesson:
                raise LessonNotFoundError(lesson_id)

            if title is not None or content is not None or parsed_type is not None:
                try:
                    lesson.update_content(
                        title if title is not None else lesson.title,
                        content if content is not None else lesson.content,
                    )
                except ValidationError as e:
                    raise BadRequestError(e.message) from e
                if parsed_type is not None:
                    lesson.change_type(parsed_type)
                lesson = self.lesson_repository.save(lesson)

            if order_index is not None and order_index != lesson.order_index:
                siblings = [
                    sibling.position
                    for sibling in self.lesson_repository.find_by_module(lesson.module_id)
                ]
                try:
                    next_state = OrderIndexService.move(siblings, lesson_id, order_index)
                except OrderIndexOutOfRangeError as e:
                    raise ConflictError(e.invariant) from e
                self.lesson_repository.update_order_indices(
                    OrderIndexService.changed_positions(siblings, next_state)
                )
                lesson.order_index = next_state[lesson_id]
                logger.info(
                    "lesson_moved",
                    lesson_id=lesson_id,
                    module_id=lesson.module_id.value,
                    order_index=order_index,
                )

            self.uow.commit()

        return lesson

    def delete_lesson(self, lesson_id: int, access: CourseAccess) -> None:
        """
        Delete a lesson and close the gap in its module.

        Progress records and quiz data of the lesson go with it.

        Raises:
            ForbiddenError: If the caller cannot edit the course
            LessonNotFoundError: If the lesson is not found
        """
        if not access.can_edit:
            raise ForbiddenError("Only instructors and admins can delete lessons")

        lesson_id_vo = LessonId(lesson_id)
        with self.uow:
            lesson = self.lesson_repository.find_by_id(lesson_id_vo)
            if not lesson:
                raise LessonNotFoundError(lesson_id)

            siblings = [s.position for s in self.lesson_repository.find_by_module(lesson.module_id)]
            next_state = OrderIndexService.delete(siblings, lesson_id)
            self.lesson_repository.delete(lesson_id_vo)
            self.lesson_repository.update_order_indices(
                OrderIndexService.changed_positions(siblings, next_state)
            )
            self.uow.commit()

        logger.info("lesson_deleted", lesson_id=lesson_id, module_id=lesson.module_id.value)

    @staticmethod
    def _parse_type(raw: str) -> LessonType:
        result = parse_enum(LessonType, raw, field="lesson_type")
        if result.is_failure:
            raise BadRequestError(result.unwrap_error().message)
        return result.unwrap()
