"""Use case for module operations."""

import structlog

from learnpath.application.common.access import CourseAccess
from learnpath.application.common.unit_of_work import UnitOfWork
from learnpath.application.curriculum.protocols.course_repository import (
    CourseRepositoryProtocol,
)
from learnpath.application.curriculum.protocols.module_repository import (
    ModuleRepositoryProtocol,
)
from learnpath.application.progress.services.progress_propagator import ProgressPropagator
from learnpath.domain.common.exceptions import ValidationError
from learnpath.domain.common.value_objects.ids import CourseId, ModuleId
from learnpath.domain.curriculum.entities.module import Module
from learnpath.domain.curriculum.services.order_index_service import (
    OrderIndexOutOfRangeError,
    OrderIndexService,
)
from learnpath.exceptions import (
    BadRequestError,
    ConflictError,
    CourseModuleNotFoundError,
    CourseNotFoundError,
    ForbiddenError,
)

logger = structlog.get_logger(__name__)


class ModuleUseCase:
    """Use case for creating, editing, reordering and deleting modules."""

    def __init__(
        self,
        course_repository: CourseRepositoryProtocol,
        module_repository: ModuleRepositoryProtocol,
        progress_propagator: ProgressPropagator,
        uow: UnitOfWork,
    ) -> None:
        self.course_repository = course_repository
        self.module_repository = module_repository
        self.progress_propagator = progress_propagator
        self.uow = uow

    def create_module(self, course_id: int, title: str, access: CourseAccess) -> Module:
        """
        Append a module to a course.

        Adding content reopens every Completed enrollment of the course.

        Args:
            course_id: ID of the course
            title: Module title
            access: Caller's access to the course

        Returns:
            Created module domain entity

        Raises:
            ForbiddenError: If the caller cannot edit the course
            CourseNotFoundError: If the course is not found
            BadRequestError: If the title is empty
        """
        if not access.can_edit:
            raise ForbiddenError("Only instructors and admins can add modules")

        course_id_vo = CourseId(course_id)
        with self.uow:
            if not self.course_repository.find_by_id(course_id_vo):
                raise CourseNotFoundError(course_id)

            siblings = self.module_repository.find_by_course(course_id_vo)
            order_index = OrderIndexService.append(m.position for m in siblings)
            try:
                module = Module.create(course_id_vo, title, order_index)
            except ValidationError as e:
                raise BadRequestError(e.message) from e

            module = self.module_repository.save(module)
            self.progress_propagator.reopen_completed_enrollments(course_id_vo)
            self.uow.commit()

        logger.info(
            "module_created",
            module_id=module.id.value,
            course_id=course_id,
            order_index=module.order_index,
        )
        return module

    def update_module(
        self,
        module_id: int,
        access: CourseAccess,
        title: str | None = None,
        order_index: int | None = None,
    ) -> Module:
        """
        Rename and/or move a module within its course.

        Args:
            module_id: ID of the module
            access: Caller's access to the course
            title: New title, unchanged when None
            order_index: New position (1-based), unchanged when None

        Returns:
            Updated module domain entity

        Raises:
            ForbiddenError: If the caller cannot edit the course
            CourseModuleNotFoundError: If the module is not found
            BadRequestError: If the title is empty
            ConflictError: If order_index is outside 1..N
        """
        if not access.can_edit:
            raise ForbiddenError("Only instructors and admins can edit modules")

        module_id_vo = ModuleId(module_id)
        with self.uow:
            module = self.module_repository.find_by_id(module_id_vo)
            if not module:
                raise CourseModuleNotFoundError(module_id)

            if title is not None:
                try:
                    module.rename(title)
                except ValidationError as e:
                    raise BadRequestError(e.message) from e
                module = self.module_repository.save(module)

            if order_index is not None and order_index != module.order_index:
                siblings = [
                    m.position for m in self.module_repository.find_by_course(module.course_id)
                ]
                try:
                    next_state = OrderIndexService.move(siblings, module_id, order_index)
                except OrderIndexOutOfRangeError as e:
                    raise ConflictError(e.invariant) from e
                self.module_repository.update_order_indices(
                    OrderIndexService.changed_positions(siblings, next_state)
                )
                module.order_index = next_state[module_id]
                logger.info(
                    "module_moved",
                    module_id=module_id,
                    course_id=module.course_id.value,
                    order_index=order_index,
                )

            self.uow.commit()

        return module

    def delete_module(self, module_id: int, access: CourseAccess) -> None:
        """
        Delete a module with its lessons and close the gap in the course.

        Raises:
            ForbiddenError: If the caller cannot edit the course
            CourseModuleNotFoundError: If the module is not found
        """
        if not access.can_edit:
            raise ForbiddenError("Only instructors and admins can delete modules")

        module_id_vo = ModuleId(module_id)
        with self.uow:
            module = self.module_repository.find_by_id(module_id_vo)
            if not module:
                raise CourseModuleNotFoundError(module_id)

            siblings = [m.position for m in self.module_repository.find_by_course(module.course_id)]
            next_state = OrderIndexService.delete(siblings, module_id)
            self.module_repository.delete(module_id_vo)
            self.module_repository.update_order_indices(
                OrderIndexService.changed_positions(siblings, next_state)
            )
            self.uow.commit()

        logger.info("module_deleted", module_id=module_id, course_id=module.course_id.value)
