"""Protocol for Module repository in curriculum context."""

from typing import Protocol

from learnpath.domain.common.value_objects.ids import CourseId, ModuleId
from learnpath.domain.curriculum.entities.module import Module


class ModuleRepositoryProtocol(Protocol):
    """Protocol for Module repository operations in curriculum context."""

    def find_by_id(self, module_id: ModuleId) -> Module | None:
        """
        Find a module by ID.

        Args:
            module_id: The module ID

        Returns:
            Module entity if found, None otherwise
        """
        ...

    def find_by_course(self, course_id: CourseId) -> list[Module]:
        """
        Get the sibling group of modules of a course.

        Args:
            course_id: The course ID

        Returns:
            List of module entities ordered by order_index ASC
        """
        ...

    def save(self, module: Module) -> Module:
        """
        Save a module entity (create or update).

        Args:
            module: The module entity to save

        Returns:
            Saved module entity with database-generated values
        """
        ...

    def update_order_indices(self, positions: dict[int, int]) -> None:
        """
        Write new order indices.

        Args:
            positions: Mapping of module id to its new order_index
        """
        ...

    def delete(self, module_id: ModuleId) -> bool:
        """
        Delete a module together with its lessons.

        Args:
            module_id: The module ID

        Returns:
            True if deleted, False if not found
        """
        ...
