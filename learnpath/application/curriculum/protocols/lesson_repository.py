"""Protocol for Lesson repository in curriculum context."""

from typing import Protocol

from learnpath.domain.common.value_objects.ids import CourseId, LessonId, ModuleId
from learnpath.domain.curriculum.entities.lesson import Lesson


class LessonRepositoryProtocol(Protocol):
    """Protocol for Lesson repository operations in curriculum context."""

    def find_by_id(self, lesson_id: LessonId) -> Lesson | None:
        """
        Find a lesson by ID.

        Args:
            lesson_id: The lesson ID

        Returns:
            Lesson entity if found, None otherwise
        """
        ...

    def find_by_module(self, module_id: ModuleId) -> list[Lesson]:
        """
        Get the sibling group of lessons of a module.

        Args:
            module_id: The module ID

        Returns:
            List of lesson entities ordered by order_index ASC
        """
        ...

    def find_by_course(self, course_id: CourseId) -> list[Lesson]:
        """
        Get all lessons of a course.

        Args:
            course_id: The course ID

        Returns:
            List of lesson entities ordered by module order, then lesson order
        """
        ...

    def find_course_id(self, lesson_id: LessonId) -> CourseId | None:
        """
        Resolve the course a lesson belongs to.

        Args:
            lesson_id: The lesson ID

        Returns:
            The owning course ID, or None if the lesson does not exist
        """
        ...

    def count_by_course(self, course_id: CourseId) -> int:
        """
        Count lessons across all modules of a course.

        Args:
            course_id: The course ID

        Returns:
            Count of lessons
        """
        ...

    def save(self, lesson: Lesson) -> Lesson:
        """
        Save a lesson entity (create or update).

        Args:
            lesson: The lesson entity to save

        Returns:
            Saved lesson entity with database-generated values
        """
        ...

    def update_order_indices(self, positions: dict[int, int]) -> None:
        """
        Write new order indices.

        Args:
            positions: Mapping of lesson id to its new order_index
        """
        ...

    def delete(self, lesson_id: LessonId) -> bool:
        """
        Delete a lesson.

        Args:
            lesson_id: The lesson ID

        Returns:
            True if deleted, False if not found
        """
        ...
