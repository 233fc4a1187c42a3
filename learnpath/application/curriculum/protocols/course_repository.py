"""Protocol for Course repository in curriculum context."""

from typing import Protocol

from learnpath.domain.common.value_objects.ids import CourseId
from learnpath.domain.curriculum.entities.course import Course


class CourseRepositoryProtocol(Protocol):
    """Protocol for Course repository operations in curriculum context."""

    def find_by_id(self, course_id: CourseId) -> Course | None:
        """
        Find a course by ID.

        Args:
            course_id: The course ID

        Returns:
            Course entity if found, None otherwise
        """
        ...
