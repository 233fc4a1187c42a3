"""Protocol for Enrollment repository in progress context."""

from typing import Protocol

from learnpath.domain.common.value_objects.ids import CourseId, EnrollmentId, UserId
from learnpath.domain.progress.entities.enrollment import Enrollment


class EnrollmentRepositoryProtocol(Protocol):
    """Protocol for Enrollment repository operations in progress context."""

    def find_by_user_and_course(self, user_id: UserId, course_id: CourseId) -> Enrollment | None:
        """
        Find the enrollment of a user in a course.

        Args:
            user_id: The user ID
            course_id: The course ID

        Returns:
            Enrollment entity if found, None otherwise
        """
        ...

    def find_by_user(self, user_id: UserId) -> list[Enrollment]:
        """
        Get all enrollments of a user.

        Args:
            user_id: The user ID

        Returns:
            List of enrollment entities ordered by enrolled_at ASC
        """
        ...

    def find_completed_by_course(self, course_id: CourseId) -> list[Enrollment]:
        """
        Get every Completed enrollment of a course, for all users.

        Args:
            course_id: The course ID

        Returns:
            List of enrollment entities
        """
        ...

    def save(self, enrollment: Enrollment) -> Enrollment:
        """
        Save an enrollment entity (create or update).

        Args:
            enrollment: The enrollment entity to save

        Returns:
            Saved enrollment entity with database-generated values
        """
        ...

    def delete(self, enrollment_id: EnrollmentId) -> bool:
        """
        Delete an enrollment.

        Args:
            enrollment_id: The enrollment ID

        Returns:
            True if deleted, False if not found
        """
        ...
