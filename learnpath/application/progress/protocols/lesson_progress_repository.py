"""Protocol for LessonProgress repository in progress context."""

from typing import Protocol

from learnpath.domain.common.value_objects.ids import CourseId, LessonId, UserId
from learnpath.domain.progress.entities.lesson_progress import LessonProgress


class LessonProgressRepositoryProtocol(Protocol):
    """Protocol for LessonProgress repository operations in progress context."""

    def find_by_user_and_lesson(
        self, user_id: UserId, lesson_id: LessonId
    ) -> LessonProgress | None:
        """
        Find the progress record of a user on a lesson.

        Args:
            user_id: The user ID
            lesson_id: The lesson ID

        Returns:
            LessonProgress entity if found, None otherwise
        """
        ...

    def find_by_user_and_course(self, user_id: UserId, course_id: CourseId) -> list[LessonProgress]:
        """
        Get a user's progress records for lessons of a course.

        Args:
            user_id: The user ID
            course_id: The course ID

        Returns:
            List of progress entities
        """
        ...

    def count_completed_in_course(self, user_id: UserId, course_id: CourseId) -> int:
        """
        Count a user's completed lessons in a course.

        Args:
            user_id: The user ID
            course_id: The course ID

        Returns:
            Count of completed progress records
        """
        ...

    def save(self, progress: LessonProgress) -> LessonProgress:
        """
        Save a progress entity (create or update).

        Args:
            progress: The progress entity to save

        Returns:
            Saved progress entity with database-generated values
        """
        ...

    def delete_by_user_and_course(self, user_id: UserId, course_id: CourseId) -> int:
        """
        Delete a user's progress records for lessons of a course.

        Args:
            user_id: The user ID
            course_id: The course ID

        Returns:
            Number of deleted records
        """
        ...
