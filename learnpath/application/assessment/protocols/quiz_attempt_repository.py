"""Protocol for QuizAttempt repository in assessment context."""

from typing import Protocol

from learnpath.domain.assessment.entities.quiz_attempt import QuizAttempt
from learnpath.domain.common.value_objects.ids import LessonId, UserId


class QuizAttemptRepositoryProtocol(Protocol):
    """Protocol for QuizAttempt repository operations in assessment context."""

    def add(self, attempt: QuizAttempt) -> QuizAttempt:
        """
        Store a new attempt with its answer rows.

        Args:
            attempt: The attempt entity to store

        Returns:
            Stored attempt entity with database-generated values
        """
        ...

    def find_by_lesson(
        self, lesson_id: LessonId, user_id: UserId | None = None
    ) -> list[QuizAttempt]:
        """
        Get attempts for a quiz lesson.

        Args:
            lesson_id: The lesson ID
            user_id: Restrict to one user's attempts; None returns everyone's

        Returns:
            List of attempt entities ordered by completed_at DESC
        """
        ...

    def delete_by_user_and_lessons(self, user_id: UserId, lesson_ids: list[LessonId]) -> int:
        """
        Delete a user's attempts for the given lessons.

        Args:
            user_id: The user ID
            lesson_ids: The lesson IDs

        Returns:
            Number of deleted attempts
        """
        ...
