"""Protocol for QuizQuestion repository in assessment context."""

from typing import Protocol

from learnpath.domain.assessment.entities.quiz_question import QuizQuestion
from learnpath.domain.common.value_objects.ids import LessonId, QuizQuestionId


class QuizQuestionRepositoryProtocol(Protocol):
    """Protocol for QuizQuestion repository operations in assessment context."""

    def find_by_id(self, question_id: QuizQuestionId) -> QuizQuestion | None:
        """
        Find a question with its options.

        Args:
            question_id: The question ID

        Returns:
            QuizQuestion entity if found, None otherwise
        """
        ...

    def find_by_lesson(self, lesson_id: LessonId) -> list[QuizQuestion]:
        """
        Get the question bank of a quiz lesson.

        Args:
            lesson_id: The lesson ID

        Returns:
            List of question entities with options, ordered by order_index ASC
        """
        ...

    def save(self, question: QuizQuestion) -> QuizQuestion:
        """
        Save a question and synchronize its options.

        Options with a transient id are inserted, options missing from the
        entity are deleted, the rest are updated.

        Args:
            question: The question entity to save

        Returns:
            Saved question entity with database-generated values
        """
        ...

    def update_order_indices(self, positions: dict[int, int]) -> None:
        """
        Write new order indices.

        Args:
            positions: Mapping of question id to its new order_index
        """
        ...

    def delete(self, question_id: QuizQuestionId) -> bool:
        """
        Delete a question with its options.

        Args:
            question_id: The question ID

        Returns:
            True if deleted, False if not found
        """
        ...
