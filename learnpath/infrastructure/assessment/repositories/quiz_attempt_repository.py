"""Repository for QuizAttempt domain entities."""

from sqlalchemy import delete, select
from sqlalchemy.orm import Session, selectinload

from learnpath.domain.assessment.entities.quiz_attempt import QuizAttempt
from learnpath.domain.common.value_objects.ids import LessonId, UserId
from learnpath.infrastructure.assessment.mappers.quiz_attempt_mapper import QuizAttemptMapper
from learnpath.models import QuizAttempt as QuizAttemptORM


class QuizAttemptRepository:
    """Repository for QuizAttempt domain entities, loaded with their answer rows."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = QuizAttemptMapper()

    def add(self, attempt: QuizAttempt) -> QuizAttempt:
        """
        Store a new attempt with its answer rows.

        Args:
            attempt: The attempt entity to store

        Returns:
            Stored attempt entity with database-generated values
        """
        if not attempt.id.is_transient():
            raise ValueError(f"QuizAttempt {attempt.id.value} is already stored")

        orm_model = self.mapper.to_orm(attempt)
        self.db.add(orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)

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
        stmt = (
            select(QuizAttemptORM)
            .options(selectinload(QuizAttemptORM.answers))
            .where(QuizAttemptORM.lesson_id == lesson_id.value)
            .order_by(QuizAttemptORM.completed_at.desc(), QuizAttemptORM.id.desc())
        )
        if user_id is not None:
            stmt = stmt.where(QuizAttemptORM.user_id == user_id.value)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def delete_by_user_and_lessons(self, user_id: UserId, lesson_ids: list[LessonId]) -> int:
        """
        Delete a user's attempts for the given lessons; answer rows cascade.

        Returns:
            Number of deleted attempts
        """
        if not lesson_ids:
            return 0
        stmt = delete(QuizAttemptORM).where(
            QuizAttemptORM.user_id == user_id.value,
            QuizAttemptORM.lesson_id.in_([lesson_id.value for lesson_id in lesson_ids]),
        )
        result = self.db.execute(stmt)
        self.db.flush()
        return getattr(result, "rowcount", 0) or 0
