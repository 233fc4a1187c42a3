"""Repository for QuizQuestion domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from learnpath.domain.assessment.entities.quiz_question import QuizQuestion
from learnpath.domain.common.value_objects.ids import LessonId, QuizQuestionId
from learnpath.infrastructure.assessment.mappers.quiz_question_mapper import QuizQuestionMapper
from learnpath.models import QuizQuestion as QuizQuestionORM


class QuizQuestionRepository:
    """Repository for QuizQuestion domain entities, loaded with their options."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = QuizQuestionMapper()

    def find_by_id(self, question_id: QuizQuestionId) -> QuizQuestion | None:
        stmt = (
            select(QuizQuestionORM)
            .options(selectinload(QuizQuestionORM.options))
            .where(QuizQuestionORM.id == question_id.value)
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_lesson(self, lesson_id: LessonId) -> list[QuizQuestion]:
        """
        Get the question bank of a quiz lesson.

        Args:
            lesson_id: The lesson ID

        Returns:
            List of question entities with options, ordered by order_index ASC
        """
        stmt = (
            select(QuizQuestionORM)
            .options(selectinload(QuizQuestionORM.options))
            .where(QuizQuestionORM.lesson_id == lesson_id.value)
            .order_by(QuizQuestionORM.order_index, QuizQuestionORM.id)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, question: QuizQuestion) -> QuizQuestion:
        """
        Save a question and synchronize its options.

        Args:
            question: The question entity to save

        Returns:
            Saved question entity with database-generated values
        """
        if question.id.is_transient():
            orm_model = self.mapper.to_orm(question)
            self.db.add(orm_model)
            self.db.flush()
            return self.mapper.to_domain(orm_model)

        orm_model = self.db.get(QuizQuestionORM, question.id.value)
        if not orm_model:
            raise ValueError(f"QuizQuestion {question.id.value} not found")
        self.mapper.to_orm(question, orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)

    def update_order_indices(self, positions: dict[int, int]) -> None:
        if not positions:
            return
        stmt = select(QuizQuestionORM).where(QuizQuestionORM.id.in_(positions.keys()))
        for orm_model in self.db.execute(stmt).scalars():
            orm_model.order_index = positions[orm_model.id]
        self.db.flush()

    def delete(self, question_id: QuizQuestionId) -> bool:
        orm_model = self.db.get(QuizQuestionORM, question_id.value)
        if not orm_model:
            return False

        self.db.delete(orm_model)
        self.db.flush()
        return True
