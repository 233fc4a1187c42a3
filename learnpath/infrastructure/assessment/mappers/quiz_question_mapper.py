"""Mapper for QuizQuestion ORM ↔ Domain conversion."""

from learnpath.domain.assessment.entities.quiz_question import (
    QuestionType,
    QuizOption,
    QuizQuestion,
)
from learnpath.domain.common.value_objects import LessonId, QuizOptionId, QuizQuestionId
from learnpath.models import QuizOption as QuizOptionORM
from learnpath.models import QuizQuestion as QuizQuestionORM


class QuizQuestionMapper:
    """Mapper for QuizQuestion (with its options) ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: QuizQuestionORM) -> QuizQuestion:
        """Convert ORM model to domain entity."""
        question_id = QuizQuestionId(orm_model.id)
        return QuizQuestion.create_with_id(
            id=question_id,
            lesson_id=LessonId(orm_model.lesson_id),
            text=orm_model.question_text,
            order_index=orm_model.order_index,
            question_type=QuestionType(orm_model.question_type),
            options=[
                QuizOption.create_with_id(
                    id=QuizOptionId(option.id),
                    question_id=question_id,
                    text=option.option_text,
                    is_correct=option.is_correct,
                )
                for option in orm_model.options
            ],
        )

    def to_orm(
        self, domain_entity: QuizQuestion, orm_model: QuizQuestionORM | None = None
    ) -> QuizQuestionORM:
        """
        Convert domain entity to ORM model.

        On update the option collection is synchronized: options removed
        from the entity are orphaned (and deleted), transient ones are added.
        """
        if orm_model is None:
            return QuizQuestionORM(
                lesson_id=domain_entity.lesson_id.value,
                question_text=domain_entity.text,
                question_type=domain_entity.question_type.value,
                order_index=domain_entity.order_index,
                options=[
                    QuizOptionORM(option_text=o.text, is_correct=o.is_correct)
                    for o in domain_entity.options
                ],
            )

        # order_index is only written through update_order_indices
        orm_model.question_text = domain_entity.text
        orm_model.question_type = domain_entity.question_type.value

        existing = {o.id: o for o in orm_model.options}
        kept_ids = {o.id.value for o in domain_entity.options if not o.id.is_transient()}
        for option_id, option_orm in existing.items():
            if option_id not in kept_ids:
                orm_model.options.remove(option_orm)

        for option in domain_entity.options:
            if option.id.is_transient():
                orm_model.options.append(
                    QuizOptionORM(option_text=option.text, is_correct=option.is_correct)
                )
            else:
                option_orm = existing[option.id.value]
                option_orm.option_text = option.text
                option_orm.is_correct = option.is_correct
        return orm_model
