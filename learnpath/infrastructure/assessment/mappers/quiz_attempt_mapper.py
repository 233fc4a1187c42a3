"""Mapper for QuizAttempt ORM ↔ Domain conversion."""

from learnpath.domain.assessment.entities.quiz_attempt import QuizAnswer, QuizAttempt
from learnpath.domain.common.value_objects import (
    LessonId,
    QuizAttemptId,
    QuizOptionId,
    QuizQuestionId,
    UserId,
)
from learnpath.models import QuizAnswer as QuizAnswerORM
from learnpath.models import QuizAttempt as QuizAttemptORM


class QuizAttemptMapper:
    """Mapper for QuizAttempt (with its answer rows) ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: QuizAttemptORM) -> QuizAttempt:
        """Convert ORM model to domain entity."""
        return QuizAttempt.create_with_id(
            id=QuizAttemptId(orm_model.id),
            lesson_id=LessonId(orm_model.lesson_id),
            user_id=UserId(orm_model.user_id),
            started_at=orm_model.started_at,
            completed_at=orm_model.completed_at,
            score=orm_model.score,
            total_questions=orm_model.total_questions,
            passed=orm_model.passed,
            answers=[
                QuizAnswer(
                    question_id=QuizQuestionId(answer.question_id),
                    selected_option_id=(
                        QuizOptionId(answer.selected_option_id)
                        if answer.selected_option_id is not None
                        else None
                    ),
                    is_correct=answer.is_correct,
                )
                for answer in orm_model.answers
            ],
        )

    def to_orm(self, domain_entity: QuizAttempt) -> QuizAttemptORM:
        """Convert a new domain entity to an ORM model. Attempts are never updated."""
        return QuizAttemptORM(
            lesson_id=domain_entity.lesson_id.value,
            user_id=domain_entity.user_id.value,
            started_at=domain_entity.started_at,
            completed_at=domain_entity.completed_at,
            score=domain_entity.score,
            total_questions=domain_entity.total_questions,
            passed=domain_entity.passed,
            answers=[
                QuizAnswerORM(
                    question_id=answer.question_id.value,
                    selected_option_id=(
                        answer.selected_option_id.value
                        if answer.selected_option_id is not None
                        else None
                    ),
                    is_correct=answer.is_correct,
                )
                for answer in domain_entity.answers
            ],
        )
