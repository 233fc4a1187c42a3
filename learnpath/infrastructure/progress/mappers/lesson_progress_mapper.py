"""Mapper for LessonProgress ORM ↔ Domain conversion."""

from learnpath.domain.common.value_objects import LessonId, LessonProgressId, UserId
from learnpath.domain.progress.entities.lesson_progress import LessonProgress
from learnpath.models import LessonProgress as LessonProgressORM


class LessonProgressMapper:
    """Mapper for LessonProgress ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: LessonProgressORM) -> LessonProgress:
        """Convert ORM model to domain entity."""
        return LessonProgress.create_with_id(
            id=LessonProgressId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            lesson_id=LessonId(orm_model.lesson_id),
            started_at=orm_model.started_at,
            completed_at=orm_model.completed_at,
            is_completed=orm_model.is_completed,
        )

    def to_orm(
        self, domain_entity: LessonProgress, orm_model: LessonProgressORM | None = None
    ) -> LessonProgressORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            orm_model.started_at = domain_entity.started_at
            orm_model.completed_at = domain_entity.completed_at
            orm_model.is_completed = domain_entity.is_completed
            return orm_model

        return LessonProgressORM(
            user_id=domain_entity.user_id.value,
            lesson_id=domain_entity.lesson_id.value,
            started_at=domain_entity.started_at,
            completed_at=domain_entity.completed_at,
            is_completed=domain_entity.is_completed,
        )
