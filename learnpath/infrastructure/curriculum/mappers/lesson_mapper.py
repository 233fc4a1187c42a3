"""Mapper for Lesson ORM ↔ Domain conversion."""

from learnpath.domain.common.value_objects import LessonId, ModuleId
from learnpath.domain.curriculum.entities.lesson import Lesson, LessonType
from learnpath.models import Lesson as LessonORM


class LessonMapper:
    """Mapper for Lesson ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: LessonORM) -> Lesson:
        """Convert ORM model to domain entity."""
        return Lesson.create_with_id(
            id=LessonId(orm_model.id),
            module_id=ModuleId(orm_model.module_id),
            title=orm_model.title,
            lesson_type=LessonType(orm_model.lesson_type),
            order_index=orm_model.order_index,
            content=orm_model.content,
        )

    def to_orm(self, domain_entity: Lesson, orm_model: LessonORM | None = None) -> LessonORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # order_index is only written through update_order_indices
            orm_model.title = domain_entity.title
            orm_model.content = domain_entity.content
            orm_model.lesson_type = domain_entity.lesson_type.value
            return orm_model

        return LessonORM(
            module_id=domain_entity.module_id.value,
            title=domain_entity.title,
            content=domain_entity.content,
            lesson_type=domain_entity.lesson_type.value,
            order_index=domain_entity.order_index,
        )
