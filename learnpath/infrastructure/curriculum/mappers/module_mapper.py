"""Mapper for Module ORM ↔ Domain conversion."""

from learnpath.domain.common.value_objects import CourseId, ModuleId
from learnpath.domain.curriculum.entities.module import Module
from learnpath.models import Module as ModuleORM


class ModuleMapper:
    """Mapper for Module ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: ModuleORM) -> Module:
        """Convert ORM model to domain entity."""
        return Module.create_with_id(
            id=ModuleId(orm_model.id),
            course_id=CourseId(orm_model.course_id),
            title=orm_model.title,
            order_index=orm_model.order_index,
        )

    def to_orm(self, domain_entity: Module, orm_model: ModuleORM | None = None) -> ModuleORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # order_index is only written through update_order_indices
            orm_model.title = domain_entity.title
            return orm_model

        return ModuleORM(
            course_id=domain_entity.course_id.value,
            title=domain_entity.title,
            order_index=domain_entity.order_index,
        )
