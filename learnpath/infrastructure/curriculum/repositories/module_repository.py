"""Repository for Module domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from learnpath.domain.common.value_objects.ids import CourseId, ModuleId
from learnpath.domain.curriculum.entities.module import Module
from learnpath.infrastructure.curriculum.mappers.module_mapper import ModuleMapper
from learnpath.models import Module as ModuleORM


class ModuleRepository:
    """Repository for Module domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ModuleMapper()

    def find_by_id(self, module_id: ModuleId) -> Module | None:
        stmt = select(ModuleORM).where(ModuleORM.id == module_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_course(self, course_id: CourseId) -> list[Module]:
        """
        Get the sibling group of modules of a course.

        Args:
            course_id: The course ID

        Returns:
            List of module entities ordered by order_index ASC
        """
        stmt = (
            select(ModuleORM)
            .where(ModuleORM.course_id == course_id.value)
            .order_by(ModuleORM.order_index, ModuleORM.id)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, module: Module) -> Module:
        """
        Save a module entity (create or update).

        Args:
            module: The module entity to save

        Returns:
            Saved module entity with database-generated values
        """
        if module.id.is_transient():
            orm_model = self.mapper.to_orm(module)
            self.db.add(orm_model)
            self.db.flush()
            return self.mapper.to_domain(orm_model)

        orm_model = self.db.get(ModuleORM, module.id.value)
        if not orm_model:
            raise ValueError(f"Module {module.id.value} not found")
        self.mapper.to_orm(module, orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)

    def update_order_indices(self, positions: dict[int, int]) -> None:
        if not positions:
            return
        stmt = select(ModuleORM).where(ModuleORM.id.in_(positions.keys()))
        for orm_model in self.db.execute(stmt).scalars():
            orm_model.order_index = positions[orm_model.id]
        self.db.flush()

    def delete(self, module_id: ModuleId) -> bool:
        """
        Delete a module; lessons, progress and quiz data cascade in the database.

        Args:
            module_id: The module ID

        Returns:
            True if deleted, False if not found
        """
        orm_model = self.db.get(ModuleORM, module_id.value)
        if not orm_model:
            return False

        self.db.delete(orm_model)
        self.db.flush()
        return True
