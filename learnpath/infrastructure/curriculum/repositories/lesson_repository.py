"""Repository for Lesson domain entities."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from learnpath.domain.common.value_objects.ids import CourseId, LessonId, ModuleId
from learnpath.domain.curriculum.entities.lesson import Lesson
from learnpath.infrastructure.curriculum.mappers.lesson_mapper import LessonMapper
from learnpath.models import Lesson as LessonORM
from learnpath.models import Module as ModuleORM


class LessonRepository:
    """Repository for Lesson domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = LessonMapper()

    def find_by_id(self, lesson_id: LessonId) -> Lesson | None:
        stmt = select(LessonORM).where(LessonORM.id == lesson_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_module(self, module_id: ModuleId) -> list[Lesson]:
        """
        Get the sibling group of lessons of a module.

        Args:
            module_id: The module ID

        Returns:
            List of lesson entities ordered by order_index ASC
        """
        stmt = (
            select(LessonORM)
            .where(LessonORM.module_id == module_id.value)
            .order_by(LessonORM.order_index, LessonORM.id)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_course(self, course_id: CourseId) -> list[Lesson]:
        """
        Get all lessons of a course.

        Args:
            course_id: The course ID

        Returns:
            List of lesson entities ordered by module order, then lesson order
        """
        stmt = (
            select(LessonORM)
            .join(ModuleORM, LessonORM.module_id == ModuleORM.id)
            .where(ModuleORM.course_id == course_id.value)
            .order_by(ModuleORM.order_index, LessonORM.order_index, LessonORM.id)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_course_id(self, lesson_id: LessonId) -> CourseId | None:
        stmt = (
            select(ModuleORM.course_id)
            .join(LessonORM, LessonORM.module_id == ModuleORM.id)
            .where(LessonORM.id == lesson_id.value)
        )
        course_id = self.db.execute(stmt).scalar_one_or_none()
        return CourseId(course_id) if course_id is not None else None

    def count_by_course(self, course_id: CourseId) -> int:
        stmt = (
            select(func.count(LessonORM.id))
            .join(ModuleORM, LessonORM.module_id == ModuleORM.id)
            .where(ModuleORM.course_id == course_id.value)
        )
        return self.db.execute(stmt).scalar() or 0

    def save(self, lesson: Lesson) -> Lesson:
        """
        Save a lesson entity (create or update).

        Args:
            lesson: The lesson entity to save

        Returns:
            Saved lesson entity with database-generated values
        """
        if lesson.id.is_transient():
            orm_model = self.mapper.to_orm(lesson)
            self.db.add(orm_model)
            self.db.flush()
            return self.mapper.to_domain(orm_model)

        orm_model = self.db.get(LessonORM, lesson.id.value)
        if not orm_model:
            raise ValueError(f"Lesson {lesson.id.value} not found")
        self.mapper.to_orm(lesson, orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)

    def update_order_indices(self, positions: dict[int, int]) -> None:
        if not positions:
            return
        stmt = select(LessonORM).where(LessonORM.id.in_(positions.keys()))
        for orm_model in self.db.execute(stmt).scalars():
            orm_model.order_index = positions[orm_model.id]
        self.db.flush()

    def delete(self, lesson_id: LessonId) -> bool:
        """
        Delete a lesson; progress and quiz data cascade in the database.

        Args:
            lesson_id: The lesson ID

        Returns:
            True if deleted, False if not found
        """
        orm_model = self.db.get(LessonORM, lesson_id.value)
        if not orm_model:
            return False

        self.db.delete(orm_model)
        self.db.flush()
        return True
