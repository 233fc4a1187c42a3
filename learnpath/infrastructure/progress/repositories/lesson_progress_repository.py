"""Repository for LessonProgress domain entities."""

from sqlalchemy import Select, delete, func, select
from sqlalchemy.orm import Session

from learnpath.domain.common.value_objects.ids import CourseId, LessonId, UserId
from learnpath.domain.progress.entities.lesson_progress import LessonProgress
from learnpath.infrastructure.progress.mappers.lesson_progress_mapper import LessonProgressMapper
from learnpath.models import Lesson as LessonORM
from learnpath.models import LessonProgress as LessonProgressORM
from learnpath.models import Module as ModuleORM


class LessonProgressRepository:
    """Repository for LessonProgress domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = LessonProgressMapper()

    def find_by_user_and_lesson(
        self, user_id: UserId, lesson_id: LessonId
    ) -> LessonProgress | None:
        stmt = select(LessonProgressORM).where(
            LessonProgressORM.user_id == user_id.value,
            LessonProgressORM.lesson_id == lesson_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_user_and_course(self, user_id: UserId, course_id: CourseId) -> list[LessonProgress]:
        stmt = (
            select(LessonProgressORM)
            .where(
                LessonProgressORM.user_id == user_id.value,
                LessonProgressORM.lesson_id.in_(self._course_lesson_ids(course_id)),
            )
            .order_by(LessonProgressORM.id)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def count_completed_in_course(self, user_id: UserId, course_id: CourseId) -> int:
        """
        Count a user's completed lessons in a course.

        Args:
            user_id: The user ID
            course_id: The course ID

        Returns:
            Count of completed progress records
        """
        stmt = select(func.count(LessonProgressORM.id)).where(
            LessonProgressORM.user_id == user_id.value,
            LessonProgressORM.is_completed.is_(True),
            LessonProgressORM.lesson_id.in_(self._course_lesson_ids(course_id)),
        )
        return self.db.execute(stmt).scalar() or 0

    def save(self, progress: LessonProgress) -> LessonProgress:
        """
        Save a progress entity (create or update).

        Args:
            progress: The progress entity to save

        Returns:
            Saved progress entity with database-generated values
        """
        if progress.id.is_transient():
            orm_model = self.mapper.to_orm(progress)
            self.db.add(orm_model)
            self.db.flush()
            return self.mapper.to_domain(orm_model)

        orm_model = self.db.get(LessonProgressORM, progress.id.value)
        if not orm_model:
            raise ValueError(f"LessonProgress {progress.id.value} not found")
        self.mapper.to_orm(progress, orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)

    def delete_by_user_and_course(self, user_id: UserId, course_id: CourseId) -> int:
        stmt = delete(LessonProgressORM).where(
            LessonProgressORM.user_id == user_id.value,
            LessonProgressORM.lesson_id.in_(self._course_lesson_ids(course_id)),
        )
        result = self.db.execute(stmt)
        self.db.flush()
        return getattr(result, "rowcount", 0) or 0

    @staticmethod
    def _course_lesson_ids(course_id: CourseId) -> Select[tuple[int]]:
        return (
            select(LessonORM.id)
            .join(ModuleORM, LessonORM.module_id == ModuleORM.id)
            .where(ModuleORM.course_id == course_id.value)
        )
