"""Repository for Course domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from learnpath.domain.common.value_objects.ids import CourseId
from learnpath.domain.curriculum.entities.course import Course
from learnpath.infrastructure.curriculum.mappers.course_mapper import CourseMapper
from learnpath.models import Course as CourseORM


class CourseRepository:
    """Repository for Course domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = CourseMapper()

    def find_by_id(self, course_id: CourseId) -> Course | None:
        stmt = select(CourseORM).where(CourseORM.id == course_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None
