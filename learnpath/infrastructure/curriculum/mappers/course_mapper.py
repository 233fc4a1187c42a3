"""Mapper for Course ORM ↔ Domain conversion."""

from learnpath.domain.common.value_objects import CourseId, UserId
from learnpath.domain.curriculum.entities.course import Course
from learnpath.models import Course as CourseORM


class CourseMapper:
    """Mapper for Course ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: CourseORM) -> Course:
        """Convert ORM model to domain entity."""
        return Course.create_with_id(
            id=CourseId(orm_model.id),
            title=orm_model.title,
            instructor_id=UserId(orm_model.instructor_id),
            description=orm_model.description,
            created_at=orm_model.created_at,
        )
