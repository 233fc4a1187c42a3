"""Mapper for Enrollment ORM ↔ Domain conversion."""

from learnpath.domain.common.value_objects import CourseId, EnrollmentId, UserId
from learnpath.domain.progress.entities.enrollment import Enrollment, EnrollmentStatus
from learnpath.models import Enrollment as EnrollmentORM


class EnrollmentMapper:
    """Mapper for Enrollment ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: EnrollmentORM) -> Enrollment:
        """Convert ORM model to domain entity."""
        return Enrollment.create_with_id(
            id=EnrollmentId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            course_id=CourseId(orm_model.course_id),
            enrolled_at=orm_model.enrolled_at,
            status=EnrollmentStatus(orm_model.status),
            completion_date=orm_model.completion_date,
        )

    def to_orm(
        self, domain_entity: Enrollment, orm_model: EnrollmentORM | None = None
    ) -> EnrollmentORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            orm_model.status = domain_entity.status.value
            orm_model.completion_date = domain_entity.completion_date
            return orm_model

        return EnrollmentORM(
            user_id=domain_entity.user_id.value,
            course_id=domain_entity.course_id.value,
            enrolled_at=domain_entity.enrolled_at,
            status=domain_entity.status.value,
            completion_date=domain_entity.completion_date,
        )
