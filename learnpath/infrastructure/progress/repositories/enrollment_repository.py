"""Repository for Enrollment domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from learnpath.domain.common.value_objects.ids import CourseId, EnrollmentId, UserId
from learnpath.domain.progress.entities.enrollment import Enrollment, EnrollmentStatus
from learnpath.infrastructure.progress.mappers.enrollment_mapper import EnrollmentMapper
from learnpath.models import Enrollment as EnrollmentORM


class EnrollmentRepository:
    """Repository for Enrollment domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = EnrollmentMapper()

    def find_by_user_and_course(self, user_id: UserId, course_id: CourseId) -> Enrollment | None:
        stmt = select(EnrollmentORM).where(
            EnrollmentORM.user_id == user_id.value,
            EnrollmentORM.course_id == course_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_user(self, user_id: UserId) -> list[Enrollment]:
        stmt = (
            select(EnrollmentORM)
            .where(EnrollmentORM.user_id == user_id.value)
            .order_by(EnrollmentORM.enrolled_at, EnrollmentORM.id)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_completed_by_course(self, course_id: CourseId) -> list[Enrollment]:
        stmt = select(EnrollmentORM).where(
            EnrollmentORM.course_id == course_id.value,
            EnrollmentORM.status == EnrollmentStatus.COMPLETED.value,
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, enrollment: Enrollment) -> Enrollment:
        """
        Save an enrollment entity (create or update).

        Args:
            enrollment: The enrollment entity to save

        Returns:
            Saved enrollment entity with database-generated values
        """
        if enrollment.id.is_transient():
            orm_model = self.mapper.to_orm(enrollment)
            self.db.add(orm_model)
            self.db.flush()
            return self.mapper.to_domain(orm_model)

        orm_model = self.db.get(EnrollmentORM, enrollment.id.value)
        if not orm_model:
            raise ValueError(f"Enrollment {enrollment.id.value} not found")
        self.mapper.to_orm(enrollment, orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)

    def delete(self, enrollment_id: EnrollmentId) -> bool:
        orm_model = self.db.get(EnrollmentORM, enrollment_id.value)
        if not orm_model:
            return False

        self.db.delete(orm_model)
        self.db.flush()
        return True
