"""Course entity."""

from dataclasses import dataclass
from datetime import datetime

from learnpath.domain.common.entity import Entity
from learnpath.domain.common.exceptions import ValidationError
from learnpath.domain.common.value_objects.ids import CourseId, UserId


@dataclass
class Course(Entity[CourseId]):
    """
    Course taught by an instructor.

    Only the fields the progress and ordering logic reads are modelled here;
    catalogue data lives with the request layer.
    """

    id: CourseId
    title: str
    instructor_id: UserId
    description: str | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.title or not self.title.strip():
            raise ValidationError("Course title cannot be empty", field="title")

    def is_taught_by(self, user_id: UserId) -> bool:
        """Check whether the user is the course instructor."""
        return self.instructor_id == user_id

    @classmethod
    def create_with_id(
        cls,
        id: CourseId,
        title: str,
        instructor_id: UserId,
        description: str | None,
        created_at: datetime | None,
    ) -> "Course":
        """Reconstitute a course from persistence."""
        return cls(
            id=id,
            title=title,
            instructor_id=instructor_id,
            description=description,
            created_at=created_at,
        )
