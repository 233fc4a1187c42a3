"""Module entity: an ordered section of a course."""

from dataclasses import dataclass

from learnpath.domain.common.entity import Entity
from learnpath.domain.common.exceptions import ValidationError
from learnpath.domain.common.value_objects import CourseId, ModuleId, SiblingPosition


@dataclass
class Module(Entity[ModuleId]):
    """
    Module inside a course.

    Business Rules:
    - Title cannot be empty
    - order_index is unique and contiguous (1..N) among the course's modules;
      it is only changed through the order index service
    """

    id: ModuleId
    course_id: CourseId
    title: str
    order_index: int

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.title or not self.title.strip():
            raise ValidationError("Module title cannot be empty", field="title")
        if self.order_index < 1:
            raise ValidationError(
                "Order index must be positive", field="order_index", value=self.order_index
            )

    def rename(self, title: str) -> None:
        """
        Update the module title.

        Raises:
            ValidationError: If title is empty
        """
        if not title or not title.strip():
            raise ValidationError("Module title cannot be empty", field="title")
        self.title = title.strip()

    @property
    def position(self) -> SiblingPosition:
        return SiblingPosition(item_id=self.id.value, order_index=self.order_index)

    @classmethod
    def create(cls, course_id: CourseId, title: str, order_index: int) -> "Module":
        """Create a new module (ID will be 0 until persisted)."""
        return cls(
            id=ModuleId.generate(),
            course_id=course_id,
            title=title.strip(),
            order_index=order_index,
        )

    @classmethod
    def create_with_id(
        cls, id: ModuleId, course_id: CourseId, title: str, order_index: int
    ) -> "Module":
        """Reconstitute a module from persistence."""
        return cls(id=id, course_id=course_id, title=title, order_index=order_index)
