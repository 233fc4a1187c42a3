"""Lesson entity: the unit of completion."""

from dataclasses import dataclass
from enum import Enum

from learnpath.domain.common.entity import Entity
from learnpath.domain.common.exceptions import ValidationError
from learnpath.domain.common.value_objects import LessonId, ModuleId, SiblingPosition


class LessonType(str, Enum):
    """Lesson content type."""

    TEXT = "Text"
    VIDEO = "Video"
    QUIZ = "Quiz"


@dataclass
class Lesson(Entity[LessonId]):
    """
    Lesson inside a module.

    Business Rules:
    - Title cannot be empty
    - order_index is unique and contiguous (1..N) among the module's lessons
    - Only QUIZ lessons carry a question bank
    """

    id: LessonId
    module_id: ModuleId
    title: str
    lesson_type: LessonType
    order_index: int
    content: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.title or not self.title.strip():
            raise ValidationError("Lesson title cannot be empty", field="title")
        if self.order_index < 1:
            raise ValidationError(
                "Order index must be positive", field="order_index", value=self.order_index
            )

    def is_quiz(self) -> bool:
        return self.lesson_type is LessonType.QUIZ

    def update_content(self, title: str, content: str | None) -> None:
        """
        Update title and body.

        Raises:
            ValidationError: If title is empty
        """
        if not title or not title.strip():
            raise ValidationError("Lesson title cannot be empty", field="title")
        self.title = title.strip()
        self.content = content

    def change_type(self, lesson_type: LessonType) -> None:
        self.lesson_type = lesson_type

    @property
    def position(self) -> SiblingPosition:
        return SiblingPosition(item_id=self.id.value, order_index=self.order_index)

    @classmethod
    def create(
        cls,
        module_id: ModuleId,
        title: str,
        lesson_type: LessonType,
        order_index: int,
        content: str | None = None,
    ) -> "Lesson":
        """Create a new lesson (ID will be 0 until persisted)."""
        return cls(
            id=LessonId.generate(),
            module_id=module_id,
            title=title.strip(),
            lesson_type=lesson_type,
            order_index=order_index,
            content=content,
        )

    @classmethod
    def create_with_id(
        cls,
        id: LessonId,
        module_id: ModuleId,
        title: str,
        lesson_type: LessonType,
        order_index: int,
        content: str | None,
    ) -> "Lesson":
        """Reconstitute a lesson from persistence."""
        return cls(
            id=id,
            module_id=module_id,
            title=title,
            lesson_type=lesson_type,
            order_index=order_index,
            content=content,
        )
