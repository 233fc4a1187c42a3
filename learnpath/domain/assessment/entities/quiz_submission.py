"""Quiz submission value object."""

from dataclasses import dataclass, field

from learnpath.domain.common.value_object import ValueObject
from learnpath.domain.common.value_objects import LessonId


@dataclass(frozen=True)
class QuizSubmission(ValueObject):
    """
    Answers a learner submitted for a quiz lesson.

    ``selections`` maps a question id to the option ids picked for it, in
    the order they were submitted. Questions missing from the mapping, or
    mapped to an empty tuple, are unanswered.
    """

    lesson_id: LessonId
    selections: dict[int, tuple[int, ...]] = field(default_factory=dict)

    def __hash__(self) -> int:
        return hash((self.lesson_id, tuple(sorted(self.selections.items()))))

    def selected_for(self, question_id: int) -> tuple[int, ...]:
        return self.selections.get(question_id, ())
