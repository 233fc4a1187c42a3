"""Quiz question entity with its option bank."""

from dataclasses import dataclass, field
from enum import Enum

from learnpath.domain.common.entity import Entity
from learnpath.domain.common.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    ValidationError,
)
from learnpath.domain.common.value_objects import (
    LessonId,
    QuizOptionId,
    QuizQuestionId,
    SiblingPosition,
)

MIN_OPTIONS_PER_QUESTION = 2
DEFAULT_QUESTION_TEXT = "New Question"
DEFAULT_OPTION_TEXT = "New Option"


class QuestionType(str, Enum):
    """How many options a correct answer consists of."""

    SINGLE_CHOICE = "SingleChoice"
    MULTIPLE_CHOICE = "MultipleChoice"


@dataclass
class QuizOption(Entity[QuizOptionId]):
    """One selectable answer of a question."""

    id: QuizOptionId
    question_id: QuizQuestionId
    text: str
    is_correct: bool = False

    @classmethod
    def create(
        cls, question_id: QuizQuestionId, text: str | None, is_correct: bool
    ) -> "QuizOption":
        """Create a new option (ID will be 0 until persisted)."""
        return cls(
            id=QuizOptionId.generate(),
            question_id=question_id,
            text=(text or DEFAULT_OPTION_TEXT).strip(),
            is_correct=is_correct,
        )

    @classmethod
    def create_with_id(
        cls, id: QuizOptionId, question_id: QuizQuestionId, text: str, is_correct: bool
    ) -> "QuizOption":
        """Reconstitute an option from persistence."""
        return cls(id=id, question_id=question_id, text=text, is_correct=is_correct)


@dataclass
class QuizQuestion(Entity[QuizQuestionId]):
    """
    Question of a quiz lesson, owning its options.

    Business Rules:
    - order_index is unique and contiguous (1..N) among the lesson's questions
    - An option cannot be deleted when it would leave fewer than
      MIN_OPTIONS_PER_QUESTION options
    - The last correct option cannot be deleted or marked incorrect
    - A SINGLE_CHOICE question has at most one correct option; marking an
      option correct clears the others
    - Toggling correctness is only allowed on MULTIPLE_CHOICE questions
    """

    id: QuizQuestionId
    lesson_id: LessonId
    text: str
    order_index: int
    question_type: QuestionType = QuestionType.SINGLE_CHOICE
    options: list[QuizOption] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.text or not self.text.strip():
            raise ValidationError("Question text cannot be empty", field="text")
        if self.order_index < 1:
            raise ValidationError(
                "Order index must be positive", field="order_index", value=self.order_index
            )

    @property
    def position(self) -> SiblingPosition:
        return SiblingPosition(item_id=self.id.value, order_index=self.order_index)

    @property
    def is_single_choice(self) -> bool:
        return self.question_type is QuestionType.SINGLE_CHOICE

    def correct_options(self) -> list[QuizOption]:
        return [o for o in self.options if o.is_correct]

    def correct_option_ids(self) -> set[int]:
        return {o.id.value for o in self.options if o.is_correct}

    def option_ids(self) -> set[int]:
        return {o.id.value for o in self.options}

    def get_option(self, option_id: QuizOptionId) -> QuizOption:
        """
        Look up one of this question's options.

        Raises:
            EntityNotFoundError: If the option does not belong to this question
        """
        for option in self.options:
            if option.id == option_id:
                return option
        raise EntityNotFoundError("QuizOption", option_id.value)

    def update_text(self, text: str) -> None:
        if not text or not text.strip():
            raise ValidationError("Question text cannot be empty", field="text")
        self.text = text.strip()

    def add_option(self, text: str | None, is_correct: bool = False) -> QuizOption:
        """Append a new option; a correct option on a single-choice question is exclusive."""
        if is_correct and self.is_single_choice:
            self._clear_correct()
        option = QuizOption.create(question_id=self.id, text=text, is_correct=is_correct)
        self.options.append(option)
        return option

    def update_option(
        self, option_id: QuizOptionId, text: str | None, is_correct: bool | None
    ) -> QuizOption:
        """
        Update option text and, if given, correctness.

        Raises:
            EntityNotFoundError: If the option does not belong to this question
            BusinessRuleViolationError: If it would clear the only correct option
        """
        option = self.get_option(option_id)
        if is_correct is False:
            self._ensure_not_last_correct(option, "Cannot unmark the only correct option")
        if text is not None and text.strip():
            option.text = text.strip()
        if is_correct is True:
            self.mark_correct(option_id)
        elif is_correct is False:
            option.is_correct = False
        return option

    def ensure_option_removable(self, option_id: QuizOptionId) -> None:
        """
        Check that deleting the option keeps the question answerable.

        Raises:
            EntityNotFoundError: If the option does not belong to this question
            BusinessRuleViolationError: If too few options would remain or it is
                the only correct option
        """
        option = self.get_option(option_id)
        if len(self.options) <= MIN_OPTIONS_PER_QUESTION:
            raise BusinessRuleViolationError(
                "min_options",
                f"Cannot delete option: Questions must have at least "
                f"{MIN_OPTIONS_PER_QUESTION} options",
            )
        self._ensure_not_last_correct(option, "Cannot delete the only correct option")

    def remove_option(self, option_id: QuizOptionId) -> QuizOption:
        """Remove an option after checking ensure_option_removable."""
        self.ensure_option_removable(option_id)
        option = self.get_option(option_id)
        self.options.remove(option)
        return option

    def mark_correct(self, option_id: QuizOptionId) -> None:
        """Mark an option correct; exclusive for single-choice questions."""
        option = self.get_option(option_id)
        if self.is_single_choice:
            self._clear_correct()
        option.is_correct = True

    def toggle_correct(self, option_id: QuizOptionId) -> bool:
        """
        Flip an option's correctness.

        Returns:
            The new correctness value

        Raises:
            BusinessRuleViolationError: If the question is single-choice, or it
                would clear the only correct option
        """
        if self.is_single_choice:
            raise BusinessRuleViolationError(
                "toggle_single_choice",
                "Cannot toggle correctness for single-choice questions",
            )
        option = self.get_option(option_id)
        self._ensure_not_last_correct(option, "Cannot unmark the only correct option")
        option.is_correct = not option.is_correct
        return option.is_correct

    def change_type(
        self, question_type: QuestionType, keep_correct: QuizOptionId | None = None
    ) -> None:
        """
        Switch the question type.

        Switching to SINGLE_CHOICE keeps exactly one correct option when one
        can be chosen: ``keep_correct`` if it belongs to the question,
        otherwise the first currently correct option.
        """
        if question_type is self.question_type:
            return
        self.question_type = question_type
        if question_type is not QuestionType.SINGLE_CHOICE:
            return

        survivor: QuizOption | None = None
        if keep_correct is not None:
            survivor = next((o for o in self.options if o.id == keep_correct), None)
        if survivor is None:
            survivor = next(iter(self.correct_options()), None)
        self._clear_correct()
        if survivor is not None:
            survivor.is_correct = True

    def _ensure_not_last_correct(self, option: QuizOption, action: str) -> None:
        if option.is_correct and len(self.correct_options()) <= 1:
            raise BusinessRuleViolationError(
                "last_correct_option",
                f"{action}. Mark another option as correct first.",
            )

    def _clear_correct(self) -> None:
        for option in self.options:
            option.is_correct = False

    @classmethod
    def create(
        cls,
        lesson_id: LessonId,
        text: str | None,
        order_index: int,
        question_type: QuestionType = QuestionType.SINGLE_CHOICE,
    ) -> "QuizQuestion":
        """Create a new question (ID will be 0 until persisted)."""
        return cls(
            id=QuizQuestionId.generate(),
            lesson_id=lesson_id,
            text=(text or DEFAULT_QUESTION_TEXT).strip(),
            order_index=order_index,
            question_type=question_type,
        )

    @classmethod
    def create_with_id(
        cls,
        id: QuizQuestionId,
        lesson_id: LessonId,
        text: str,
        order_index: int,
        question_type: QuestionType,
        options: list[QuizOption],
    ) -> "QuizQuestion":
        """Reconstitute a question from persistence."""
        return cls(
            id=id,
            lesson_id=lesson_id,
            text=text,
            order_index=order_index,
            question_type=question_type,
            options=options,
        )
