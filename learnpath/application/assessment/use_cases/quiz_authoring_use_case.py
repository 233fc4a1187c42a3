"""Use case for editing a quiz's question bank."""

from collections.abc import Sequence

import structlog

from learnpath.application.assessment.protocols.quiz_question_repository import (
    QuizQuestionRepositoryProtocol,
)
from learnpath.application.common.access import CourseAccess
from learnpath.application.common.parsing import parse_enum
from learnpath.application.common.unit_of_work import UnitOfWork
from learnpath.application.curriculum.protocols.lesson_repository import (
    LessonRepositoryProtocol,
)
from learnpath.domain.assessment.entities.quiz_question import (
    QuestionType,
    QuizOption,
    QuizQuestion,
)
from learnpath.domain.common.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    ValidationError,
)
from learnpath.domain.common.value_objects.ids import LessonId, QuizOptionId, QuizQuestionId
from learnpath.domain.curriculum.services.order_index_service import (
    OrderIndexOutOfRangeError,
    OrderIndexService,
)
from learnpath.exceptions import (
    BadRequestError,
    ConflictError,
    ForbiddenError,
    LessonNotFoundError,
    NotAQuizError,
    OptionNotFoundError,
    QuestionNotFoundError,
)

logger = structlog.get_logger(__name__)


class QuizAuthoringUseCase:
    """Use case for questions and options of a quiz lesson."""

    def __init__(
        self,
        lesson_repository: LessonRepositoryProtocol,
        quiz_question_repository: QuizQuestionRepositoryProtocol,
        uow: UnitOfWork,
    ) -> None:
        self.lesson_repository = lesson_repository
        self.quiz_question_repository = quiz_question_repository
        self.uow = uow

    def add_question(
        self,
        lesson_id: int,
        access: CourseAccess,
        text: str | None = None,
        question_type: str | None = None,
        options: Sequence[tuple[str, bool]] = (),
    ) -> QuizQuestion:
        """
        Append a question to a quiz lesson.

        Args:
            lesson_id: ID of the quiz lesson
            access: Caller's access to the course
            text: Question text; a placeholder when omitted
            question_type: "SingleChoice" or "MultipleChoice"; SingleChoice
                when omitted
            options: Initial (text, is_correct) options

        Returns:
            Created question domain entity with its options

        Raises:
            ForbiddenError: If the caller cannot edit the course
            LessonNotFoundError: If the lesson is not found
            NotAQuizError: If the lesson is not a quiz
            BadRequestError: If the question type is unknown
        """
        self._require_edit(access)
        parsed_type = (
            self._parse_type(question_type)
            if question_type is not None
            else QuestionType.SINGLE_CHOICE
        )

        lesson_id_vo = LessonId(lesson_id)
        with self.uow:
            lesson = self.lesson_repository.find_by_id(lesson_id_vo)
            if not lesson:
                raise LessonNotFoundError(lesson_id)
            if not lesson.is_quiz():
                raise NotAQuizError(lesson_id)

            siblings = self.quiz_question_repository.find_by_lesson(lesson_id_vo)
            order_index = OrderIndexService.append(q.position for q in siblings)
            question = QuizQuestion.create(lesson_id_vo, text, order_index, parsed_type)
            for option_text, is_correct in options:
                question.add_option(option_text, is_correct)

            question = self.quiz_question_repository.save(question)
            self.uow.commit()

        logger.info(
            "quiz_question_added",
            question_id=question.id.value,
            lesson_id=lesson_id,
            order_index=order_index,
            option_count=len(question.options),
        )
        return question

    def update_question(
        self,
        question_id: int,
        access: CourseAccess,
        text: str | None = None,
        question_type: str | None = None,
        correct_option_id: int | None = None,
    ) -> QuizQuestion:
        """
        Update question text and/or type.

        Switching to SingleChoice keeps one correct option: correct_option_id
        when given, otherwise the first currently correct option.

        Raises:
            ForbiddenError: If the caller cannot edit the course
            QuestionNotFoundError: If the question is not found
            BadRequestError: If the text is empty or the type is unknown
        """
        self._require_edit(access)
        parsed_type = self._parse_type(question_type) if question_type is not None else None

        with self.uow:
            question = self._get_question(question_id)
            try:
                if text is not None:
                    question.update_text(text)
            except ValidationError as e:
                raise BadRequestError(e.message) from e
            if parsed_type is not None:
                keep = QuizOptionId(correct_option_id) if correct_option_id is not None else None
                question.change_type(parsed_type, keep_correct=keep)

            question = self.quiz_question_repository.save(question)
            self.uow.commit()

        logger.info(
            "quiz_question_updated",
            question_id=question_id,
            question_type=question.question_type.value,
        )
        return question

    def move_question(self, question_id: int, new_index: int, access: CourseAccess) -> QuizQuestion:
        """
        Move a question within its quiz.

        Raises:
            ForbiddenError: If the caller cannot edit the course
            QuestionNotFoundError: If the question is not found
            ConflictError: If new_index is outside 1..N
        """
        self._require_edit(access)

        with self.uow:
            question = self._get_question(question_id)
            siblings = [
                q.position for q in self.quiz_question_repository.find_by_lesson(question.lesson_id)
            ]
            try:
                next_state = OrderIndexService.move(siblings, question_id, new_index)
            except OrderIndexOutOfRangeError as e:
                raise ConflictError(e.invariant) from e
            self.quiz_question_repository.update_order_indices(
                OrderIndexService.changed_positions(siblings, next_state)
            )
            question.order_index = next_state[question_id]
            self.uow.commit()

        logger.info("quiz_question_moved", question_id=question_id, order_index=new_index)
        return question

    def delete_question(self, question_id: int, access: CourseAccess) -> None:
        """
        Delete a question with its options and close the gap in the quiz.

        Raises:
            ForbiddenError: If the caller cannot edit the course
            QuestionNotFoundError: If the question is not found
        """
        self._require_edit(access)

        with self.uow:
            question = self._get_question(question_id)
            siblings = [
                q.position for q in self.quiz_question_repository.find_by_lesson(question.lesson_id)
            ]
            next_state = OrderIndexService.delete(siblings, question_id)
            self.quiz_question_repository.delete(question.id)
            self.quiz_question_repository.update_order_indices(
                OrderIndexService.changed_positions(siblings, next_state)
            )
            self.uow.commit()

        logger.info(
            "quiz_question_deleted",
            question_id=question_id,
            lesson_id=question.lesson_id.value,
        )

    def add_option(
        self,
        question_id: int,
        access: CourseAccess,
        text: str | None = None,
        is_correct: bool = False,
    ) -> QuizOption:
        """
        Add an option to a question.

        Raises:
            ForbiddenError: If the caller cannot edit the course
            QuestionNotFoundError: If the question is not found
        """
        self._require_edit(access)

        with self.uow:
            question = self._get_question(question_id)
            question.add_option(text, is_correct)
            question = self.quiz_question_repository.save(question)
            self.uow.commit()

        # Options are returned ordered by id, the new one is last
        option = question.options[-1]
        logger.info("quiz_option_added", question_id=question_id, option_id=option.id.value)
        return option

    def update_option(
        self,
        question_id: int,
        option_id: int,
        access: CourseAccess,
        text: str | None = None,
        is_correct: bool | None = None,
    ) -> QuizOption:
        """
        Update option text and, if given, correctness.

        Raises:
            ForbiddenError: If the caller cannot edit the course
            QuestionNotFoundError: If the question is not found
            OptionNotFoundError: If the option is not part of the question
            BadRequestError: If it would clear the only correct option
        """
        self._require_edit(access)

        with self.uow:
            question = self._get_question(question_id)
            try:
                question.update_option(QuizOptionId(option_id), text, is_correct)
            except EntityNotFoundError as e:
                raise OptionNotFoundError(option_id) from e
            except BusinessRuleViolationError as e:
                raise BadRequestError(e.message) from e
            question = self.quiz_question_repository.save(question)
            self.uow.commit()

        return question.get_option(QuizOptionId(option_id))

    def delete_option(self, question_id: int, option_id: int, access: CourseAccess) -> None:
        """
        Delete an option.

        Raises:
            ForbiddenError: If the caller cannot edit the course
            QuestionNotFoundError: If the question is not found
            OptionNotFoundError: If the option is not part of the question
            BadRequestError: If fewer than two options would remain, or it is
                the only correct option
        """
        self._require_edit(access)

        with self.uow:
            question = self._get_question(question_id)
            try:
                question.remove_option(QuizOptionId(option_id))
            except EntityNotFoundError as e:
                raise OptionNotFoundError(option_id) from e
            except BusinessRuleViolationError as e:
                raise BadRequestError(e.message) from e
            self.quiz_question_repository.save(question)
            self.uow.commit()

        logger.info("quiz_option_deleted", question_id=question_id, option_id=option_id)

    def set_correct_option(self, question_id: int, option_id: int, access: CourseAccess) -> None:
        """
        Mark an option correct; on a single-choice question the others are cleared.

        Raises:
            ForbiddenError: If the caller cannot edit the course
            QuestionNotFoundError: If the question is not found
            OptionNotFoundError: If the option is not part of the question
        """
        self._require_edit(access)

        with self.uow:
            question = self._get_question(question_id)
            try:
                question.mark_correct(QuizOptionId(option_id))
            except EntityNotFoundError as e:
                raise OptionNotFoundError(option_id) from e
            self.quiz_question_repository.save(question)
            self.uow.commit()

    def toggle_correct_option(self, question_id: int, option_id: int, access: CourseAccess) -> bool:
        """
        Flip an option's correctness on a multiple-choice question.

        Returns:
            The option's new correctness

        Raises:
            ForbiddenError: If the caller cannot edit the course
            QuestionNotFoundError: If the question is not found
            OptionNotFoundError: If the option is not part of the question
            BadRequestError: If the question is single-choice, or it would clear
                the only correct option
        """
        self._require_edit(access)

        with self.uow:
            question = self._get_question(question_id)
            try:
                is_correct = question.toggle_correct(QuizOptionId(option_id))
            except EntityNotFoundError as e:
                raise OptionNotFoundError(option_id) from e
            except BusinessRuleViolationError as e:
                raise BadRequestError(e.message) from e
            self.quiz_question_repository.save(question)
            self.uow.commit()

        return is_correct

    def _get_question(self, question_id: int) -> QuizQuestion:
        question = self.quiz_question_repository.find_by_id(QuizQuestionId(question_id))
        if not question:
            raise QuestionNotFoundError(question_id)
        return question

    @staticmethod
    def _require_edit(access: CourseAccess) -> None:
        if not access.can_edit:
            raise ForbiddenError("Only instructors and admins can edit quizzes")

    @staticmethod
    def _parse_type(raw: str) -> QuestionType:
        result = parse_enum(QuestionType, raw, field="question_type")
        if result.is_failure:
            raise BadRequestError(result.unwrap_error().message)
        return result.unwrap()
