"""Tests for editing a quiz's question bank."""

import pytest
from sqlalchemy.orm import Session

from learnpath import models
from learnpath.application.assessment.use_cases.quiz_authoring_use_case import (
    QuizAuthoringUseCase,
)
from learnpath.domain.assessment.entities.quiz_question import QuestionType
from learnpath.exceptions import (
    BadRequestError,
    ConflictError,
    ForbiddenError,
    LessonNotFoundError,
    NotAQuizError,
    OptionNotFoundError,
    QuestionNotFoundError,
)
from tests.conftest import (
    INSTRUCTOR_ACCESS,
    LEARNER_ACCESS,
    create_test_lesson,
    create_test_question,
)

THREE_OPTIONS = [("Paris", True), ("Lyon", False), ("Nice", False)]


@pytest.fixture
def quiz_lesson(db_session: Session, test_module: models.Module) -> models.Lesson:
    return create_test_lesson(db_session, test_module, 1, title="Quiz", lesson_type="Quiz")


def _question_order(db_session: Session, lesson: models.Lesson) -> list[tuple[str, int]]:
    db_session.expire_all()
    questions = (
        db_session.query(models.QuizQuestion)
        .filter_by(lesson_id=lesson.id)
        .order_by(models.QuizQuestion.order_index)
        .all()
    )
    return [(q.question_text, q.order_index) for q in questions]


def _stored_correctness(db_session: Session, question_id: int) -> list[bool]:
    db_session.expire_all()
    options = (
        db_session.query(models.QuizOption)
        .filter_by(question_id=question_id)
        .order_by(models.QuizOption.id)
        .all()
    )
    return [o.is_correct for o in options]


class TestQuestions:
    """Test suite for adding, editing, moving and deleting questions."""

    def test_add_question_with_options(
        self, quiz_lesson: models.Lesson, quiz_authoring_use_case: QuizAuthoringUseCase
    ) -> None:
        """Test a question is appended with its initial options."""
        question = quiz_authoring_use_case.add_question(
            quiz_lesson.id, INSTRUCTOR_ACCESS, text="Capital of France?", options=THREE_OPTIONS
        )

        assert question.order_index == 1
        assert question.question_type is QuestionType.SINGLE_CHOICE
        assert [o.text for o in question.options] == ["Paris", "Lyon", "Nice"]
        assert all(not o.id.is_transient() for o in question.options)

    def test_add_question_defaults(
        self,
        db_session: Session,
        quiz_lesson: models.Lesson,
        quiz_authoring_use_case: QuizAuthoringUseCase,
    ) -> None:
        """Test an omitted text and type fall back to the placeholder and SingleChoice."""
        create_test_question(db_session, quiz_lesson, 1, THREE_OPTIONS)

        question = quiz_authoring_use_case.add_question(quiz_lesson.id, INSTRUCTOR_ACCESS)

        assert question.text == "New Question"
        assert question.order_index == 2

    def test_add_question_unknown_type(
        self,
        db_session: Session,
        quiz_lesson: models.Lesson,
        quiz_authoring_use_case: QuizAuthoringUseCase,
    ) -> None:
        """Test a given but unknown type is rejected."""
        with pytest.raises(BadRequestError, match="Invalid question_type"):
            quiz_authoring_use_case.add_question(
                quiz_lesson.id, INSTRUCTOR_ACCESS, question_type="TrueFalse"
            )

        assert db_session.query(models.QuizQuestion).count() == 0

    def test_add_question_to_text_lesson(
        self,
        db_session: Session,
        test_module: models.Module,
        quiz_authoring_use_case: QuizAuthoringUseCase,
    ) -> None:
        """Test questions can only be added to quiz lessons."""
        lesson = create_test_lesson(db_session, test_module, 1)

        with pytest.raises(NotAQuizError):
            quiz_authoring_use_case.add_question(lesson.id, INSTRUCTOR_ACCESS)

    def test_add_question_missing_lesson(
        self, quiz_authoring_use_case: QuizAuthoringUseCase
    ) -> None:
        """Test adding to a missing lesson raises not found."""
        with pytest.raises(LessonNotFoundError):
            quiz_authoring_use_case.add_question(99999, INSTRUCTOR_ACCESS)

    def test_learner_cannot_add(
        self, quiz_lesson: models.Lesson, quiz_authoring_use_case: QuizAuthoringUseCase
    ) -> None:
        """Test only instructors and admins author quizzes."""
        with pytest.raises(ForbiddenError):
            quiz_authoring_use_case.add_question(quiz_lesson.id, LEARNER_ACCESS)

    def test_switch_to_single_choice_keeps_nominated_option(
        self,
        db_session: Session,
        quiz_lesson: models.Lesson,
        quiz_authoring_use_case: QuizAuthoringUseCase,
    ) -> None:
        """Test switching to SingleChoice keeps only the nominated correct option."""
        question = create_test_question(
            db_session,
            quiz_lesson,
            1,
            [("A", True), ("B", True), ("C", False)],
            question_type="MultipleChoice",
        )
        keep = question.options[1].id

        updated = quiz_authoring_use_case.update_question(
            question.id, INSTRUCTOR_ACCESS, question_type="SingleChoice", correct_option_id=keep
        )

        assert updated.question_type is QuestionType.SINGLE_CHOICE
        assert _stored_correctness(db_session, question.id) == [False, True, False]

    def test_switch_to_single_choice_keeps_first_correct(
        self,
        db_session: Session,
        quiz_lesson: models.Lesson,
        quiz_authoring_use_case: QuizAuthoringUseCase,
    ) -> None:
        """Test without a nomination the first correct option survives."""
        question = create_test_question(
            db_session,
            quiz_lesson,
            1,
            [("A", False), ("B", True), ("C", True)],
            question_type="MultipleChoice",
        )

        quiz_authoring_use_case.update_question(
            question.id, INSTRUCTOR_ACCESS, question_type="single_choice"
        )

        assert _stored_correctness(db_session, question.id) == [False, True, False]

    def test_update_text(
        self,
        db_session: Session,
        quiz_lesson: models.Lesson,
        quiz_authoring_use_case: QuizAuthoringUseCase,
    ) -> None:
        """Test the question text can be changed and empty text is rejected."""
        question = create_test_question(db_session, quiz_lesson, 1, THREE_OPTIONS)

        updated = quiz_authoring_use_case.update_question(
            question.id, INSTRUCTOR_ACCESS, text="Reworded"
        )
        assert updated.text == "Reworded"

        with pytest.raises(BadRequestError):
            quiz_authoring_use_case.update_question(question.id, INSTRUCTOR_ACCESS, text=" ")

    def test_move_question(
        self,
        db_session: Session,
        quiz_lesson: models.Lesson,
        quiz_authoring_use_case: QuizAuthoringUseCase,
    ) -> None:
        """Test moving the last question to the front."""
        for index, text in enumerate(["Q1", "Q2", "Q3"], start=1):
            create_test_question(db_session, quiz_lesson, index, THREE_OPTIONS, text=text)
        last = db_session.query(models.QuizQuestion).filter_by(question_text="Q3").one()

        moved = quiz_authoring_use_case.move_question(last.id, 1, INSTRUCTOR_ACCESS)

        assert moved.order_index == 1
        assert _question_order(db_session, quiz_lesson) == [("Q3", 1), ("Q1", 2), ("Q2", 3)]

    def test_move_question_out_of_range(
        self,
        db_session: Session,
        quiz_lesson: models.Lesson,
        quiz_authoring_use_case: QuizAuthoringUseCase,
    ) -> None:
        """Test a target past the end is a conflict."""
        question = create_test_question(db_session, quiz_lesson, 1, THREE_OPTIONS)

        with pytest.raises(ConflictError):
            quiz_authoring_use_case.move_question(question.id, 2, INSTRUCTOR_ACCESS)

    def test_delete_question_compacts(
        self,
        db_session: Session,
        quiz_lesson: models.Lesson,
        quiz_authoring_use_case: QuizAuthoringUseCase,
    ) -> None:
        """Test deleting a question removes its options and closes the gap."""
        for index, text in enumerate(["Q1", "Q2", "Q3"], start=1):
            create_test_question(db_session, quiz_lesson, index, THREE_OPTIONS, text=text)
        first = db_session.query(models.QuizQuestion).filter_by(question_text="Q1").one()

        quiz_authoring_use_case.delete_question(first.id, INSTRUCTOR_ACCESS)

        assert _question_order(db_session, quiz_lesson) == [("Q2", 1), ("Q3", 2)]
        assert db_session.query(models.QuizOption).count() == 6

    def test_missing_question(self, quiz_authoring_use_case: QuizAuthoringUseCase) -> None:
        """Test operating on a missing question raises not found."""
        with pytest.raises(QuestionNotFoundError):
            quiz_authoring_use_case.delete_question(99999, INSTRUCTOR_ACCESS)


class TestOptions:
    """Test suite for option editing."""

    @pytest.fixture
    def question(self, db_session: Session, quiz_lesson: models.Lesson) -> models.QuizQuestion:
        return create_test_question(db_session, quiz_lesson, 1, THREE_OPTIONS)

    def test_add_option(
        self,
        db_session: Session,
        question: models.QuizQuestion,
        quiz_authoring_use_case: QuizAuthoringUseCase,
    ) -> None:
        """Test a new option is stored and returned with its id."""
        option = quiz_authoring_use_case.add_option(question.id, INSTRUCTOR_ACCESS, text="Lille")

        assert option.text == "Lille"
        assert option.is_correct is False
        assert not option.id.is_transient()
        assert _stored_correctness(db_session, question.id) == [True, False, False, False]

    def test_add_correct_option_to_single_choice_is_exclusive(
        self,
        db_session: Session,
        question: models.QuizQuestion,
        quiz_authoring_use_case: QuizAuthoringUseCase,
    ) -> None:
        """Test a new correct option replaces the old one on a single-choice question."""
        quiz_authoring_use_case.add_option(
            question.id, INSTRUCTOR_ACCESS, text="Marseille", is_correct=True
        )

        assert _stored_correctness(db_session, question.id) == [False, False, False, True]

    def test_update_option(
        self,
        db_session: Session,
        question: models.QuizQuestion,
        quiz_authoring_use_case: QuizAuthoringUseCase,
    ) -> None:
        """Test marking another option correct through an update."""
        lyon = question.options[1].id

        option = quiz_authoring_use_case.update_option(
            question.id, lyon, INSTRUCTOR_ACCESS, text="Lyon!", is_correct=True
        )

        assert option.text == "Lyon!"
        assert _stored_correctness(db_session, question.id) == [False, True, False]

    def test_update_option_cannot_unmark_only_correct(
        self,
        db_session: Session,
        question: models.QuizQuestion,
        quiz_authoring_use_case: QuizAuthoringUseCase,
    ) -> None:
        """Test a single-choice question keeps its correct option."""
        with pytest.raises(BadRequestError, match="only correct option"):
            quiz_authoring_use_case.update_option(
                question.id, question.options[0].id, INSTRUCTOR_ACCESS, is_correct=False
            )

        assert _stored_correctness(db_session, question.id) == [True, False, False]

    def test_update_foreign_option(
        self,
        db_session: Session,
        quiz_lesson: models.Lesson,
        question: models.QuizQuestion,
        quiz_authoring_use_case: QuizAuthoringUseCase,
    ) -> None:
        """Test options of another question are not found."""
        other = create_test_question(db_session, quiz_lesson, 2, THREE_OPTIONS)

        with pytest.raises(OptionNotFoundError):
            quiz_authoring_use_case.update_option(
                question.id, other.options[0].id, INSTRUCTOR_ACCESS, text="X"
            )

    def test_delete_option(
        self,
        db_session: Session,
        question: models.QuizQuestion,
        quiz_authoring_use_case: QuizAuthoringUseCase,
    ) -> None:
        """Test an incorrect option can be deleted while three remain."""
        quiz_authoring_use_case.delete_option(
            question.id, question.options[2].id, INSTRUCTOR_ACCESS
        )

        assert _stored_correctness(db_session, question.id) == [True, False]

    def test_delete_option_keeps_two(
        self,
        db_session: Session,
        quiz_lesson: models.Lesson,
        quiz_authoring_use_case: QuizAuthoringUseCase,
    ) -> None:
        """Test a question cannot drop below two options."""
        question = create_test_question(db_session, quiz_lesson, 1, [("Yes", True), ("No", False)])

        with pytest.raises(BadRequestError, match="at least 2 options"):
            quiz_authoring_use_case.delete_option(
                question.id, question.options[1].id, INSTRUCTOR_ACCESS
            )

        assert len(_stored_correctness(db_session, question.id)) == 2

    def test_delete_only_correct_option(
        self,
        question: models.QuizQuestion,
        quiz_authoring_use_case: QuizAuthoringUseCase,
    ) -> None:
        """Test the only correct option cannot be deleted."""
        with pytest.raises(BadRequestError, match="only correct option"):
            quiz_authoring_use_case.delete_option(
                question.id, question.options[0].id, INSTRUCTOR_ACCESS
            )

    def test_set_correct_option(
        self,
        db_session: Session,
        question: models.QuizQuestion,
        quiz_authoring_use_case: QuizAuthoringUseCase,
    ) -> None:
        """Test setting the correct option on a single-choice question clears the others."""
        quiz_authoring_use_case.set_correct_option(
            question.id, question.options[2].id, INSTRUCTOR_ACCESS
        )

        assert _stored_correctness(db_session, question.id) == [False, False, True]

    def test_toggle_on_single_choice(
        self,
        question: models.QuizQuestion,
        quiz_authoring_use_case: QuizAuthoringUseCase,
    ) -> None:
        """Test toggling is reserved for multiple-choice questions."""
        with pytest.raises(BadRequestError, match="single-choice"):
            quiz_authoring_use_case.toggle_correct_option(
                question.id, question.options[1].id, INSTRUCTOR_ACCESS
            )

    def test_toggle_on_multiple_choice(
        self,
        db_session: Session,
        quiz_lesson: models.Lesson,
        quiz_authoring_use_case: QuizAuthoringUseCase,
    ) -> None:
        """Test toggling flips one option and leaves the rest."""
        question = create_test_question(
            db_session, quiz_lesson, 1, THREE_OPTIONS, question_type="MultipleChoice"
        )

        is_correct = quiz_authoring_use_case.toggle_correct_option(
            question.id, question.options[1].id, INSTRUCTOR_ACCESS
        )

        assert is_correct is True
        assert _stored_correctness(db_session, question.id) == [True, True, False]

    def test_toggle_cannot_unmark_last_correct(
        self,
        db_session: Session,
        quiz_lesson: models.Lesson,
        quiz_authoring_use_case: QuizAuthoringUseCase,
    ) -> None:
        """Test a multiple-choice question keeps at least one correct option."""
        question = create_test_question(
            db_session, quiz_lesson, 1, THREE_OPTIONS, question_type="MultipleChoice"
        )

        with pytest.raises(BadRequestError, match="only correct option"):
            quiz_authoring_use_case.toggle_correct_option(
                question.id, question.options[0].id, INSTRUCTOR_ACCESS
            )

        assert _stored_correctness(db_session, question.id) == [True, False, False]
