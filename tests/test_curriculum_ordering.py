"""Tests for module and lesson editing and their sibling ordering."""

import pytest
from sqlalchemy.orm import Session

from learnpath import models
from learnpath.application.curriculum.use_cases.lesson_use_case import LessonUseCase
from learnpath.application.curriculum.use_cases.module_use_case import ModuleUseCase
from learnpath.domain.curriculum.entities.lesson import LessonType
from learnpath.exceptions import (
    BadRequestError,
    ConflictError,
    CourseModuleNotFoundError,
    CourseNotFoundError,
    ForbiddenError,
    LessonNotFoundError,
)
from tests.conftest import (
    ADMIN_ACCESS,
    INSTRUCTOR_ACCESS,
    LEARNER_ACCESS,
    create_test_lesson,
    create_test_module,
)


def _lesson_order(db_session: Session, module: models.Module) -> list[tuple[str, int]]:
    db_session.expire_all()
    lessons = (
        db_session.query(models.Lesson)
        .filter_by(module_id=module.id)
        .order_by(models.Lesson.order_index)
        .all()
    )
    return [(lesson.title, lesson.order_index) for lesson in lessons]


def _module_order(db_session: Session, course: models.Course) -> list[tuple[str, int]]:
    db_session.expire_all()
    modules = (
        db_session.query(models.Module)
        .filter_by(course_id=course.id)
        .order_by(models.Module.order_index)
        .all()
    )
    return [(module.title, module.order_index) for module in modules]


@pytest.fixture
def four_lessons(db_session: Session, test_module: models.Module) -> list[models.Lesson]:
    return [
        create_test_lesson(db_session, test_module, index, title=title)
        for index, title in enumerate(["A", "B", "C", "D"], start=1)
    ]


class TestCreateLesson:
    """Test suite for appending lessons."""

    def test_appends_at_end(
        self,
        db_session: Session,
        test_module: models.Module,
        four_lessons: list[models.Lesson],
        lesson_use_case: LessonUseCase,
    ) -> None:
        """Test a new lesson gets max + 1."""
        lesson = lesson_use_case.create_lesson(test_module.id, "E", INSTRUCTOR_ACCESS)

        assert lesson.order_index == 5
        assert lesson.lesson_type is LessonType.TEXT
        assert _lesson_order(db_session, test_module)[-1] == ("E", 5)

    def test_first_lesson_gets_index_one(
        self, test_module: models.Module, lesson_use_case: LessonUseCase
    ) -> None:
        """Test appending to an empty module starts at 1."""
        lesson = lesson_use_case.create_lesson(
            test_module.id, "Intro", ADMIN_ACCESS, lesson_type="video"
        )

        assert lesson.order_index == 1
        assert lesson.lesson_type is LessonType.VIDEO

    def test_unknown_type_is_rejected(
        self, db_session: Session, test_module: models.Module, lesson_use_case: LessonUseCase
    ) -> None:
        """Test an unknown lesson type is an error, not a silent default."""
        with pytest.raises(BadRequestError, match="Invalid lesson_type 'Podcast'"):
            lesson_use_case.create_lesson(
                test_module.id, "Intro", INSTRUCTOR_ACCESS, lesson_type="Podcast"
            )

        assert db_session.query(models.Lesson).count() == 0

    def test_empty_title_is_rejected(
        self, test_module: models.Module, lesson_use_case: LessonUseCase
    ) -> None:
        """Test an empty title is a bad request."""
        with pytest.raises(BadRequestError):
            lesson_use_case.create_lesson(test_module.id, "  ", INSTRUCTOR_ACCESS)

    def test_learner_cannot_create(
        self, test_module: models.Module, lesson_use_case: LessonUseCase
    ) -> None:
        """Test only instructors and admins edit the curriculum."""
        with pytest.raises(ForbiddenError):
            lesson_use_case.create_lesson(test_module.id, "Intro", LEARNER_ACCESS)

    def test_unknown_module(self, lesson_use_case: LessonUseCase) -> None:
        """Test appending to a missing module raises not found."""
        with pytest.raises(CourseModuleNotFoundError):
            lesson_use_case.create_lesson(99999, "Intro", INSTRUCTOR_ACCESS)


class TestMoveLesson:
    """Test suite for reordering lessons."""

    def test_move_later(
        self,
        db_session: Session,
        test_module: models.Module,
        four_lessons: list[models.Lesson],
        lesson_use_case: LessonUseCase,
    ) -> None:
        """Test moving 1 → 3 shifts the lessons in between up."""
        lesson_use_case.update_lesson(four_lessons[0].id, INSTRUCTOR_ACCESS, order_index=3)

        assert _lesson_order(db_session, test_module) == [("B", 1), ("C", 2), ("A", 3), ("D", 4)]

    def test_move_earlier(
        self,
        db_session: Session,
        test_module: models.Module,
        four_lessons: list[models.Lesson],
        lesson_use_case: LessonUseCase,
    ) -> None:
        """Test moving 4 → 2 shifts the lessons in between down."""
        moved = lesson_use_case.update_lesson(
            four_lessons[3].id, INSTRUCTOR_ACCESS, order_index=2
        )

        assert moved.order_index == 2
        assert _lesson_order(db_session, test_module) == [("A", 1), ("D", 2), ("B", 3), ("C", 4)]

    def test_move_to_same_index_is_noop(
        self,
        db_session: Session,
        test_module: models.Module,
        four_lessons: list[models.Lesson],
        lesson_use_case: LessonUseCase,
    ) -> None:
        """Test moving to the current index changes nothing."""
        lesson_use_case.update_lesson(four_lessons[1].id, INSTRUCTOR_ACCESS, order_index=2)

        assert _lesson_order(db_session, test_module) == [("A", 1), ("B", 2), ("C", 3), ("D", 4)]

    @pytest.mark.parametrize("target", [0, 5, -1])
    def test_out_of_range_is_conflict(
        self,
        db_session: Session,
        test_module: models.Module,
        four_lessons: list[models.Lesson],
        lesson_use_case: LessonUseCase,
        target: int,
    ) -> None:
        """Test targets outside 1..N are rejected and nothing moves."""
        with pytest.raises(ConflictError):
            lesson_use_case.update_lesson(four_lessons[0].id, INSTRUCTOR_ACCESS, order_index=target)

        assert _lesson_order(db_session, test_module) == [("A", 1), ("B", 2), ("C", 3), ("D", 4)]

    def test_edit_content_and_type(
        self,
        db_session: Session,
        four_lessons: list[models.Lesson],
        lesson_use_case: LessonUseCase,
    ) -> None:
        """Test editing title and type leaves the position alone."""
        lesson = lesson_use_case.update_lesson(
            four_lessons[1].id, INSTRUCTOR_ACCESS, title="Renamed", lesson_type="Quiz"
        )

        assert lesson.title == "Renamed"
        assert lesson.lesson_type is LessonType.QUIZ
        assert lesson.order_index == 2

    def test_unknown_lesson(self, lesson_use_case: LessonUseCase) -> None:
        """Test editing a missing lesson raises not found."""
        with pytest.raises(LessonNotFoundError):
            lesson_use_case.update_lesson(99999, INSTRUCTOR_ACCESS, title="X")


class TestDeleteLesson:
    """Test suite for deleting lessons."""

    def test_delete_second_of_four_compacts(
        self,
        db_session: Session,
        test_module: models.Module,
        four_lessons: list[models.Lesson],
        lesson_use_case: LessonUseCase,
    ) -> None:
        """Test deleting index 2 of 1..4 leaves 1..3 in the same relative order."""
        lesson_use_case.delete_lesson(four_lessons[1].id, INSTRUCTOR_ACCESS)

        assert _lesson_order(db_session, test_module) == [("A", 1), ("C", 2), ("D", 3)]

    def test_delete_removes_progress(
        self,
        db_session: Session,
        learner: models.User,
        four_lessons: list[models.Lesson],
        lesson_use_case: LessonUseCase,
    ) -> None:
        """Test progress rows of a deleted lesson go with it."""
        db_session.add(
            models.LessonProgress(
                user_id=learner.id, lesson_id=four_lessons[0].id, is_completed=False
            )
        )
        db_session.commit()

        lesson_use_case.delete_lesson(four_lessons[0].id, INSTRUCTOR_ACCESS)

        assert db_session.query(models.LessonProgress).count() == 0

    def test_learner_cannot_delete(
        self, four_lessons: list[models.Lesson], lesson_use_case: LessonUseCase
    ) -> None:
        """Test only instructors and admins delete lessons."""
        with pytest.raises(ForbiddenError):
            lesson_use_case.delete_lesson(four_lessons[0].id, LEARNER_ACCESS)


class TestModules:
    """Test suite for module editing."""

    def test_create_appends(
        self,
        db_session: Session,
        test_course: models.Course,
        test_module: models.Module,
        module_use_case: ModuleUseCase,
    ) -> None:
        """Test a new module is appended after the existing one."""
        module = module_use_case.create_module(test_course.id, "Second", INSTRUCTOR_ACCESS)

        assert module.order_index == 2

    def test_create_in_unknown_course(self, module_use_case: ModuleUseCase) -> None:
        """Test creating a module in a missing course raises not found."""
        with pytest.raises(CourseNotFoundError):
            module_use_case.create_module(99999, "Module", INSTRUCTOR_ACCESS)

    def test_move_and_rename(
        self,
        db_session: Session,
        test_course: models.Course,
        module_use_case: ModuleUseCase,
    ) -> None:
        """Test renaming and moving a module in one call."""
        first = create_test_module(db_session, test_course, 1, title="One")
        create_test_module(db_session, test_course, 2, title="Two")
        create_test_module(db_session, test_course, 3, title="Three")

        module_use_case.update_module(first.id, INSTRUCTOR_ACCESS, title="Uno", order_index=3)

        assert _module_order(db_session, test_course) == [("Two", 1), ("Three", 2), ("Uno", 3)]

    def test_move_out_of_range(
        self,
        db_session: Session,
        test_course: models.Course,
        module_use_case: ModuleUseCase,
    ) -> None:
        """Test moving a module past the end is a conflict."""
        first = create_test_module(db_session, test_course, 1, title="One")
        create_test_module(db_session, test_course, 2, title="Two")

        with pytest.raises(ConflictError):
            module_use_case.update_module(first.id, INSTRUCTOR_ACCESS, order_index=3)

    def test_delete_compacts_and_removes_lessons(
        self,
        db_session: Session,
        test_course: models.Course,
        module_use_case: ModuleUseCase,
    ) -> None:
        """Test deleting a module removes its lessons and closes the gap."""
        create_test_module(db_session, test_course, 1, title="One")
        middle = create_test_module(db_session, test_course, 2, title="Two")
        create_test_module(db_session, test_course, 3, title="Three")
        create_test_lesson(db_session, middle, 1)

        module_use_case.delete_module(middle.id, INSTRUCTOR_ACCESS)

        assert _module_order(db_session, test_course) == [("One", 1), ("Three", 2)]
        assert db_session.query(models.Lesson).count() == 0

    def test_learner_cannot_edit(
        self, test_module: models.Module, module_use_case: ModuleUseCase
    ) -> None:
        """Test only instructors and admins edit modules."""
        with pytest.raises(ForbiddenError):
            module_use_case.update_module(test_module.id, LEARNER_ACCESS, title="Hacked")
