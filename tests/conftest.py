"""Pytest configuration and fixtures."""

from collections.abc import Generator
from datetime import UTC, datetime, timedelta

import pytest
from dependency_injector import providers
from sqlalchemy.orm import Session, sessionmaker

from learnpath import models
from learnpath.application.assessment.use_cases.quiz_authoring_use_case import (
    QuizAuthoringUseCase,
)
from learnpath.application.assessment.use_cases.quiz_submission_use_case import (
    QuizSubmissionUseCase,
)
from learnpath.application.common.access import CourseAccess
from learnpath.application.curriculum.use_cases.lesson_use_case import LessonUseCase
from learnpath.application.curriculum.use_cases.module_use_case import ModuleUseCase
from learnpath.application.progress.use_cases.enrollment_use_case import EnrollmentUseCase
from learnpath.application.progress.use_cases.progress_use_case import ProgressUseCase
from learnpath.core import Container
from learnpath.database import Base, create_db_engine

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine (foreign keys enabled so ON DELETE CASCADE applies)
test_engine = create_db_engine(TEST_DATABASE_URL)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

# Access flags as resolved by the request layer
LEARNER_ACCESS = CourseAccess(is_enrolled=True)
INSTRUCTOR_ACCESS = CourseAccess(is_instructor=True)
ADMIN_ACCESS = CourseAccess(is_admin=True)
NO_ACCESS = CourseAccess()

FROZEN_NOW = datetime(2024, 3, 1, 9, 0, 0, tzinfo=UTC)


class FrozenClock:
    """Clock returning a fixed instant until advanced."""

    def __init__(self, now: datetime) -> None:
        self.current = now

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs: float) -> None:
        self.current += timedelta(**kwargs)


def naive(value: datetime | None) -> datetime | None:
    """SQLite drops tzinfo; compare stored datetimes without it."""
    return value.replace(tzinfo=None) if value else None


# --- Builders for test data ---


def create_test_user(
    db_session: Session, email: str = "learner@example.com", full_name: str = "Test Learner"
) -> models.User:
    user = models.User(email=email, full_name=full_name)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def create_test_course(
    db_session: Session, instructor: models.User, title: str = "Test Course"
) -> models.Course:
    course = models.Course(title=title, description="A test course", instructor_id=instructor.id)
    db_session.add(course)
    db_session.commit()
    db_session.refresh(course)
    return course


def create_test_module(
    db_session: Session, course: models.Course, order_index: int, title: str | None = None
) -> models.Module:
    module = models.Module(
        course_id=course.id,
        title=title or f"Module {order_index}",
        order_index=order_index,
    )
    db_session.add(module)
    db_session.commit()
    db_session.refresh(module)
    return module


def create_test_lesson(
    db_session: Session,
    module: models.Module,
    order_index: int,
    title: str | None = None,
    lesson_type: str = "Text",
) -> models.Lesson:
    lesson = models.Lesson(
        module_id=module.id,
        title=title or f"Lesson {order_index}",
        content="Lesson body",
        lesson_type=lesson_type,
        order_index=order_index,
    )
    db_session.add(lesson)
    db_session.commit()
    db_session.refresh(lesson)
    return lesson


def create_test_question(
    db_session: Session,
    lesson: models.Lesson,
    order_index: int,
    options: list[tuple[str, bool]],
    question_type: str = "SingleChoice",
    text: str | None = None,
) -> models.QuizQuestion:
    question = models.QuizQuestion(
        lesson_id=lesson.id,
        question_text=text or f"Question {order_index}",
        question_type=question_type,
        order_index=order_index,
        options=[
            models.QuizOption(option_text=option_text, is_correct=is_correct)
            for option_text, is_correct in options
        ],
    )
    db_session.add(question)
    db_session.commit()
    db_session.refresh(question)
    return question


def create_test_enrollment(
    db_session: Session,
    user: models.User,
    course: models.Course,
    status: str = "Active",
    completion_date: datetime | None = None,
) -> models.Enrollment:
    enrollment = models.Enrollment(
        user_id=user.id,
        course_id=course.id,
        enrolled_at=FROZEN_NOW - timedelta(days=7),
        status=status,
        completion_date=completion_date,
    )
    db_session.add(enrollment)
    db_session.commit()
    db_session.refresh(enrollment)
    return enrollment


def correct_option_ids(question: models.QuizQuestion) -> list[int]:
    return [o.id for o in question.options if o.is_correct]


def wrong_option_ids(question: models.QuizQuestion) -> list[int]:
    return [o.id for o in question.options if not o.is_correct]


# --- Fixtures ---


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(FROZEN_NOW)


@pytest.fixture
def container(db_session: Session, clock: FrozenClock) -> Generator[Container, None, None]:
    """Container wired to the test session and the frozen clock."""
    container = Container()
    container.db.override(db_session)
    container.clock.override(providers.Object(clock))
    yield container
    container.reset_override()


@pytest.fixture
def learner(db_session: Session) -> models.User:
    return create_test_user(db_session)


@pytest.fixture
def instructor(db_session: Session) -> models.User:
    return create_test_user(db_session, email="instructor@example.com", full_name="Instructor")


@pytest.fixture
def test_course(db_session: Session, instructor: models.User) -> models.Course:
    return create_test_course(db_session, instructor)


@pytest.fixture
def test_module(db_session: Session, test_course: models.Course) -> models.Module:
    return create_test_module(db_session, test_course, 1)


@pytest.fixture
def progress_use_case(container: Container) -> ProgressUseCase:
    return container.progress_use_case()


@pytest.fixture
def enrollment_use_case(container: Container) -> EnrollmentUseCase:
    return container.enrollment_use_case()


@pytest.fixture
def module_use_case(container: Container) -> ModuleUseCase:
    return container.module_use_case()


@pytest.fixture
def lesson_use_case(container: Container) -> LessonUseCase:
    return container.lesson_use_case()


@pytest.fixture
def quiz_authoring_use_case(container: Container) -> QuizAuthoringUseCase:
    return container.quiz_authoring_use_case()


@pytest.fixture
def quiz_submission_use_case(container: Container) -> QuizSubmissionUseCase:
    return container.quiz_submission_use_case()
