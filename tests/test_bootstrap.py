"""Tests for application startup and settings."""

from collections.abc import Generator

import pytest
from pydantic import ValidationError

from learnpath import models
from learnpath.bootstrap import container_scope, init_app, shutdown_app
from learnpath.config import Settings
from learnpath.database import Base, get_engine
from learnpath.domain.progress.entities.enrollment import EnrollmentStatus
from tests.conftest import create_test_course, create_test_user


@pytest.fixture
def initialized_app() -> Generator[None, None, None]:
    init_app(Settings(DATABASE_URL="sqlite:///:memory:", ENVIRONMENT="test"))
    Base.metadata.create_all(get_engine())
    yield
    shutdown_app()


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(DATABASE_URL="sqlite:///:memory:")
        assert settings.QUIZ_PASS_THRESHOLD == 0.70
        assert settings.QUIZ_ASSUMED_DURATION_MINUTES == 5

    @pytest.mark.parametrize("threshold", [0, -0.1, 1.5])
    def test_pass_threshold_out_of_range(self, threshold: float) -> None:
        with pytest.raises(ValidationError):
            Settings(QUIZ_PASS_THRESHOLD=threshold)

    def test_negative_assumed_duration(self) -> None:
        with pytest.raises(ValidationError):
            Settings(QUIZ_ASSUMED_DURATION_MINUTES=-1)


class TestContainerScope:
    @pytest.mark.usefixtures("initialized_app")
    def test_use_case_commits_through_scoped_session(self) -> None:
        """Test a use case resolved in the scope persists through the shared engine."""
        with container_scope() as scoped:
            db = scoped.db()
            learner = create_test_user(db)
            course = create_test_course(db, create_test_user(db, email="instructor@example.com"))
            learner_id, course_id = learner.id, course.id

            enrollment = scoped.enrollment_use_case().enroll(learner_id, course_id)

        assert enrollment.status is EnrollmentStatus.ACTIVE
        with container_scope() as scoped:
            stored = scoped.db().query(models.Enrollment).filter_by(user_id=learner_id).one()
            assert stored.course_id == course_id
            assert stored.status == "Active"

    def test_engine_released_on_shutdown(self) -> None:
        """Test shutdown disposes the engine until the next startup."""
        shutdown_app()
        with pytest.raises(RuntimeError, match="not initialized"):
            get_engine()
