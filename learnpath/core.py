from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from learnpath.application.assessment.use_cases.quiz_authoring_use_case import (
    QuizAuthoringUseCase,
)
from learnpath.application.assessment.use_cases.quiz_submission_use_case import (
    QuizSubmissionUseCase,
)
from learnpath.application.curriculum.use_cases.lesson_use_case import LessonUseCase
from learnpath.application.curriculum.use_cases.module_use_case import ModuleUseCase
from learnpath.application.progress.services.progress_propagator import ProgressPropagator
from learnpath.application.progress.use_cases.enrollment_use_case import EnrollmentUseCase
from learnpath.application.progress.use_cases.progress_use_case import ProgressUseCase
from learnpath.config import get_settings
from learnpath.domain.assessment.services.quiz_scoring_service import QuizScoringService
from learnpath.domain.progress.services.progress_calculator import ProgressCalculator
from learnpath.infrastructure.assessment.repositories import (
    QuizAttemptRepository,
    QuizQuestionRepository,
)
from learnpath.infrastructure.common.clock import SystemClock
from learnpath.infrastructure.common.unit_of_work import SQLAlchemyUnitOfWork
from learnpath.infrastructure.curriculum.repositories import (
    CourseRepository,
    LessonRepository,
    ModuleRepository,
)
from learnpath.infrastructure.progress.repositories import (
    EnrollmentRepository,
    LessonProgressRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Singleton(get_settings)
    clock = providers.Singleton(SystemClock)
    uow = providers.Factory(SQLAlchemyUnitOfWork, db=db)

    # Repositories
    course_repository = providers.Factory(CourseRepository, db=db)
    module_repository = providers.Factory(ModuleRepository, db=db)
    lesson_repository = providers.Factory(LessonRepository, db=db)
    quiz_question_repository = providers.Factory(QuizQuestionRepository, db=db)
    quiz_attempt_repository = providers.Factory(QuizAttemptRepository, db=db)
    lesson_progress_repository = providers.Factory(LessonProgressRepository, db=db)
    enrollment_repository = providers.Factory(EnrollmentRepository, db=db)

    # Domain services (pure domain logic, no db)
    quiz_scoring_service = providers.Factory(
        QuizScoringService,
        pass_threshold=settings.provided.QUIZ_PASS_THRESHOLD,
    )
    progress_calculator = providers.Factory(ProgressCalculator)

    # Application services
    progress_propagator = providers.Factory(
        ProgressPropagator,
        lesson_progress_repository=lesson_progress_repository,
        enrollment_repository=enrollment_repository,
        lesson_repository=lesson_repository,
        clock=clock,
    )

    # Curriculum use cases
    module_use_case = providers.Factory(
        ModuleUseCase,
        course_repository=course_repository,
        module_repository=module_repository,
        progress_propagator=progress_propagator,
        uow=uow,
    )
    lesson_use_case = providers.Factory(
        LessonUseCase,
        module_repository=module_repository,
        lesson_repository=lesson_repository,
        progress_propagator=progress_propagator,
        uow=uow,
    )

    # Assessment use cases
    quiz_authoring_use_case = providers.Factory(
        QuizAuthoringUseCase,
        lesson_repository=lesson_repository,
        quiz_question_repository=quiz_question_repository,
        uow=uow,
    )
    quiz_submission_use_case = providers.Factory(
        QuizSubmissionUseCase,
        lesson_repository=lesson_repository,
        quiz_question_repository=quiz_question_repository,
        quiz_attempt_repository=quiz_attempt_repository,
        progress_propagator=progress_propagator,
        scoring_service=quiz_scoring_service,
        clock=clock,
        uow=uow,
        assumed_duration_minutes=settings.provided.QUIZ_ASSUMED_DURATION_MINUTES,
    )

    # Progress use cases
    progress_use_case = providers.Factory(
        ProgressUseCase,
        course_repository=course_repository,
        module_repository=module_repository,
        lesson_repository=lesson_repository,
        lesson_progress_repository=lesson_progress_repository,
        enrollment_repository=enrollment_repository,
        progress_propagator=progress_propagator,
        progress_calculator=progress_calculator,
        uow=uow,
    )
    enrollment_use_case = providers.Factory(
        EnrollmentUseCase,
        course_repository=course_repository,
        lesson_repository=lesson_repository,
        lesson_progress_repository=lesson_progress_repository,
        enrollment_repository=enrollment_repository,
        quiz_attempt_repository=quiz_attempt_repository,
        progress_propagator=progress_propagator,
        clock=clock,
        uow=uow,
    )


# Initialize container
container = Container()
