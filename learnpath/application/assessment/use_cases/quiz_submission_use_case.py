"""Use case for taking quizzes: viewing, submitting and attempt history."""

from datetime import timedelta

import structlog

from learnpath.application.assessment.protocols.quiz_attempt_repository import (
    QuizAttemptRepositoryProtocol,
)
from learnpath.application.assessment.protocols.quiz_question_repository import (
    QuizQuestionRepositoryProtocol,
)
from learnpath.application.assessment.use_cases.dtos.quiz_dtos import (
    QuizAttemptSummary,
    QuizOptionView,
    QuizQuestionView,
    QuizResult,
    QuizView,
)
from learnpath.application.common.access import CourseAccess
from learnpath.application.common.unit_of_work import UnitOfWork
from learnpath.application.curriculum.protocols.lesson_repository import (
    LessonRepositoryProtocol,
)
from learnpath.application.ports.clock import ClockProtocol
from learnpath.application.progress.services.progress_propagator import ProgressPropagator
from learnpath.domain.assessment.entities.quiz_attempt import QuizAttempt
from learnpath.domain.assessment.entities.quiz_submission import QuizSubmission
from learnpath.domain.assessment.services.quiz_scoring_service import QuizScoringService
from learnpath.domain.common.exceptions import ValidationError
from learnpath.domain.common.value_objects.ids import LessonId, UserId
from learnpath.domain.curriculum.entities.lesson import Lesson
from learnpath.exceptions import (
    BadRequestError,
    ForbiddenError,
    LessonNotFoundError,
    NotAQuizError,
)

logger = structlog.get_logger(__name__)

DEFAULT_ASSUMED_DURATION_MINUTES = 5


class QuizSubmissionUseCase:
    """Use case for learners taking a quiz."""

    def __init__(
        self,
        lesson_repository: LessonRepositoryProtocol,
        quiz_question_repository: QuizQuestionRepositoryProtocol,
        quiz_attempt_repository: QuizAttemptRepositoryProtocol,
        progress_propagator: ProgressPropagator,
        scoring_service: QuizScoringService,
        clock: ClockProtocol,
        uow: UnitOfWork,
        assumed_duration_minutes: int = DEFAULT_ASSUMED_DURATION_MINUTES,
    ) -> None:
        self.lesson_repository = lesson_repository
        self.quiz_question_repository = quiz_question_repository
        self.quiz_attempt_repository = quiz_attempt_repository
        self.progress_propagator = progress_propagator
        self.scoring_service = scoring_service
        self.clock = clock
        self.uow = uow
        self.assumed_duration = timedelta(minutes=assumed_duration_minutes)

    def submit_quiz(
        self, user_id: int, submission: QuizSubmission, access: CourseAccess
    ) -> QuizResult:
        """
        Score a submission, record the attempt and complete the lesson on pass.

        The attempt is recorded whether or not it passes. A failing attempt
        never changes lesson progress.

        Args:
            user_id: ID of the learner
            submission: Selected options per question
            access: Caller's access to the course

        Returns:
            QuizResult with the stored attempt and per-question report

        Raises:
            LessonNotFoundError: If the lesson is not found
            NotAQuizError: If the lesson is not a quiz
            ForbiddenError: If the caller cannot view the course
            BadRequestError: If the submission does not match the quiz
        """
        user_id_vo = UserId(user_id)
        lesson_id = submission.lesson_id

        with self.uow:
            lesson = self._get_quiz_lesson(lesson_id.value)
            if not access.can_view:
                raise ForbiddenError("You don't have permission to submit this quiz")

            questions = self.quiz_question_repository.find_by_lesson(lesson_id)
            try:
                scored = self.scoring_service.score(questions, submission)
            except ValidationError as e:
                raise BadRequestError(e.message) from e

            now = self.clock.now()
            started_at = now - self.assumed_duration
            attempt = self.quiz_attempt_repository.add(
                QuizAttempt.record(
                    lesson_id=lesson_id,
                    user_id=user_id_vo,
                    started_at=started_at,
                    completed_at=now,
                    score=scored.score,
                    total_questions=scored.total_questions,
                    passed=scored.passed,
                    answers=scored.answers,
                )
            )

            if scored.passed:
                course_id = self.lesson_repository.find_course_id(lesson.id)
                if course_id is None:
                    raise LessonNotFoundError(lesson_id.value)
                self.progress_propagator.complete_lesson(
                    user_id_vo, lesson.id, course_id, started_at=started_at
                )

            self.uow.commit()

        logger.info(
            "quiz_submitted",
            user_id=user_id,
            lesson_id=lesson_id.value,
            attempt_id=attempt.id.value,
            score=scored.score,
            total_questions=scored.total_questions,
            passed=scored.passed,
        )
        return QuizResult(attempt=attempt, results=scored.results, lesson_completed=scored.passed)

    def get_quiz(self, lesson_id: int, access: CourseAccess) -> QuizView:
        """
        Get a quiz with its questions in order.

        Option correctness is only included for instructors and admins.

        Raises:
            LessonNotFoundError: If the lesson is not found
            NotAQuizError: If the lesson is not a quiz
            ForbiddenError: If the caller cannot view the course
        """
        lesson = self._get_quiz_lesson(lesson_id)
        if not access.can_view:
            raise ForbiddenError("You don't have permission to view this quiz")

        show_answers = access.sees_answer_key
        questions = self.quiz_question_repository.find_by_lesson(lesson.id)
        return QuizView(
            lesson_id=lesson_id,
            title=lesson.title,
            questions=[
                QuizQuestionView(
                    id=q.id.value,
                    text=q.text,
                    question_type=q.question_type,
                    order_index=q.order_index,
                    options=[
                        QuizOptionView(
                            id=o.id.value,
                            text=o.text,
                            is_correct=o.is_correct if show_answers else None,
                        )
                        for o in q.options
                    ],
                )
                for q in questions
            ],
        )

    def get_attempts(
        self, lesson_id: int, user_id: int, access: CourseAccess
    ) -> list[QuizAttemptSummary]:
        """
        Get attempt history of a quiz.

        Learners see their own attempts; instructors and admins see everyone's.

        Returns:
            Attempts ordered newest first

        Raises:
            LessonNotFoundError: If the lesson is not found
            NotAQuizError: If the lesson is not a quiz
            ForbiddenError: If the caller cannot view the course
        """
        lesson = self._get_quiz_lesson(lesson_id)
        if not access.can_view:
            raise ForbiddenError("You don't have permission to view quiz attempts for this lesson")

        owner = None if access.can_edit else UserId(user_id)
        attempts = self.quiz_attempt_repository.find_by_lesson(lesson.id, owner)
        return [
            QuizAttemptSummary(
                id=a.id.value,
                user_id=a.user_id.value,
                score=a.score,
                total_questions=a.total_questions,
                score_percentage=a.score_percentage,
                passed=a.passed,
                started_at=a.started_at,
                completed_at=a.completed_at,
            )
            for a in attempts
        ]

    def _get_quiz_lesson(self, lesson_id: int) -> Lesson:
        lesson = self.lesson_repository.find_by_id(LessonId(lesson_id))
        if not lesson:
            raise LessonNotFoundError(lesson_id)
        if not lesson.is_quiz():
            raise NotAQuizError(lesson_id)
        return lesson
