"""DTOs for quiz use cases."""

from dataclasses import dataclass
from datetime import datetime

from learnpath.domain.assessment.entities.quiz_attempt import QuizAttempt
from learnpath.domain.assessment.entities.quiz_question import QuestionType
from learnpath.domain.assessment.services.quiz_scoring_service import QuestionResult


@dataclass
class QuizResult:
    """Outcome of a submission: the stored attempt plus the per-question report."""

    attempt: QuizAttempt
    results: list[QuestionResult]
    lesson_completed: bool

    @property
    def score_percentage(self) -> float:
        return self.attempt.score_percentage


@dataclass
class QuizOptionView:
    """Option as shown to the caller; is_correct is None when hidden."""

    id: int
    text: str
    is_correct: bool | None


@dataclass
class QuizQuestionView:
    """Question as shown to the caller."""

    id: int
    text: str
    question_type: QuestionType
    order_index: int
    options: list[QuizOptionView]


@dataclass
class QuizView:
    """Quiz lesson with its ordered question bank."""

    lesson_id: int
    title: str
    questions: list[QuizQuestionView]


@dataclass
class QuizAttemptSummary:
    """Attempt row of the attempt history."""

    id: int
    user_id: int
    score: int
    total_questions: int
    score_percentage: float
    passed: bool
    started_at: datetime
    completed_at: datetime | None
