from .quiz_scoring_service import (
    DEFAULT_PASS_THRESHOLD,
    QuestionResult,
    QuizScoringService,
    ScoredQuiz,
)

__all__ = [
    "DEFAULT_PASS_THRESHOLD",
    "QuestionResult",
    "QuizScoringService",
    "ScoredQuiz",
]
