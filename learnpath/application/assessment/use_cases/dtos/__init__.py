from .quiz_dtos import QuizAttemptSummary, QuizOptionView, QuizQuestionView, QuizResult, QuizView

__all__ = [
    "QuizAttemptSummary",
    "QuizOptionView",
    "QuizQuestionView",
    "QuizResult",
    "QuizView",
]
