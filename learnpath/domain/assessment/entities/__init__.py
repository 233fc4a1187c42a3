from .quiz_attempt import QuizAnswer, QuizAttempt
from .quiz_question import QuestionType, QuizOption, QuizQuestion
from .quiz_submission import QuizSubmission

__all__ = [
    "QuestionType",
    "QuizAnswer",
    "QuizAttempt",
    "QuizOption",
    "QuizQuestion",
    "QuizSubmission",
]
