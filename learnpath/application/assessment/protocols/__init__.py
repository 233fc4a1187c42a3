from .quiz_attempt_repository import QuizAttemptRepositoryProtocol
from .quiz_question_repository import QuizQuestionRepositoryProtocol

__all__ = [
    "QuizAttemptRepositoryProtocol",
    "QuizQuestionRepositoryProtocol",
]
