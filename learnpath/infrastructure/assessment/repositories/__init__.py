from .quiz_attempt_repository import QuizAttemptRepository
from .quiz_question_repository import QuizQuestionRepository

__all__ = ["QuizAttemptRepository", "QuizQuestionRepository"]
