from .quiz_attempt_mapper import QuizAttemptMapper
from .quiz_question_mapper import QuizQuestionMapper

__all__ = ["QuizAttemptMapper", "QuizQuestionMapper"]
