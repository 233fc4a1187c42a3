from .enrollment_repository import EnrollmentRepositoryProtocol
from .lesson_progress_repository import LessonProgressRepositoryProtocol

__all__ = [
    "EnrollmentRepositoryProtocol",
    "LessonProgressRepositoryProtocol",
]
