from .enrollment import Enrollment, EnrollmentStatus
from .lesson_progress import LessonProgress

__all__ = [
    "Enrollment",
    "EnrollmentStatus",
    "LessonProgress",
]
