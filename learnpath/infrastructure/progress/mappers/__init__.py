from .enrollment_mapper import EnrollmentMapper
from .lesson_progress_mapper import LessonProgressMapper

__all__ = ["EnrollmentMapper", "LessonProgressMapper"]
