from .course import Course
from .lesson import Lesson, LessonType
from .module import Module

__all__ = [
    "Course",
    "Lesson",
    "LessonType",
    "Module",
]
