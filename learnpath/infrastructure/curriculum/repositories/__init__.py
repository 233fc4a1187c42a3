from .course_repository import CourseRepository
from .lesson_repository import LessonRepository
from .module_repository import ModuleRepository

__all__ = ["CourseRepository", "LessonRepository", "ModuleRepository"]
