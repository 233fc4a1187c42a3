from .course_repository import CourseRepositoryProtocol
from .lesson_repository import LessonRepositoryProtocol
from .module_repository import ModuleRepositoryProtocol

__all__ = [
    "CourseRepositoryProtocol",
    "LessonRepositoryProtocol",
    "ModuleRepositoryProtocol",
]
