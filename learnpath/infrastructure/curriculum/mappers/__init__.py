from .course_mapper import CourseMapper
from .lesson_mapper import LessonMapper
from .module_mapper import ModuleMapper

__all__ = ["CourseMapper", "LessonMapper", "ModuleMapper"]
