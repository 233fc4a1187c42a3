from .progress_calculator import (
    CourseProgressSummary,
    LessonProgressSummary,
    ModuleProgressSummary,
    ProgressCalculator,
)

__all__ = [
    "CourseProgressSummary",
    "LessonProgressSummary",
    "ModuleProgressSummary",
    "ProgressCalculator",
]
