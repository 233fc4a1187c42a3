"""Domain service aggregating lesson progress into module and course figures."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime

from learnpath.domain.curriculum.entities.course import Course
from learnpath.domain.curriculum.entities.lesson import Lesson
from learnpath.domain.curriculum.entities.module import Module
from learnpath.domain.progress.entities.lesson_progress import LessonProgress


@dataclass
class LessonProgressSummary:
    """Progress of one lesson for one user."""

    lesson_id: int
    lesson_title: str
    module_id: int
    module_title: str
    is_completed: bool
    started_at: datetime | None
    completed_at: datetime | None


@dataclass
class ModuleProgressSummary:
    """Progress of one module for one user."""

    module_id: int
    module_title: str
    total_lessons: int
    completed_lessons: int
    progress_percentage: float
    lessons: list[LessonProgressSummary] = field(default_factory=list)


@dataclass
class CourseProgressSummary:
    """Progress of one course for one user."""

    course_id: int
    course_title: str
    total_lessons: int
    completed_lessons: int
    progress_percentage: float
    modules: list[ModuleProgressSummary] = field(default_factory=list)


class ProgressCalculator:
    """Stateless domain service for progress percentages."""

    @staticmethod
    def percentage(completed: int, total: int) -> float:
        """Completed share in percent, rounded to one decimal; 0 for an empty course."""
        if total <= 0:
            return 0
        return round(completed / total * 100, 1)

    @staticmethod
    def has_completed_all(completed: int, total: int) -> bool:
        """A course with no lessons is never complete."""
        return total > 0 and completed == total

    def summarize_course(
        self,
        course: Course,
        modules: Sequence[Module],
        lessons: Sequence[Lesson],
        progress: Sequence[LessonProgress],
    ) -> CourseProgressSummary:
        """
        Build the course progress view for one user.

        Args:
            course: The course
            modules: All modules of the course
            lessons: All lessons of the course
            progress: The user's progress records for lessons of the course

        Returns:
            CourseProgressSummary with modules and lessons in order_index order
        """
        progress_by_lesson = {p.lesson_id.value: p for p in progress}

        module_summaries: list[ModuleProgressSummary] = []
        for module in sorted(modules, key=lambda m: m.order_index):
            module_lessons = sorted(
                (lesson for lesson in lessons if lesson.module_id == module.id),
                key=lambda lesson: lesson.order_index,
            )
            lesson_summaries = []
            for lesson in module_lessons:
                record = progress_by_lesson.get(lesson.id.value)
                lesson_summaries.append(
                    LessonProgressSummary(
                        lesson_id=lesson.id.value,
                        lesson_title=lesson.title,
                        module_id=module.id.value,
                        module_title=module.title,
                        is_completed=record.is_completed if record else False,
                        started_at=record.started_at if record else None,
                        completed_at=record.completed_at if record else None,
                    )
                )

            completed = sum(1 for s in lesson_summaries if s.is_completed)
            module_summaries.append(
                ModuleProgressSummary(
                    module_id=module.id.value,
                    module_title=module.title,
                    total_lessons=len(lesson_summaries),
                    completed_lessons=completed,
                    progress_percentage=self.percentage(completed, len(lesson_summaries)),
                    lessons=lesson_summaries,
                )
            )

        total = sum(m.total_lessons for m in module_summaries)
        course_lesson_ids = {lesson.id.value for lesson in lessons}
        completed_total = sum(
            1 for p in progress if p.is_completed and p.lesson_id.value in course_lesson_ids
        )
        return CourseProgressSummary(
            course_id=course.id.value,
            course_title=course.title,
            total_lessons=total,
            completed_lessons=completed_total,
            progress_percentage=self.percentage(completed_total, total),
            modules=module_summaries,
        )
