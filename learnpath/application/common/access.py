"""Caller access flags resolved outside the application layer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CourseAccess:
    """
    What the caller may do with one course.

    The request layer resolves these flags from the caller's identity and
    role; use cases only read them.
    """

    is_instructor: bool = False
    is_admin: bool = False
    is_enrolled: bool = False

    @property
    def can_view(self) -> bool:
        return self.is_instructor or self.is_admin or self.is_enrolled

    @property
    def can_edit(self) -> bool:
        return self.is_instructor or self.is_admin

    @property
    def sees_answer_key(self) -> bool:
        """Whether option correctness may be shown."""
        return self.can_edit
