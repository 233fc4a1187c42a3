"""Custom exception hierarchy for learnpath application."""


class LearnPathError(Exception):
    """Base exception for all learnpath errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(LearnPathError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class BadRequestError(LearnPathError):
    """Invalid input or a request that breaks a business rule."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 400 status code."""
        super().__init__(message, status_code=400)


class ForbiddenError(LearnPathError):
    """Caller lacks access to the resource."""

    def __init__(self, message: str = "You do not have access to this resource") -> None:
        """Initialize with message and 403 status code."""
        super().__init__(message, status_code=403)


class ConflictError(LearnPathError):
    """Request conflicts with the current state of the resource."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 409 status code."""
        super().__init__(message, status_code=409)


class CourseNotFoundError(NotFoundError):
    """Course not found error."""

    def __init__(self, course_id: int) -> None:
        self.course_id = course_id
        super().__init__(f"Course with id {course_id} not found")


class CourseModuleNotFoundError(NotFoundError):
    """Module not found error."""

    def __init__(self, module_id: int) -> None:
        self.module_id = module_id
        super().__init__(f"Module with id {module_id} not found")


class LessonNotFoundError(NotFoundError):
    """Lesson not found error."""

    def __init__(self, lesson_id: int) -> None:
        self.lesson_id = lesson_id
        super().__init__(f"Lesson with id {lesson_id} not found")


class QuestionNotFoundError(NotFoundError):
    """Quiz question not found error."""

    def __init__(self, question_id: int) -> None:
        self.question_id = question_id
        super().__init__(f"Question with id {question_id} not found")


class OptionNotFoundError(NotFoundError):
    """Quiz option not found error."""

    def __init__(self, option_id: int) -> None:
        self.option_id = option_id
        super().__init__(f"Option with id {option_id} not found")


class EnrollmentNotFoundError(NotFoundError):
    """Enrollment not found error."""

    def __init__(self, user_id: int, course_id: int) -> None:
        self.user_id = user_id
        self.course_id = course_id
        super().__init__(f"Enrollment of user {user_id} in course {course_id} not found")


class NotAQuizError(BadRequestError):
    """Quiz operation on a lesson that is not a quiz."""

    def __init__(self, lesson_id: int) -> None:
        self.lesson_id = lesson_id
        super().__init__(f"Lesson {lesson_id} is not a quiz")
