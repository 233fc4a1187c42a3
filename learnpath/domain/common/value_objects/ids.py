from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("UserId must be non-negative")


@dataclass(frozen=True)
class CourseId(EntityId):
    """Strongly-typed course identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("CourseId must be non-negative")


@dataclass(frozen=True)
class ModuleId(EntityId):
    """Strongly-typed module identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("ModuleId must be non-negative")

    @classmethod
    def generate(cls) -> "ModuleId":
        return cls(0)  # Database assigns real ID


@dataclass(frozen=True)
class LessonId(EntityId):
    """Strongly-typed lesson identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("LessonId must be non-negative")

    @classmethod
    def generate(cls) -> "LessonId":
        return cls(0)  # Database assigns real ID


@dataclass(frozen=True)
class QuizQuestionId(EntityId):
    """Strongly-typed quiz question identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("QuizQuestionId must be non-negative")

    @classmethod
    def generate(cls) -> "QuizQuestionId":
        return cls(0)  # Database assigns real ID


@dataclass(frozen=True)
class QuizOptionId(EntityId):
    """Strongly-typed quiz option identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("QuizOptionId must be non-negative")

    @classmethod
    def generate(cls) -> "QuizOptionId":
        return cls(0)  # Database assigns real ID


@dataclass(frozen=True)
class QuizAttemptId(EntityId):
    """Strongly-typed quiz attempt identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("QuizAttemptId must be non-negative")

    @classmethod
    def generate(cls) -> "QuizAttemptId":
        return cls(0)  # Database assigns real ID


@dataclass(frozen=True)
class LessonProgressId(EntityId):
    """Strongly-typed lesson progress identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("LessonProgressId must be non-negative")

    @classmethod
    def generate(cls) -> "LessonProgressId":
        return cls(0)  # Database assigns real ID


@dataclass(frozen=True)
class EnrollmentId(EntityId):
    """Strongly-typed enrollment identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("EnrollmentId must be non-negative")

    @classmethod
    def generate(cls) -> "EnrollmentId":
        return cls(0)  # Database assigns real ID
