"""
Application common module.

Contains building blocks shared by all use cases:
- CourseAccess: Externally resolved access flags of the caller
- Result: Result type for parsing outcomes
- UnitOfWork: Transaction boundary port
"""

from .access import CourseAccess
from .parsing import parse_enum
from .result import Failure, Result, Success
from .unit_of_work import UnitOfWork

__all__ = [
    "CourseAccess",
    "Failure",
    "Result",
    "Success",
    "UnitOfWork",
    "parse_enum",
]
