"""Parsing of externally supplied enum values."""

from enum import Enum
from typing import TypeVar

from learnpath.domain.common.exceptions import ValidationError

from .result import Failure, Result, Success

EnumT = TypeVar("EnumT", bound=Enum)


def parse_enum(
    enum_type: type[EnumT], raw: object, field: str
) -> "Result[EnumT, ValidationError]":
    """
    Parse a raw value into a member of ``enum_type``.

    Matches member values exactly, then member values and names
    case-insensitively. Anything else is a Failure; there is no fallback
    member.

    Args:
        enum_type: Target enum class
        raw: Raw value (usually a string from the request layer)
        field: Field name reported in the error

    Returns:
        Success with the enum member, or Failure with a ValidationError
    """
    if isinstance(raw, enum_type):
        return Success(raw)

    if isinstance(raw, str):
        candidate = raw.strip()
        for member in enum_type:
            if member.value == candidate:
                return Success(member)
        lowered = candidate.lower()
        for member in enum_type:
            if str(member.value).lower() == lowered or member.name.lower() == lowered:
                return Success(member)

    allowed = ", ".join(str(m.value) for m in enum_type)
    return Failure(
        ValidationError(
            f"Invalid {field} '{raw}'. Allowed values: {allowed}",
            field=field,
            value=raw,
        )
    )
