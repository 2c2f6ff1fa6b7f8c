"""
Shared value objects.

Small immutable primitives reused by the domain layer.
"""

from enum import Enum
from typing import Self


class StatusEnum(str, Enum):
    """
    Base for string enums stored by value.

    Lookups are case-insensitive so documents and user input written in any
    case resolve to the same member.
    """

    @classmethod
    def values(cls) -> list[str]:
        return [e.value for e in cls]

    @classmethod
    def from_string(cls, value: "str | StatusEnum") -> Self:
        """Resolve a member from its value, ignoring case and surrounding spaces."""
        if isinstance(value, cls):
            return value
        wanted = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        raise ValueError(f"Invalid {cls.__name__}: {value}. Expected one of: {', '.join(cls.values())}")
