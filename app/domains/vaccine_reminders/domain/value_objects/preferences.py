"""Messaging Preferences Value Object."""

from dataclasses import dataclass
from typing import Any

from .enums import ContactTime


@dataclass(frozen=True)
class MessagingPreferences:
    """Owner's language and preferred contact window."""

    language: str = "es"
    contact_time: ContactTime = ContactTime.ANY

    def to_dict(self) -> dict[str, Any]:
        return {"language": self.language, "contact_time": self.contact_time.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "MessagingPreferences":
        if not data:
            return cls()
        return cls(
            language=data.get("language") or "es",
            contact_time=ContactTime.from_string(data.get("contact_time") or ContactTime.ANY.value),
        )
