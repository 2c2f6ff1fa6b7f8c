"""Consent Value Object."""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Any


def _now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class ConsentState:
    """
    Owner consent for outbound contact.

    ``given_at`` is set once when consent is first recorded; ``updated_at``
    moves on every change. A patient without a stored consent record reads
    as ``ConsentState.default()``.
    """

    marketing: bool = False
    reminders: bool = True
    privacy: bool = True
    given_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    @classmethod
    def default(cls, now: datetime | None = None) -> "ConsentState":
        now = now or _now()
        return cls(given_at=now, updated_at=now)

    def merge(
        self,
        marketing: bool | None = None,
        reminders: bool | None = None,
        privacy: bool | None = None,
        now: datetime | None = None,
    ) -> "ConsentState":
        """Return a copy with only the provided flags changed and ``updated_at`` refreshed."""
        changes: dict[str, Any] = {"updated_at": now or _now()}
        if marketing is not None:
            changes["marketing"] = bool(marketing)
        if reminders is not None:
            changes["reminders"] = bool(reminders)
        if privacy is not None:
            changes["privacy"] = bool(privacy)
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        return {
            "marketing": self.marketing,
            "reminders": self.reminders,
            "privacy": self.privacy,
            "given_at": self.given_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "ConsentState":
        if not data:
            return cls.default()
        default = cls.default()
        return cls(
            marketing=bool(data.get("marketing", default.marketing)),
            reminders=bool(data.get("reminders", default.reminders)),
            privacy=bool(data.get("privacy", default.privacy)),
            given_at=_parse_datetime(data.get("given_at")) or default.given_at,
            updated_at=_parse_datetime(data.get("updated_at")) or default.updated_at,
        )


def _parse_datetime(value: Any) -> datetime | None:
    if value is None:
        return None
    parsed = value if isinstance(value, datetime) else datetime.fromisoformat(str(value))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed
