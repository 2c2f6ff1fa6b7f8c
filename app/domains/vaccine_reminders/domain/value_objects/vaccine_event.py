"""Vaccine Event Value Object."""

from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Any


@dataclass(frozen=True)
class VaccineEvent:
    """
    A scheduled (or administered) vaccination.

    ``time`` is kept as entered ("10:30", "10:30 AM") since it is only
    rendered back into messages.
    """

    name: str
    date: date
    time: str
    location: str
    notes: str | None = None
    lot_number: str | None = None
    next_dose_date: date | None = None
    administered: bool = False

    def mark_administered(self) -> "VaccineEvent":
        return replace(self, administered=True)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "date": self.date.isoformat(),
            "time": self.time,
            "location": self.location,
            "notes": self.notes,
            "lot_number": self.lot_number,
            "next_dose_date": self.next_dose_date.isoformat() if self.next_dose_date else None,
            "administered": self.administered,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "VaccineEvent | None":
        if not data:
            return None
        return cls(
            name=data["name"],
            date=parse_date(data["date"]),
            time=data["time"],
            location=data["location"],
            notes=data.get("notes"),
            lot_number=data.get("lot_number"),
            next_dose_date=parse_date(data["next_dose_date"]) if data.get("next_dose_date") else None,
            administered=bool(data.get("administered", False)),
        )


def parse_date(value: date | datetime | str) -> date:
    """Accept a date, a datetime or an ISO-8601 string ('2026-10-21' or '2026-10-21T10:00:00Z')."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if "T" in text or " " in text:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    return date.fromisoformat(text)
