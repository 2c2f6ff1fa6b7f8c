"""
Test data builders using the Builder pattern.

Provides fluent interfaces for constructing test objects with sensible defaults.
"""

from datetime import UTC, date, datetime, timedelta

from app.domains.vaccine_reminders.domain.entities.patient import Patient
from app.domains.vaccine_reminders.domain.value_objects import (
    ConsentState,
    ContactTime,
    MessagingPreferences,
    PetType,
    VaccineEvent,
)

FIXED_NOW = datetime(2026, 10, 18, 15, 0, tzinfo=UTC)


class VaccineEventBuilder:
    """Builder for creating vaccine events."""

    def __init__(self):
        self._data = {
            "name": "Rabia",
            "date": date(2026, 10, 21),
            "time": "10:30",
            "location": "Sucursal Centro",
            "notes": None,
            "lot_number": None,
            "next_dose_date": None,
            "administered": False,
        }

    def named(self, name: str) -> "VaccineEventBuilder":
        self._data["name"] = name
        return self

    def on(self, vaccine_date: date) -> "VaccineEventBuilder":
        self._data["date"] = vaccine_date
        return self

    def in_days(self, days: int, now: datetime = FIXED_NOW) -> "VaccineEventBuilder":
        """Schedule ``days`` calendar days after ``now``'s UTC date."""
        self._data["date"] = now.date() + timedelta(days=days)
        return self

    def at(self, time_text: str, location: str | None = None) -> "VaccineEventBuilder":
        self._data["time"] = time_text
        if location is not None:
            self._data["location"] = location
        return self

    def administered(self) -> "VaccineEventBuilder":
        self._data["administered"] = True
        return self

    def build(self) -> VaccineEvent:
        return VaccineEvent(**self._data)


class PatientBuilder:
    """Builder for creating patient aggregates."""

    _counter = 0

    def __init__(self):
        PatientBuilder._counter += 1
        n = PatientBuilder._counter
        self._data = {
            "id": f"patient-{n:04d}",
            "full_name": "Ana López",
            "phone": f"55{n:08d}",
            "email": None,
            "pet_name": "Firulais",
            "pet_type": PetType.DOG,
            "next_vaccine": None,
            "consent": ConsentState.default(FIXED_NOW - timedelta(days=30)),
            "last_interaction": None,
            "preferences": MessagingPreferences(language="es", contact_time=ContactTime.ANY),
            "created_at": FIXED_NOW - timedelta(days=30),
        }

    def with_id(self, patient_id: str) -> "PatientBuilder":
        self._data["id"] = patient_id
        return self

    def with_owner(self, full_name: str, phone: str | None = None) -> "PatientBuilder":
        self._data["full_name"] = full_name
        if phone is not None:
            self._data["phone"] = phone
        return self

    def with_phone(self, phone: str) -> "PatientBuilder":
        self._data["phone"] = phone
        return self

    def with_pet(self, pet_name: str, pet_type: PetType = PetType.DOG) -> "PatientBuilder":
        self._data["pet_name"] = pet_name
        self._data["pet_type"] = pet_type
        return self

    def with_vaccine(self, event: VaccineEvent | None = None) -> "PatientBuilder":
        self._data["next_vaccine"] = event or VaccineEventBuilder().build()
        return self

    def with_vaccine_in_days(self, days: int, now: datetime = FIXED_NOW) -> "PatientBuilder":
        self._data["next_vaccine"] = VaccineEventBuilder().in_days(days, now).build()
        return self

    def with_consent(self, **flags: bool) -> "PatientBuilder":
        self._data["consent"] = self._data["consent"].merge(**flags, now=FIXED_NOW - timedelta(days=1))
        return self

    def without_reminder_consent(self) -> "PatientBuilder":
        return self.with_consent(reminders=False)

    def with_last_interaction(self, when: datetime) -> "PatientBuilder":
        self._data["last_interaction"] = when
        return self

    def created_at(self, when: datetime) -> "PatientBuilder":
        self._data["created_at"] = when
        return self

    def build(self) -> Patient:
        data = dict(self._data)
        data["updated_at"] = data["created_at"]
        return Patient(**data)
