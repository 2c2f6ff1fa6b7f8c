# ============================================================================
# SCOPE: APPLICATION LAYER (Vaccine Reminders)
# Description: Data Transfer Objects for patient and reminder operations.
# ============================================================================
"""Vaccine Reminder DTOs.

Request and result objects for registration, scheduling, consent and
reminder sends. Request fields are optional so that missing input reaches
the use case and is reported as a ValidationError with the field name.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from app.domains.vaccine_reminders.domain.entities.patient import Patient
from app.domains.vaccine_reminders.domain.value_objects import (
    ConsentState,
    InteractionRecord,
    PetType,
    VaccineEvent,
)

# =============================================================================
# Request DTOs
# =============================================================================


@dataclass(frozen=True)
class RegisterPatientRequest:
    """Request DTO for registering a new patient."""

    full_name: str | None
    phone: str | None
    pet_name: str | None
    pet_type: PetType | str | None
    email: str | None = None
    pet_breed: str | None = None
    pet_age: int | None = None
    pet_weight: float | None = None
    marketing_consent: bool | None = None
    reminders_consent: bool | None = None
    language: str | None = None
    contact_time: str | None = None


@dataclass(frozen=True)
class ScheduleVaccineRequest:
    """Request DTO for scheduling the next vaccine of a patient."""

    patient_id: str
    name: str | None
    date: date | datetime | str | None
    time: str | None
    location: str | None
    notes: str | None = None
    lot_number: str | None = None
    next_dose_date: date | datetime | str | None = None

    @classmethod
    def from_dict(cls, patient_id: str, data: dict[str, Any]) -> "ScheduleVaccineRequest":
        return cls(
            patient_id=patient_id,
            name=data.get("name"),
            date=data.get("date"),
            time=data.get("time"),
            location=data.get("location"),
            notes=data.get("notes"),
            lot_number=data.get("lot_number"),
            next_dose_date=data.get("next_dose_date"),
        )


@dataclass(frozen=True)
class UpdateConsentRequest:
    """Partial consent update; None leaves the flag unchanged."""

    patient_id: str
    marketing: bool | None = None
    reminders: bool | None = None
    privacy: bool | None = None


# =============================================================================
# Result DTOs
# =============================================================================


@dataclass(frozen=True)
class PatientSummary:
    """Projection used by patient listings."""

    id: str
    full_name: str
    phone: str
    pet_name: str
    pet_type: PetType
    next_vaccine: VaccineEvent | None
    last_interaction: datetime | None
    created_at: datetime

    @classmethod
    def from_entity(cls, patient: Patient) -> "PatientSummary":
        return cls(
            id=patient.id,
            full_name=patient.full_name,
            phone=patient.phone,
            pet_name=patient.pet_name,
            pet_type=patient.pet_type,
            next_vaccine=patient.next_vaccine,
            last_interaction=patient.last_interaction,
            created_at=patient.created_at,
        )


@dataclass(frozen=True)
class SendReminderResult:
    """Outcome of a successful reminder send."""

    patient_id: str
    message_id: str
    interaction: InteractionRecord


@dataclass(frozen=True)
class UpdateConsentResult:
    patient_id: str
    consent: ConsentState


@dataclass
class SendDueRemindersResult:
    """Counts and ids of a reminder sweep."""

    sent_ids: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)  # patient_id -> error code
    skipped_ids: list[str] = field(default_factory=list)

    @property
    def sent_count(self) -> int:
        return len(self.sent_ids)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped_ids)
