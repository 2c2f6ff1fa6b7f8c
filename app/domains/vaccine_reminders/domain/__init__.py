"""
Vaccine Reminders Domain Layer

Components:
- Entities: Patient (aggregate root)
- Value Objects: VaccineEvent, ConsentState, InteractionRecord, MessagingPreferences, enums
- Domain Services: reminder eligibility rules (is_reminder_due, can_receive_offers)
"""

from app.domains.vaccine_reminders.domain.entities import Patient
from app.domains.vaccine_reminders.domain.exceptions import (
    ConsentDeniedError,
    DuplicatePhoneError,
    NoScheduledVaccineError,
)
from app.domains.vaccine_reminders.domain.services import can_receive_offers, is_reminder_due
from app.domains.vaccine_reminders.domain.value_objects import (
    ConsentState,
    ContactTime,
    DeliveryStatus,
    InteractionRecord,
    InteractionType,
    MessagingPreferences,
    PetType,
    VaccineEvent,
)

__all__ = [
    "Patient",
    "ConsentDeniedError",
    "DuplicatePhoneError",
    "NoScheduledVaccineError",
    "can_receive_offers",
    "is_reminder_due",
    "ConsentState",
    "ContactTime",
    "DeliveryStatus",
    "InteractionRecord",
    "InteractionType",
    "MessagingPreferences",
    "PetType",
    "VaccineEvent",
]
