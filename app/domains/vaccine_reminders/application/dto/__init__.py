# ============================================================================
# SCOPE: APPLICATION LAYER (Vaccine Reminders)
# Description: Data Transfer Objects exports.
# ============================================================================
"""Application DTOs for Vaccine Reminders domain."""

from .reminder_dtos import (
    PatientSummary,
    RegisterPatientRequest,
    ScheduleVaccineRequest,
    SendDueRemindersResult,
    SendReminderResult,
    UpdateConsentRequest,
    UpdateConsentResult,
)

__all__ = [
    # Request DTOs
    "RegisterPatientRequest",
    "ScheduleVaccineRequest",
    "UpdateConsentRequest",
    # Result DTOs
    "PatientSummary",
    "SendReminderResult",
    "SendDueRemindersResult",
    "UpdateConsentResult",
]
