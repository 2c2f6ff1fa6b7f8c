"""
Patient Repository Port

Interface for patient persistence following Clean Architecture.
"""

from datetime import date
from typing import Protocol, runtime_checkable

from app.domains.vaccine_reminders.domain.entities.patient import Patient

from ..dto.reminder_dtos import PatientSummary


@runtime_checkable
class IPatientRepository(Protocol):
    """
    Patient repository interface.

    The store enforces one invariant itself: phone numbers are unique.
    Implementations raise DuplicatePhoneError when it is violated and
    StorageError for any other persistence failure.
    """

    async def create(self, patient: Patient) -> Patient:
        """
        Persist a new patient.

        Raises:
            DuplicatePhoneError: If another patient already uses the phone
        """
        ...

    async def find_by_id(self, patient_id: str) -> Patient | None:
        """
        Find patient by ID.

        Args:
            patient_id: Unique patient identifier

        Returns:
            Patient if found, None otherwise
        """
        ...

    async def find_by_phone(self, phone: str) -> Patient | None:
        """Find patient by phone number, as registered."""
        ...

    async def find_all(self, limit: int = 100) -> list[PatientSummary]:
        """List projected patient rows, newest first, at most ``limit``."""
        ...

    async def save(self, patient: Patient) -> Patient:
        """Write the whole aggregate back, replacing the stored document."""
        ...

    async def find_due_between(self, start: date, end: date) -> list[Patient]:
        """Patients whose pending vaccine date falls within [start, end]."""
        ...
