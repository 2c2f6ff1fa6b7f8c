# ============================================================================
# SCOPE: APPLICATION LAYER (Vaccine Reminders)
# Description: Query use cases for patients.
# ============================================================================
"""Patient query use cases."""

from typing import TYPE_CHECKING

from app.core.domain.exceptions import NotFoundError, ValidationError
from app.domains.vaccine_reminders.domain.entities.patient import Patient

from ..dto.reminder_dtos import PatientSummary

if TYPE_CHECKING:
    from ..ports import IPatientRepository

DEFAULT_LIST_LIMIT = 100


class GetPatientUseCase:
    """Load a single patient by id."""

    def __init__(self, patient_repository: "IPatientRepository") -> None:
        self._repository = patient_repository

    async def execute(self, patient_id: str) -> Patient:
        patient = await self._repository.find_by_id(patient_id)
        if patient is None:
            raise NotFoundError("Patient", patient_id)
        return patient


class ListPatientsUseCase:
    """Newest-first patient listing, bounded by ``limit``."""

    def __init__(self, patient_repository: "IPatientRepository") -> None:
        self._repository = patient_repository

    async def execute(self, limit: int = DEFAULT_LIST_LIMIT) -> list[PatientSummary]:
        if limit <= 0:
            raise ValidationError("limit must be a positive integer", field="limit")
        return await self._repository.find_all(limit=limit)
