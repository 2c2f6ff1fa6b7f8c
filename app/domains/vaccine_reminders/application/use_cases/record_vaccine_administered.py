# ============================================================================
# SCOPE: APPLICATION LAYER (Vaccine Reminders)
# Description: Use case for archiving an administered vaccine.
# ============================================================================
"""Record Vaccine Administered Use Case."""

import logging
from typing import TYPE_CHECKING

from app.core.domain.exceptions import NotFoundError
from app.domains.vaccine_reminders.domain.entities.patient import Patient

if TYPE_CHECKING:
    from ..ports import IPatientRepository

logger = logging.getLogger(__name__)


class RecordVaccineAdministeredUseCase:
    """Move the pending vaccine into the patient's history, marked administered."""

    def __init__(self, patient_repository: "IPatientRepository") -> None:
        self._repository = patient_repository

    async def execute(self, patient_id: str) -> Patient:
        """
        Raises:
            NotFoundError: If the patient does not exist.
            NoScheduledVaccineError: If there is no pending vaccine to archive.
        """
        patient = await self._repository.find_by_id(patient_id)
        if patient is None:
            raise NotFoundError("Patient", patient_id)

        archived = patient.archive_next_vaccine(administered=True)
        saved = await self._repository.save(patient)

        logger.info(f"Vaccine '{archived.name}' recorded as administered for patient {patient_id}")
        return saved
