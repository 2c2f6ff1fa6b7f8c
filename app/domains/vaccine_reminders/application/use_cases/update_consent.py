# ============================================================================
# SCOPE: APPLICATION LAYER (Vaccine Reminders)
# Description: Use case for updating owner consent.
# ============================================================================
"""Update Consent Use Case."""

import logging
from typing import TYPE_CHECKING

from app.core.domain.exceptions import NotFoundError

from ..dto.reminder_dtos import UpdateConsentRequest, UpdateConsentResult

if TYPE_CHECKING:
    from ..ports import IPatientRepository

logger = logging.getLogger(__name__)


class UpdateConsentUseCase:
    """Merge the provided consent flags over the stored ones."""

    def __init__(self, patient_repository: "IPatientRepository") -> None:
        self._repository = patient_repository

    async def execute(self, request: UpdateConsentRequest) -> UpdateConsentResult:
        patient = await self._repository.find_by_id(request.patient_id)
        if patient is None:
            raise NotFoundError("Patient", request.patient_id)

        consent = patient.update_consent(
            marketing=request.marketing,
            reminders=request.reminders,
            privacy=request.privacy,
        )
        await self._repository.save(patient)

        logger.info(
            f"Consent updated for patient {patient.id}: "
            f"marketing={consent.marketing} reminders={consent.reminders} privacy={consent.privacy}"
        )
        return UpdateConsentResult(patient_id=patient.id, consent=consent)
