# ============================================================================
# SCOPE: APPLICATION LAYER (Vaccine Reminders)
# Description: Use case for scheduling a patient's next vaccine.
# ============================================================================
"""Schedule Vaccine Use Case."""

import logging
from typing import TYPE_CHECKING

from app.core.domain.exceptions import NotFoundError, ValidationError
from app.domains.vaccine_reminders.domain.entities.patient import Patient
from app.domains.vaccine_reminders.domain.value_objects import VaccineEvent, parse_date

from ..dto.reminder_dtos import ScheduleVaccineRequest

if TYPE_CHECKING:
    from ..ports import IPatientRepository

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "date", "time", "location")


class ScheduleVaccineUseCase:
    """Use case for setting the pending vaccine of a patient.

    Any previously scheduled vaccine is replaced as a whole.
    """

    def __init__(self, patient_repository: "IPatientRepository") -> None:
        self._repository = patient_repository

    async def execute(self, request: ScheduleVaccineRequest) -> Patient:
        """Execute the schedule vaccine use case.

        Raises:
            ValidationError: If name, date, time or location is missing or the date is malformed.
            NotFoundError: If the patient does not exist.
        """
        event = self._build_event(request)

        patient = await self._repository.find_by_id(request.patient_id)
        if patient is None:
            raise NotFoundError("Patient", request.patient_id)

        if patient.next_vaccine is not None:
            logger.info(f"Replacing scheduled vaccine '{patient.next_vaccine.name}' for patient {patient.id}")

        patient.schedule_vaccine(event)
        saved = await self._repository.save(patient)

        logger.info(f"Vaccine '{event.name}' scheduled for patient {patient.id} on {event.date.isoformat()}")
        return saved

    def _build_event(self, request: ScheduleVaccineRequest) -> VaccineEvent:
        for field_name in REQUIRED_FIELDS:
            value = getattr(request, field_name)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise ValidationError(f"Vaccine {field_name} is required", field=field_name)

        try:
            vaccine_date = parse_date(request.date)
            next_dose_date = parse_date(request.next_dose_date) if request.next_dose_date else None
        except ValueError as e:
            raise ValidationError(f"Invalid vaccine date: {e}", field="date") from e

        return VaccineEvent(
            name=request.name.strip(),
            date=vaccine_date,
            time=request.time.strip(),
            location=request.location.strip(),
            notes=request.notes,
            lot_number=request.lot_number,
            next_dose_date=next_dose_date,
            administered=False,
        )
