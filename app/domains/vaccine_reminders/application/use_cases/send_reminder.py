# ============================================================================
# SCOPE: APPLICATION LAYER (Vaccine Reminders)
# Description: Use case for sending a vaccine reminder to a patient's owner.
# ============================================================================
"""Send Reminder Use Case.

Sends the vaccine reminder template via WhatsApp and records the send in
the patient's interaction history.
"""

import logging
from typing import TYPE_CHECKING

from app.core.domain.exceptions import NotFoundError
from app.core.shared.formatters import DateFormatter
from app.domains.vaccine_reminders.domain.exceptions import ConsentDeniedError, NoScheduledVaccineError
from app.domains.vaccine_reminders.domain.value_objects import (
    DeliveryStatus,
    InteractionRecord,
    InteractionType,
)

from ..dto.reminder_dtos import SendReminderResult
from ..messages import DEFAULT_CLINIC_NAME, build_reminder_log_message

if TYPE_CHECKING:
    from app.domains.vaccine_reminders.domain.entities.patient import Patient

    from ..ports import IMessagingGateway, IPatientRepository

logger = logging.getLogger(__name__)


class SendReminderUseCase:
    """Use case for sending a vaccine reminder.

    Preconditions are checked in order: the patient exists, has a pending
    vaccine, and has reminder consent. Gateway errors propagate unchanged
    and leave the interaction history untouched.
    """

    def __init__(
        self,
        patient_repository: "IPatientRepository",
        messaging_gateway: "IMessagingGateway",
        template_name: str = "recordatorio_vacuna",
        clinic_name: str = DEFAULT_CLINIC_NAME,
        locale: str = "es-MX",
    ) -> None:
        """Initialize use case.

        Args:
            patient_repository: Patient store (DIP).
            messaging_gateway: Outbound messaging (DIP).
            template_name: Approved reminder template.
            clinic_name: Last template parameter.
            locale: Locale used to render the vaccine date.
        """
        self._repository = patient_repository
        self._gateway = messaging_gateway
        self._template_name = template_name
        self._clinic_name = clinic_name
        self._locale = locale

    async def execute(self, patient_id: str) -> SendReminderResult:
        """Execute the send reminder use case.

        Raises:
            NotFoundError: If the patient does not exist.
            NoScheduledVaccineError: If there is no pending vaccine.
            ConsentDeniedError: If reminder consent is off.
            GatewayError: If the provider rejected the message or timed out.
        """
        patient = await self._repository.find_by_id(patient_id)
        if patient is None:
            raise NotFoundError("Patient", patient_id)

        vaccine = patient.next_vaccine
        if vaccine is None:
            raise NoScheduledVaccineError(patient_id)

        if not patient.consent.reminders:
            raise ConsentDeniedError(patient_id, "reminders")

        acceptance = await self._gateway.send_template(
            patient.phone,
            self._template_name,
            self.build_parameters(patient),
        )

        interaction = InteractionRecord(
            type=InteractionType.REMINDER_SENT,
            message=build_reminder_log_message(vaccine.name),
            message_id=acceptance.message_id,
            status=DeliveryStatus.SENT,
            metadata={
                "template": self._template_name,
                "vaccine_name": vaccine.name,
                "vaccine_date": vaccine.date.isoformat(),
            },
        )
        patient.record_interaction(interaction)
        await self._repository.save(patient)

        logger.info(f"Reminder sent to patient {patient_id}: {acceptance.message_id}")
        return SendReminderResult(
            patient_id=patient_id,
            message_id=acceptance.message_id,
            interaction=interaction,
        )

    def build_parameters(self, patient: "Patient") -> list[str]:
        """Template body parameters, in the order the approved template expects."""
        vaccine = patient.next_vaccine
        return [
            patient.full_name,
            patient.pet_name,
            vaccine.name,
            DateFormatter.format_long_date(vaccine.date, self._locale),
            vaccine.time,
            vaccine.location,
            self._clinic_name,
        ]
