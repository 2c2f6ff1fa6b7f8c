# ============================================================================
# SCOPE: APPLICATION LAYER (Vaccine Reminders)
# Description: Use case for registering a new patient.
# ============================================================================
"""Register Patient Use Case.

Creates the patient record and sends a best-effort welcome message.
"""

import logging
from typing import TYPE_CHECKING

from app.core.domain.exceptions import GatewayError, ValidationError
from app.domains.vaccine_reminders.domain.entities.patient import Patient
from app.domains.vaccine_reminders.domain.exceptions import DuplicatePhoneError
from app.domains.vaccine_reminders.domain.value_objects import ConsentState, MessagingPreferences
from app.domains.vaccine_reminders.domain.value_objects.enums import ContactTime

from ..dto.reminder_dtos import RegisterPatientRequest
from ..messages import build_welcome_message

if TYPE_CHECKING:
    from ..ports import IMessagingGateway, IPatientRepository

logger = logging.getLogger(__name__)


class RegisterPatientUseCase:
    """Use case for registering a new patient.

    The phone number must not belong to another patient. The welcome
    message never makes registration fail.
    """

    def __init__(
        self,
        patient_repository: "IPatientRepository",
        messaging_gateway: "IMessagingGateway",
        clinic_name: str | None = None,
    ) -> None:
        """Initialize use case.

        Args:
            patient_repository: Patient store (DIP).
            messaging_gateway: Outbound messaging (DIP).
            clinic_name: Name shown at the end of the welcome message.
        """
        self._repository = patient_repository
        self._gateway = messaging_gateway
        self._clinic_name = clinic_name

    async def execute(self, request: RegisterPatientRequest) -> Patient:
        """Execute the register patient use case.

        Raises:
            ValidationError: If a required field is missing or pet_type is unknown.
            DuplicatePhoneError: If the phone is already registered.
        """
        patient = Patient.register(
            full_name=request.full_name,
            phone=request.phone,
            pet_name=request.pet_name,
            pet_type=request.pet_type,
            email=request.email,
            pet_breed=request.pet_breed,
            pet_age=request.pet_age,
            pet_weight=request.pet_weight,
            consent=ConsentState.default().merge(
                marketing=request.marketing_consent,
                reminders=request.reminders_consent,
            ),
            preferences=self._build_preferences(request),
        )

        if await self._repository.find_by_phone(patient.phone) is not None:
            logger.info(f"Registration rejected, phone already registered: {patient.phone}")
            raise DuplicatePhoneError(patient.phone)

        saved = await self._repository.create(patient)
        logger.info(f"Patient registered: {saved.id} ({saved.pet_name})")

        await self._send_welcome(saved)
        return saved

    def _build_preferences(self, request: RegisterPatientRequest) -> MessagingPreferences:
        contact_time = ContactTime.ANY
        if request.contact_time:
            try:
                contact_time = ContactTime.from_string(request.contact_time)
            except ValueError as e:
                raise ValidationError(str(e), field="contact_time") from e
        return MessagingPreferences(language=request.language or "es", contact_time=contact_time)

    async def _send_welcome(self, patient: Patient) -> None:
        message = build_welcome_message(patient.full_name, patient.pet_name, self._clinic_name)
        try:
            await self._gateway.send_text(patient.phone, message)
        except GatewayError as e:
            logger.warning(f"Welcome message failed for patient {patient.id}: {e.message}")
