"""Vaccine Reminders Domain Exceptions."""

from app.core.domain.exceptions import BusinessRuleViolationError, DuplicateEntityError


class DuplicatePhoneError(DuplicateEntityError):
    """Raised when a patient with the same phone number already exists."""

    def __init__(self, phone: str):
        super().__init__("Patient", "phone", phone, code="DUPLICATE_PHONE")
        self.phone = phone


class ConsentDeniedError(BusinessRuleViolationError):
    """Raised when the owner has not consented to the kind of message being sent."""

    def __init__(self, patient_id: str, consent_type: str = "reminders"):
        self.patient_id = patient_id
        self.consent_type = consent_type
        super().__init__(
            rule=f"{consent_type}_consent_required",
            message=f"Patient {patient_id} has not consented to {consent_type}",
            code="CONSENT_DENIED",
            details={"patient_id": patient_id, "consent_type": consent_type},
        )


class NoScheduledVaccineError(BusinessRuleViolationError):
    """Raised when an operation needs a pending vaccine and the patient has none."""

    def __init__(self, patient_id: str):
        self.patient_id = patient_id
        super().__init__(
            rule="scheduled_vaccine_required",
            message=f"Patient {patient_id} has no scheduled vaccine",
            code="NO_SCHEDULED_VACCINE",
            details={"patient_id": patient_id},
        )
