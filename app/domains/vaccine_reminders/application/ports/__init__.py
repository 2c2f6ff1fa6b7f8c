# ============================================================================
# SCOPE: APPLICATION LAYER (Vaccine Reminders)
# Description: Ports (interfaces) for storage and messaging.
# ============================================================================
from .messaging_gateway import IMessagingGateway
from .patient_repository import IPatientRepository

__all__ = ["IMessagingGateway", "IPatientRepository"]
