# Domain Value Objects
from .consent import ConsentState
from .enums import ContactTime, DeliveryStatus, InteractionType, PetType
from .interaction import InteractionRecord
from .preferences import MessagingPreferences
from .vaccine_event import VaccineEvent, parse_date

__all__ = [
    "ConsentState",
    "ContactTime",
    "DeliveryStatus",
    "InteractionRecord",
    "InteractionType",
    "MessagingPreferences",
    "PetType",
    "VaccineEvent",
    "parse_date",
]
