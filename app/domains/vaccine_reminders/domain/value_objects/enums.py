"""Vaccine Reminders Enumerations.

Pet species, contact windows, interaction kinds and delivery states.
"""

from app.core.domain.value_objects import StatusEnum


class PetType(StatusEnum):
    """Especie de la mascota."""

    DOG = "DOG"
    CAT = "CAT"
    BIRD = "BIRD"
    RODENT = "RODENT"
    REPTILE = "REPTILE"
    OTHER = "OTHER"


class ContactTime(StatusEnum):
    """Franja horaria preferida para contactar al dueño."""

    MORNING = "MORNING"
    AFTERNOON = "AFTERNOON"
    EVENING = "EVENING"
    ANY = "ANY"


class InteractionType(StatusEnum):
    """Tipo de interacción registrada en el historial del paciente."""

    REMINDER_SENT = "REMINDER_SENT"
    CONFIRMATION = "CONFIRMATION"
    RESCHEDULE = "RESCHEDULE"
    INQUIRY = "INQUIRY"
    OFFER = "OFFER"


class DeliveryStatus(StatusEnum):
    """Estado de entrega reportado para un mensaje saliente."""

    SENT = "SENT"
    DELIVERED = "DELIVERED"
    READ = "READ"
    FAILED = "FAILED"
