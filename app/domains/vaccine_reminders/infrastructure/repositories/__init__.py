"""
Vaccine Reminders Infrastructure Repositories

Repository implementations for the vaccine reminders domain.
"""

from app.domains.vaccine_reminders.infrastructure.repositories.in_memory_patient_repository import (
    InMemoryPatientRepository,
)
from app.domains.vaccine_reminders.infrastructure.repositories.patient_repository import (
    SQLAlchemyPatientRepository,
)

__all__ = [
    "InMemoryPatientRepository",
    "SQLAlchemyPatientRepository",
]
