"""
Vaccine Reminders SQLAlchemy Models

Database models for vaccine reminder persistence. The patient aggregate is
stored as one row; nested value objects live in JSON columns.
"""

from sqlalchemy import JSON, Column, Date, DateTime, Enum as SQLEnum, Float, Index, Integer, String

from app.domains.vaccine_reminders.domain.value_objects.enums import PetType
from app.models.db.base import Base, TimestampMixin


class PatientModel(Base, TimestampMixin):
    """SQLAlchemy model for Patient aggregate."""

    __tablename__ = "patients"

    id = Column(String(36), primary_key=True)

    # Dueño
    full_name = Column(String(200), nullable=False)
    phone = Column(String(32), nullable=False)
    email = Column(String(255), nullable=True)

    # Mascota
    pet_name = Column(String(100), nullable=False)
    pet_type = Column(SQLEnum(PetType, name="pet_type"), nullable=False, default=PetType.DOG)
    pet_breed = Column(String(100), nullable=True)
    pet_age = Column(Integer, nullable=True)
    pet_weight = Column(Float, nullable=True)

    # Vacunación: next_vaccine_date mirrors next_vaccine["date"] for range queries
    next_vaccine = Column(JSON, nullable=True)
    next_vaccine_date = Column(Date, nullable=True)
    vaccine_history = Column(JSON, nullable=False, default=list)

    # Consentimiento, historial y preferencias
    consent = Column(JSON, nullable=True)
    interactions = Column(JSON, nullable=False, default=list)
    last_interaction = Column(DateTime(timezone=True), nullable=True)
    preferences = Column(JSON, nullable=True)

    __table_args__ = (
        Index("ix_patients_phone", "phone", unique=True),
        Index("ix_patients_next_vaccine_date", "next_vaccine_date"),
        Index("ix_patients_last_interaction", "last_interaction"),
        Index("ix_patients_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<PatientModel(id='{self.id}', phone='{self.phone}', pet='{self.pet_name}')>"
