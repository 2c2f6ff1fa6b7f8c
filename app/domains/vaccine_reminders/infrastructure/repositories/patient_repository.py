"""
Patient Repository Implementation

SQLAlchemy implementation of IPatientRepository.
"""

from datetime import UTC, date, datetime

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain.exceptions import StorageError
from app.core.shared.logger import get_repository_logger
from app.domains.vaccine_reminders.application.dto.reminder_dtos import PatientSummary
from app.domains.vaccine_reminders.application.ports.patient_repository import IPatientRepository
from app.domains.vaccine_reminders.domain.entities.patient import Patient
from app.domains.vaccine_reminders.domain.exceptions import DuplicatePhoneError
from app.domains.vaccine_reminders.domain.value_objects import (
    ConsentState,
    InteractionRecord,
    MessagingPreferences,
    VaccineEvent,
)
from app.domains.vaccine_reminders.infrastructure.persistence.sqlalchemy.models import PatientModel

logger = get_repository_logger("patients")


class SQLAlchemyPatientRepository(IPatientRepository):
    """
    SQLAlchemy implementation of patient repository.

    Unique-phone violations surface as DuplicatePhoneError; every other
    database failure is wrapped in StorageError.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, patient: Patient) -> Patient:
        """Insert a new patient."""
        model = self._to_model(patient)
        self.session.add(model)
        await self._commit("create", patient.phone)
        await self.session.refresh(model)
        logger.info("Patient created", patient_id=patient.id)
        return self._to_entity(model)

    async def find_by_id(self, patient_id: str) -> Patient | None:
        """Find patient by ID."""
        return await self._find_one("find_by_id", select(PatientModel).where(PatientModel.id == patient_id))

    async def find_by_phone(self, phone: str) -> Patient | None:
        """Find patient by phone number (exact match on the stored value)."""
        return await self._find_one("find_by_phone", select(PatientModel).where(PatientModel.phone == phone))

    async def find_all(self, limit: int = 100) -> list[PatientSummary]:
        """Projected listing, newest first."""
        stmt = (
            select(
                PatientModel.id,
                PatientModel.full_name,
                PatientModel.phone,
                PatientModel.pet_name,
                PatientModel.pet_type,
                PatientModel.next_vaccine,
                PatientModel.last_interaction,
                PatientModel.created_at,
            )
            .order_by(PatientModel.created_at.desc())
            .limit(limit)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError("find_all", "Failed to list patients", e) from e

        return [
            PatientSummary(
                id=row.id,
                full_name=row.full_name,
                phone=row.phone,
                pet_name=row.pet_name,
                pet_type=row.pet_type,
                next_vaccine=VaccineEvent.from_dict(row.next_vaccine),
                last_interaction=_aware(row.last_interaction),
                created_at=_aware(row.created_at),
            )
            for row in result.all()
        ]

    async def save(self, patient: Patient) -> Patient:
        """Save or update patient, replacing the whole stored document."""
        try:
            result = await self.session.execute(select(PatientModel).where(PatientModel.id == patient.id))
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageError("save", f"Failed to load patient {patient.id}", e) from e

        if model:
            self._update_model(model, patient)
        else:
            model = self._to_model(patient)
            self.session.add(model)

        await self._commit("save", patient.phone)
        await self.session.refresh(model)
        return self._to_entity(model)

    async def find_due_between(self, start: date, end: date) -> list[Patient]:
        """Patients whose pending vaccine date is within [start, end]."""
        stmt = (
            select(PatientModel)
            .where(PatientModel.next_vaccine_date.between(start, end))
            .order_by(PatientModel.next_vaccine_date)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError("find_due_between", "Failed to query due vaccines", e) from e
        return [self._to_entity(m) for m in result.scalars().all()]

    async def _find_one(self, operation: str, stmt) -> Patient | None:
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(operation, "Failed to load patient", e) from e
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def _commit(self, operation: str, phone: str) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning("Phone uniqueness violated", operation=operation, phone=phone)
            raise DuplicatePhoneError(phone) from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Database error on {operation}: {e}")
            raise StorageError(operation, f"Failed to {operation} patient", e) from e

    # Mapping methods

    def _to_entity(self, model: PatientModel) -> Patient:
        """Convert model to entity."""
        return Patient(
            id=model.id,
            full_name=model.full_name,
            phone=model.phone,
            email=model.email,
            pet_name=model.pet_name,
            pet_type=model.pet_type,
            pet_breed=model.pet_breed,
            pet_age=model.pet_age,
            pet_weight=model.pet_weight,
            next_vaccine=VaccineEvent.from_dict(model.next_vaccine),
            vaccine_history=[VaccineEvent.from_dict(v) for v in model.vaccine_history or []],
            consent=ConsentState.from_dict(model.consent),
            interactions=[InteractionRecord.from_dict(i) for i in model.interactions or []],
            last_interaction=_aware(model.last_interaction),
            preferences=MessagingPreferences.from_dict(model.preferences),
            created_at=_aware(model.created_at),
            updated_at=_aware(model.updated_at),
        )

    def _to_model(self, patient: Patient) -> PatientModel:
        """Convert entity to model."""
        model = PatientModel(id=patient.id, created_at=patient.created_at)
        self._update_model(model, patient)
        return model

    def _update_model(self, model: PatientModel, patient: Patient) -> None:
        """Overwrite every mutable column from the entity."""
        model.full_name = patient.full_name
        model.phone = patient.phone
        model.email = patient.email
        model.pet_name = patient.pet_name
        model.pet_type = patient.pet_type
        model.pet_breed = patient.pet_breed
        model.pet_age = patient.pet_age
        model.pet_weight = patient.pet_weight
        model.next_vaccine = patient.next_vaccine.to_dict() if patient.next_vaccine else None
        model.next_vaccine_date = patient.next_vaccine.date if patient.next_vaccine else None
        model.vaccine_history = [v.to_dict() for v in patient.vaccine_history]
        model.consent = patient.consent.to_dict()
        model.interactions = [i.to_dict() for i in patient.interactions]
        model.last_interaction = patient.last_interaction
        model.preferences = patient.preferences.to_dict()
        model.updated_at = patient.updated_at


def _aware(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    return value if value.tzinfo else value.replace(tzinfo=UTC)
