"""
In-memory Patient Repository

Dictionary-backed IPatientRepository for development and tests. Patients
are stored as serialized documents, so callers never share state with the
store and every save replaces the whole document.
"""

from datetime import date
from typing import Any

from app.domains.vaccine_reminders.application.dto.reminder_dtos import PatientSummary
from app.domains.vaccine_reminders.application.ports.patient_repository import IPatientRepository
from app.domains.vaccine_reminders.domain.entities.patient import Patient
from app.domains.vaccine_reminders.domain.exceptions import DuplicatePhoneError


class InMemoryPatientRepository(IPatientRepository):
    """In-memory implementation for development/testing"""

    def __init__(self):
        self._documents: dict[str, dict[str, Any]] = {}

    def _phone_owner(self, phone: str) -> str | None:
        for patient_id, document in self._documents.items():
            if document["phone"] == phone:
                return patient_id
        return None

    async def create(self, patient: Patient) -> Patient:
        if self._phone_owner(patient.phone) is not None:
            raise DuplicatePhoneError(patient.phone)
        self._documents[patient.id] = patient.to_dict()
        return Patient.from_dict(self._documents[patient.id])

    async def find_by_id(self, patient_id: str) -> Patient | None:
        document = self._documents.get(patient_id)
        return Patient.from_dict(document) if document else None

    async def find_by_phone(self, phone: str) -> Patient | None:
        patient_id = self._phone_owner(phone)
        return await self.find_by_id(patient_id) if patient_id else None

    async def find_all(self, limit: int = 100) -> list[PatientSummary]:
        patients = [Patient.from_dict(d) for d in self._documents.values()]
        patients.sort(key=lambda p: p.created_at, reverse=True)
        return [PatientSummary.from_entity(p) for p in patients[:limit]]

    async def save(self, patient: Patient) -> Patient:
        owner = self._phone_owner(patient.phone)
        if owner is not None and owner != patient.id:
            raise DuplicatePhoneError(patient.phone)
        self._documents[patient.id] = patient.to_dict()
        return Patient.from_dict(self._documents[patient.id])

    async def find_due_between(self, start: date, end: date) -> list[Patient]:
        due = []
        for document in self._documents.values():
            patient = Patient.from_dict(document)
            if patient.next_vaccine and start <= patient.next_vaccine.date <= end:
                due.append(patient)
        return sorted(due, key=lambda p: p.next_vaccine.date)

    def count(self) -> int:
        return len(self._documents)
