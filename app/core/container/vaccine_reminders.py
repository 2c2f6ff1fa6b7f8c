"""
Vaccine Reminders Domain Container.

Single Responsibility: Wire all vaccine reminder dependencies.
"""

import logging
from typing import TYPE_CHECKING

from app.database.async_db import get_async_db_context
from app.domains.vaccine_reminders.application.dto import SendDueRemindersResult
from app.domains.vaccine_reminders.application.use_cases import (
    CheckMessagingConnectionUseCase,
    GetPatientUseCase,
    ListPatientsUseCase,
    RecordVaccineAdministeredUseCase,
    RegisterPatientUseCase,
    ScheduleVaccineUseCase,
    SendDueRemindersUseCase,
    SendReminderUseCase,
    UpdateConsentUseCase,
)
from app.domains.vaccine_reminders.infrastructure.repositories import SQLAlchemyPatientRepository
from app.domains.vaccine_reminders.infrastructure.scheduler import ReminderScheduler

if TYPE_CHECKING:
    from app.core.container.base import BaseContainer

logger = logging.getLogger(__name__)


class VaccineRemindersContainer:
    """
    Vaccine reminders domain container.

    Single Responsibility: Create repositories, use cases and the scheduler.
    """

    def __init__(self, base: "BaseContainer"):
        """
        Initialize vaccine reminders container.

        Args:
            base: BaseContainer with shared singletons
        """
        self._base = base

    @property
    def settings(self):
        return self._base.settings

    # ==================== REPOSITORIES ====================

    def create_patient_repository(self, db) -> SQLAlchemyPatientRepository:
        """Create Patient Repository."""
        return SQLAlchemyPatientRepository(session=db)

    # ==================== USE CASES ====================

    def create_register_patient_use_case(self, db) -> RegisterPatientUseCase:
        """Create RegisterPatientUseCase with dependencies."""
        return RegisterPatientUseCase(
            patient_repository=self.create_patient_repository(db),
            messaging_gateway=self._base.get_messaging_gateway(),
            clinic_name=self.settings.CLINIC_NAME,
        )

    def create_schedule_vaccine_use_case(self, db) -> ScheduleVaccineUseCase:
        """Create ScheduleVaccineUseCase with dependencies."""
        return ScheduleVaccineUseCase(patient_repository=self.create_patient_repository(db))

    def create_send_reminder_use_case(self, db) -> SendReminderUseCase:
        """Create SendReminderUseCase with dependencies."""
        return SendReminderUseCase(
            patient_repository=self.create_patient_repository(db),
            messaging_gateway=self._base.get_messaging_gateway(),
            template_name=self.settings.REMINDER_TEMPLATE_NAME,
            clinic_name=self.settings.CLINIC_NAME,
            locale=self.settings.MESSAGING_LOCALE,
        )

    def create_send_due_reminders_use_case(self, db) -> SendDueRemindersUseCase:
        """Create SendDueRemindersUseCase with dependencies."""
        return SendDueRemindersUseCase(
            patient_repository=self.create_patient_repository(db),
            send_reminder=self.create_send_reminder_use_case(db),
            days_before=self.settings.REMINDER_DAYS_BEFORE,
        )

    def create_update_consent_use_case(self, db) -> UpdateConsentUseCase:
        """Create UpdateConsentUseCase with dependencies."""
        return UpdateConsentUseCase(patient_repository=self.create_patient_repository(db))

    def create_get_patient_use_case(self, db) -> GetPatientUseCase:
        return GetPatientUseCase(patient_repository=self.create_patient_repository(db))

    def create_list_patients_use_case(self, db) -> ListPatientsUseCase:
        return ListPatientsUseCase(patient_repository=self.create_patient_repository(db))

    def create_record_vaccine_administered_use_case(self, db) -> RecordVaccineAdministeredUseCase:
        return RecordVaccineAdministeredUseCase(patient_repository=self.create_patient_repository(db))

    def create_check_messaging_connection_use_case(self) -> CheckMessagingConnectionUseCase:
        return CheckMessagingConnectionUseCase(messaging_gateway=self._base.get_messaging_gateway())

    # ==================== SCHEDULER ====================

    async def run_due_reminders(self) -> SendDueRemindersResult:
        """Run one reminder sweep inside its own database session."""
        async with get_async_db_context() as db:
            use_case = self.create_send_due_reminders_use_case(db)
            return await use_case.execute()

    def create_reminder_scheduler(self) -> ReminderScheduler:
        """Create the daily reminder scheduler from settings."""
        return ReminderScheduler(
            run_sweep=self.run_due_reminders,
            hour=self.settings.REMINDER_SCHEDULER_HOUR,
            timezone_name=self.settings.REMINDER_SCHEDULER_TIMEZONE,
            enabled=self.settings.REMINDER_SCHEDULER_ENABLED,
        )
