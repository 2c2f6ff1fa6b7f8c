# ============================================================================
# SCOPE: APPLICATION LAYER (Vaccine Reminders)
# Description: Use case exports.
# ============================================================================
from .check_messaging_connection import CheckMessagingConnectionUseCase
from .get_patient import GetPatientUseCase, ListPatientsUseCase
from .record_vaccine_administered import RecordVaccineAdministeredUseCase
from .register_patient import RegisterPatientUseCase
from .schedule_vaccine import ScheduleVaccineUseCase
from .send_due_reminders import SendDueRemindersUseCase
from .send_reminder import SendReminderUseCase
from .update_consent import UpdateConsentUseCase

__all__ = [
    "CheckMessagingConnectionUseCase",
    "GetPatientUseCase",
    "ListPatientsUseCase",
    "RecordVaccineAdministeredUseCase",
    "RegisterPatientUseCase",
    "ScheduleVaccineUseCase",
    "SendDueRemindersUseCase",
    "SendReminderUseCase",
    "UpdateConsentUseCase",
]
