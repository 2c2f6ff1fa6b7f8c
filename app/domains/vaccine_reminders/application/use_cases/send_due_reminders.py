# ============================================================================
# SCOPE: APPLICATION LAYER (Vaccine Reminders)
# Description: Batch sweep sending every reminder that is due.
# ============================================================================
"""Send Due Reminders Use Case.

Used by the scheduler. Each patient is handled independently; a failure
for one patient is logged and counted, never raised, and never retried.
"""

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from app.core.domain.exceptions import DomainException
from app.core.shared.logger import get_service_logger
from app.domains.vaccine_reminders.domain.services import is_reminder_due

from ..dto.reminder_dtos import SendDueRemindersResult

if TYPE_CHECKING:
    from ..ports import IPatientRepository
    from .send_reminder import SendReminderUseCase

logger = get_service_logger("send_due_reminders")


class SendDueRemindersUseCase:
    """Send reminders to every patient whose vaccine is within the reminder window."""

    def __init__(
        self,
        patient_repository: "IPatientRepository",
        send_reminder: "SendReminderUseCase",
        days_before: int = 3,
    ) -> None:
        """Initialize use case.

        Args:
            patient_repository: Patient store (DIP).
            send_reminder: Single-patient reminder use case.
            days_before: Default reminder window in days.
        """
        self._repository = patient_repository
        self._send_reminder = send_reminder
        self._days_before = days_before

    async def execute(
        self,
        days_before: int | None = None,
        now: datetime | None = None,
    ) -> SendDueRemindersResult:
        """Execute the sweep.

        Args:
            days_before: Window override; defaults to the configured value.
            now: Reference instant; defaults to the current UTC time.

        Returns:
            SendDueRemindersResult with sent, failed and skipped patient ids.
        """
        window = self._days_before if days_before is None else days_before
        now = now or datetime.now(UTC)
        today = now.astimezone(UTC).date()

        candidates = await self._repository.find_due_between(today, today + timedelta(days=window))
        logger.info(f"Reminder sweep started: {len(candidates)} candidate(s)", days_before=window)

        result = SendDueRemindersResult()
        for patient in candidates:
            if not is_reminder_due(patient, days_before=window, now=now):
                result.skipped_ids.append(patient.id)
                continue

            try:
                await self._send_reminder.execute(patient.id)
                result.sent_ids.append(patient.id)
            except DomainException as e:
                result.failed[patient.id] = e.code
                logger.error(f"Reminder failed: {e.message}", patient_id=patient.id, error_code=e.code)

        logger.info(
            f"Reminder sweep completed: {result.sent_count} sent, "
            f"{result.failed_count} failed, {result.skipped_count} skipped"
        )
        return result
