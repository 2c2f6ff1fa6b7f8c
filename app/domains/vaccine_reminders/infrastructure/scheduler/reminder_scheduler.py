"""Vaccine Reminder Scheduler.

APScheduler-based async scheduler that runs the daily reminder sweep at a
configured hour in the clinic's timezone.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from apscheduler.schedulers.asyncio import AsyncIOScheduler  # type: ignore[import-not-found]
from apscheduler.triggers.cron import CronTrigger  # type: ignore[import-not-found]
from pytz import timezone

from app.domains.vaccine_reminders.application.dto.reminder_dtos import SendDueRemindersResult

logger = logging.getLogger(__name__)

SweepRunner = Callable[[], Awaitable[SendDueRemindersResult]]

JOB_ID = "vaccine_reminders_sweep"


class ReminderScheduler:
    """Scheduler de recordatorios de vacunas.

    Runs ``run_sweep`` once a day at ``hour``:00 in ``timezone_name``.
    The sweep itself decides which patients are due.
    """

    def __init__(
        self,
        run_sweep: SweepRunner,
        hour: int = 9,
        minute: int = 0,
        timezone_name: str = "America/Mexico_City",
        enabled: bool = True,
    ):
        """Initialize scheduler.

        Args:
            run_sweep: Coroutine function executing one reminder sweep.
            hour: Hour of day (0-23) for the daily job.
            minute: Minute of the hour for the daily job.
            timezone_name: Timezone for scheduling jobs.
            enabled: Whether scheduler is enabled.
        """
        self._run_sweep = run_sweep
        self.hour = hour
        self.minute = minute
        self.tz = timezone(timezone_name)
        self.enabled = enabled

        self._scheduler: AsyncIOScheduler | None = None
        self._is_running = False

    def start(self) -> None:
        """Start the scheduler. Must be called from within a running event loop."""
        if not self.enabled:
            logger.info("ReminderScheduler is disabled, skipping start")
            return

        if self._is_running:
            logger.warning("ReminderScheduler already running")
            return

        scheduler = AsyncIOScheduler(timezone=self.tz)
        self._scheduler = scheduler

        scheduler.add_job(
            self.run_once,
            CronTrigger(hour=self.hour, minute=self.minute, timezone=self.tz),
            id=JOB_ID,
            replace_existing=True,
            name="Daily Vaccine Reminders",
        )

        scheduler.start()
        self._is_running = True
        logger.info(f"ReminderScheduler started with timezone {self.tz} (daily at {self.hour:02d}:{self.minute:02d})")

    def stop(self) -> None:
        """Stop the scheduler gracefully."""
        if self._scheduler and self._is_running:
            self._scheduler.shutdown(wait=False)
            self._is_running = False
            logger.info("ReminderScheduler stopped")

    async def run_once(self) -> SendDueRemindersResult | None:
        """Run one sweep now. Errors are logged so the next daily run still happens."""
        logger.info("Starting vaccine reminder job")

        try:
            result = await self._run_sweep()
        except Exception as e:
            logger.error(f"Error running vaccine reminder job: {e}", exc_info=True)
            return None

        logger.info(
            f"Vaccine reminder job finished: {result.sent_count} sent, "
            f"{result.failed_count} failed, {result.skipped_count} skipped"
        )
        return result

    @property
    def is_running(self) -> bool:
        """Check if scheduler is running."""
        return self._is_running

    def get_jobs_info(self) -> list[dict[str, Any]]:
        """Get information about scheduled jobs."""
        if not self._scheduler:
            return []

        jobs = []
        for job in self._scheduler.get_jobs():
            jobs.append(
                {
                    "id": job.id,
                    "name": job.name,
                    "next_run": job.next_run_time.isoformat() if job.next_run_time else None,
                }
            )
        return jobs
