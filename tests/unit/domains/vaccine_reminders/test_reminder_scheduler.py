"""
Unit tests for ReminderScheduler.
"""

from unittest.mock import AsyncMock

import pytest

from app.domains.vaccine_reminders.application.dto import SendDueRemindersResult
from app.domains.vaccine_reminders.infrastructure.scheduler import ReminderScheduler


@pytest.mark.unit
class TestReminderScheduler:
    @pytest.mark.asyncio
    async def test_run_once_returns_sweep_result(self):
        expected = SendDueRemindersResult(sent_ids=["p-1"], failed={"p-2": "GATEWAY_ERROR"})
        run_sweep = AsyncMock(return_value=expected)
        scheduler = ReminderScheduler(run_sweep)

        result = await scheduler.run_once()

        assert result is expected
        run_sweep.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_run_once_logs_and_swallows_failures(self, caplog):
        scheduler = ReminderScheduler(AsyncMock(side_effect=RuntimeError("database unavailable")))

        result = await scheduler.run_once()

        assert result is None
        assert "database unavailable" in caplog.text

    def test_disabled_scheduler_does_not_start(self):
        scheduler = ReminderScheduler(AsyncMock(), enabled=False)

        scheduler.start()

        assert scheduler.is_running is False
        assert scheduler.get_jobs_info() == []

    @pytest.mark.asyncio
    async def test_start_registers_daily_job(self):
        scheduler = ReminderScheduler(AsyncMock(), hour=8, timezone_name="America/Mexico_City")

        scheduler.start()
        try:
            jobs = scheduler.get_jobs_info()
            assert scheduler.is_running is True
            assert [job["id"] for job in jobs] == ["vaccine_reminders_sweep"]
            assert jobs[0]["next_run"] is not None
        finally:
            scheduler.stop()

        assert scheduler.is_running is False
