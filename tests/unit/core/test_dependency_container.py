"""
Tests for the dependency container wiring.
"""

from unittest.mock import MagicMock

import pytest

from app.config.settings import Settings
from app.core.container import DependencyContainer, get_container, reset_container
from app.domains.vaccine_reminders.application.use_cases import SendDueRemindersUseCase, SendReminderUseCase
from app.domains.vaccine_reminders.infrastructure.repositories import SQLAlchemyPatientRepository
from app.integrations.whatsapp import WhatsAppGateway


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        WHATSAPP_ACCESS_TOKEN="token",
        WHATSAPP_PHONE_NUMBER_ID="123",
        CLINIC_NAME="Clínica Patitas",
        REMINDER_DAYS_BEFORE=2,
        REMINDER_SCHEDULER_HOUR=7,
    )


@pytest.fixture
def container(settings) -> DependencyContainer:
    return DependencyContainer(settings)


@pytest.mark.unit
class TestDependencyContainer:
    def test_gateway_is_a_singleton(self, container):
        gateway = container.get_messaging_gateway()

        assert isinstance(gateway, WhatsAppGateway)
        assert gateway is container.get_messaging_gateway()
        assert gateway.config.phone_number_id == "123"

    def test_use_cases_share_the_session(self, container):
        db = MagicMock()

        repository = container.vaccine_reminders.create_patient_repository(db)
        sweep = container.vaccine_reminders.create_send_due_reminders_use_case(db)

        assert isinstance(repository, SQLAlchemyPatientRepository)
        assert repository.session is db
        assert isinstance(sweep, SendDueRemindersUseCase)
        assert isinstance(container.vaccine_reminders.create_send_reminder_use_case(db), SendReminderUseCase)

    def test_scheduler_uses_settings(self, container):
        scheduler = container.vaccine_reminders.create_reminder_scheduler()

        assert scheduler.hour == 7
        assert scheduler.enabled is False

    @pytest.mark.asyncio
    async def test_close_releases_gateway(self, container):
        first = container.get_messaging_gateway()

        await container.close()

        assert container.get_messaging_gateway() is not first

    def test_global_container(self, settings):
        reset_container()
        try:
            assert get_container(settings) is get_container()
        finally:
            reset_container()
