# ============================================================================
# SCOPE: GLOBAL
# Description: Contenedor de dependencias del worker de recordatorios (singleton).
# ============================================================================
"""
Dependency Injection Container.

Wires the WhatsApp gateway, the patient repositories and the reminder use
cases. Use cases that need a database session take it as an argument; the
gateway is shared by everything built from the same container.
"""

from __future__ import annotations

import logging

from app.config.settings import Settings
from app.integrations.whatsapp import WhatsAppGateway

from .base import BaseContainer
from .vaccine_reminders import VaccineRemindersContainer

logger = logging.getLogger(__name__)


class DependencyContainer:
    """Facade over the shared singletons and the vaccine reminders container."""

    def __init__(self, settings: Settings | None = None):
        self._base = BaseContainer(settings)
        self._vaccine_reminders = VaccineRemindersContainer(self._base)
        logger.info("DependencyContainer ready")

    @property
    def settings(self) -> Settings:
        return self._base.settings

    @property
    def vaccine_reminders(self) -> VaccineRemindersContainer:
        return self._vaccine_reminders

    def get_messaging_gateway(self) -> WhatsAppGateway:
        return self._base.get_messaging_gateway()

    async def close(self) -> None:
        """Close the gateway's HTTP client."""
        await self._base.close()


_container: DependencyContainer | None = None


def get_container(settings: Settings | None = None) -> DependencyContainer:
    """
    Process-wide container.

    Args:
        settings: Only used when the container is first created
    """
    global _container

    if _container is None:
        logger.info("Creating global DependencyContainer")
        _container = DependencyContainer(settings)

    return _container


def reset_container() -> None:
    """Drop the global container (tests, settings reload)."""
    global _container
    _container = None


__all__ = [
    "BaseContainer",
    "DependencyContainer",
    "VaccineRemindersContainer",
    "get_container",
    "reset_container",
]
