# ============================================================================
# SCOPE: APPLICATION LAYER (Vaccine Reminders)
# Description: Use case for probing the messaging provider.
# ============================================================================
"""Check Messaging Connection Use Case."""

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.integrations.whatsapp.models import ConnectionStatus

    from ..ports import IMessagingGateway

logger = logging.getLogger(__name__)


class CheckMessagingConnectionUseCase:
    def __init__(self, messaging_gateway: "IMessagingGateway") -> None:
        self._gateway = messaging_gateway

    async def execute(self) -> "ConnectionStatus":
        status = await self._gateway.check_connection()
        if status.connected:
            logger.info(f"Messaging provider connected as {status.phone_number}")
        else:
            logger.warning(f"Messaging provider not reachable: {status.error}")
        return status
