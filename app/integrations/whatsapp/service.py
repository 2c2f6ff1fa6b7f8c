"""
WhatsApp Service.

Single Responsibility: Facade for WhatsApp messaging operations.

The gateway receives an explicit WhatsAppConfig at construction; it never
reads environment variables on its own.
"""

import logging

import httpx

from app.core.domain.exceptions import GatewayError
from app.integrations.whatsapp.config import WhatsAppConfig
from app.integrations.whatsapp.http_client import WhatsAppHttpClient
from app.integrations.whatsapp.messenger import WhatsAppMessenger
from app.integrations.whatsapp.models import ConnectionStatus, MessageAcceptance

logger = logging.getLogger(__name__)


class WhatsAppGateway:
    """
    Messaging gateway backed by the WhatsApp Cloud API.

    Stateless per call: send_text and send_template either return the
    provider acceptance or raise GatewayError. check_connection never raises.
    """

    def __init__(self, config: WhatsAppConfig, client: httpx.AsyncClient | None = None):
        """
        Initialize the gateway.

        Args:
            config: Credentials and transport settings
            client: Optional httpx client to share or mock
        """
        self._config = config
        self._http_client = WhatsAppHttpClient(config, client)
        self._messenger = WhatsAppMessenger(self._http_client, config)

        if not config.is_configured:
            logger.warning("WhatsApp gateway created without access token or phone number id")

    @property
    def config(self) -> WhatsAppConfig:
        return self._config

    async def send_text(self, to: str, body: str) -> MessageAcceptance:
        """Send a free-form text message."""
        return await self._messenger.send_text(to, body)

    async def send_template(self, to: str, template_name: str, parameters: list[str]) -> MessageAcceptance:
        """Send a template message in the configured language."""
        return await self._messenger.send_template(to, template_name, parameters)

    async def check_connection(self) -> ConnectionStatus:
        """Query the phone number identity; failures are reported, not raised."""
        try:
            data = await self._http_client.get("")
        except GatewayError as e:
            logger.warning(f"WhatsApp connection check failed: {e.message}")
            return ConnectionStatus(connected=False, error=e.message)

        phone = data.get("display_phone_number")
        return ConnectionStatus(connected=True, phone_number=str(phone) if phone is not None else None)

    async def close(self) -> None:
        await self._http_client.close()

    async def __aenter__(self) -> "WhatsAppGateway":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
