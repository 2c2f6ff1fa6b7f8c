"""
WhatsApp Messenger.

Single Responsibility: Build and send WhatsApp messages of various types.
"""

import logging
import re

from pydantic import ValidationError as PydanticValidationError

from app.core.domain.exceptions import GatewayError
from app.integrations.whatsapp.config import WhatsAppConfig
from app.integrations.whatsapp.http_client import WhatsAppHttpClient
from app.integrations.whatsapp.models import (
    MessageAcceptance,
    SendMessageResponse,
    TemplateMessage,
    TextBody,
    TextMessage,
)

logger = logging.getLogger(__name__)


def normalize_phone(phone: str, default_country_code: str = "52") -> str:
    """
    Normalize a phone number for the WhatsApp API.

    Rules, in order:
        - exactly 10 digits after stripping non-digits: prefix the default country code
        - input starting with '+': drop only the leading '+'
        - anything else: the stripped digits

    Examples:
        >>> normalize_phone("55 1234 5678")
        '525512345678'
        >>> normalize_phone("+5215512345678")
        '5215512345678'
    """
    digits = re.sub(r"\D", "", phone or "")

    if len(digits) == 10:
        return f"{default_country_code}{digits}"

    if phone.startswith("+"):
        return phone[1:]

    return digits


class WhatsAppMessenger:
    """
    Message sender for WhatsApp.

    Single Responsibility: Build and send messages of different types.
    """

    def __init__(self, http_client: WhatsAppHttpClient, config: WhatsAppConfig):
        """
        Initialize messenger.

        Args:
            http_client: HTTP client for API calls
            config: Gateway configuration (country code, template language)
        """
        self._client = http_client
        self._config = config

    def _normalize_number(self, numero: str) -> str:
        """Normalize phone number."""
        normalized = normalize_phone(numero, self._config.default_country_code)
        if normalized != numero:
            logger.debug(f"Number normalized: {numero} -> {normalized}")
        return normalized

    async def send_text(self, numero: str, mensaje: str) -> MessageAcceptance:
        """Send text message."""
        if not numero or not mensaje:
            raise GatewayError("Number and message required")

        to = self._normalize_number(numero)
        message = TextMessage(to=to, text=TextBody(body=mensaje))

        data = await self._client.post(message.model_dump(exclude_none=True))
        return self._to_acceptance(to, data)

    async def send_template(self, numero: str, template_name: str, parameters: list[str]) -> MessageAcceptance:
        """Send a pre-approved template; body parameters are attached only when present."""
        if not numero or not template_name:
            raise GatewayError("Number and template name required")

        to = self._normalize_number(numero)
        message = TemplateMessage.build(
            to=to,
            name=template_name,
            language=self._config.template_language,
            parameters=parameters,
        )

        data = await self._client.post(message.model_dump(exclude_none=True))
        return self._to_acceptance(to, data)

    def _to_acceptance(self, to: str, data: dict) -> MessageAcceptance:
        try:
            response = SendMessageResponse.model_validate(data)
        except PydanticValidationError as e:
            raise GatewayError("WhatsApp API returned an unexpected response body", original_error=e) from e
        if not response.messages:
            raise GatewayError("WhatsApp API accepted the request but returned no message id")

        wa_id = response.contacts[0].wa_id if response.contacts else None
        logger.info(f"Message accepted for {to}: {response.messages[0].id}")
        return MessageAcceptance(
            message_id=response.messages[0].id,
            recipient=to,
            wa_id=wa_id,
            raw=data,
        )
