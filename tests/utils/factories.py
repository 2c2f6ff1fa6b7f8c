"""
Test doubles for the messaging gateway.
"""

from app.core.domain.exceptions import GatewayError
from app.integrations.whatsapp.models import ConnectionStatus, MessageAcceptance


class FakeMessagingGateway:
    """In-memory IMessagingGateway that records every call."""

    def __init__(self, connected: bool = True, phone_number: str = "+52 55 1234 5678"):
        self.text_messages: list[tuple[str, str]] = []
        self.template_messages: list[tuple[str, str, list[str]]] = []
        self._connected = connected
        self._phone_number = phone_number
        self._text_error: GatewayError | None = None
        self._template_errors: dict[str, GatewayError] = {}
        self._default_template_error: GatewayError | None = None
        self._sequence = 0

    def fail_text_with(self, error: GatewayError) -> None:
        self._text_error = error

    def fail_templates_with(self, error: GatewayError, to: str | None = None) -> None:
        """Fail template sends for ``to``, or for every recipient when ``to`` is None."""
        if to is None:
            self._default_template_error = error
        else:
            self._template_errors[to] = error

    def _accept(self, to: str) -> MessageAcceptance:
        self._sequence += 1
        message_id = f"wamid.TEST{self._sequence:04d}"
        return MessageAcceptance(
            message_id=message_id,
            recipient=to,
            wa_id=to,
            raw={"messages": [{"id": message_id}]},
        )

    async def send_text(self, to: str, body: str) -> MessageAcceptance:
        if self._text_error is not None:
            raise self._text_error
        self.text_messages.append((to, body))
        return self._accept(to)

    async def send_template(self, to: str, template_name: str, parameters: list[str]) -> MessageAcceptance:
        error = self._template_errors.get(to) or self._default_template_error
        if error is not None:
            raise error
        self.template_messages.append((to, template_name, list(parameters)))
        return self._accept(to)

    async def check_connection(self) -> ConnectionStatus:
        if self._connected:
            return ConnectionStatus(connected=True, phone_number=self._phone_number)
        return ConnectionStatus(connected=False, error="Invalid OAuth access token")
