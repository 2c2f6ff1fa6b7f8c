# ============================================================================
# SCOPE: APPLICATION LAYER (Vaccine Reminders)
# Description: Messaging gateway port (DIP compliant).
# ============================================================================
"""Messaging Gateway Port.

Defines the interface the reminder engine uses to reach pet owners.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from app.integrations.whatsapp.models import ConnectionStatus, MessageAcceptance


@runtime_checkable
class IMessagingGateway(Protocol):
    """Interface for outbound messaging.

    Implementations: WhatsAppGateway

    send_text and send_template raise GatewayError (GatewayTimeoutError on
    timeout) and never retry. check_connection never raises.
    """

    async def send_text(self, to: str, body: str) -> "MessageAcceptance":
        """Send a free-form text message."""
        ...

    async def send_template(self, to: str, template_name: str, parameters: list[str]) -> "MessageAcceptance":
        """Send a pre-approved template with ordered body parameters."""
        ...

    async def check_connection(self) -> "ConnectionStatus":
        """Report whether the provider accepts the configured credentials."""
        ...
