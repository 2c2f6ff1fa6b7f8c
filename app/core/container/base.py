# ============================================================================
# SCOPE: GLOBAL
# Description: Contenedor base con recursos compartidos (settings, gateway de mensajería).
# ============================================================================
"""
Base Container - Shared Singletons.

Single Responsibility: Manage shared resources (settings, messaging gateway).
"""

import logging

from app.config.settings import Settings, get_settings
from app.integrations.whatsapp import WhatsAppGateway

logger = logging.getLogger(__name__)


class BaseContainer:
    """
    Base container for shared singletons.

    Single Responsibility: Create and cache shared resources.
    """

    def __init__(self, settings: Settings | None = None):
        """
        Initialize base container.

        Args:
            settings: Optional settings instance (defaults to get_settings())
        """
        self.settings = settings or get_settings()

        # Singletons
        self._gateway_instance: WhatsAppGateway | None = None

        logger.info("BaseContainer initialized")

    def get_messaging_gateway(self) -> WhatsAppGateway:
        """Get the WhatsApp gateway (singleton), built from explicit settings."""
        if self._gateway_instance is None:
            config = self.settings.whatsapp_config
            logger.info(f"Creating WhatsAppGateway for phone number id {config.phone_number_id or '<unset>'}")
            self._gateway_instance = WhatsAppGateway(config)
        return self._gateway_instance

    async def close(self) -> None:
        """Release shared resources."""
        if self._gateway_instance is not None:
            await self._gateway_instance.close()
            self._gateway_instance = None
