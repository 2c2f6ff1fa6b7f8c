"""
WhatsApp Integration

Messaging gateway for the WhatsApp Business Cloud API:
- WhatsAppGateway: facade for text/template sends and connection checks
- WhatsAppConfig: explicit credentials and transport settings
- normalize_phone: destination number normalization

Following Clean Architecture, these are infrastructure services
that integrate with external WhatsApp Business API.
"""

from app.integrations.whatsapp.config import WhatsAppConfig
from app.integrations.whatsapp.messenger import normalize_phone
from app.integrations.whatsapp.models import ConnectionStatus, MessageAcceptance
from app.integrations.whatsapp.service import WhatsAppGateway

__all__ = [
    "WhatsAppGateway",
    "WhatsAppConfig",
    "MessageAcceptance",
    "ConnectionStatus",
    "normalize_phone",
]
