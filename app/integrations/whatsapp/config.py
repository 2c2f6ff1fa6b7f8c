"""
WhatsApp Gateway Configuration.

Explicit configuration handed to the gateway at construction time.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class WhatsAppConfig:
    """Credentials and transport settings for the WhatsApp Cloud API."""

    access_token: str
    phone_number_id: str
    api_base: str = "https://graph.facebook.com"
    api_version: str = "v18.0"
    timeout: float = 10.0
    default_country_code: str = "52"
    template_language: str = "es"

    @property
    def base_url(self) -> str:
        """Root URL for the configured phone number (e.g. .../v18.0/<phone_number_id>)."""
        return f"{self.api_base.rstrip('/')}/{self.api_version}/{self.phone_number_id}"

    @property
    def is_configured(self) -> bool:
        return bool(self.access_token and self.phone_number_id)
