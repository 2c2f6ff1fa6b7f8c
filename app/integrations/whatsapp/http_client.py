"""
WhatsApp HTTP Client.

Single Responsibility: Handle HTTP communication with WhatsApp Business API.
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from app.core.domain.exceptions import GatewayError, GatewayTimeoutError
from app.integrations.whatsapp.config import WhatsAppConfig
from app.integrations.whatsapp.models import GraphErrorDetail

logger = logging.getLogger(__name__)


class WhatsAppHttpClient:
    """
    HTTP client for WhatsApp Business API.

    Single Responsibility: Execute HTTP requests to WhatsApp API.

    Requests are made relative to ``{api_base}/{api_version}/{phone_number_id}``.
    Every failure is raised as GatewayError (or GatewayTimeoutError); no
    request is ever retried.
    """

    def __init__(self, config: WhatsAppConfig, client: httpx.AsyncClient | None = None):
        """
        Initialize HTTP client.

        Args:
            config: Gateway configuration (credentials, API version, timeout)
            client: Optional pre-built httpx client (tests inject a MockTransport)
        """
        self._config = config
        self._client = client
        self._owns_client = client is None

    @property
    def headers(self) -> dict[str, str]:
        """Get standard headers for requests."""
        return {
            "Authorization": f"Bearer {self._config.access_token}",
            "Content-Type": "application/json",
        }

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._config.base_url,
                timeout=httpx.Timeout(self._config.timeout),
                headers=self.headers,
            )
            self._owns_client = True
        return self._client

    def _url(self, endpoint: str) -> str:
        # Absolute URL so an injected client needs no base_url of its own
        endpoint = endpoint.lstrip("/")
        return f"{self._config.base_url}/{endpoint}" if endpoint else self._config.base_url

    async def post(self, payload: dict[str, Any], endpoint: str = "messages") -> dict[str, Any]:
        """
        Execute POST request to WhatsApp API.

        Args:
            payload: Request payload
            endpoint: API endpoint relative to the phone number (default: messages)

        Returns:
            Decoded JSON response body

        Raises:
            GatewayTimeoutError: If the provider did not answer in time
            GatewayError: On transport failure or non-2xx response
        """
        return await self._request("POST", endpoint, json=payload)

    async def get(self, endpoint: str = "", params: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Execute GET request to WhatsApp API.

        Args:
            endpoint: API endpoint relative to the phone number ("" for the number itself)
            params: Query parameters

        Returns:
            Decoded JSON response body
        """
        return await self._request("GET", endpoint, params=params)

    async def _request(self, method: str, endpoint: str, **kwargs: Any) -> dict[str, Any]:
        url = self._url(endpoint)
        logger.debug(f"{method} {url}")

        try:
            response = await self._get_client().request(
                method,
                url,
                headers=self.headers,
                timeout=httpx.Timeout(self._config.timeout),
                **kwargs,
            )
        except httpx.TimeoutException as e:
            logger.error(f"Timeout after {self._config.timeout}s calling WhatsApp API: {method} {endpoint}")
            raise GatewayTimeoutError(
                f"WhatsApp API did not respond within {self._config.timeout} seconds",
                timeout=self._config.timeout,
                original_error=e,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Connection error with WhatsApp API: {e}")
            raise GatewayError(f"Connection error with WhatsApp API: {e}", original_error=e) from e

        logger.info(f"WhatsApp API Response: {response.status_code}")

        if response.is_success:
            try:
                body = response.json()
            except ValueError as e:
                raise GatewayError(
                    "WhatsApp API returned a non-JSON response",
                    status_code=response.status_code,
                    original_error=e,
                ) from e
            if not isinstance(body, dict):
                raise GatewayError(
                    "WhatsApp API returned an unexpected response body",
                    status_code=response.status_code,
                )
            return body

        raise self._error_from_response(response)

    def _error_from_response(self, response: httpx.Response) -> GatewayError:
        """Build a GatewayError preserving the provider's structured error when present."""
        logger.error(f"Error {response.status_code}: {response.text}")

        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            try:
                detail = GraphErrorDetail.model_validate(body["error"])
            except PydanticValidationError:
                # Malformed error object; keep whatever message it carries
                return GatewayError(
                    str(body["error"].get("message") or response.text or response.reason_phrase),
                    status_code=response.status_code,
                )
            return GatewayError(
                detail.message,
                provider_code=detail.code,
                provider_type=detail.type,
                trace_id=detail.fbtrace_id,
                status_code=response.status_code,
            )

        return GatewayError(
            f"HTTP {response.status_code}: {response.text or response.reason_phrase}",
            status_code=response.status_code,
        )

    async def close(self) -> None:
        """Close the underlying client if this instance created it."""
        if self._client is not None and self._owns_client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
