# ============================================================================
# Tests for the WhatsApp Cloud API gateway
# ============================================================================
"""
Tests for WhatsAppGateway.

Verifies:
- Request URL, headers and payload shape for text and template messages
- Phone number normalization
- Provider errors preserved in GatewayError, timeouts as GatewayTimeoutError
- Malformed provider bodies surface as GatewayError
- Connection check never raises
"""

import json

import httpx
import pytest

from app.core.domain.exceptions import GatewayError, GatewayTimeoutError
from app.integrations.whatsapp import WhatsAppConfig, WhatsAppGateway, normalize_phone

PHONE_NUMBER_ID = "106540352242922"
MESSAGES_URL = f"https://graph.facebook.com/v18.0/{PHONE_NUMBER_ID}/messages"

ACCEPTED = {
    "messaging_product": "whatsapp",
    "contacts": [{"input": "525512345678", "wa_id": "5215512345678"}],
    "messages": [{"id": "wamid.HBgMNTIxNTUxMjM0NTY3OBUCABEYEjdBQjA"}],
}


class RecordingTransport:
    """httpx MockTransport handler that records requests and replays a canned response."""

    def __init__(self, response: httpx.Response | None = None, error: Exception | None = None):
        self.requests: list[httpx.Request] = []
        self._response = response or httpx.Response(200, json=ACCEPTED)
        self._error = error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        return self._response

    @property
    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def config() -> WhatsAppConfig:
    return WhatsAppConfig(access_token="EAAG-test-token", phone_number_id=PHONE_NUMBER_ID)


def _gateway(config: WhatsAppConfig, transport: RecordingTransport) -> WhatsAppGateway:
    return WhatsAppGateway(config, client=httpx.AsyncClient(transport=httpx.MockTransport(transport)))


# ============================================================================
# Phone normalization
# ============================================================================


class TestNormalizePhone:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("5512345678", "525512345678"),
            ("55-1234-5678", "525512345678"),
            ("(55) 1234 5678", "525512345678"),
            ("+5512345678", "525512345678"),
            ("+5215512345678", "5215512345678"),
            ("5215512345678", "5215512345678"),
            ("+52 1 55 1234 5678", "52 1 55 1234 5678"),
        ],
    )
    def test_normalization_rules(self, raw, expected):
        assert normalize_phone(raw) == expected

    def test_custom_country_code(self):
        assert normalize_phone("2025550123", default_country_code="1") == "12025550123"


# ============================================================================
# Sending
# ============================================================================


class TestSendMessages:
    @pytest.mark.asyncio
    async def test_send_text_payload(self, config):
        transport = RecordingTransport()
        gateway = _gateway(config, transport)

        acceptance = await gateway.send_text("55 1234 5678", "Hola")

        request = transport.requests[0]
        assert request.method == "POST"
        assert str(request.url) == MESSAGES_URL
        assert request.headers["Authorization"] == "Bearer EAAG-test-token"
        assert transport.last_payload == {
            "messaging_product": "whatsapp",
            "recipient_type": "individual",
            "to": "525512345678",
            "type": "text",
            "text": {"body": "Hola", "preview_url": False},
        }
        assert acceptance.message_id == ACCEPTED["messages"][0]["id"]
        assert acceptance.recipient == "525512345678"
        assert acceptance.wa_id == "5215512345678"

    @pytest.mark.asyncio
    async def test_send_template_with_parameters(self, config):
        transport = RecordingTransport()
        gateway = _gateway(config, transport)

        await gateway.send_template("5512345678", "recordatorio_vacuna", ["Ana", "Firulais"])

        assert transport.last_payload["type"] == "template"
        assert transport.last_payload["template"] == {
            "name": "recordatorio_vacuna",
            "language": {"code": "es"},
            "components": [
                {
                    "type": "body",
                    "parameters": [
                        {"type": "text", "text": "Ana"},
                        {"type": "text", "text": "Firulais"},
                    ],
                }
            ],
        }

    @pytest.mark.asyncio
    async def test_send_template_without_parameters_omits_components(self, config):
        transport = RecordingTransport()
        gateway = _gateway(config, transport)

        await gateway.send_template("5512345678", "hello_world", [])

        assert transport.last_payload["template"] == {"name": "hello_world", "language": {"code": "es"}}

    @pytest.mark.asyncio
    async def test_template_language_comes_from_config(self):
        config = WhatsAppConfig(access_token="t", phone_number_id=PHONE_NUMBER_ID, template_language="en")
        transport = RecordingTransport()

        await _gateway(config, transport).send_template("5512345678", "vaccine_reminder", ["Ana"])

        assert transport.last_payload["template"]["language"] == {"code": "en"}

    @pytest.mark.asyncio
    async def test_empty_recipient_is_rejected_without_request(self, config):
        transport = RecordingTransport()

        with pytest.raises(GatewayError):
            await _gateway(config, transport).send_text("", "Hola")

        assert transport.requests == []


# ============================================================================
# Errors
# ============================================================================


class TestGatewayErrors:
    @pytest.mark.asyncio
    async def test_provider_error_is_preserved(self, config):
        body = {
            "error": {
                "message": "(#131030) Recipient phone number not in allowed list",
                "type": "OAuthException",
                "code": 131030,
                "fbtrace_id": "AbCdEf123",
            }
        }
        transport = RecordingTransport(httpx.Response(400, json=body))

        with pytest.raises(GatewayError) as exc_info:
            await _gateway(config, transport).send_template("5512345678", "recordatorio_vacuna", ["Ana"])

        error = exc_info.value
        assert error.message == "(#131030) Recipient phone number not in allowed list"
        assert error.provider_code == 131030
        assert error.provider_type == "OAuthException"
        assert error.trace_id == "AbCdEf123"
        assert error.status_code == 400
        assert error.details["provider_code"] == 131030
        assert len(transport.requests) == 1

    @pytest.mark.asyncio
    async def test_non_json_error_body(self, config):
        transport = RecordingTransport(httpx.Response(502, text="Bad Gateway"))

        with pytest.raises(GatewayError) as exc_info:
            await _gateway(config, transport).send_text("5512345678", "Hola")

        assert exc_info.value.message == "HTTP 502: Bad Gateway"
        assert exc_info.value.status_code == 502
        assert exc_info.value.provider_code is None

    @pytest.mark.asyncio
    async def test_timeout(self, config):
        transport = RecordingTransport(error=httpx.ReadTimeout("read timed out"))

        with pytest.raises(GatewayTimeoutError) as exc_info:
            await _gateway(config, transport).send_text("5512345678", "Hola")

        assert exc_info.value.code == "GATEWAY_TIMEOUT"
        assert exc_info.value.timeout == 10.0
        assert len(transport.requests) == 1

    @pytest.mark.asyncio
    async def test_connection_error(self, config):
        transport = RecordingTransport(error=httpx.ConnectError("connection refused"))

        with pytest.raises(GatewayError) as exc_info:
            await _gateway(config, transport).send_text("5512345678", "Hola")

        assert not isinstance(exc_info.value, GatewayTimeoutError)
        assert "Connection error" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_success_without_message_id(self, config):
        transport = RecordingTransport(httpx.Response(200, json={"messaging_product": "whatsapp", "messages": []}))

        with pytest.raises(GatewayError):
            await _gateway(config, transport).send_text("5512345678", "Hola")

    @pytest.mark.asyncio
    async def test_malformed_error_object_keeps_status(self, config):
        transport = RecordingTransport(httpx.Response(502, json={"error": {"message": None, "code": "x"}}))

        with pytest.raises(GatewayError) as exc_info:
            await _gateway(config, transport).send_text("5512345678", "Hola")

        assert exc_info.value.status_code == 502
        assert exc_info.value.provider_code is None

    @pytest.mark.asyncio
    async def test_malformed_error_object_keeps_its_message(self, config):
        body = {"error": {"message": "bad", "code": "OAuthException"}}
        transport = RecordingTransport(httpx.Response(400, json=body))

        with pytest.raises(GatewayError) as exc_info:
            await _gateway(config, transport).send_text("5512345678", "Hola")

        assert exc_info.value.message == "bad"
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_success_body_with_wrong_shape(self, config):
        transport = RecordingTransport(httpx.Response(200, json={"messages": "wamid.1"}))

        with pytest.raises(GatewayError) as exc_info:
            await _gateway(config, transport).send_text("5512345678", "Hola")

        assert exc_info.value.message == "WhatsApp API returned an unexpected response body"

    @pytest.mark.asyncio
    async def test_success_body_that_is_not_an_object(self, config):
        transport = RecordingTransport(httpx.Response(200, json=["unexpected"]))

        with pytest.raises(GatewayError) as exc_info:
            await _gateway(config, transport).send_text("5512345678", "Hola")

        assert exc_info.value.status_code == 200

    @pytest.mark.asyncio
    async def test_configured_timeout_applies_to_injected_client(self):
        config = WhatsAppConfig(access_token="t", phone_number_id=PHONE_NUMBER_ID, timeout=2.5)
        transport = RecordingTransport()

        await _gateway(config, transport).send_text("5512345678", "Hola")

        assert transport.requests[0].extensions["timeout"]["read"] == 2.5
        assert transport.requests[0].extensions["timeout"]["connect"] == 2.5


# ============================================================================
# Connection check
# ============================================================================


class TestCheckConnection:
    @pytest.mark.asyncio
    async def test_connected(self, config):
        body = {"display_phone_number": "+52 55 1234 5678", "verified_name": "Clínica Patitas", "id": PHONE_NUMBER_ID}
        transport = RecordingTransport(httpx.Response(200, json=body))

        status = await _gateway(config, transport).check_connection()

        assert status.connected is True
        assert status.phone_number == "+52 55 1234 5678"
        assert transport.requests[0].method == "GET"
        assert str(transport.requests[0].url) == f"https://graph.facebook.com/v18.0/{PHONE_NUMBER_ID}"

    @pytest.mark.asyncio
    async def test_failure_is_reported(self, config):
        body = {"error": {"message": "Invalid OAuth access token.", "type": "OAuthException", "code": 190}}
        transport = RecordingTransport(httpx.Response(401, json=body))

        status = await _gateway(config, transport).check_connection()

        assert status.connected is False
        assert status.error == "Invalid OAuth access token."

    @pytest.mark.asyncio
    async def test_body_that_is_not_an_object_is_reported(self, config):
        transport = RecordingTransport(httpx.Response(200, json=["unexpected"]))

        status = await _gateway(config, transport).check_connection()

        assert status.connected is False
        assert status.error == "WhatsApp API returned an unexpected response body"

    @pytest.mark.asyncio
    async def test_malformed_error_object_is_reported(self, config):
        body = {"error": {"message": "bad", "code": "OAuthException"}}
        transport = RecordingTransport(httpx.Response(400, json=body))

        status = await _gateway(config, transport).check_connection()

        assert status.connected is False
        assert status.error == "bad"

    @pytest.mark.asyncio
    async def test_numeric_display_phone_number(self, config):
        transport = RecordingTransport(httpx.Response(200, json={"display_phone_number": 525512345678}))

        status = await _gateway(config, transport).check_connection()

        assert status.connected is True
        assert status.phone_number == "525512345678"

    @pytest.mark.asyncio
    async def test_injected_client_is_not_closed(self, config):
        client = httpx.AsyncClient(transport=httpx.MockTransport(RecordingTransport()))

        async with WhatsAppGateway(config, client=client) as gateway:
            await gateway.send_text("5512345678", "Hola")

        assert client.is_closed is False
        await client.aclose()
