"""
WhatsApp Cloud API wire models.

Request payloads for text and template messages, the send response,
the provider error body and the results handed back to callers.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Outbound payloads
# ============================================================================


class WhatsAppRecipient(BaseModel):
    """Base recipient model for WhatsApp messages"""

    messaging_product: str = Field(default="whatsapp", description="Messaging product")
    recipient_type: str = Field(default="individual", description="Type of recipient")
    to: str = Field(..., description="Recipient phone number, digits only")


class TextBody(BaseModel):
    body: str = Field(..., description="Message text")
    preview_url: bool = Field(default=False, description="Render link previews")


class TextMessage(WhatsAppRecipient):
    """Free-form text message (only deliverable inside the 24h service window)."""

    type: Literal["text"] = "text"
    text: TextBody


class TemplateParameter(BaseModel):
    type: Literal["text"] = "text"
    text: str


class TemplateComponent(BaseModel):
    type: Literal["body"] = "body"
    parameters: list[TemplateParameter]


class TemplateLanguage(BaseModel):
    code: str = Field(..., description="Template language code, e.g. 'es'")


class TemplateSpec(BaseModel):
    name: str
    language: TemplateLanguage
    components: list[TemplateComponent] | None = Field(
        default=None, description="Omitted entirely when the template has no parameters"
    )


class TemplateMessage(WhatsAppRecipient):
    """Pre-approved template message."""

    type: Literal["template"] = "template"
    template: TemplateSpec

    @classmethod
    def build(cls, to: str, name: str, language: str, parameters: list[str]) -> "TemplateMessage":
        components = None
        if parameters:
            components = [
                TemplateComponent(parameters=[TemplateParameter(text=str(value)) for value in parameters])
            ]
        return cls(
            to=to,
            template=TemplateSpec(name=name, language=TemplateLanguage(code=language), components=components),
        )


# ============================================================================
# Provider responses
# ============================================================================


class SentContact(BaseModel):
    input: str | None = None
    wa_id: str | None = None


class SentMessage(BaseModel):
    id: str


class SendMessageResponse(BaseModel):
    """Body returned by POST /messages on success."""

    model_config = ConfigDict(extra="allow")

    messaging_product: str | None = None
    contacts: list[SentContact] = Field(default_factory=list)
    messages: list[SentMessage] = Field(default_factory=list)


class GraphErrorDetail(BaseModel):
    """The ``error`` object of a Graph API error response."""

    model_config = ConfigDict(extra="allow")

    message: str = "Unknown WhatsApp API error"
    type: str | None = None
    code: int | None = None
    error_data: dict[str, Any] | None = None
    fbtrace_id: str | None = None


# ============================================================================
# Results
# ============================================================================


class MessageAcceptance(BaseModel):
    """Provider acceptance of an outbound message."""

    message_id: str = Field(..., description="Provider message id (wamid...)")
    recipient: str = Field(..., description="Normalized destination number")
    wa_id: str | None = Field(None, description="WhatsApp id resolved by the provider")
    raw: dict[str, Any] = Field(default_factory=dict, description="Full provider response body")


class ConnectionStatus(BaseModel):
    """Outcome of a connectivity probe against the configured phone number."""

    connected: bool
    phone_number: str | None = Field(None, description="Display phone number reported by the provider")
    error: str | None = None
