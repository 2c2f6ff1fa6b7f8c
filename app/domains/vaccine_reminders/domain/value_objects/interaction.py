"""Interaction Record Value Object."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from .enums import DeliveryStatus, InteractionType


@dataclass(frozen=True)
class InteractionRecord:
    """One entry of the patient's append-only interaction log."""

    type: InteractionType
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    message: str | None = None
    response: str | None = None
    message_id: str | None = None
    status: DeliveryStatus = DeliveryStatus.SENT
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "timestamp": self.timestamp.isoformat(),
            "message": self.message,
            "response": self.response,
            "message_id": self.message_id,
            "status": self.status.value,
            "metadata": dict(self.metadata),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InteractionRecord":
        timestamp = datetime.fromisoformat(data["timestamp"])
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=UTC)
        return cls(
            type=InteractionType(data["type"]),
            timestamp=timestamp,
            message=data.get("message"),
            response=data.get("response"),
            message_id=data.get("message_id"),
            status=DeliveryStatus(data.get("status", DeliveryStatus.SENT.value)),
            metadata=dict(data.get("metadata") or {}),
        )
