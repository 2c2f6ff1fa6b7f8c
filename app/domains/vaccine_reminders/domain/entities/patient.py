"""Patient Entity.

A veterinary patient: the pet, its owner's contact data, the pending
vaccination and the history of messages exchanged with the owner.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from app.core.domain.entities import AggregateRoot, generate_uuid_str
from app.core.domain.exceptions import ValidationError

from ..exceptions import NoScheduledVaccineError
from ..value_objects import (
    ConsentState,
    InteractionRecord,
    MessagingPreferences,
    PetType,
    VaccineEvent,
)


@dataclass
class Patient(AggregateRoot[str]):
    """
    Patient aggregate root.

    The aggregate is always written back whole; interaction entries are only
    appended through ``record_interaction``.

    Example:
        ```python
        patient = Patient.register(
            full_name="Ana López",
            phone="5512345678",
            pet_name="Firulais",
            pet_type="DOG",
        )
        patient.schedule_vaccine(VaccineEvent("Rabia", date(2026, 10, 21), "10:30", "Sucursal Centro"))
        ```
    """

    # Dueño
    full_name: str = ""
    phone: str = ""
    email: str | None = None

    # Mascota
    pet_name: str = ""
    pet_type: PetType = PetType.DOG
    pet_breed: str | None = None
    pet_age: int | None = None
    pet_weight: float | None = None

    # Vacunación
    next_vaccine: VaccineEvent | None = None
    vaccine_history: list[VaccineEvent] = field(default_factory=list)

    # Consentimiento e interacciones
    consent: ConsentState = field(default_factory=ConsentState.default)
    interactions: list[InteractionRecord] = field(default_factory=list)
    last_interaction: datetime | None = None
    preferences: MessagingPreferences = field(default_factory=MessagingPreferences)

    @classmethod
    def register(
        cls,
        full_name: str | None,
        phone: str | None,
        pet_name: str | None,
        pet_type: PetType | str | None,
        email: str | None = None,
        pet_breed: str | None = None,
        pet_age: int | None = None,
        pet_weight: float | None = None,
        consent: ConsentState | None = None,
        preferences: MessagingPreferences | None = None,
    ) -> "Patient":
        """Create a new patient, validating the fields required for registration."""
        required = {
            "full_name": full_name,
            "phone": phone,
            "pet_name": pet_name,
            "pet_type": pet_type,
        }
        for field_name, value in required.items():
            if value is None or (isinstance(value, str) and not value.strip()):
                raise ValidationError(f"{field_name} is required", field=field_name)

        if isinstance(pet_type, PetType):
            resolved_pet_type = pet_type
        else:
            try:
                resolved_pet_type = PetType.from_string(str(pet_type).strip())
            except ValueError as e:
                raise ValidationError(
                    f"Invalid pet_type '{pet_type}'. Expected one of: {', '.join(PetType.values())}",
                    field="pet_type",
                ) from e

        # Optional; stored trimmed and lowercase, never rejected
        normalized_email = (email.strip().lower() or None) if email else None

        return cls(
            id=generate_uuid_str(),
            full_name=full_name.strip(),
            phone=phone.strip(),
            email=normalized_email,
            pet_name=pet_name.strip(),
            pet_type=resolved_pet_type,
            pet_breed=pet_breed,
            pet_age=pet_age,
            pet_weight=pet_weight,
            consent=consent or ConsentState.default(),
            preferences=preferences or MessagingPreferences(),
        )

    # Vaccination

    def schedule_vaccine(self, event: VaccineEvent) -> None:
        """Replace the pending vaccine; nothing from the previous one is kept."""
        self.next_vaccine = event
        self.touch()

    def archive_next_vaccine(self, administered: bool = True) -> VaccineEvent:
        """Move the pending vaccine into the history and clear it."""
        if self.next_vaccine is None:
            raise NoScheduledVaccineError(self.id)

        archived = self.next_vaccine.mark_administered() if administered else self.next_vaccine
        self.vaccine_history.append(archived)
        self.next_vaccine = None
        self.touch()
        return archived

    # Consent

    def update_consent(
        self,
        marketing: bool | None = None,
        reminders: bool | None = None,
        privacy: bool | None = None,
    ) -> ConsentState:
        current = self.consent or ConsentState.default()
        self.consent = current.merge(marketing=marketing, reminders=reminders, privacy=privacy)
        self.touch()
        return self.consent

    # Interaction history

    def record_interaction(self, record: InteractionRecord) -> None:
        self.interactions.append(record)
        self.last_interaction = record.timestamp
        self.touch()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "full_name": self.full_name,
            "phone": self.phone,
            "email": self.email,
            "pet_name": self.pet_name,
            "pet_type": self.pet_type.value,
            "pet_breed": self.pet_breed,
            "pet_age": self.pet_age,
            "pet_weight": self.pet_weight,
            "next_vaccine": self.next_vaccine.to_dict() if self.next_vaccine else None,
            "vaccine_history": [v.to_dict() for v in self.vaccine_history],
            "consent": self.consent.to_dict(),
            "interactions": [i.to_dict() for i in self.interactions],
            "last_interaction": self.last_interaction.isoformat() if self.last_interaction else None,
            "preferences": self.preferences.to_dict(),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Patient":
        """Rebuild a patient from ``to_dict`` output."""
        last_interaction = data.get("last_interaction")
        return cls(
            id=data["id"],
            full_name=data["full_name"],
            phone=data["phone"],
            email=data.get("email"),
            pet_name=data["pet_name"],
            pet_type=PetType(data.get("pet_type") or PetType.DOG.value),
            pet_breed=data.get("pet_breed"),
            pet_age=data.get("pet_age"),
            pet_weight=data.get("pet_weight"),
            next_vaccine=VaccineEvent.from_dict(data.get("next_vaccine")),
            vaccine_history=[VaccineEvent.from_dict(v) for v in data.get("vaccine_history") or []],
            consent=ConsentState.from_dict(data.get("consent")),
            interactions=[InteractionRecord.from_dict(i) for i in data.get("interactions") or []],
            last_interaction=_parse_datetime(last_interaction),
            preferences=MessagingPreferences.from_dict(data.get("preferences")),
            created_at=_parse_datetime(data.get("created_at")) or datetime.now(UTC),
            updated_at=_parse_datetime(data.get("updated_at")) or datetime.now(UTC),
        )


def _parse_datetime(value: Any) -> datetime | None:
    if value is None:
        return None
    parsed = value if isinstance(value, datetime) else datetime.fromisoformat(str(value))
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)
