"""
Base entity classes.

Aggregates in this service are stored as whole documents: they are loaded,
mutated in memory and written back in one piece. The base classes only carry
identity and the two audit timestamps every document has.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Generic, TypeVar
from uuid import uuid4

TId = TypeVar("TId")


def utc_now() -> datetime:
    """Current instant as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


@dataclass
class Entity(Generic[TId]):
    """
    Domain object with identity.

    Timestamps are always timezone-aware UTC.
    """

    id: TId | None = field(default=None)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def touch(self, now: datetime | None = None) -> None:
        """Move ``updated_at`` forward after a mutation."""
        self.updated_at = now or utc_now()


@dataclass
class AggregateRoot(Entity[TId], Generic[TId]):
    """
    Entry point of an aggregate.

    Every state change goes through a method on the root, and the whole
    aggregate is saved at once; there is no partial-field update path.
    """


def generate_uuid_str() -> str:
    """New random identifier for an aggregate (UUID4 as string)."""
    return str(uuid4())
