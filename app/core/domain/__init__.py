"""
Domain Layer - shared building blocks

- Entities: identity and audit timestamps for aggregates
- Value Objects: the StatusEnum base
- Exceptions: error hierarchy with stable codes
"""

from app.core.domain.entities import (
    AggregateRoot,
    Entity,
    generate_uuid_str,
    utc_now,
)
from app.core.domain.exceptions import (
    BusinessRuleViolationError,
    DomainException,
    DuplicateEntityError,
    GatewayError,
    GatewayTimeoutError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from app.core.domain.value_objects import StatusEnum

__all__ = [
    # Entities
    "Entity",
    "AggregateRoot",
    "generate_uuid_str",
    "utc_now",
    # Value Objects
    "StatusEnum",
    # Exceptions
    "DomainException",
    "ValidationError",
    "NotFoundError",
    "DuplicateEntityError",
    "BusinessRuleViolationError",
    "GatewayError",
    "GatewayTimeoutError",
    "StorageError",
]
