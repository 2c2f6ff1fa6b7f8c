"""Test utilities and helpers."""

from tests.utils.builders import FIXED_NOW, PatientBuilder, VaccineEventBuilder
from tests.utils.factories import FakeMessagingGateway

__all__ = [
    # Builders
    "FIXED_NOW",
    "PatientBuilder",
    "VaccineEventBuilder",
    # Test doubles
    "FakeMessagingGateway",
]
