"""
Shared pytest fixtures for all tests.

This module provides the in-memory patient store, the fake messaging
gateway and test data builders shared by the unit tests.
"""

import os

import pytest

from app.domains.vaccine_reminders.infrastructure.repositories import InMemoryPatientRepository
from tests.utils import FIXED_NOW, FakeMessagingGateway, PatientBuilder

# Ensure test environment
os.environ["ENVIRONMENT"] = "test"


# ============================================================================
# STORE & GATEWAY FIXTURES
# ============================================================================


@pytest.fixture
def patient_repository() -> InMemoryPatientRepository:
    """Empty in-memory patient store."""
    return InMemoryPatientRepository()


@pytest.fixture
def gateway() -> FakeMessagingGateway:
    """Fake messaging gateway recording every send."""
    return FakeMessagingGateway()


# ============================================================================
# TEST DATA FIXTURES
# ============================================================================


@pytest.fixture
def now():
    """Fixed reference instant (2026-10-18 15:00 UTC)."""
    return FIXED_NOW


@pytest.fixture
def patient_builder() -> PatientBuilder:
    return PatientBuilder()


# ============================================================================
# PYTEST CONFIGURATION
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external dependencies)")
    config.addinivalue_line("markers", "use_case: Application use case tests")
    config.addinivalue_line("markers", "integration: Integration tests against mocked transports")
