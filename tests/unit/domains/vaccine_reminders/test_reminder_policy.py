"""
Unit tests for the reminder eligibility rules.

Tests:
- is_reminder_due
- can_receive_offers
"""

from datetime import UTC, date, datetime, timedelta

import pytest

from app.domains.vaccine_reminders.domain.services import can_receive_offers, days_until, is_reminder_due
from tests.utils import FIXED_NOW, PatientBuilder, VaccineEventBuilder

# ============================================================================
# is_reminder_due
# ============================================================================


@pytest.mark.unit
class TestIsReminderDue:
    """Vaccine date window and consent gating."""

    def test_no_scheduled_vaccine_is_never_due(self):
        patient = PatientBuilder().build()

        assert is_reminder_due(patient, days_before=3, now=FIXED_NOW) is False

    def test_reminder_consent_off_is_never_due(self):
        patient = PatientBuilder().with_vaccine_in_days(1).without_reminder_consent().build()

        assert is_reminder_due(patient, days_before=3, now=FIXED_NOW) is False

    @pytest.mark.parametrize(
        "days_ahead,expected",
        [
            (0, True),  # today, already past midnight
            (1, True),
            (3, True),  # 2d9h away, rounds up to 3
            (4, False),
            (-1, False),  # yesterday
        ],
    )
    def test_window_uses_days_rounded_up(self, days_ahead, expected):
        patient = PatientBuilder().with_vaccine_in_days(days_ahead).build()

        assert is_reminder_due(patient, days_before=3, now=FIXED_NOW) is expected

    def test_exact_midnight_boundary_is_inclusive(self):
        now = datetime(2026, 10, 18, 0, 0, tzinfo=UTC)
        patient = PatientBuilder().with_vaccine(VaccineEventBuilder().on(date(2026, 10, 21)).build()).build()

        assert days_until(date(2026, 10, 21), now) == 3
        assert is_reminder_due(patient, days_before=3, now=now) is True

    def test_zero_days_before_only_matches_today(self):
        today = PatientBuilder().with_vaccine_in_days(0).build()
        tomorrow = PatientBuilder().with_vaccine_in_days(1).build()

        assert is_reminder_due(today, days_before=0, now=FIXED_NOW) is True
        assert is_reminder_due(tomorrow, days_before=0, now=FIXED_NOW) is False

    def test_naive_now_is_treated_as_utc(self):
        patient = PatientBuilder().with_vaccine_in_days(2).build()
        naive_now = FIXED_NOW.replace(tzinfo=None)

        assert is_reminder_due(patient, days_before=3, now=naive_now) is True

    def test_default_window_is_three_days(self):
        patient = PatientBuilder().with_vaccine_in_days(3).build()

        assert is_reminder_due(patient, now=FIXED_NOW) is True


# ============================================================================
# can_receive_offers
# ============================================================================


@pytest.mark.unit
class TestCanReceiveOffers:
    """Marketing consent plus the 24h interaction window."""

    def test_requires_marketing_consent(self):
        patient = PatientBuilder().with_last_interaction(FIXED_NOW - timedelta(hours=1)).build()

        assert can_receive_offers(patient, now=FIXED_NOW) is False

    def test_requires_a_previous_interaction(self):
        patient = PatientBuilder().with_consent(marketing=True).build()

        assert can_receive_offers(patient, now=FIXED_NOW) is False

    def test_recent_interaction_allows_offers(self):
        patient = (
            PatientBuilder()
            .with_consent(marketing=True)
            .with_last_interaction(FIXED_NOW - timedelta(hours=3))
            .build()
        )

        assert can_receive_offers(patient, now=FIXED_NOW) is True

    def test_exactly_24_hours_is_inside_the_window(self):
        patient = (
            PatientBuilder()
            .with_consent(marketing=True)
            .with_last_interaction(FIXED_NOW - timedelta(hours=24))
            .build()
        )

        assert can_receive_offers(patient, now=FIXED_NOW) is True

    def test_older_than_24_hours_is_outside_the_window(self):
        patient = (
            PatientBuilder()
            .with_consent(marketing=True)
            .with_last_interaction(FIXED_NOW - timedelta(hours=24, seconds=1))
            .build()
        )

        assert can_receive_offers(patient, now=FIXED_NOW) is False
