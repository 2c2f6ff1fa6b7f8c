"""
Reminder Policy

Pure eligibility rules for outbound messages. Both rules take an explicit
``now`` so they can be evaluated deterministically.
"""

import math
from datetime import UTC, date, datetime, time, timedelta

from ..entities.patient import Patient

DEFAULT_DAYS_BEFORE = 3
OFFER_WINDOW = timedelta(hours=24)


def days_until(vaccine_date: date, now: datetime) -> int:
    """Whole days, rounded up, from ``now`` to midnight UTC of ``vaccine_date``."""
    vaccine_midnight = datetime.combine(vaccine_date, time.min, tzinfo=UTC)
    return math.ceil((vaccine_midnight - now) / timedelta(days=1))


def is_reminder_due(
    patient: Patient,
    days_before: int = DEFAULT_DAYS_BEFORE,
    now: datetime | None = None,
) -> bool:
    """
    Whether a vaccine reminder should go out for ``patient``.

    False without a pending vaccine or reminder consent. Otherwise true when
    the vaccine is between 0 and ``days_before`` days away, inclusive.
    """
    if patient.next_vaccine is None:
        return False
    if not patient.consent.reminders:
        return False

    now = _as_utc(now)
    diff_days = days_until(patient.next_vaccine.date, now)
    return 0 <= diff_days <= days_before


def can_receive_offers(patient: Patient, now: datetime | None = None) -> bool:
    """
    Whether a marketing offer may be sent.

    Requires marketing consent and an interaction within the last 24 hours
    (the boundary itself counts as inside the window).
    """
    if not patient.consent.marketing:
        return False
    if patient.last_interaction is None:
        return False

    now = _as_utc(now)
    return _as_utc(patient.last_interaction) >= now - OFFER_WINDOW


def _as_utc(value: datetime | None) -> datetime:
    if value is None:
        return datetime.now(UTC)
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
