# Domain Services
from .reminder_policy import DEFAULT_DAYS_BEFORE, can_receive_offers, days_until, is_reminder_due

__all__ = ["DEFAULT_DAYS_BEFORE", "can_receive_offers", "days_until", "is_reminder_due"]
