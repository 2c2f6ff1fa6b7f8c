# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Vaccine Reminders)
# Description: Scheduler module for vaccine reminders.
# ============================================================================
from .reminder_scheduler import ReminderScheduler

__all__ = ["ReminderScheduler"]
