"""
Shared utilities module

This module provides common utilities used across the entire application.
All utilities are domain-agnostic and reusable.
"""

from .formatters import DateFormatter
from .logger import (
    ContextLogger,
    configure_logging,
    get_logger,
    get_repository_logger,
    get_service_logger,
)

__all__ = [
    # Formatting
    "DateFormatter",
    # Logging
    "ContextLogger",
    "configure_logging",
    "get_logger",
    "get_repository_logger",
    "get_service_logger",
]
