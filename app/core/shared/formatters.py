"""
Shared Formatters

Date formatting for patient-facing messages.
"""

from datetime import date, datetime


class DateFormatter:
    """Long date rendering for patient-facing messages."""

    # Day names indexed by date.weekday()
    DAYS = {
        "es": ["lunes", "martes", "miércoles", "jueves", "viernes", "sábado", "domingo"],
        "en": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"],
    }

    # Month names indexed by date.month - 1
    MONTHS = {
        "es": [
            "enero",
            "febrero",
            "marzo",
            "abril",
            "mayo",
            "junio",
            "julio",
            "agosto",
            "septiembre",
            "octubre",
            "noviembre",
            "diciembre",
        ],
        "en": [
            "January",
            "February",
            "March",
            "April",
            "May",
            "June",
            "July",
            "August",
            "September",
            "October",
            "November",
            "December",
        ],
    }

    DEFAULT_LANGUAGE = "es"

    @classmethod
    def language_of(cls, locale: str | None) -> str:
        """Reduce a locale tag ('es-MX', 'en_US') to a supported language code."""
        if not locale:
            return cls.DEFAULT_LANGUAGE
        language = locale.replace("_", "-").split("-")[0].lower()
        return language if language in cls.DAYS else cls.DEFAULT_LANGUAGE

    @classmethod
    def format_long_date(cls, d: date | datetime, locale: str | None = None) -> str:
        """
        Format a date in long human form for the given locale.

        Examples:
            es-MX: 'miércoles, 21 de octubre de 2026'
            en-US: 'Wednesday, October 21, 2026'
        """
        if d is None:
            return ""

        language = cls.language_of(locale)
        day_name = cls.DAYS[language][d.weekday()]
        month_name = cls.MONTHS[language][d.month - 1]

        if language == "en":
            return f"{day_name}, {month_name} {d.day}, {d.year}"
        return f"{day_name}, {d.day} de {month_name} de {d.year}"
