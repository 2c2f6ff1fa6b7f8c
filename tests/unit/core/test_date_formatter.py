"""
Tests for DateFormatter.
"""

from datetime import date, datetime

import pytest

from app.core.shared.formatters import DateFormatter


@pytest.mark.unit
class TestDateFormatter:
    @pytest.mark.parametrize(
        "locale,expected",
        [
            ("es-MX", "miércoles, 21 de octubre de 2026"),
            ("es", "miércoles, 21 de octubre de 2026"),
            ("en-US", "Wednesday, October 21, 2026"),
            ("en_GB", "Wednesday, October 21, 2026"),
            ("fr-FR", "miércoles, 21 de octubre de 2026"),
            (None, "miércoles, 21 de octubre de 2026"),
        ],
    )
    def test_format_long_date(self, locale, expected):
        assert DateFormatter.format_long_date(date(2026, 10, 21), locale) == expected

    def test_long_date_accepts_datetime(self):
        assert DateFormatter.format_long_date(datetime(2027, 1, 3, 9, 0)) == "domingo, 3 de enero de 2027"

    def test_language_of(self):
        assert DateFormatter.language_of("EN-us") == "en"
        assert DateFormatter.language_of("") == "es"
