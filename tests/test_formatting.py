"""Tests for display formatting and money helpers."""

import datetime
import locale
from decimal import Decimal

import pytest

from portfolio_reports.utils.formatting import (
    EMPTY,
    days_since_label,
    format_count,
    format_currency,
    format_display_date,
    format_full_address,
)
from portfolio_reports.utils.loan_calculations import (
    average,
    days_between,
    loan_profit,
    money,
    outstanding_interest,
    outstanding_principal,
)


class TestMoney:
    """Tests for two-decimal rounding and derived amounts."""

    def test_half_up_rounding(self) -> None:
        """Halves round away from zero."""
        assert money("2.345") == Decimal("2.35")
        assert money(None) == Decimal("0.00")

    def test_outstanding_principal_is_floored(self) -> None:
        """Overpaid principal never shows a negative balance."""
        assert outstanding_principal(5000, 2500) == Decimal("2500.00")
        assert outstanding_principal(5000, 5200) == Decimal("0.00")

    def test_outstanding_interest_can_go_negative(self) -> None:
        """Interest collected beyond the schedule is shown as a negative balance."""
        assert outstanding_interest(100, 150) == Decimal("-50.00")

    def test_loan_profit(self) -> None:
        """Profit is everything collected minus the amount lent."""
        assert loan_profit(5200, 5000) == Decimal("200.00")

    def test_average_of_nothing_is_zero(self) -> None:
        """Averaging over zero items does not divide by zero."""
        assert average(Decimal("100"), 0) == Decimal("0.00")
        assert average(Decimal("25000"), 3) == Decimal("8333.33")

    def test_days_between(self) -> None:
        """Day differences are signed; a missing date gives None."""
        assert days_between(datetime.date(2024, 5, 1), datetime.date(2024, 5, 11)) == 10
        assert days_between(datetime.date(2024, 5, 11), datetime.date(2024, 5, 1)) == -10
        assert days_between(None, datetime.date(2024, 5, 1)) is None


class TestNumberFormatting:
    """Tests for currency and count strings."""

    def test_currency(self) -> None:
        """Currency uses comma thousands and two decimals."""
        assert format_currency(Decimal("1234567.5")) == "1,234,567.50"
        assert format_currency(0) == "0.00"
        assert format_currency(None) == EMPTY

    def test_count(self) -> None:
        """Counts are plain thousands-separated integers."""
        assert format_count(1234) == "1,234"
        assert format_count(0) == "0"

    def test_currency_ignores_process_locale(self) -> None:
        """Output does not change under a locale with different separators."""
        previous = locale.setlocale(locale.LC_ALL)
        try:
            try:
                locale.setlocale(locale.LC_ALL, "de_DE.UTF-8")
            except locale.Error:
                pytest.skip("de_DE locale not available")
            assert format_currency(Decimal("12000")) == "12,000.00"
            assert format_display_date(datetime.date(2024, 3, 5)) == "5 Mar 2024"
        finally:
            locale.setlocale(locale.LC_ALL, previous)


class TestDisplayText:
    """Tests for dates, addresses and relative-day labels."""

    def test_display_date(self) -> None:
        """Dates render as day, short month, year."""
        assert format_display_date(datetime.date(2024, 12, 25)) == "25 Dec 2024"
        assert format_display_date(None) == EMPTY

    def test_full_address(self) -> None:
        """Address parts are joined in order with their prefixes."""
        assert format_full_address(
            block="123",
            street="Serangoon Ave 3",
            unit="05-12",
            building="Golden Court",
            address="123 Serangoon Ave 3",
            postal="550123",
        ) == "Blk 123, Serangoon Ave 3, #05-12, Golden Court, 123 Serangoon Ave 3, Postal 550123"

    def test_full_address_skips_blank_parts(self) -> None:
        """Blank parts are dropped and an existing unit hash is not doubled."""
        assert format_full_address(street="  ", unit="#01-01", postal="123456") == "#01-01, Postal 123456"
        assert format_full_address() == EMPTY

    def test_days_since_label(self) -> None:
        """Past dates read as "ago", future dates as "in"."""
        today = datetime.date(2024, 5, 1)
        assert days_since_label(datetime.date(2024, 4, 21), today) == "10 days ago"
        assert days_since_label(today, today) == "0 days ago"
        assert days_since_label(datetime.date(2024, 5, 4), today) == "In 3 days"
        assert days_since_label(None, today) == EMPTY
