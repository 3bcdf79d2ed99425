# portfolio_reports/utils/formatting.py
#
# Display helpers. Output is locale independent: "," thousands separator,
# "." decimal point, whatever the process locale says.

import datetime
from decimal import Decimal
from typing import Optional, Union

from portfolio_reports.utils.loan_calculations import days_between, money

EMPTY = "—"

Number = Union[int, float, Decimal]

# strftime("%b") follows the process locale
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_currency(amount: Optional[Number]) -> str:
    if amount is None:
        return EMPTY
    return f"{money(amount):,.2f}"


def format_count(value: Optional[int]) -> str:
    if value is None:
        return EMPTY
    return f"{int(value):,d}"


def format_display_date(value: Optional[datetime.date]) -> str:
    """5 Mar 2024"""
    if value is None:
        return EMPTY
    return f"{value.day} {MONTHS[value.month - 1]} {value.year}"


def format_full_address(
        block: Optional[str] = None,
        street: Optional[str] = None,
        unit: Optional[str] = None,
        building: Optional[str] = None,
        address: Optional[str] = None,
        postal: Optional[str] = None,
) -> str:
    parts = []

    block = (block or "").strip()
    if block:
        parts.append(f"Blk {block}")

    street = (street or "").strip()
    if street:
        parts.append(street)

    unit = (unit or "").strip()
    if unit:
        parts.append(unit if unit.startswith("#") else f"#{unit}")

    building = (building or "").strip()
    if building:
        parts.append(building)

    address = (address or "").strip()
    if address:
        parts.append(address)

    postal = (postal or "").strip()
    if postal:
        parts.append(f"Postal {postal}")

    return ", ".join(parts) if parts else EMPTY


def days_since_label(day: Optional[datetime.date], today: datetime.date) -> str:
    days = days_between(day, today)
    if days is None:
        return EMPTY
    if days >= 0:
        return f"{days} days ago"
    return f"In {abs(days)} days"
