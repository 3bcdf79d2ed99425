from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

ZERO = Decimal("0.00")


def money(x) -> Decimal:
    """Always return 2-decimal Decimal with HALF_UP rounding."""
    if x is None:
        x = 0
    if not isinstance(x, Decimal):
        x = Decimal(str(x))
    return x.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def outstanding_principal(loan_amount, principal_repaid) -> Decimal:
    """
    Loan amount minus repaid principal, floored at zero.

    Example:
      loan=5000, repaid=2500 => 2500.00
      loan=5000, repaid=5200 => 0.00
    """
    return max(money(money(loan_amount) - money(principal_repaid)), ZERO)


def outstanding_interest(scheduled_interest, interest_collected) -> Decimal:
    """Scheduled interest minus interest already collected (not floored)."""
    return money(money(scheduled_interest) - money(interest_collected))


def loan_profit(total_repaid, loan_amount) -> Decimal:
    """Everything collected on the loan minus what was lent out."""
    return money(money(total_repaid) - money(loan_amount))


def average(total, count: int) -> Decimal:
    if count <= 0:
        return ZERO
    return money(money(total) / Decimal(count))


def days_between(earlier: Optional[date], later: date) -> Optional[int]:
    """Whole days from `earlier` to `later`; negative when `earlier` is in the future."""
    if earlier is None:
        return None
    return (later - earlier).days
