"""Numeric conventions shared by the payoff projector and the strategy simulator."""

from __future__ import annotations

import calendar
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Optional, Union

Number = Union[int, float, str, Decimal]

MAX_MONTHS = 600
EPSILON = Decimal("0.01")
CENT = Decimal("0.01")
ZERO = Decimal("0")
MONTHS_PER_YEAR = Decimal("12")


def to_decimal(value: Optional[Number]) -> Optional[Decimal]:
    """Coerce a numeric input to Decimal, returning None for missing or non-finite values."""
    if value is None or isinstance(value, bool):
        return None
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return None
    if not amount.is_finite():
        return None
    return amount


def quantize_amount(amount: Decimal, exponent: Decimal) -> Decimal:
    """Quantize with ROUND_HALF_UP, widening precision so large amounts never overflow it."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() - exponent.adjusted() + 2)
        return amount.quantize(exponent, rounding=ROUND_HALF_UP)


def round_cents(amount: Decimal) -> Decimal:
    return quantize_amount(amount, CENT)


def monthly_rate(annual_interest_rate: Optional[Number]) -> Decimal:
    """Monthly rate from an APR fraction. Negative, missing or malformed rates count as 0."""
    rate = to_decimal(annual_interest_rate)
    if rate is None or rate <= 0:
        return ZERO
    return rate / MONTHS_PER_YEAR


def accrue_interest(balance: Decimal, rate_per_month: Decimal) -> Decimal:
    """Interest accrued on `balance` over one month, in whole cents."""
    if balance <= 0 or rate_per_month <= 0:
        return ZERO
    return round_cents(balance * rate_per_month)


def add_months(base_date: date, months: int) -> date:
    """Add months to a date while clamping invalid day numbers."""
    month_index = (base_date.month - 1) + months
    year = base_date.year + month_index // 12
    month = month_index % 12 + 1
    max_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(base_date.day, max_day))
