"""Single-debt payoff projection with optional extra payment and skipped months."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from debtplan.engine.money import (
    MAX_MONTHS,
    ZERO,
    Number,
    accrue_interest,
    add_months,
    monthly_rate,
    round_cents,
    to_decimal,
)

logger = logging.getLogger(__name__)


class ScheduleEntryType(str, enum.Enum):
    """Kind of event recorded in a payoff schedule."""

    EXTRA = "extra"
    SKIP = "skip"
    PAYMENT = "payment"


class PayoffFailure(str, enum.Enum):
    """Why a projection did not reach a zero balance."""

    PAYMENT_TOO_LOW = "paymentTooLow"
    MAX_MONTHS_EXCEEDED = "maxMonthsExceeded"


@dataclass(frozen=True)
class ScheduleEntry:
    month: int
    type: ScheduleEntryType
    payment: Decimal
    interest: Decimal
    principal: Decimal
    remaining_balance: Decimal


@dataclass(frozen=True)
class PayoffResult:
    payoff_date: Optional[date]
    total_interest: Decimal
    total_paid: Decimal
    months: int
    schedule: tuple[ScheduleEntry, ...]
    is_complete: bool
    failure_reason: Optional[PayoffFailure] = None

    @property
    def skip_interest(self) -> Decimal:
        """Interest capitalized during skipped months."""
        return sum(
            (entry.interest for entry in self.schedule if entry.type is ScheduleEntryType.SKIP),
            ZERO,
        )


def project(
    balance: Number,
    monthly_payment: Number,
    annual_interest_rate: Optional[Number],
    *,
    start_date: Optional[date] = None,
    max_months: int = MAX_MONTHS,
    extra_payment: Optional[Number] = 0,
    skip_months: Optional[Number] = 0,
) -> Optional[PayoffResult]:
    """
    Project the month-by-month payoff of a single debt.

    An optional upfront extra payment is recorded as a month-0 event, then
    `skip_months` months accrue interest with no payment before regular
    payments start. Returns None when the balance or the payment is not a
    finite positive number.

    Args:
        balance: Outstanding principal.
        monthly_payment: Fixed payment applied every regular month.
        annual_interest_rate: APR as a decimal fraction (0.18 for 18%).
        start_date: Projection start; the payoff date is this plus `months`.
        max_months: Horizon after which the projection gives up.
        extra_payment: One-time principal reduction applied before month 1.
        skip_months: Number of months with no payment before regular payments.

    Returns:
        PayoffResult, or None for rejected input.
    """
    current = to_decimal(balance)
    payment_amount = to_decimal(monthly_payment)
    if current is None or payment_amount is None or current <= 0 or payment_amount <= 0:
        return None

    current = round_cents(current)
    rate = monthly_rate(annual_interest_rate)
    start = start_date or date.today()
    extra = max(ZERO, to_decimal(extra_payment) or ZERO)
    skips = max(0, int(to_decimal(skip_months) or 0))

    schedule: list[ScheduleEntry] = []
    total_interest = ZERO
    month = 0
    failure: Optional[PayoffFailure] = None

    if extra > 0 and current > 0:
        applied = round_cents(min(extra, current))
        current = round_cents(current - applied)
        schedule.append(
            ScheduleEntry(
                month=0,
                type=ScheduleEntryType.EXTRA,
                payment=applied,
                interest=ZERO,
                principal=applied,
                remaining_balance=max(ZERO, current),
            )
        )

    skipped = 0
    while skipped < skips and current > 0 and month < max_months:
        interest = accrue_interest(current, rate)
        current = round_cents(current + interest)
        total_interest += interest
        month += 1
        skipped += 1
        schedule.append(
            ScheduleEntry(
                month=month,
                type=ScheduleEntryType.SKIP,
                payment=ZERO,
                interest=interest,
                principal=ZERO,
                remaining_balance=max(ZERO, current),
            )
        )

    while current > 0 and month < max_months:
        interest = accrue_interest(current, rate)
        available = payment_amount - interest
        if available <= 0:
            failure = PayoffFailure.PAYMENT_TOO_LOW
            break

        principal = round_cents(min(available, current))
        current = round_cents(current - principal)
        total_interest += interest
        month += 1
        schedule.append(
            ScheduleEntry(
                month=month,
                type=ScheduleEntryType.PAYMENT,
                payment=interest + principal,
                interest=interest,
                principal=principal,
                remaining_balance=max(ZERO, current),
            )
        )

    if current > 0 and failure is None:
        failure = PayoffFailure.MAX_MONTHS_EXCEEDED

    is_complete = current <= 0 and failure is None
    if failure is not None:
        logger.info(
            "Payoff projection stopped after %d months: %s (remaining %s)",
            month,
            failure.value,
            current,
        )

    return PayoffResult(
        payoff_date=add_months(start, month) if is_complete else None,
        total_interest=total_interest,
        total_paid=sum((entry.payment for entry in schedule), ZERO),
        months=month,
        schedule=tuple(schedule),
        is_complete=is_complete,
        failure_reason=failure,
    )
