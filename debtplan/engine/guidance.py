"""Starting values and user-facing copy for the payoff planner."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable, Optional

from debtplan.engine.amortization import PayoffFailure
from debtplan.engine.money import ZERO, Number, quantize_amount, to_decimal
from debtplan.engine.strategy import (
    Debt,
    RecommendationReason,
    Strategy,
    StrategyComparison,
    coerce_debt,
)

SUGGESTION_FLOOR = Decimal("5000")

STRATEGY_LABELS = {
    Strategy.SNOWBALL: "Pay smallest balance first",
    Strategy.AVALANCHE: "Pay highest interest first",
}

FAILURE_MESSAGES = {
    "noDebts": "No active debts to simulate.",
    "noBudget": "Enter a monthly budget above zero.",
    "paymentTooLow": "Budget is not enough to reduce any balances. Increase the amount to see a plan.",
    "maxMonthsExceeded": "Projection capped at 600 months. Increase payments to accelerate payoff.",
}

PROJECTION_FAILURE_MESSAGES = {
    PayoffFailure.PAYMENT_TOO_LOW: (
        "Monthly payment is not enough to cover the interest. Increase the amount to generate a payoff date."
    ),
    PayoffFailure.MAX_MONTHS_EXCEEDED: (
        "Projection is capped at 600 months. Increase the payment to pay this debt sooner."
    ),
}

INVALID_PROJECTION_MESSAGE = "Balance and monthly payment must both be greater than zero."


def _round_whole(amount: Decimal) -> Decimal:
    return quantize_amount(amount, Decimal("1"))


def active_debts(debts: Iterable[Any]) -> list[Debt]:
    """Debts that are not marked paid and still carry a positive balance."""
    active = []
    for raw in debts:
        debt = coerce_debt(raw)
        balance = to_decimal(debt.balance)
        if not debt.is_paid and balance is not None and balance > 0:
            active.append(debt)
    return active


def suggested_monthly_payment(balance: Number, floor: Number = SUGGESTION_FLOOR) -> Decimal:
    """A twelfth of the balance, never below the floor."""
    amount = to_decimal(balance) or ZERO
    return max(to_decimal(floor) or ZERO, _round_whole(max(ZERO, amount) / 12))


def default_monthly_budget(debts: Iterable[Any], floor: Number = SUGGESTION_FLOOR) -> Decimal:
    """Average active balance as a starting budget, never below the floor; 0 with no active debts."""
    active = active_debts(debts)
    if not active:
        return ZERO
    total = sum((to_decimal(debt.balance) for debt in active), ZERO)
    return max(to_decimal(floor) or ZERO, _round_whole(total / len(active)))


def parse_rate_percentage(value: Optional[Number]) -> Optional[Decimal]:
    """Convert an APR percentage (0-100) into a decimal fraction.

    Raises ValueError for values outside 0..100 or that are not numbers.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    rate = to_decimal(value)
    if rate is None or rate < 0 or rate > 100:
        raise ValueError("Enter an interest rate between 0% and 100%.")
    return rate / 100


def resolve_annual_rate(
    annual_interest_rate: Optional[Number], apr_percentage: Optional[Number] = None
) -> Optional[Decimal]:
    """The APR fraction, taken from `annual_interest_rate` or else converted from a percentage."""
    if annual_interest_rate is not None:
        return to_decimal(annual_interest_rate)
    return parse_rate_percentage(apr_percentage)


def recommendation_message(comparison: StrategyComparison) -> Optional[str]:
    if comparison.recommendation is None:
        return None
    label = STRATEGY_LABELS[comparison.recommendation]
    if comparison.reason is RecommendationReason.TIME and comparison.months_saved:
        plural = "" if comparison.months_saved == 1 else "s"
        return f"{label} gets you debt-free about {comparison.months_saved} month{plural} sooner."
    if comparison.reason is RecommendationReason.INTEREST:
        saved = _round_whole(comparison.interest_saved) if comparison.interest_saved >= 1 else ZERO
        return f"{label} keeps more cash in your pocket, roughly {saved} less interest."
    return None
