"""Multi-debt payoff simulation under snowball and avalanche ordering."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Hashable, Iterable, Optional

from debtplan.engine.money import (
    EPSILON,
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


class Strategy(str, enum.Enum):
    """Order in which a shared monthly budget is applied to debts."""

    SNOWBALL = "snowball"
    AVALANCHE = "avalanche"


class StrategyFailure(str, enum.Enum):
    NO_DEBTS = "noDebts"
    NO_BUDGET = "noBudget"
    PAYMENT_TOO_LOW = "paymentTooLow"
    MAX_MONTHS_EXCEEDED = "maxMonthsExceeded"


class RecommendationReason(str, enum.Enum):
    TIME = "time"
    INTEREST = "interest"


@dataclass(frozen=True)
class Debt:
    """A debt record as supplied by the caller."""

    id: Hashable
    balance: Number
    annual_interest_rate: Optional[Number] = None
    name: Optional[str] = None
    is_paid: bool = False


@dataclass(frozen=True)
class DebtPayoff:
    debt_id: Hashable
    month: int


@dataclass(frozen=True)
class StrategyResult:
    strategy: Strategy
    months: Optional[int]
    payoff_date: Optional[date]
    total_interest: Decimal
    is_successful: bool
    failure_reason: Optional[StrategyFailure] = None
    payoff_order: tuple[DebtPayoff, ...] = ()


@dataclass(frozen=True)
class StrategyComparison:
    snowball: StrategyResult
    avalanche: StrategyResult
    recommendation: Optional[Strategy] = None
    months_saved: Optional[int] = None
    interest_saved: Decimal = ZERO
    reason: Optional[RecommendationReason] = None


@dataclass
class _SimulatedDebt:
    id: Hashable
    balance: Decimal
    rate: Decimal
    rate_per_month: Decimal = field(init=False)

    def __post_init__(self) -> None:
        self.rate_per_month = monthly_rate(self.rate)


def coerce_debt(debt: Any) -> Debt:
    if isinstance(debt, Debt):
        return debt
    if isinstance(debt, dict):
        return Debt(
            id=debt.get("id"),
            balance=debt.get("balance", 0),
            annual_interest_rate=debt.get("annual_interest_rate"),
            name=debt.get("name"),
            is_paid=bool(debt.get("is_paid", False)),
        )
    raise TypeError(f"Unsupported debt record: {debt!r}")


def _normalize(debts: Iterable[Any]) -> list[_SimulatedDebt]:
    """Working copies of unpaid debts with a positive balance."""
    normalized: list[_SimulatedDebt] = []
    for raw in debts:
        debt = coerce_debt(raw)
        balance = to_decimal(debt.balance)
        if debt.is_paid or balance is None or balance <= 0:
            continue
        rate = to_decimal(debt.annual_interest_rate) or ZERO
        normalized.append(
            _SimulatedDebt(id=debt.id, balance=round_cents(balance), rate=max(ZERO, rate))
        )
    return normalized


def _priority_order(debts: list[_SimulatedDebt], strategy: Strategy) -> list[_SimulatedDebt]:
    if strategy is Strategy.SNOWBALL:
        return sorted(debts, key=lambda d: (d.balance, d.rate))
    return sorted(debts, key=lambda d: (-d.rate, -d.balance))


def _is_clear(debt: _SimulatedDebt) -> bool:
    return debt.balance <= EPSILON


def simulate(
    debts: Iterable[Any],
    monthly_budget: Optional[Number],
    strategy: Strategy | str,
    *,
    start_date: Optional[date] = None,
    max_months: int = MAX_MONTHS,
) -> StrategyResult:
    """
    Simulate paying off every debt with one shared monthly budget.

    The payment order is fixed before the first month: snowball pays the
    smallest balance first (ties by lower rate), avalanche pays the highest
    rate first (ties by larger balance). Each month interest accrues on every
    debt, then the budget is spent down the priority list.
    """
    strategy = Strategy(strategy)
    start = start_date or date.today()
    normalized = _normalize(debts)

    if not normalized or all(_is_clear(debt) for debt in normalized):
        return StrategyResult(
            strategy=strategy,
            months=0,
            payoff_date=start,
            total_interest=ZERO,
            is_successful=True,
        )

    budget = to_decimal(monthly_budget)
    if budget is None or budget <= 0:
        return StrategyResult(
            strategy=strategy,
            months=None,
            payoff_date=None,
            total_interest=ZERO,
            is_successful=False,
            failure_reason=StrategyFailure.NO_BUDGET,
        )

    ordered = _priority_order(normalized, strategy)
    months = 0
    total_interest = ZERO
    payoff_order: list[DebtPayoff] = []

    while months < max_months and not all(_is_clear(debt) for debt in normalized):
        months += 1

        for debt in normalized:
            if _is_clear(debt):
                continue
            interest = accrue_interest(debt.balance, debt.rate_per_month)
            debt.balance += interest
            total_interest += interest

        remaining = budget
        paid_this_month = ZERO
        for debt in ordered:
            if remaining <= 0:
                break
            if _is_clear(debt):
                continue
            payment = min(debt.balance, remaining)
            debt.balance -= payment
            remaining -= payment
            paid_this_month += payment
            if _is_clear(debt):
                payoff_order.append(DebtPayoff(debt_id=debt.id, month=months))

        if all(_is_clear(debt) for debt in normalized):
            logger.debug(
                "%s plan clears %d debts in %d months", strategy.value, len(normalized), months
            )
            return StrategyResult(
                strategy=strategy,
                months=months,
                payoff_date=add_months(start, months),
                total_interest=total_interest,
                is_successful=True,
                payoff_order=tuple(payoff_order),
            )

        if paid_this_month <= EPSILON:
            logger.info("%s plan makes no progress in month %d", strategy.value, months)
            return StrategyResult(
                strategy=strategy,
                months=None,
                payoff_date=None,
                total_interest=total_interest,
                is_successful=False,
                failure_reason=StrategyFailure.PAYMENT_TOO_LOW,
                payoff_order=tuple(payoff_order),
            )

    logger.info("%s plan not finished within %d months", strategy.value, max_months)
    return StrategyResult(
        strategy=strategy,
        months=None,
        payoff_date=None,
        total_interest=total_interest,
        is_successful=False,
        failure_reason=StrategyFailure.MAX_MONTHS_EXCEEDED,
        payoff_order=tuple(payoff_order),
    )


def compare(
    debts: Iterable[Any],
    monthly_budget: Optional[Number],
    *,
    start_date: Optional[date] = None,
    max_months: int = MAX_MONTHS,
) -> StrategyComparison:
    """Run both strategies over the same debts and recommend one."""
    debts = list(debts)
    start = start_date or date.today()
    snowball = simulate(debts, monthly_budget, Strategy.SNOWBALL, start_date=start, max_months=max_months)
    avalanche = simulate(debts, monthly_budget, Strategy.AVALANCHE, start_date=start, max_months=max_months)

    recommendation: Optional[Strategy] = None
    months_saved: Optional[int] = None
    interest_saved = ZERO
    reason: Optional[RecommendationReason] = None

    if snowball.is_successful and not avalanche.is_successful:
        recommendation = Strategy.SNOWBALL
        reason = RecommendationReason.TIME
    elif avalanche.is_successful and not snowball.is_successful:
        recommendation = Strategy.AVALANCHE
        reason = RecommendationReason.TIME
    elif snowball.is_successful and avalanche.is_successful:
        if (
            snowball.months is not None
            and avalanche.months is not None
            and snowball.months != avalanche.months
        ):
            if snowball.months < avalanche.months:
                recommendation, winner, other = Strategy.SNOWBALL, snowball, avalanche
            else:
                recommendation, winner, other = Strategy.AVALANCHE, avalanche, snowball
            months_saved = abs(snowball.months - avalanche.months)
            interest_saved = max(ZERO, other.total_interest - winner.total_interest)
            reason = RecommendationReason.TIME
        else:
            difference = avalanche.total_interest - snowball.total_interest
            if abs(difference) > EPSILON:
                recommendation = Strategy.SNOWBALL if difference > 0 else Strategy.AVALANCHE
                interest_saved = abs(difference)
                reason = RecommendationReason.INTEREST

    return StrategyComparison(
        snowball=snowball,
        avalanche=avalanche,
        recommendation=recommendation,
        months_saved=months_saved,
        interest_saved=interest_saved,
        reason=reason,
    )
