"""Debt payoff projection and strategy comparison."""

from debtplan.engine.amortization import (
    PayoffFailure,
    PayoffResult,
    ScheduleEntry,
    ScheduleEntryType,
    project,
)
from debtplan.engine.guidance import (
    FAILURE_MESSAGES,
    PROJECTION_FAILURE_MESSAGES,
    STRATEGY_LABELS,
    active_debts,
    default_monthly_budget,
    parse_rate_percentage,
    recommendation_message,
    resolve_annual_rate,
    suggested_monthly_payment,
)
from debtplan.engine.money import EPSILON, MAX_MONTHS, add_months
from debtplan.engine.strategy import (
    Debt,
    DebtPayoff,
    RecommendationReason,
    Strategy,
    StrategyComparison,
    StrategyFailure,
    StrategyResult,
    compare,
    simulate,
)

__all__ = [
    "EPSILON",
    "FAILURE_MESSAGES",
    "MAX_MONTHS",
    "PROJECTION_FAILURE_MESSAGES",
    "STRATEGY_LABELS",
    "Debt",
    "DebtPayoff",
    "PayoffFailure",
    "PayoffResult",
    "RecommendationReason",
    "ScheduleEntry",
    "ScheduleEntryType",
    "Strategy",
    "StrategyComparison",
    "StrategyFailure",
    "StrategyResult",
    "active_debts",
    "add_months",
    "compare",
    "default_monthly_budget",
    "parse_rate_percentage",
    "project",
    "recommendation_message",
    "resolve_annual_rate",
    "simulate",
    "suggested_monthly_payment",
]
