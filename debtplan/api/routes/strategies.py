"""API routes for comparing snowball and avalanche payoff plans."""

from typing import List

from fastapi import APIRouter

from debtplan.api.schemas import (
    CompareRequest,
    DebtInput,
    DebtPayoffItem,
    SimulateRequest,
    StrategyComparisonResponse,
    StrategyResultResponse,
)
from debtplan.config import settings
from debtplan.engine import (
    FAILURE_MESSAGES,
    STRATEGY_LABELS,
    Debt,
    StrategyResult,
    active_debts,
    compare,
    default_monthly_budget,
    recommendation_message,
    resolve_annual_rate,
    simulate,
)

router = APIRouter()


def _to_debts(items: List[DebtInput]) -> List[Debt]:
    return [
        Debt(
            id=item.id,
            name=item.name,
            balance=item.balance,
            annual_interest_rate=resolve_annual_rate(item.annual_interest_rate, item.apr_percentage),
            is_paid=item.is_paid,
        )
        for item in items
    ]


def _result_to_response(result: StrategyResult) -> StrategyResultResponse:
    failure = result.failure_reason
    return StrategyResultResponse(
        strategy=result.strategy,
        label=STRATEGY_LABELS[result.strategy],
        months=result.months,
        payoff_date=result.payoff_date,
        total_interest=result.total_interest,
        is_successful=result.is_successful,
        failure_reason=failure,
        message=FAILURE_MESSAGES.get(failure.value) if failure else None,
        payoff_order=[DebtPayoffItem.model_validate(item) for item in result.payoff_order],
    )


@router.post("/simulate", response_model=StrategyResultResponse)
def simulate_strategy(payload: SimulateRequest):
    """Simulate one payoff strategy over a set of debts."""
    result = simulate(
        _to_debts(payload.debts),
        payload.monthly_budget,
        payload.strategy,
        start_date=payload.start_date,
        max_months=settings.max_months,
    )
    return _result_to_response(result)


@router.post("/compare", response_model=StrategyComparisonResponse)
def compare_strategies(payload: CompareRequest):
    """Compare snowball and avalanche and recommend one.

    When no budget is given the default monthly budget for the active debts is used.
    """
    debts = _to_debts(payload.debts)
    budget = payload.monthly_budget
    if budget is None:
        budget = default_monthly_budget(debts, floor=settings.suggestion_floor)

    comparison = compare(
        debts,
        budget,
        start_date=payload.start_date,
        max_months=settings.max_months,
    )

    message = recommendation_message(comparison)
    if message is None and not active_debts(debts):
        message = FAILURE_MESSAGES["noDebts"]

    return StrategyComparisonResponse(
        monthly_budget=budget,
        snowball=_result_to_response(comparison.snowball),
        avalanche=_result_to_response(comparison.avalanche),
        recommendation=comparison.recommendation,
        months_saved=comparison.months_saved,
        interest_saved=comparison.interest_saved,
        reason=comparison.reason,
        message=message,
    )
