from decimal import Decimal

import pytest

from debtplan.engine import (
    Debt,
    RecommendationReason,
    Strategy,
    StrategyComparison,
    StrategyResult,
    active_debts,
    default_monthly_budget,
    parse_rate_percentage,
    recommendation_message,
    resolve_annual_rate,
    suggested_monthly_payment,
)


def _result(strategy):
    return StrategyResult(
        strategy=strategy, months=10, payoff_date=None, total_interest=Decimal("0"), is_successful=True
    )


def test_suggested_payment_respects_floor():
    assert suggested_monthly_payment(12000) == Decimal("5000")
    assert suggested_monthly_payment(120000) == Decimal("10000")
    assert suggested_monthly_payment(60006) == Decimal("5001")
    assert suggested_monthly_payment(1200, floor=0) == Decimal("100")


def test_default_budget_averages_active_debts():
    debts = [
        Debt(id=1, balance=20000),
        Debt(id=2, balance=10000),
        Debt(id=3, balance=90000, is_paid=True),
    ]
    assert default_monthly_budget(debts) == Decimal("15000")
    assert default_monthly_budget([Debt(id=1, balance=1000), Debt(id=2, balance=2000)]) == Decimal("5000")


def test_default_budget_is_zero_without_active_debts():
    assert default_monthly_budget([]) == 0
    assert default_monthly_budget([Debt(id=1, balance=500, is_paid=True)]) == 0


def test_active_debts_filters_paid_and_empty_records():
    debts = [
        {"id": "a", "balance": 100},
        {"id": "b", "balance": 0},
        {"id": "c", "balance": 50, "is_paid": True},
    ]
    assert [debt.id for debt in active_debts(debts)] == ["a"]


def test_rate_percentage_converts_to_fraction():
    assert parse_rate_percentage("18") == Decimal("0.18")
    assert parse_rate_percentage(0) == Decimal("0")
    assert parse_rate_percentage("") is None
    assert parse_rate_percentage(None) is None


@pytest.mark.parametrize("value", [-1, "150", "abc"])
def test_rate_percentage_out_of_range(value):
    with pytest.raises(ValueError):
        parse_rate_percentage(value)


def test_recommendation_message_for_time():
    comparison = StrategyComparison(
        snowball=_result(Strategy.SNOWBALL),
        avalanche=_result(Strategy.AVALANCHE),
        recommendation=Strategy.AVALANCHE,
        months_saved=1,
        reason=RecommendationReason.TIME,
    )
    assert recommendation_message(comparison) == (
        "Pay highest interest first gets you debt-free about 1 month sooner."
    )


def test_recommendation_message_for_interest():
    comparison = StrategyComparison(
        snowball=_result(Strategy.SNOWBALL),
        avalanche=_result(Strategy.AVALANCHE),
        recommendation=Strategy.SNOWBALL,
        interest_saved=Decimal("5.10"),
        reason=RecommendationReason.INTEREST,
    )
    message = recommendation_message(comparison)
    assert message.startswith("Pay smallest balance first keeps more cash in your pocket")
    assert "roughly 5 less interest" in message


def test_no_message_without_recommendation():
    comparison = StrategyComparison(
        snowball=_result(Strategy.SNOWBALL),
        avalanche=_result(Strategy.AVALANCHE),
    )
    assert recommendation_message(comparison) is None


def test_resolve_annual_rate_prefers_fraction():
    assert resolve_annual_rate(Decimal("0.2"), 12) == Decimal("0.2")
    assert resolve_annual_rate(None, 12) == Decimal("0.12")
    assert resolve_annual_rate(None, None) is None
    with pytest.raises(ValueError):
        resolve_annual_rate(None, 150)


def test_suggested_payment_handles_very_large_balance():
    assert suggested_monthly_payment(Decimal("1.2e30")) == Decimal("1e29")
