from datetime import date
from decimal import Decimal

from debtplan.engine import PayoffFailure, ScheduleEntryType, project

START = date(2026, 1, 15)


def test_zero_interest_pays_off_in_equal_installments():
    result = project(1200, 100, 0, start_date=START)
    assert result is not None
    assert result.is_complete
    assert result.failure_reason is None
    assert result.months == 12
    assert result.total_interest == 0
    assert result.total_paid == Decimal("1200")
    assert result.schedule[-1].remaining_balance == 0
    assert result.payoff_date == date(2027, 1, 15)
    assert all(entry.type is ScheduleEntryType.PAYMENT for entry in result.schedule)


def test_final_payment_is_clamped_to_remaining_balance():
    result = project(1250, 100, 0, start_date=START)
    assert result.months == 13
    assert result.schedule[-1].payment == Decimal("50")
    assert result.total_paid == Decimal("1250")


def test_payment_rows_split_into_interest_and_principal():
    result = project(5000, 250, Decimal("0.18"), start_date=START)
    assert result.is_complete
    assert result.total_interest > 0
    assert result.schedule[-1].remaining_balance == 0
    assert result.schedule[-1].month == result.months
    for entry in result.schedule:
        assert entry.payment == entry.interest + entry.principal
        assert entry.remaining_balance >= 0
    # first month: 5000 * 0.18 / 12
    assert result.schedule[0].interest == Decimal("75.00")
    assert result.schedule[0].principal == Decimal("175.00")


def test_payment_not_covering_interest_is_too_low():
    result = project(10000, 100, Decimal("0.12"), start_date=START)
    assert result is not None
    assert result.failure_reason is PayoffFailure.PAYMENT_TOO_LOW
    assert not result.is_complete
    assert result.payoff_date is None
    assert result.months == 0
    assert result.schedule == ()


def test_horizon_exhausted_without_payoff():
    result = project(10000, 101, Decimal("0.12"), start_date=START, max_months=12)
    assert result.failure_reason is PayoffFailure.MAX_MONTHS_EXCEEDED
    assert result.months == 12
    assert result.payoff_date is None
    assert result.schedule[-1].remaining_balance > 0


def test_extra_payment_covering_balance_finishes_upfront():
    result = project(1000, 100, Decimal("0.1"), start_date=START, extra_payment=1000)
    assert result.is_complete
    assert len(result.schedule) == 1
    entry = result.schedule[0]
    assert entry.month == 0
    assert entry.type is ScheduleEntryType.EXTRA
    assert entry.interest == 0
    assert entry.remaining_balance == 0
    assert result.months == 0
    assert result.payoff_date == START
    assert result.total_paid == Decimal("1000")


def test_extra_payment_counts_towards_total_paid():
    result = project(1200, 100, 0, start_date=START, extra_payment=200)
    assert result.schedule[0].type is ScheduleEntryType.EXTRA
    assert result.schedule[0].payment == Decimal("200")
    assert result.months == 10
    assert result.total_paid == Decimal("1200")


def test_skipped_months_capitalize_interest():
    result = project(1200, 100, Decimal("0.12"), start_date=START, skip_months=2)
    first, second, third = result.schedule[:3]

    assert first.type is ScheduleEntryType.SKIP
    assert first.month == 1
    assert first.payment == 0
    assert first.principal == 0
    assert first.interest == Decimal("12.00")
    assert first.remaining_balance == Decimal("1212.00")

    assert second.type is ScheduleEntryType.SKIP
    assert second.interest == Decimal("12.12")
    assert second.remaining_balance == Decimal("1224.12")

    assert third.type is ScheduleEntryType.PAYMENT
    assert third.month == 3
    assert result.is_complete


def test_skip_months_truncated_and_negative_extra_ignored():
    result = project(1200, 100, Decimal("0.12"), start_date=START, skip_months=1.9, extra_payment=-50)
    skipped = [entry for entry in result.schedule if entry.type is ScheduleEntryType.SKIP]
    extras = [entry for entry in result.schedule if entry.type is ScheduleEntryType.EXTRA]
    assert len(skipped) == 1
    assert extras == []


def test_negative_rate_treated_as_zero():
    result = project(1200, 100, Decimal("-0.05"), start_date=START)
    assert result.total_interest == 0
    assert result.months == 12


def test_payoff_date_clamps_to_month_end():
    result = project(300, 100, 0, start_date=date(2026, 1, 31))
    assert result.months == 3
    assert result.payoff_date == date(2026, 4, 30)


def test_invalid_inputs_are_rejected():
    assert project(0, 100, 0.1) is None
    assert project(-5, 100, 0.1) is None
    assert project(1000, 0, 0.1) is None
    assert project(float("nan"), 100, 0.1) is None
    assert project(1000, float("inf"), 0.1) is None
    assert project("abc", 100, 0.1) is None


def test_very_large_balance_stays_in_band():
    result = project(Decimal("1e27"), 100, 0, start_date=START, max_months=12)
    assert result.failure_reason is PayoffFailure.MAX_MONTHS_EXCEEDED
    assert result.months == 12
    assert result.schedule[-1].principal == Decimal("100.00")


def test_extra_payment_is_rounded_to_cents():
    result = project(1000, 100, 0, start_date=START, extra_payment=Decimal("100.005"))
    extra = result.schedule[0]
    assert extra.principal == Decimal("100.01")
    assert extra.payment == extra.principal
    assert extra.remaining_balance == Decimal("899.99")


def test_skip_interest_sums_skipped_months():
    result = project(1200, 100, Decimal("0.12"), start_date=START, skip_months=2)
    assert result.skip_interest == Decimal("24.12")
    assert project(1200, 100, Decimal("0.12"), start_date=START).skip_interest == 0
