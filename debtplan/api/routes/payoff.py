"""API routes for single-debt payoff projections."""

import logging
from decimal import Decimal

from fastapi import APIRouter, HTTPException, Query

from debtplan.api.schemas import (
    PayoffProjectionRequest,
    PayoffProjectionResponse,
    ScheduleEntryResponse,
    SuggestedPaymentResponse,
)
from debtplan.config import settings
from debtplan.engine import (
    PROJECTION_FAILURE_MESSAGES,
    project,
    resolve_annual_rate,
    suggested_monthly_payment,
)
from debtplan.engine.guidance import INVALID_PROJECTION_MESSAGE

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/projection", response_model=PayoffProjectionResponse)
def payoff_projection(payload: PayoffProjectionRequest):
    """Project the payoff schedule for one debt, with optional extra payment or skipped months."""
    try:
        rate = resolve_annual_rate(payload.annual_interest_rate, payload.apr_percentage)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    if rate is None:
        rate = Decimal("0")

    result = project(
        payload.balance,
        payload.monthly_payment,
        rate,
        start_date=payload.start_date,
        max_months=settings.max_months,
        extra_payment=payload.extra_payment,
        skip_months=payload.skip_months,
    )
    if result is None:
        raise HTTPException(status_code=422, detail=INVALID_PROJECTION_MESSAGE)

    status = result.failure_reason.value if result.failure_reason else "ok"
    if result.failure_reason:
        logger.info("Projection for balance %s ended with %s", payload.balance, status)

    return PayoffProjectionResponse(
        balance=payload.balance,
        monthly_payment=payload.monthly_payment,
        annual_interest_rate=rate,
        months=result.months,
        total_interest=result.total_interest,
        total_paid=result.total_paid,
        skip_interest=result.skip_interest,
        payoff_date=result.payoff_date,
        is_complete=result.is_complete,
        failure_reason=result.failure_reason,
        status=status,
        message=PROJECTION_FAILURE_MESSAGES.get(result.failure_reason),
        schedule=[ScheduleEntryResponse.model_validate(entry) for entry in result.schedule],
    )


@router.get("/suggested-payment", response_model=SuggestedPaymentResponse)
def suggested_payment(balance: Decimal = Query(..., gt=Decimal("0"))):
    """Starting monthly payment offered for a debt balance."""
    return SuggestedPaymentResponse(
        balance=balance,
        suggested_payment=suggested_monthly_payment(balance, floor=settings.suggestion_floor),
    )
