"""API schemas for request/response validation."""

from datetime import date
from decimal import Decimal
from typing import Optional, Union
from pydantic import BaseModel, Field

from debtplan.engine import (
    PayoffFailure,
    RecommendationReason,
    ScheduleEntryType,
    Strategy,
    StrategyFailure,
)


# --- Payoff Projection Schemas ---


class PayoffProjectionRequest(BaseModel):
    balance: Decimal = Field(gt=Decimal("0"))
    monthly_payment: Decimal = Field(gt=Decimal("0"))
    annual_interest_rate: Optional[Decimal] = Field(default=None, ge=Decimal("0"), le=Decimal("1"))
    apr_percentage: Optional[Decimal] = Field(default=None, ge=Decimal("0"), le=Decimal("100"))
    extra_payment: Decimal = Decimal("0")
    skip_months: int = 0
    start_date: Optional[date] = None


class ScheduleEntryResponse(BaseModel):
    month: int
    type: ScheduleEntryType
    payment: Decimal
    interest: Decimal
    principal: Decimal
    remaining_balance: Decimal

    class Config:
        from_attributes = True


class PayoffProjectionResponse(BaseModel):
    balance: Decimal
    monthly_payment: Decimal
    annual_interest_rate: Decimal
    months: int
    total_interest: Decimal
    total_paid: Decimal
    skip_interest: Decimal = Decimal("0")
    payoff_date: Optional[date] = None
    is_complete: bool
    failure_reason: Optional[PayoffFailure] = None
    status: str
    message: Optional[str] = None
    schedule: list[ScheduleEntryResponse]


class SuggestedPaymentResponse(BaseModel):
    balance: Decimal
    suggested_payment: Decimal


# --- Strategy Schemas ---


class DebtInput(BaseModel):
    id: Union[int, str]
    name: Optional[str] = None
    balance: Decimal
    annual_interest_rate: Optional[Decimal] = Field(default=None, ge=Decimal("0"), le=Decimal("1"))
    apr_percentage: Optional[Decimal] = Field(default=None, ge=Decimal("0"), le=Decimal("100"))
    is_paid: bool = False


class SimulateRequest(BaseModel):
    debts: list[DebtInput]
    monthly_budget: Decimal
    strategy: Strategy = Strategy.SNOWBALL
    start_date: Optional[date] = None


class CompareRequest(BaseModel):
    debts: list[DebtInput]
    monthly_budget: Optional[Decimal] = None
    start_date: Optional[date] = None


class DebtPayoffItem(BaseModel):
    debt_id: Union[int, str]
    month: int

    class Config:
        from_attributes = True


class StrategyResultResponse(BaseModel):
    strategy: Strategy
    label: str
    months: Optional[int] = None
    payoff_date: Optional[date] = None
    total_interest: Decimal
    is_successful: bool
    failure_reason: Optional[StrategyFailure] = None
    message: Optional[str] = None
    payoff_order: list[DebtPayoffItem] = []


class StrategyComparisonResponse(BaseModel):
    monthly_budget: Decimal
    snowball: StrategyResultResponse
    avalanche: StrategyResultResponse
    recommendation: Optional[Strategy] = None
    months_saved: Optional[int] = None
    interest_saved: Decimal = Decimal("0")
    reason: Optional[RecommendationReason] = None
    message: Optional[str] = None
