"""Pydantic schemas for API request/response models."""

from decimal import Decimal
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from flipcalc.config import settings
from flipcalc.models.renovation import HouseCondition, RenovationCategory
from flipcalc.models.results import DealQuality


# ---- Request schemas ----

class ManualRenovationRequest(BaseModel):
    source: Literal["manual"] = "manual"
    amount: Decimal = Decimal("0")


class BreakdownRenovationRequest(BaseModel):
    source: Literal["breakdown"]
    items: dict[RenovationCategory, Decimal] = {}


class EstimatedRenovationRequest(BaseModel):
    source: Literal["estimate"]
    size_sqft: Decimal = Field(default_factory=lambda: settings.default_house_size_sqft)
    condition: HouseCondition = Field(
        default_factory=lambda: HouseCondition(settings.default_house_condition)
    )
    region: str = Field(default_factory=lambda: settings.default_region)
    diy_level: str = Field(default_factory=lambda: settings.default_diy_level)


RenovationRequest = Annotated[
    Union[ManualRenovationRequest, BreakdownRenovationRequest, EstimatedRenovationRequest],
    Field(discriminator="source"),
]


class TimelineRequest(BaseModel):
    """Base phase durations in days."""
    closing: int = 30
    permit: int = 15
    demo: int = 7
    rough_in: int = 14
    finish: int = 21
    listing: int = 45


class DealRequest(BaseModel):
    purchase_price: Decimal = Field(..., description="Purchase price in dollars")
    expected_selling_price: Decimal = Field(..., description="After-repair value (ARV)")

    down_payment_percent: Decimal = Field(
        default_factory=lambda: settings.default_down_payment_percent
    )
    interest_rate_percent: Decimal = Field(
        default_factory=lambda: settings.default_interest_rate_percent
    )
    loan_term_years: int = Field(default_factory=lambda: settings.default_loan_term_years)

    renovation: RenovationRequest = Field(default_factory=ManualRenovationRequest)
    holding_period_months: int = Field(
        default_factory=lambda: settings.default_holding_period_months
    )
    monthly_expenses: Decimal = Decimal("0")

    selling_cost_percent: Decimal = Field(
        default_factory=lambda: settings.default_selling_cost_percent
    )
    expected_monthly_rent: Decimal = Field(Decimal("0"), description="0 skips the exit comparison")

    house_condition: HouseCondition = Field(
        default_factory=lambda: HouseCondition(settings.default_house_condition)
    )
    timeline: TimelineRequest = Field(default_factory=TimelineRequest)


class ClassifyRequest(BaseModel):
    roi: Decimal
    arv_ratio: Decimal
    renovation_ratio: Decimal


class RenovationEstimateRequest(BaseModel):
    size_sqft: Decimal = Field(default_factory=lambda: settings.default_house_size_sqft)
    condition: HouseCondition = Field(
        default_factory=lambda: HouseCondition(settings.default_house_condition)
    )
    region: str = Field(default_factory=lambda: settings.default_region)
    diy_level: str = Field(default_factory=lambda: settings.default_diy_level)


class ScheduleRequest(BaseModel):
    estimates: TimelineRequest = Field(default_factory=TimelineRequest)
    house_condition: HouseCondition = Field(
        default_factory=lambda: HouseCondition(settings.default_house_condition)
    )


# ---- Response schemas ----

class EngineResponse(BaseModel):
    """Built straight from engine dataclasses. Ratios may be Infinity or NaN."""
    model_config = ConfigDict(from_attributes=True, allow_inf_nan=True)


class FlipResponse(EngineResponse):
    down_payment: Decimal
    loan_amount: Decimal
    monthly_payment: Decimal
    renovation_cost: Decimal
    total_holding_costs: Decimal
    selling_costs: Decimal
    total_investment: Decimal
    net_profit: Decimal
    roi: Decimal
    monthly_roi: Decimal
    annualized_roi: Decimal
    break_even_price: Decimal
    self_consistent_break_even_price: Decimal | None = None
    arv_ratio: Decimal
    renovation_ratio: Decimal
    holding_period_months: Decimal


class FinanceOptionResponse(EngineResponse):
    name: str
    down_payment_percent: Decimal
    interest_rate_percent: Decimal
    points_percent: Decimal
    other_fees: Decimal
    down_payment: Decimal
    loan_amount: Decimal
    loan_points_cost: Decimal
    monthly_payment: Decimal
    total_interest: Decimal
    total_holding_costs: Decimal
    selling_costs: Decimal
    total_investment: Decimal
    initial_cash_outlay: Decimal
    net_profit: Decimal
    roi: Decimal
    cash_on_cash: Decimal
    break_even_price: Decimal


class RentalYearResponse(EngineResponse):
    year: int
    appreciated_value: Decimal
    adjusted_monthly_rent: Decimal
    rental_income: Decimal
    vacancy_loss: Decimal
    property_management: Decimal
    maintenance: Decimal
    property_taxes: Decimal
    insurance: Decimal
    annual_mortgage: Decimal
    total_expenses: Decimal
    cash_flow: Decimal
    remaining_loan_balance: Decimal
    equity: Decimal
    equity_gain: Decimal
    principal_paydown: Decimal
    cash_on_cash: Decimal


class RentalResponse(EngineResponse):
    years: list[RentalYearResponse]
    monthly_rent: Decimal
    rent_is_estimated: bool
    monthly_mortgage_payment: Decimal
    loan_amount: Decimal
    initial_investment: Decimal
    final_value: Decimal
    final_loan_balance: Decimal
    selling_cost_after_holding: Decimal
    net_proceeds_from_sale: Decimal
    total_rental_cash_flow: Decimal
    total_appreciation: Decimal
    total_principal_paydown: Decimal
    total_rental_profit: Decimal
    rental_roi: Decimal
    annualized_rental_roi: Decimal
    rental_irr: Decimal | None = None
    real_appreciation_rate: Decimal


class StrategySummaryResponse(EngineResponse):
    strategy: str
    total_profit: Decimal
    annualized_roi: Decimal
    timeframe: str
    risk: str
    liquidity: str


class ExitStrategyResponse(EngineResponse):
    flip: StrategySummaryResponse
    rental: StrategySummaryResponse
    rental_breakdown: dict[str, Decimal] = {}
    negative_rental_cash_flow: bool = False


class ScenarioResponse(EngineResponse):
    name: str
    roi: Decimal
    net_profit: Decimal
    total_investment: Decimal


class ScenarioReportResponse(EngineResponse):
    base: ScenarioResponse
    optimistic: ScenarioResponse
    pessimistic: ScenarioResponse
    extreme: ScenarioResponse
    individual: list[ScenarioResponse] = []


class ClassifyResponse(BaseModel):
    quality: DealQuality


class RenovationEstimateResponse(EngineResponse):
    point_estimate: Decimal
    range_low: Decimal
    range_high: Decimal
    raw_estimate: Decimal
    region_multiplier: Decimal
    diy_factor: Decimal


class PhaseResponse(EngineResponse):
    name: str
    start: int
    end: int
    duration: int
    adjusted: bool


class TimelineResponse(EngineResponse):
    phases: list[PhaseResponse]
    total_days: int


class CashFlowEventResponse(EngineResponse):
    day: int
    label: str
    amount: Decimal


class AmortizationPaymentResponse(EngineResponse):
    period: int
    payment: Decimal
    principal: Decimal
    interest: Decimal
    balance: Decimal


class AmortizationResponse(EngineResponse):
    payments: list[AmortizationPaymentResponse]
    monthly_payment: Decimal
    total_interest: Decimal
    total_principal: Decimal


class AnalysisResponse(EngineResponse):
    flip: FlipResponse
    quality: DealQuality
    financing: list[FinanceOptionResponse]
    rental: RentalResponse
    exit_strategies: ExitStrategyResponse | None = None
    scenarios: ScenarioReportResponse
    timeline: TimelineResponse
    cash_flow_events: list[CashFlowEventResponse] = []
    renovation_estimate: RenovationEstimateResponse | None = None
    amortization: AmortizationResponse | None = None
    executive_summary: str = ""
    risk_assessment: str = ""
    sensitivity_insights: list[str] = []
    recommendations: list[str] = []
    metric_ratings: dict[str, str] = {}
