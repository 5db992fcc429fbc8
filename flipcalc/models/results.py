from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional

from flipcalc.engine.debt import AmortizationSchedule
from flipcalc.models.renovation import RenovationEstimate


class DealQuality(Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"


@dataclass
class FlipResult:
    down_payment: Decimal = Decimal("0")
    loan_amount: Decimal = Decimal("0")
    monthly_payment: Decimal = Decimal("0")
    renovation_cost: Decimal = Decimal("0")
    total_holding_costs: Decimal = Decimal("0")
    selling_costs: Decimal = Decimal("0")
    total_investment: Decimal = Decimal("0")
    net_profit: Decimal = Decimal("0")
    roi: Decimal = Decimal("0")  # Percent
    monthly_roi: Decimal = Decimal("0")
    annualized_roi: Decimal = Decimal("0")  # ROI per month x 12, not compounded
    break_even_price: Decimal = Decimal("0")
    # ARV at which profit is zero with selling costs charged on that ARV itself
    self_consistent_break_even_price: Optional[Decimal] = None
    arv_ratio: Decimal = Decimal("0")  # ARV / purchase price
    renovation_ratio: Decimal = Decimal("0")  # Renovation as % of ARV
    holding_period_months: Decimal = Decimal("0")


@dataclass(frozen=True)
class ScenarioResult:
    name: str
    roi: Decimal
    net_profit: Decimal
    total_investment: Decimal


@dataclass
class ScenarioReport:
    base: ScenarioResult
    optimistic: ScenarioResult
    pessimistic: ScenarioResult
    extreme: ScenarioResult
    individual: list[ScenarioResult] = field(default_factory=list)

    @property
    def composites(self) -> list[ScenarioResult]:
        return [self.base, self.optimistic, self.pessimistic, self.extreme]


@dataclass
class FinanceOptionResult:
    name: str
    down_payment_percent: Decimal = Decimal("0")
    interest_rate_percent: Decimal = Decimal("0")
    points_percent: Decimal = Decimal("0")
    other_fees: Decimal = Decimal("0")

    down_payment: Decimal = Decimal("0")
    loan_amount: Decimal = Decimal("0")
    loan_points_cost: Decimal = Decimal("0")
    monthly_payment: Decimal = Decimal("0")  # Interest-only
    total_interest: Decimal = Decimal("0")
    total_holding_costs: Decimal = Decimal("0")  # Monthly expenses over the hold
    selling_costs: Decimal = Decimal("0")
    total_investment: Decimal = Decimal("0")
    initial_cash_outlay: Decimal = Decimal("0")
    net_profit: Decimal = Decimal("0")
    roi: Decimal = Decimal("0")
    cash_on_cash: Decimal = Decimal("0")
    break_even_price: Decimal = Decimal("0")


@dataclass
class RentalYearRecord:
    year: int

    # Value
    appreciated_value: Decimal = Decimal("0")

    # Income
    adjusted_monthly_rent: Decimal = Decimal("0")
    rental_income: Decimal = Decimal("0")

    # Expenses
    vacancy_loss: Decimal = Decimal("0")
    property_management: Decimal = Decimal("0")
    maintenance: Decimal = Decimal("0")
    property_taxes: Decimal = Decimal("0")
    insurance: Decimal = Decimal("0")
    annual_mortgage: Decimal = Decimal("0")
    total_expenses: Decimal = Decimal("0")

    cash_flow: Decimal = Decimal("0")

    # Debt & equity
    remaining_loan_balance: Decimal = Decimal("0")
    equity: Decimal = Decimal("0")
    equity_gain: Decimal = Decimal("0")  # Appreciation over ARV to date
    principal_paydown: Decimal = Decimal("0")

    cash_on_cash: Decimal = Decimal("0")


@dataclass
class RentalProjection:
    years: list[RentalYearRecord] = field(default_factory=list)

    monthly_rent: Decimal = Decimal("0")
    rent_is_estimated: bool = False
    monthly_mortgage_payment: Decimal = Decimal("0")
    loan_amount: Decimal = Decimal("0")
    initial_investment: Decimal = Decimal("0")  # Down payment + renovation

    # Exit at end of hold
    final_value: Decimal = Decimal("0")
    final_loan_balance: Decimal = Decimal("0")
    selling_cost_after_holding: Decimal = Decimal("0")
    net_proceeds_from_sale: Decimal = Decimal("0")

    # Totals
    total_rental_cash_flow: Decimal = Decimal("0")
    total_appreciation: Decimal = Decimal("0")
    total_principal_paydown: Decimal = Decimal("0")
    total_rental_profit: Decimal = Decimal("0")
    rental_roi: Decimal = Decimal("0")
    annualized_rental_roi: Decimal = Decimal("0")  # rental_roi / years, not compounded
    rental_irr: Optional[Decimal] = None  # Annual, fraction; None if no root
    real_appreciation_rate: Decimal = Decimal("0")  # Appreciation net of inflation


@dataclass(frozen=True)
class StrategySummary:
    strategy: str
    total_profit: Decimal
    annualized_roi: Decimal
    timeframe: str
    risk: str
    liquidity: str


@dataclass
class ExitStrategyComparison:
    flip: StrategySummary
    rental: StrategySummary
    rental_breakdown: dict[str, Decimal] = field(default_factory=dict)
    negative_rental_cash_flow: bool = False


@dataclass(frozen=True)
class Phase:
    name: str
    start: int  # Inclusive day
    end: int  # Exclusive day
    adjusted: bool = False  # Duration scaled by house condition

    @property
    def duration(self) -> int:
        return self.end - self.start


@dataclass
class Timeline:
    phases: list[Phase] = field(default_factory=list)
    total_days: int = 0

    def phase(self, name: str) -> Phase:
        for p in self.phases:
            if p.name == name:
                return p
        raise KeyError(name)


@dataclass(frozen=True)
class CashFlowEvent:
    day: int
    label: str
    amount: Decimal  # Negative = cash out


@dataclass
class DealAnalysis:
    flip: FlipResult
    quality: DealQuality
    financing: list[FinanceOptionResult]
    rental: RentalProjection
    exit_strategies: Optional[ExitStrategyComparison]
    scenarios: ScenarioReport
    timeline: Timeline
    cash_flow_events: list[CashFlowEvent] = field(default_factory=list)
    renovation_estimate: Optional[RenovationEstimate] = None
    amortization: Optional[AmortizationSchedule] = None  # Flip loan over the holding period

    # Report narrative
    executive_summary: str = ""
    risk_assessment: str = ""
    sensitivity_insights: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    metric_ratings: dict[str, str] = field(default_factory=dict)
