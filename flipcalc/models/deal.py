from dataclasses import dataclass, field, fields
from decimal import Decimal

from flipcalc.errors import InvalidArgument
from flipcalc.engine.renovation import coerce_condition, resolve_renovation_cost
from flipcalc.models.renovation import HouseCondition, ManualRenovation, RenovationSource


def _is_whole(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class TimelineEstimates:
    """Base phase durations in days, before any condition adjustment."""
    closing: int = 30
    permit: int = 15
    demo: int = 7
    rough_in: int = 14
    finish: int = 21
    listing: int = 45

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not _is_whole(value) or value < 1:
                raise InvalidArgument(f"{f.name} duration must be a positive whole number of days, got {value!r}")


DECIMAL_FIELDS = (
    "purchase_price",
    "expected_selling_price",
    "down_payment_percent",
    "interest_rate_percent",
    "monthly_expenses",
    "selling_cost_percent",
    "expected_monthly_rent",
)


@dataclass(frozen=True)
class DealInputs:
    # Purchase
    purchase_price: Decimal
    expected_selling_price: Decimal  # ARV

    # Financing
    down_payment_percent: Decimal = Decimal("20")
    interest_rate_percent: Decimal = Decimal("7.5")  # Annual
    loan_term_years: int = 30

    # Renovation & holding
    renovation: RenovationSource = field(default_factory=lambda: ManualRenovation(Decimal("0")))
    holding_period_months: int = 6
    monthly_expenses: Decimal = Decimal("0")  # Taxes, insurance, utilities while held

    # Sale
    selling_cost_percent: Decimal = Decimal("8")  # % of ARV
    expected_monthly_rent: Decimal = Decimal("0")  # 0 = no rental analysis

    # Schedule
    house_condition: HouseCondition = HouseCondition.FAIR
    timeline: TimelineEstimates = field(default_factory=TimelineEstimates)

    def __post_init__(self):
        for name in DECIMAL_FIELDS:
            value = getattr(self, name)
            if not Decimal(value).is_finite():
                raise InvalidArgument(f"{name} must be a finite number, got {value}")
        object.__setattr__(self, "house_condition", coerce_condition(self.house_condition))

        if self.purchase_price <= 0:
            raise InvalidArgument(f"purchase_price must be positive, got {self.purchase_price}")
        if self.expected_selling_price <= 0:
            raise InvalidArgument(
                f"expected_selling_price must be positive, got {self.expected_selling_price}"
            )
        if not 0 <= self.down_payment_percent <= 100:
            raise InvalidArgument(
                f"down_payment_percent must be between 0 and 100, got {self.down_payment_percent}"
            )
        if self.interest_rate_percent < 0:
            raise InvalidArgument(
                f"interest_rate_percent must not be negative, got {self.interest_rate_percent}"
            )
        if not _is_whole(self.loan_term_years) or self.loan_term_years < 1:
            raise InvalidArgument(f"loan_term_years must be a positive integer, got {self.loan_term_years!r}")
        if not _is_whole(self.holding_period_months) or self.holding_period_months < 1:
            raise InvalidArgument(
                f"holding_period_months must be a positive integer, got {self.holding_period_months!r}"
            )
        if self.monthly_expenses < 0:
            raise InvalidArgument(f"monthly_expenses must not be negative, got {self.monthly_expenses}")
        if self.selling_cost_percent < 0:
            raise InvalidArgument(
                f"selling_cost_percent must not be negative, got {self.selling_cost_percent}"
            )
        if self.expected_monthly_rent < 0:
            raise InvalidArgument(
                f"expected_monthly_rent must not be negative, got {self.expected_monthly_rent}"
            )
        # Raises for negative manual amounts or breakdown items
        resolve_renovation_cost(self.renovation)

    @property
    def down_payment(self) -> Decimal:
        return self.purchase_price * self.down_payment_percent / 100

    @property
    def loan_amount(self) -> Decimal:
        return self.purchase_price - self.down_payment

    @property
    def renovation_cost(self) -> Decimal:
        """Authoritative renovation cost derived from the active source."""
        return resolve_renovation_cost(self.renovation)

    @property
    def selling_costs(self) -> Decimal:
        return self.expected_selling_price * self.selling_cost_percent / 100

    @property
    def has_rent(self) -> bool:
        return self.expected_monthly_rent > 0
