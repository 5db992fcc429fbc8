"""What-if analysis and deal-quality classification.

Every scenario is an independent flip valuation with one or more inputs
scaled by a fixed multiplier.
"""

from decimal import Decimal

from flipcalc.engine.flip import flip_metrics
from flipcalc.models.deal import DealInputs
from flipcalc.models.results import DealQuality, ScenarioReport, ScenarioResult

OPTIMISTIC = "optimistic"
PESSIMISTIC = "pessimistic"
EXTREME = "extreme"

# Multiplier on the base value of each input, by case
PERTURBATIONS: dict[str, dict[str, Decimal]] = {
    "purchase_price": {OPTIMISTIC: Decimal("0.9"), PESSIMISTIC: Decimal("1.1")},
    "expected_selling_price": {OPTIMISTIC: Decimal("1.1"), PESSIMISTIC: Decimal("0.9")},
    "renovation_cost": {
        OPTIMISTIC: Decimal("0.9"),
        PESSIMISTIC: Decimal("1.1"),
        EXTREME: Decimal("1.3"),
    },
    "holding_period_months": {
        OPTIMISTIC: Decimal("0.8"),
        PESSIMISTIC: Decimal("1.2"),
        EXTREME: Decimal("2"),
    },
    "selling_cost_percent": {OPTIMISTIC: Decimal("0.8"), PESSIMISTIC: Decimal("1.2")},
    "interest_rate_percent": {OPTIMISTIC: Decimal("0.9"), PESSIMISTIC: Decimal("1.1")},
}

INDIVIDUAL_SCENARIOS: list[tuple[str, str, str]] = [
    ("Purchase Price +10%", "purchase_price", PESSIMISTIC),
    ("Purchase Price -10%", "purchase_price", OPTIMISTIC),
    ("ARV +10%", "expected_selling_price", OPTIMISTIC),
    ("ARV -10%", "expected_selling_price", PESSIMISTIC),
    ("Renovation +10%", "renovation_cost", PESSIMISTIC),
    ("Renovation +30%", "renovation_cost", EXTREME),
    ("Holding Period x0.8", "holding_period_months", OPTIMISTIC),
    ("Holding Period x1.2", "holding_period_months", PESSIMISTIC),
    ("Holding Period x2", "holding_period_months", EXTREME),
    ("Selling Costs -20%", "selling_cost_percent", OPTIMISTIC),
    ("Selling Costs +20%", "selling_cost_percent", PESSIMISTIC),
    ("Interest Rate -10%", "interest_rate_percent", OPTIMISTIC),
    ("Interest Rate +10%", "interest_rate_percent", PESSIMISTIC),
]

# (quality, min ROI %, min ARV/purchase, max renovation % of ARV), checked in order
QUALITY_THRESHOLDS: list[tuple[DealQuality, Decimal, Decimal, Decimal]] = [
    (DealQuality.EXCELLENT, Decimal("30"), Decimal("1.3"), Decimal("20")),
    (DealQuality.GOOD, Decimal("20"), Decimal("1.2"), Decimal("25")),
    (DealQuality.FAIR, Decimal("10"), Decimal("1.1"), Decimal("30")),
]


def _base_params(inputs: DealInputs) -> dict:
    return {
        "purchase_price": inputs.purchase_price,
        "renovation_cost": inputs.renovation_cost,
        "expected_selling_price": inputs.expected_selling_price,
        "selling_cost_percent": inputs.selling_cost_percent,
        "down_payment_percent": inputs.down_payment_percent,
        "interest_rate_percent": inputs.interest_rate_percent,
        "loan_term_years": inputs.loan_term_years,
        "holding_period_months": Decimal(inputs.holding_period_months),
        "monthly_expenses": inputs.monthly_expenses,
    }


def run_scenario(name: str, inputs: DealInputs, cases: dict[str, str]) -> ScenarioResult:
    """Flip valuation with each named input scaled by its multiplier for the given case.

    Args:
        name: Label for the result.
        inputs: Base deal.
        cases: input name -> case (optimistic, pessimistic, extreme).
    """
    params = _base_params(inputs)
    for variable, case in cases.items():
        params[variable] = params[variable] * PERTURBATIONS[variable][case]
    result = flip_metrics(**params)
    return ScenarioResult(
        name=name,
        roi=result.roi,
        net_profit=result.net_profit,
        total_investment=result.total_investment,
    )


def run_scenarios(inputs: DealInputs) -> ScenarioReport:
    optimistic = {variable: OPTIMISTIC for variable in PERTURBATIONS}
    pessimistic = {variable: PESSIMISTIC for variable in PERTURBATIONS}
    extreme = dict(pessimistic, renovation_cost=EXTREME, holding_period_months=EXTREME)

    return ScenarioReport(
        base=run_scenario("Base Case", inputs, {}),
        optimistic=run_scenario("Optimistic Scenario", inputs, optimistic),
        pessimistic=run_scenario("Pessimistic Scenario", inputs, pessimistic),
        extreme=run_scenario("Extreme Scenario", inputs, extreme),
        individual=[
            run_scenario(name, inputs, {variable: case})
            for name, variable, case in INDIVIDUAL_SCENARIOS
        ],
    )


def classify_deal(roi: Decimal, arv_ratio: Decimal, renovation_ratio: Decimal) -> DealQuality:
    """First tier whose ROI, ARV ratio and renovation ratio thresholds all hold."""
    if roi.is_nan():
        return DealQuality.POOR
    for quality, min_roi, min_arv_ratio, max_renovation_ratio in QUALITY_THRESHOLDS:
        if roi >= min_roi and arv_ratio >= min_arv_ratio and renovation_ratio <= max_renovation_ratio:
            return quality
    return DealQuality.POOR
