"""Deal analysis orchestrator: composes all engine sub-modules.

Pure computation. No I/O. DealInputs in, DealAnalysis out.
"""

import logging

from flipcalc.models.deal import DealInputs
from flipcalc.models.renovation import EstimatedRenovation
from flipcalc.models.results import DealAnalysis

from flipcalc.engine.debt import amortization_schedule
from flipcalc.engine.exit_strategy import summarize_strategies
from flipcalc.engine.financing import evaluate_financing_options
from flipcalc.engine.flip import evaluate_flip
from flipcalc.engine.narrative import (
    executive_summary,
    metric_ratings,
    mitigation_recommendations,
    risk_assessment,
    sensitivity_insights,
)
from flipcalc.engine.renovation import estimate_renovation
from flipcalc.engine.rental import evaluate_rental_projection
from flipcalc.engine.scenarios import classify_deal, run_scenarios
from flipcalc.engine.timeline import cash_flow_events, compute_timeline

logger = logging.getLogger(__name__)


def evaluate(inputs: DealInputs) -> DealAnalysis:
    """Run the complete analysis for one deal.

    Rental projection is always computed (with estimated rent if none was
    entered); the exit strategy comparison only when rent was entered.
    """
    flip = evaluate_flip(inputs)
    rental = evaluate_rental_projection(inputs)
    scenarios = run_scenarios(inputs)
    timeline = compute_timeline(inputs.timeline, inputs.house_condition)

    exit_strategies = None
    if inputs.has_rent:
        exit_strategies = summarize_strategies(flip, rental, inputs.holding_period_months)

    renovation_estimate = None
    if isinstance(inputs.renovation, EstimatedRenovation):
        source = inputs.renovation
        renovation_estimate = estimate_renovation(
            source.size_sqft, source.condition, source.region, source.diy_level
        )

    if not flip.roi.is_finite():
        logger.debug("Deal ROI is non-finite (total investment %s)", flip.total_investment)

    return DealAnalysis(
        flip=flip,
        quality=classify_deal(flip.roi, flip.arv_ratio, flip.renovation_ratio),
        financing=evaluate_financing_options(inputs),
        rental=rental,
        exit_strategies=exit_strategies,
        scenarios=scenarios,
        timeline=timeline,
        cash_flow_events=cash_flow_events(inputs, timeline),
        renovation_estimate=renovation_estimate,
        amortization=amortization_schedule(
            flip.loan_amount,
            inputs.interest_rate_percent,
            inputs.loan_term_years,
            periods=inputs.holding_period_months,
        ),
        executive_summary=executive_summary(flip.roi, flip.arv_ratio, flip.renovation_ratio),
        risk_assessment=risk_assessment(
            flip.roi, flip.arv_ratio, flip.renovation_ratio, scenarios.pessimistic.roi
        ),
        sensitivity_insights=sensitivity_insights(scenarios),
        recommendations=mitigation_recommendations(flip, scenarios.pessimistic.roi, inputs.has_rent),
        metric_ratings=metric_ratings(flip),
    )
