"""Flip now vs rent for five years, side by side."""

from typing import Optional

from flipcalc.engine.flip import evaluate_flip
from flipcalc.engine.rental import HOLD_PERIOD_YEARS, evaluate_rental_projection
from flipcalc.models.deal import DealInputs
from flipcalc.models.results import (
    ExitStrategyComparison,
    FlipResult,
    RentalProjection,
    StrategySummary,
)


def summarize_strategies(
    flip: FlipResult,
    rental: RentalProjection,
    holding_period_months: int,
) -> ExitStrategyComparison:
    """Package already computed flip and rental results for comparison.

    Risk and liquidity are fixed labels, not computed.
    """
    flip_summary = StrategySummary(
        strategy="Flip Now",
        total_profit=flip.net_profit,
        annualized_roi=flip.annualized_roi,
        timeframe=f"{holding_period_months} months",
        risk="Lower",
        liquidity="Higher",
    )
    rental_summary = StrategySummary(
        strategy=f"Rent for {HOLD_PERIOD_YEARS} Years",
        total_profit=rental.total_rental_profit,
        annualized_roi=rental.annualized_rental_roi,
        timeframe=f"{HOLD_PERIOD_YEARS} years",
        risk="Higher",
        liquidity="Lower",
    )
    return ExitStrategyComparison(
        flip=flip_summary,
        rental=rental_summary,
        rental_breakdown={
            "Cash Flow": rental.total_rental_cash_flow,
            "Appreciation": rental.total_appreciation,
            "Principal Paydown": rental.total_principal_paydown,
            "Selling Costs": -rental.selling_cost_after_holding,
        },
        negative_rental_cash_flow=rental.total_rental_cash_flow < 0,
    )


def compare_exit_strategies(inputs: DealInputs) -> Optional[ExitStrategyComparison]:
    """Compare exits, or None when no expected rent was entered."""
    if not inputs.has_rent:
        return None
    return summarize_strategies(
        evaluate_flip(inputs),
        evaluate_rental_projection(inputs),
        inputs.holding_period_months,
    )
