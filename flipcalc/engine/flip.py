"""Flip valuation: buy, renovate, hold, sell.

Pure functions: Decimal in, FlipResult out. No I/O.
"""

import logging
from decimal import Decimal
from typing import Optional

from flipcalc.engine.debt import LoanTerms
from flipcalc.models.deal import DealInputs
from flipcalc.models.results import FlipResult

logger = logging.getLogger(__name__)


def percent_of(numerator: Decimal, denominator: Decimal) -> Decimal:
    """numerator / denominator x 100, non-finite when the denominator is zero."""
    if denominator == 0:
        logger.debug("Zero denominator for %s, result is non-finite", numerator)
        if numerator == 0:
            return Decimal("NaN")
        return Decimal("Infinity") if numerator > 0 else Decimal("-Infinity")
    return numerator / denominator * 100


def flip_metrics(
    purchase_price: Decimal,
    renovation_cost: Decimal,
    expected_selling_price: Decimal,
    selling_cost_percent: Decimal,
    down_payment_percent: Decimal,
    interest_rate_percent: Decimal,
    loan_term_years: int,
    holding_period_months: Decimal,
    monthly_expenses: Decimal,
) -> FlipResult:
    """Single profitability pass for selling right after the renovation.

    holding_period_months may be fractional (scenario perturbations scale it).
    """
    down_payment = purchase_price * down_payment_percent / 100
    loan_amount = purchase_price - down_payment
    payment = LoanTerms(loan_amount, interest_rate_percent, loan_term_years).monthly_payment

    total_holding_costs = (payment + monthly_expenses) * holding_period_months
    selling_costs = expected_selling_price * selling_cost_percent / 100

    total_investment = down_payment + renovation_cost + total_holding_costs
    net_profit = (
        expected_selling_price
        - selling_costs
        - purchase_price
        - renovation_cost
        - total_holding_costs
    )
    roi = percent_of(net_profit, total_investment)
    if roi.is_finite():
        monthly_roi = roi / holding_period_months
    else:
        monthly_roi = roi

    # Selling costs here come from the ARV entered, not from the break-even
    # price itself; see self_consistent_break_even_price for the solved value.
    costs_before_sale = purchase_price + renovation_cost + total_holding_costs
    break_even_price = costs_before_sale + selling_costs

    self_consistent: Optional[Decimal] = None
    if selling_cost_percent < 100:
        self_consistent = costs_before_sale / (1 - selling_cost_percent / 100)

    return FlipResult(
        down_payment=down_payment,
        loan_amount=loan_amount,
        monthly_payment=payment,
        renovation_cost=renovation_cost,
        total_holding_costs=total_holding_costs,
        selling_costs=selling_costs,
        total_investment=total_investment,
        net_profit=net_profit,
        roi=roi,
        monthly_roi=monthly_roi,
        annualized_roi=monthly_roi * 12,
        break_even_price=break_even_price,
        self_consistent_break_even_price=self_consistent,
        arv_ratio=expected_selling_price / purchase_price,
        renovation_ratio=percent_of(renovation_cost, expected_selling_price),
        holding_period_months=Decimal(holding_period_months),
    )


def evaluate_flip(inputs: DealInputs) -> FlipResult:
    """Flip valuation for a deal as entered."""
    return flip_metrics(
        purchase_price=inputs.purchase_price,
        renovation_cost=inputs.renovation_cost,
        expected_selling_price=inputs.expected_selling_price,
        selling_cost_percent=inputs.selling_cost_percent,
        down_payment_percent=inputs.down_payment_percent,
        interest_rate_percent=inputs.interest_rate_percent,
        loan_term_years=inputs.loan_term_years,
        holding_period_months=Decimal(inputs.holding_period_months),
        monthly_expenses=inputs.monthly_expenses,
    )
