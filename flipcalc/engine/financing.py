"""Financing comparison: cash vs conventional vs hard money for the same flip.

Loans are modeled interest-only over the holding period, as is typical for
short flip financing.
"""

from decimal import Decimal

from flipcalc.engine.flip import percent_of
from flipcalc.models.deal import DealInputs
from flipcalc.models.financing import FinanceOption
from flipcalc.models.results import FinanceOptionResult

CASH = FinanceOption(
    name="Cash Purchase",
    down_payment_percent=Decimal("100"),
    interest_rate_percent=Decimal("0"),
)
CONVENTIONAL = FinanceOption(
    name="Conventional Loan",
    down_payment_percent=None,
    interest_rate_percent=None,
    points_percent=Decimal("1"),
    other_fees=Decimal("2500"),
)
HARD_MONEY = FinanceOption(
    name="Hard Money Loan",
    down_payment_percent=Decimal("15"),
    interest_rate_percent=Decimal("12"),
    points_percent=Decimal("2.5"),
    other_fees=Decimal("1500"),
)

FINANCE_OPTIONS: tuple[FinanceOption, ...] = (CASH, CONVENTIONAL, HARD_MONEY)


def evaluate_finance_option(inputs: DealInputs, option: FinanceOption) -> FinanceOptionResult:
    """Flip profitability under one financing structure."""
    dp_pct = (
        option.down_payment_percent
        if option.down_payment_percent is not None
        else inputs.down_payment_percent
    )
    rate_pct = (
        option.interest_rate_percent
        if option.interest_rate_percent is not None
        else inputs.interest_rate_percent
    )

    purchase_price = inputs.purchase_price
    renovation_cost = inputs.renovation_cost
    months = inputs.holding_period_months

    down_payment = purchase_price * dp_pct / 100
    loan_amount = purchase_price * (1 - dp_pct / 100)
    loan_points_cost = loan_amount * option.points_percent / 100

    if rate_pct == 0:
        payment = Decimal("0")
        total_interest = Decimal("0")
    else:
        payment = loan_amount * (rate_pct / 100 / 12)
        total_interest = payment * months

    total_holding_costs = inputs.monthly_expenses * months
    selling_costs = inputs.selling_costs
    financing_costs = loan_points_cost + option.other_fees

    total_investment = (
        down_payment + renovation_cost + financing_costs + total_interest + total_holding_costs
    )
    net_profit = (
        inputs.expected_selling_price
        - purchase_price
        - renovation_cost
        - total_interest
        - financing_costs
        - total_holding_costs
        - selling_costs
    )
    initial_cash_outlay = down_payment + renovation_cost + financing_costs
    break_even_price = (
        purchase_price
        + renovation_cost
        + total_interest
        + financing_costs
        + total_holding_costs
        + selling_costs
    )

    return FinanceOptionResult(
        name=option.name,
        down_payment_percent=dp_pct,
        interest_rate_percent=rate_pct,
        points_percent=option.points_percent,
        other_fees=option.other_fees,
        down_payment=down_payment,
        loan_amount=loan_amount,
        loan_points_cost=loan_points_cost,
        monthly_payment=payment,
        total_interest=total_interest,
        total_holding_costs=total_holding_costs,
        selling_costs=selling_costs,
        total_investment=total_investment,
        initial_cash_outlay=initial_cash_outlay,
        net_profit=net_profit,
        roi=percent_of(net_profit, total_investment),
        cash_on_cash=percent_of(net_profit, initial_cash_outlay),
        break_even_price=break_even_price,
    )


def evaluate_financing_options(inputs: DealInputs) -> list[FinanceOptionResult]:
    """All catalog options, in catalog order."""
    return [evaluate_finance_option(inputs, option) for option in FINANCE_OPTIONS]
