"""Rental exit: hold the renovated property five years, then sell.

Pure functions: Decimal in, RentalProjection out. No I/O.
All rates are fixed market assumptions rather than user inputs.
"""

from decimal import Decimal, ROUND_HALF_UP

from flipcalc.engine.debt import LoanTerms
from flipcalc.engine.flip import percent_of
from flipcalc.engine.irr import compute_irr
from flipcalc.models.deal import DealInputs
from flipcalc.models.results import RentalProjection, RentalYearRecord

ANNUAL_APPRECIATION_RATE = Decimal("0.03")
ANNUAL_INFLATION_RATE = Decimal("0.02")
REAL_APPRECIATION_RATE = ANNUAL_APPRECIATION_RATE - ANNUAL_INFLATION_RATE
PROPERTY_MANAGEMENT_FEE = Decimal("0.10")  # Of rent
MAINTENANCE_RATE = Decimal("0.05")  # Of rent
VACANCY_RATE = Decimal("0.08")
ANNUAL_RENT_INCREASE = Decimal("0.02")
SELLING_COST_AFTER_HOLDING = Decimal("0.07")
PROPERTY_TAX_RATE = Decimal("0.015")  # Of ARV per year
INSURANCE_RATE = Decimal("0.005")  # Of ARV per year
ESTIMATED_RENT_RATIO = Decimal("0.008")  # Monthly rent as a share of ARV
HOLD_PERIOD_YEARS = 5
RENTAL_LOAN_TERM_YEARS = 30


def monthly_rent(inputs: DealInputs) -> Decimal:
    """Rent as entered, or 0.8% of ARV rounded to whole dollars when absent."""
    if inputs.expected_monthly_rent > 0:
        return inputs.expected_monthly_rent
    return (inputs.expected_selling_price * ESTIMATED_RENT_RATIO).quantize(
        Decimal("1"), ROUND_HALF_UP
    )


def appreciated_value(arv: Decimal, year: int) -> Decimal:
    """Property value at the end of a given year (1-indexed)."""
    return arv * (1 + ANNUAL_APPRECIATION_RATE) ** year


def project_year(
    inputs: DealInputs,
    year: int,
    rent: Decimal,
    loan: LoanTerms,
    initial_investment: Decimal,
) -> RentalYearRecord:
    """One projection year, derived from elapsed time alone."""
    arv = inputs.expected_selling_price
    annual_mortgage = loan.monthly_payment * 12

    value = appreciated_value(arv, year)
    adjusted_rent = rent * (1 + ANNUAL_RENT_INCREASE) ** (year - 1)
    income = adjusted_rent * 12

    vacancy_loss = income * VACANCY_RATE
    management = income * PROPERTY_MANAGEMENT_FEE
    maintenance = income * MAINTENANCE_RATE
    # Taxes and insurance are charged on the ARV, not the appreciated value
    property_taxes = arv * PROPERTY_TAX_RATE
    insurance = arv * INSURANCE_RATE
    total_expenses = vacancy_loss + management + maintenance + property_taxes + insurance + annual_mortgage
    cash_flow = income - total_expenses

    balance = loan.remaining_balance(year * 12)

    return RentalYearRecord(
        year=year,
        appreciated_value=value,
        adjusted_monthly_rent=adjusted_rent,
        rental_income=income,
        vacancy_loss=vacancy_loss,
        property_management=management,
        maintenance=maintenance,
        property_taxes=property_taxes,
        insurance=insurance,
        annual_mortgage=annual_mortgage,
        total_expenses=total_expenses,
        cash_flow=cash_flow,
        remaining_loan_balance=balance,
        equity=value - balance,
        equity_gain=value - arv,
        principal_paydown=loan.principal - balance,
        cash_on_cash=percent_of(cash_flow, initial_investment),
    )


def evaluate_rental_projection(inputs: DealInputs) -> RentalProjection:
    """Project rent, expenses, appreciation and equity, then sell at year five.

    The mortgage is always a 30-year fixed loan at the deal's down payment and
    rate, regardless of the loan term entered for the flip.
    """
    rent = monthly_rent(inputs)
    loan = LoanTerms(inputs.loan_amount, inputs.interest_rate_percent, RENTAL_LOAN_TERM_YEARS)
    initial_investment = inputs.down_payment + inputs.renovation_cost

    years = [
        project_year(inputs, year, rent, loan, initial_investment)
        for year in range(1, HOLD_PERIOD_YEARS + 1)
    ]

    # Sale at end of hold
    final = years[-1]
    selling_cost = final.appreciated_value * SELLING_COST_AFTER_HOLDING
    net_proceeds = final.appreciated_value - final.remaining_loan_balance - selling_cost

    total_cash_flow = sum((y.cash_flow for y in years), Decimal("0"))
    total_profit = total_cash_flow + net_proceeds - initial_investment
    rental_roi = percent_of(total_profit, initial_investment)

    cash_flows = [-initial_investment] + [y.cash_flow for y in years]
    cash_flows[-1] += net_proceeds

    return RentalProjection(
        years=years,
        monthly_rent=rent,
        rent_is_estimated=not inputs.has_rent,
        monthly_mortgage_payment=loan.monthly_payment,
        loan_amount=loan.principal,
        initial_investment=initial_investment,
        final_value=final.appreciated_value,
        final_loan_balance=final.remaining_loan_balance,
        selling_cost_after_holding=selling_cost,
        net_proceeds_from_sale=net_proceeds,
        total_rental_cash_flow=total_cash_flow,
        total_appreciation=final.equity_gain,
        total_principal_paydown=final.principal_paydown,
        total_rental_profit=total_profit,
        rental_roi=rental_roi,
        annualized_rental_roi=rental_roi / HOLD_PERIOD_YEARS,
        rental_irr=compute_irr(cash_flows),
        real_appreciation_rate=REAL_APPRECIATION_RATE,
    )
