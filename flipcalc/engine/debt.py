"""Fixed-rate mortgage math: payment, remaining balance, amortization schedule.

Pure functions: Decimal in, Decimal/dataclass out. No I/O.
Rates are annual percentages (7.5 means 7.5%) unless named monthly_rate.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from flipcalc.errors import InvalidArgument

TWO_PLACES = Decimal("0.01")


@dataclass(frozen=True)
class LoanTerms:
    principal: Decimal
    annual_rate_percent: Decimal
    term_years: int

    @property
    def monthly_rate(self) -> Decimal:
        return monthly_rate(self.annual_rate_percent)

    @property
    def total_payments(self) -> int:
        return self.term_years * 12

    @property
    def monthly_payment(self) -> Decimal:
        return monthly_payment(self.principal, self.annual_rate_percent, self.term_years)

    def remaining_balance(self, payments_made: int) -> Decimal:
        return remaining_balance(self.principal, self.monthly_rate, self.total_payments, payments_made)


@dataclass(frozen=True)
class AmortizationPayment:
    period: int
    payment: Decimal
    principal: Decimal
    interest: Decimal
    balance: Decimal


@dataclass(frozen=True)
class AmortizationSchedule:
    payments: list[AmortizationPayment]
    monthly_payment: Decimal
    total_interest: Decimal
    total_principal: Decimal


def monthly_rate(annual_rate_percent: Decimal) -> Decimal:
    return annual_rate_percent / 100 / 12


def monthly_payment(principal: Decimal, annual_rate_percent: Decimal, term_years: int) -> Decimal:
    """Calculate the fixed monthly payment. Unrounded.

    Preconditions: principal >= 0, rate >= 0, term_years > 0.
    """
    if term_years <= 0:
        raise InvalidArgument(f"term_years must be positive, got {term_years}")
    if principal < 0:
        raise InvalidArgument(f"principal must not be negative, got {principal}")
    if annual_rate_percent < 0:
        raise InvalidArgument(f"interest rate must not be negative, got {annual_rate_percent}")

    n = term_years * 12
    if principal == 0:
        return Decimal("0")
    r = monthly_rate(annual_rate_percent)
    if r == 0:
        return principal / n

    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + r) ** n
    return principal * (r * factor) / (factor - 1)


def remaining_balance(
    principal: Decimal,
    monthly_rate: Decimal,
    total_payments: int,
    payments_made: int,
) -> Decimal:
    """Balance left after payments_made of total_payments level payments.

    Closed form, so any month can be computed without walking the schedule.
    """
    if total_payments <= 0:
        raise InvalidArgument(f"total_payments must be positive, got {total_payments}")
    if not 0 <= payments_made <= total_payments:
        raise InvalidArgument(
            f"payments_made must be between 0 and {total_payments}, got {payments_made}"
        )
    if principal < 0:
        raise InvalidArgument(f"principal must not be negative, got {principal}")
    if monthly_rate < 0:
        raise InvalidArgument(f"monthly_rate must not be negative, got {monthly_rate}")

    if payments_made == 0:
        return principal
    if monthly_rate == 0:
        return principal * (total_payments - payments_made) / total_payments

    # B = P * [(1+r)^n - (1+r)^k] / [(1+r)^n - 1]
    growth_n = (1 + monthly_rate) ** total_payments
    growth_k = (1 + monthly_rate) ** payments_made
    return principal * (growth_n - growth_k) / (growth_n - 1)


def amortization_schedule(
    principal: Decimal,
    annual_rate_percent: Decimal,
    term_years: int,
    periods: Optional[int] = None,
) -> AmortizationSchedule:
    """Generate a full or partial amortization schedule, rounded to cents.

    Args:
        principal: Loan amount
        annual_rate_percent: Annual interest rate in percent
        term_years: Loan term in years
        periods: If provided, only generate this many monthly payments
    """
    pmt = monthly_payment(principal, annual_rate_percent, term_years).quantize(TWO_PLACES, ROUND_HALF_UP)
    r = monthly_rate(annual_rate_percent)
    n_periods = min(periods, term_years * 12) if periods is not None else term_years * 12

    payments: list[AmortizationPayment] = []
    balance = principal
    total_interest = Decimal("0")
    total_principal = Decimal("0")

    for period in range(1, n_periods + 1):
        interest = (balance * r).quantize(TWO_PLACES, ROUND_HALF_UP)
        principal_paid = pmt - interest

        # Last scheduled payment clears whatever rounding left behind
        if principal_paid > balance or period == term_years * 12:
            principal_paid = balance
            actual_payment = interest + principal_paid
        else:
            actual_payment = pmt

        balance -= principal_paid
        total_interest += interest
        total_principal += principal_paid

        payments.append(AmortizationPayment(
            period=period,
            payment=actual_payment,
            principal=principal_paid,
            interest=interest,
            balance=balance.quantize(TWO_PLACES, ROUND_HALF_UP),
        ))

    return AmortizationSchedule(
        payments=payments,
        monthly_payment=pmt,
        total_interest=total_interest,
        total_principal=total_principal,
    )
