"""Canonical test fixtures used across all engine tests.

Fixture: $200K purchase, $320K ARV, 20% down, 7.5% rate, 30yr fixed,
$40K renovation, 6 month hold, $500/mo expenses, 8% selling costs.
"""

import pytest
from decimal import Decimal

from flipcalc.models.deal import DealInputs
from flipcalc.models.renovation import ManualRenovation


@pytest.fixture
def canonical_deal() -> DealInputs:
    """The worked example: ~$1,118.74 payment, ~49.8% ROI."""
    return DealInputs(
        purchase_price=Decimal("200000"),
        expected_selling_price=Decimal("320000"),
        down_payment_percent=Decimal("20"),
        interest_rate_percent=Decimal("7.5"),
        loan_term_years=30,
        renovation=ManualRenovation(Decimal("40000")),
        holding_period_months=6,
        monthly_expenses=Decimal("500"),
        selling_cost_percent=Decimal("8"),
    )


@pytest.fixture
def canonical_deal_with_rent() -> DealInputs:
    """Same deal with $2,400/mo expected rent, enabling the exit comparison."""
    return DealInputs(
        purchase_price=Decimal("200000"),
        expected_selling_price=Decimal("320000"),
        down_payment_percent=Decimal("20"),
        interest_rate_percent=Decimal("7.5"),
        loan_term_years=30,
        renovation=ManualRenovation(Decimal("40000")),
        holding_period_months=6,
        monthly_expenses=Decimal("500"),
        selling_cost_percent=Decimal("8"),
        expected_monthly_rent=Decimal("2400"),
    )


@pytest.fixture
def all_cash_deal() -> DealInputs:
    """No renovation, no expenses, no selling costs, no interest, 100% down."""
    return DealInputs(
        purchase_price=Decimal("150000"),
        expected_selling_price=Decimal("180000"),
        down_payment_percent=Decimal("100"),
        interest_rate_percent=Decimal("0"),
        loan_term_years=30,
        holding_period_months=4,
        selling_cost_percent=Decimal("0"),
    )
