"""Financing structures compared against each other for a flip."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class FinanceOption:
    name: str
    # None = take the value the user entered for the deal
    down_payment_percent: Optional[Decimal]
    interest_rate_percent: Optional[Decimal]
    points_percent: Decimal = Decimal("0")  # % of loan amount paid at closing
    other_fees: Decimal = Decimal("0")  # Closing and lender fees
