"""Rental hold IRR, solved with scipy."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Sequence

from scipy.optimize import brentq

IRR_PLACES = Decimal("0.0001")
LOWEST_RATE = -0.99
HIGHEST_RATE = 10.0


def _present_value(flows: Sequence[float], rate: float) -> float:
    discount = 1 + rate
    return sum(flow / discount ** year for year, flow in enumerate(flows))


def compute_irr(cash_flows: Sequence[Decimal]) -> Optional[Decimal]:
    """Annual rate that zeroes the present value of year-indexed cash flows.

    Year 0 is the equity put in (negative); the last year carries the sale.
    None when fewer than two flows are given or the present value keeps one
    sign across the whole rate window.
    """
    if len(cash_flows) < 2:
        return None

    flows = [float(flow) for flow in cash_flows]
    try:
        rate = brentq(lambda r: _present_value(flows, r), LOWEST_RATE, HIGHEST_RATE, xtol=1e-8, maxiter=1000)
    except ValueError:
        return None
    return Decimal(str(rate)).quantize(IRR_PLACES, ROUND_HALF_UP)
