"""Renovation cost estimator.

Pure functions: house attributes in, cost out. No I/O.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Mapping, Union

from flipcalc.errors import InvalidArgument
from flipcalc.models.renovation import (
    BreakdownRenovation,
    DIYLevel,
    EstimatedRenovation,
    HouseCondition,
    ManualRenovation,
    RenovationCategory,
    RenovationEstimate,
    RenovationSource,
)

logger = logging.getLogger(__name__)

HUNDRED = Decimal("100")

# $/sqft by condition: (base, min, max)
COST_PER_SQFT: dict[HouseCondition, tuple[Decimal, Decimal, Decimal]] = {
    HouseCondition.TEARDOWN: (Decimal("100"), Decimal("80"), Decimal("150")),
    HouseCondition.POOR: (Decimal("60"), Decimal("50"), Decimal("80")),
    HouseCondition.FAIR: (Decimal("35"), Decimal("25"), Decimal("45")),
    HouseCondition.GOOD: (Decimal("15"), Decimal("10"), Decimal("25")),
}

REGIONAL_MULTIPLIERS: dict[str, Decimal] = {
    code: Decimal(value)
    for code, value in {
        "AL": "0.85", "AK": "1.25", "AZ": "0.95", "AR": "0.85", "CA": "1.35", "CO": "1.10",
        "CT": "1.15", "DE": "1.05", "FL": "0.95", "GA": "0.90", "HI": "1.40", "ID": "0.90",
        "IL": "1.05", "IN": "0.90", "IA": "0.90", "KS": "0.90", "KY": "0.90", "LA": "0.90",
        "ME": "1.00", "MD": "1.10", "MA": "1.25", "MI": "1.00", "MN": "1.05", "MS": "0.85",
        "MO": "0.90", "MT": "0.95", "NE": "0.90", "NV": "1.05", "NH": "1.05", "NJ": "1.20",
        "NM": "0.90", "NY": "1.35", "NC": "0.90", "ND": "0.95", "OH": "0.95", "OK": "0.85",
        "OR": "1.10", "PA": "1.05", "RI": "1.15", "SC": "0.90", "SD": "0.90", "TN": "0.90",
        "TX": "0.90", "UT": "0.95", "VT": "1.05", "VA": "1.00", "WA": "1.15", "WV": "0.90",
        "WI": "1.00", "WY": "0.95", "DC": "1.30",
    }.items()
}

DIY_FACTORS: dict[str, Decimal] = {
    DIYLevel.SIGNIFICANT.value: Decimal("0.60"),  # 40% savings
    DIYLevel.MINIMAL.value: Decimal("0.85"),
    DIYLevel.GC.value: Decimal("0.90"),
    DIYLevel.NONE.value: Decimal("1.00"),
}


def coerce_condition(condition: Union[HouseCondition, str]) -> HouseCondition:
    if isinstance(condition, HouseCondition):
        return condition
    try:
        return HouseCondition(condition)
    except ValueError:
        raise InvalidArgument(f"Unknown house condition: {condition!r}") from None


def region_multiplier(region: str) -> Decimal:
    """Regional cost multiplier; unknown codes price at the national baseline (1.0)."""
    multiplier = REGIONAL_MULTIPLIERS.get((region or "").strip().upper())
    if multiplier is None:
        logger.debug("No regional multiplier for %r, using 1.0", region)
        return Decimal("1")
    return multiplier


def diy_factor(diy_level: Union[DIYLevel, str]) -> Decimal:
    """DIY discount factor; unknown levels get no discount (1.0)."""
    key = diy_level.value if isinstance(diy_level, DIYLevel) else diy_level
    factor = DIY_FACTORS.get(key)
    if factor is None:
        logger.debug("Unknown DIY level %r, using 1.0", diy_level)
        return Decimal("1")
    return factor


def _round_to_hundred(amount: Decimal) -> Decimal:
    return (amount / HUNDRED).quantize(Decimal("1"), ROUND_HALF_UP) * HUNDRED


def _raw_cost(size_sqft: Decimal, per_sqft: Decimal, region: str, diy_level) -> Decimal:
    if size_sqft <= 0:
        raise InvalidArgument(f"size_sqft must be positive, got {size_sqft}")
    return size_sqft * per_sqft * region_multiplier(region) * diy_factor(diy_level)


def estimate_renovation_cost(
    size_sqft: Decimal,
    condition: Union[HouseCondition, str],
    region: str,
    diy_level: Union[DIYLevel, str],
) -> Decimal:
    """Point estimate rounded to the nearest $100."""
    base, _, _ = COST_PER_SQFT[coerce_condition(condition)]
    return _round_to_hundred(_raw_cost(size_sqft, base, region, diy_level))


def estimate_renovation_range(
    size_sqft: Decimal,
    condition: Union[HouseCondition, str],
    region: str,
    diy_level: Union[DIYLevel, str],
) -> tuple[Decimal, Decimal]:
    """(low, high) estimate from the min/max per-sqft costs, each rounded to $100."""
    _, low, high = COST_PER_SQFT[coerce_condition(condition)]
    return (
        _round_to_hundred(_raw_cost(size_sqft, low, region, diy_level)),
        _round_to_hundred(_raw_cost(size_sqft, high, region, diy_level)),
    )


def estimate_renovation(
    size_sqft: Decimal,
    condition: Union[HouseCondition, str],
    region: str,
    diy_level: Union[DIYLevel, str],
) -> RenovationEstimate:
    """Estimate renovation cost from house size, condition, region and DIY level.

    Args:
        size_sqft: Living area in square feet.
        condition: House condition tier (teardown, poor, fair, good).
        region: Two-letter state code (or DC).
        diy_level: significant, minimal, gc or none.

    Returns:
        RenovationEstimate with the rounded point estimate, the rounded range
        and the unrounded intermediate.
    """
    grade = coerce_condition(condition)
    base, _, _ = COST_PER_SQFT[grade]
    raw = _raw_cost(size_sqft, base, region, diy_level)
    low, high = estimate_renovation_range(size_sqft, grade, region, diy_level)
    return RenovationEstimate(
        point_estimate=_round_to_hundred(raw),
        range_low=low,
        range_high=high,
        raw_estimate=raw,
        region_multiplier=region_multiplier(region),
        diy_factor=diy_factor(diy_level),
    )


def breakdown_total(items: Mapping[RenovationCategory, Decimal]) -> Decimal:
    """Sum of a category -> cost breakdown."""
    total = Decimal("0")
    for category, cost in items.items():
        if cost < 0:
            name = category.value if isinstance(category, RenovationCategory) else category
            raise InvalidArgument(f"Renovation cost for {name} must not be negative, got {cost}")
        total += cost
    return total


def resolve_renovation_cost(source: RenovationSource) -> Decimal:
    """The authoritative renovation cost for whichever source is active."""
    if isinstance(source, ManualRenovation):
        if source.amount < 0:
            raise InvalidArgument(f"Renovation cost must not be negative, got {source.amount}")
        return source.amount
    if isinstance(source, BreakdownRenovation):
        return breakdown_total(source.items)
    if isinstance(source, EstimatedRenovation):
        return estimate_renovation_cost(
            source.size_sqft, source.condition, source.region, source.diy_level
        )
    raise InvalidArgument(f"Unsupported renovation source: {type(source).__name__}")
