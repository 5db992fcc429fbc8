"""Renovation cost data types.

A deal's renovation cost comes from exactly one source: a manually entered
amount, the total of a category breakdown, or the size/condition estimator.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Mapping, Union


class HouseCondition(Enum):
    TEARDOWN = "teardown"
    POOR = "poor"
    FAIR = "fair"
    GOOD = "good"


class DIYLevel(Enum):
    SIGNIFICANT = "significant"  # Owner does most of the work
    MINIMAL = "minimal"
    GC = "gc"  # Owner acts as general contractor
    NONE = "none"


class RenovationCategory(Enum):
    ROOF = "roof"
    SIDING = "siding"
    KITCHEN = "kitchen"
    BATHROOM = "bathroom"
    WINDOWS = "windows"
    DOORS = "doors"
    FLOORING = "flooring"
    ELECTRICAL = "electrical"
    PLUMBING = "plumbing"
    HVAC = "hvac"
    PAINTING = "painting"
    LANDSCAPING = "landscaping"
    OTHER = "other"


@dataclass(frozen=True)
class ManualRenovation:
    amount: Decimal


@dataclass(frozen=True)
class BreakdownRenovation:
    items: Mapping[RenovationCategory, Decimal] = field(default_factory=dict)


@dataclass(frozen=True)
class EstimatedRenovation:
    size_sqft: Decimal
    condition: HouseCondition = HouseCondition.FAIR
    region: str = "NJ"
    diy_level: str = DIYLevel.MINIMAL.value  # Unknown levels fall back to no discount


RenovationSource = Union[ManualRenovation, BreakdownRenovation, EstimatedRenovation]


@dataclass(frozen=True)
class RenovationEstimate:
    point_estimate: Decimal
    range_low: Decimal
    range_high: Decimal
    raw_estimate: Decimal  # Before rounding to the nearest $100
    region_multiplier: Decimal
    diy_factor: Decimal

    @property
    def range(self) -> tuple[Decimal, Decimal]:
        return (self.range_low, self.range_high)
