import logging
from decimal import Decimal

import pytest

from flipcalc.errors import InvalidArgument
from flipcalc.engine.renovation import (
    COST_PER_SQFT,
    REGIONAL_MULTIPLIERS,
    breakdown_total,
    diy_factor,
    estimate_renovation,
    estimate_renovation_cost,
    estimate_renovation_range,
    region_multiplier,
    resolve_renovation_cost,
)
from flipcalc.models.renovation import (
    BreakdownRenovation,
    DIYLevel,
    EstimatedRenovation,
    HouseCondition,
    ManualRenovation,
    RenovationCategory,
)


class TestTables:
    def test_fifty_states_plus_dc(self):
        assert len(REGIONAL_MULTIPLIERS) == 51
        assert "DC" in REGIONAL_MULTIPLIERS

    def test_multiplier_bounds(self):
        for multiplier in REGIONAL_MULTIPLIERS.values():
            assert Decimal("0.85") <= multiplier <= Decimal("1.40")

    def test_base_within_range(self):
        for base, low, high in COST_PER_SQFT.values():
            assert low <= base <= high


class TestEstimate:
    def test_fair_nj_minimal(self):
        """1500 sqft x $35 x 1.20 x 0.85 = $53,550 -> $53,600."""
        cost = estimate_renovation_cost(Decimal("1500"), HouseCondition.FAIR, "NJ", DIYLevel.MINIMAL)
        assert cost == Decimal("53600")

    def test_rounds_to_nearest_hundred(self):
        # 1000 x 15 x 1.00 x 1.00 = 15,000 exactly
        assert estimate_renovation_cost(Decimal("1000"), "good", "ME", "none") == Decimal("15000")
        # 1003 x 15 = 15,045 -> 15,000; 1004 x 15 = 15,060 -> 15,100
        assert estimate_renovation_cost(Decimal("1003"), "good", "ME", "none") == Decimal("15000")
        assert estimate_renovation_cost(Decimal("1004"), "good", "ME", "none") == Decimal("15100")

    def test_half_rounds_up(self):
        # 1010 x 15 = 15,150 -> 15,200
        assert estimate_renovation_cost(Decimal("1010"), "good", "ME", "none") == Decimal("15200")

    def test_linear_in_size(self):
        small = estimate_renovation(Decimal("1234"), HouseCondition.POOR, "OH", "gc")
        large = estimate_renovation(Decimal("2468"), HouseCondition.POOR, "OH", "gc")
        assert large.raw_estimate == 2 * small.raw_estimate
        assert abs(large.point_estimate - 2 * small.point_estimate) <= 100

    def test_range(self):
        low, high = estimate_renovation_range(Decimal("2000"), HouseCondition.TEARDOWN, "TX", "none")
        # 2000 x 80 x 0.90 = 144,000; 2000 x 150 x 0.90 = 270,000
        assert (low, high) == (Decimal("144000"), Decimal("270000"))

    def test_estimate_record(self):
        est = estimate_renovation(Decimal("1500"), "fair", "NJ", "minimal")
        assert est.point_estimate == Decimal("53600")
        assert est.raw_estimate == Decimal("53550")
        assert est.range == (est.range_low, est.range_high)
        assert est.range_low <= est.point_estimate <= est.range_high
        assert est.region_multiplier == Decimal("1.20")
        assert est.diy_factor == Decimal("0.85")

    def test_unknown_condition_rejected(self):
        with pytest.raises(InvalidArgument):
            estimate_renovation_cost(Decimal("1500"), "gutted", "NJ", "none")

    def test_non_positive_size_rejected(self):
        with pytest.raises(InvalidArgument):
            estimate_renovation_cost(Decimal("0"), "fair", "NJ", "none")


class TestDefaultPolicy:
    def test_unknown_region_is_baseline(self):
        unknown = estimate_renovation(Decimal("1800"), "poor", "ZZ", "none")
        baseline = Decimal("1800") * Decimal("60")
        assert unknown.raw_estimate == baseline
        assert unknown.region_multiplier == Decimal("1")

    def test_region_code_normalized(self):
        assert region_multiplier(" nj ") == REGIONAL_MULTIPLIERS["NJ"]

    def test_unknown_diy_level_no_discount(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="flipcalc.engine.renovation"):
            assert diy_factor("weekends") == Decimal("1")
        assert "weekends" in caplog.text

    def test_diy_enum_and_string_agree(self):
        assert diy_factor(DIYLevel.SIGNIFICANT) == diy_factor("significant") == Decimal("0.60")


class TestRenovationSource:
    def test_manual(self):
        assert resolve_renovation_cost(ManualRenovation(Decimal("40000"))) == Decimal("40000")

    def test_manual_negative_rejected(self):
        with pytest.raises(InvalidArgument):
            resolve_renovation_cost(ManualRenovation(Decimal("-1")))

    def test_breakdown_sums_categories(self):
        source = BreakdownRenovation(items={
            RenovationCategory.KITCHEN: Decimal("18000"),
            RenovationCategory.BATHROOM: Decimal("9000"),
            RenovationCategory.FLOORING: Decimal("6500"),
        })
        assert resolve_renovation_cost(source) == Decimal("33500")

    def test_empty_breakdown_is_zero(self):
        assert breakdown_total({}) == Decimal("0")

    def test_breakdown_negative_rejected(self):
        with pytest.raises(InvalidArgument):
            breakdown_total({RenovationCategory.ROOF: Decimal("-500")})

    def test_estimated_uses_point_estimate(self):
        source = EstimatedRenovation(size_sqft=Decimal("1500"))
        assert resolve_renovation_cost(source) == Decimal("53600")

    def test_thirteen_categories(self):
        assert len(RenovationCategory) == 13
