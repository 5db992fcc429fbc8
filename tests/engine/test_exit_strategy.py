from decimal import Decimal

from flipcalc.engine.exit_strategy import compare_exit_strategies
from flipcalc.engine.flip import evaluate_flip
from flipcalc.engine.rental import evaluate_rental_projection


class TestCompareExitStrategies:
    def test_none_without_rent(self, canonical_deal):
        assert compare_exit_strategies(canonical_deal) is None

    def test_flip_side(self, canonical_deal_with_rent):
        comparison = compare_exit_strategies(canonical_deal_with_rent)
        flip = evaluate_flip(canonical_deal_with_rent)
        assert comparison.flip.total_profit == flip.net_profit
        assert comparison.flip.annualized_roi == flip.annualized_roi
        assert comparison.flip.timeframe == "6 months"

    def test_rental_side(self, canonical_deal_with_rent):
        comparison = compare_exit_strategies(canonical_deal_with_rent)
        rental = evaluate_rental_projection(canonical_deal_with_rent)
        assert comparison.rental.total_profit == rental.total_rental_profit
        assert comparison.rental.annualized_roi == rental.annualized_rental_roi
        assert comparison.rental.timeframe == "5 years"

    def test_fixed_labels(self, canonical_deal_with_rent):
        comparison = compare_exit_strategies(canonical_deal_with_rent)
        assert (comparison.flip.risk, comparison.flip.liquidity) == ("Lower", "Higher")
        assert (comparison.rental.risk, comparison.rental.liquidity) == ("Higher", "Lower")

    def test_rental_breakdown(self, canonical_deal_with_rent):
        comparison = compare_exit_strategies(canonical_deal_with_rent)
        breakdown = comparison.rental_breakdown
        assert set(breakdown) == {"Cash Flow", "Appreciation", "Principal Paydown", "Selling Costs"}
        assert breakdown["Selling Costs"] < 0
        assert comparison.negative_rental_cash_flow is False

    def test_negative_cash_flow_flag(self, canonical_deal_with_rent):
        from dataclasses import replace

        thin_rent = replace(canonical_deal_with_rent, expected_monthly_rent=Decimal("800"))
        assert compare_exit_strategies(thin_rent).negative_rental_cash_flow is True
