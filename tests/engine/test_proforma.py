"""End-to-end analysis of the worked example."""

from dataclasses import replace
from decimal import Decimal

from flipcalc.engine.flip import evaluate_flip
from flipcalc.engine.proforma import evaluate
from flipcalc.models.renovation import EstimatedRenovation
from flipcalc.models.results import DealQuality


class TestEvaluate:
    def test_flip_matches_engine(self, canonical_deal):
        analysis = evaluate(canonical_deal)
        assert analysis.flip == evaluate_flip(canonical_deal)
        assert abs(analysis.flip.roi - Decimal("49.8")) < Decimal("0.05")

    def test_quality(self, canonical_deal):
        assert evaluate(canonical_deal).quality == DealQuality.EXCELLENT

    def test_sections_present(self, canonical_deal):
        analysis = evaluate(canonical_deal)
        assert len(analysis.financing) == 3
        assert len(analysis.rental.years) == 5
        assert analysis.scenarios.base.roi == analysis.flip.roi
        assert analysis.timeline.total_days == 132
        assert len(analysis.cash_flow_events) == 11

    def test_condition_given_as_string(self, canonical_deal):
        analysis = evaluate(replace(canonical_deal, house_condition="poor"))
        assert analysis.timeline.total_days == 30 + 15 + 14 + 25 + 32 + 45

    def test_no_exit_comparison_without_rent(self, canonical_deal):
        analysis = evaluate(canonical_deal)
        assert analysis.exit_strategies is None
        assert analysis.rental.rent_is_estimated

    def test_exit_comparison_with_rent(self, canonical_deal_with_rent):
        analysis = evaluate(canonical_deal_with_rent)
        assert analysis.exit_strategies is not None
        assert analysis.exit_strategies.flip.total_profit == analysis.flip.net_profit
        assert analysis.exit_strategies.rental.total_profit == analysis.rental.total_rental_profit

    def test_amortization_covers_holding_period(self, canonical_deal):
        schedule = evaluate(canonical_deal).amortization
        assert len(schedule.payments) == 6
        assert schedule.monthly_payment == Decimal("1118.74")

    def test_narratives(self, canonical_deal):
        analysis = evaluate(canonical_deal)
        assert analysis.executive_summary.startswith("This property shows excellent potential")
        assert analysis.risk_assessment.startswith("The base ROI of 49.8% is excellent")
        assert len(analysis.sensitivity_insights) == 2
        assert analysis.recommendations[-1].startswith("Exit Strategy Risk")
        assert set(analysis.metric_ratings) == {
            "roi", "arv_ratio", "renovation_ratio", "annualized_roi", "net_profit",
        }

    def test_renovation_estimate_only_for_estimated_source(self, canonical_deal):
        assert evaluate(canonical_deal).renovation_estimate is None
        estimated = replace(canonical_deal, renovation=EstimatedRenovation(size_sqft=Decimal("1500")))
        analysis = evaluate(estimated)
        assert analysis.renovation_estimate.point_estimate == Decimal("53600")
        assert analysis.flip.renovation_cost == Decimal("53600")

    def test_does_not_mutate_inputs(self, canonical_deal):
        before = replace(canonical_deal)
        evaluate(canonical_deal)
        assert canonical_deal == before
