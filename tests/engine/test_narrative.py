from dataclasses import replace
from decimal import Decimal

from flipcalc.engine.flip import evaluate_flip
from flipcalc.engine.narrative import (
    INSUFFICIENT_DATA,
    executive_summary,
    metric_ratings,
    mitigation_recommendations,
    rate_scenario,
    risk_assessment,
    sensitivity_insights,
)
from flipcalc.engine.scenarios import run_scenarios


class TestRiskAssessment:
    def test_excellent_deal(self):
        text = risk_assessment(Decimal("49.81"), Decimal("1.6"), Decimal("12.5"), Decimal("25"))
        assert text == (
            "The base ROI of 49.8% is excellent, well above the industry standard of 20%. "
            "The ARV to Purchase ratio of 1.60x indicates strong potential for value creation. "
            "Renovation costs at 12.5% of ARV are efficient. "
            "Even in the pessimistic scenario, the deal maintains a positive ROI, "
            "indicating good downside protection."
        )

    def test_middle_bands(self):
        text = risk_assessment(Decimal("22"), Decimal("1.25"), Decimal("23"), Decimal("4"))
        assert "meets industry standards" in text
        assert "1.25x is within acceptable range" in text
        assert "23.0% of ARV are reasonable" in text
        assert "minimal profit" in text

    def test_weak_bands(self):
        text = risk_assessment(Decimal("8"), Decimal("1.05"), Decimal("35"), Decimal("-12"))
        assert "below industry standards" in text
        assert "limited upside potential" in text
        assert "high and may impact profitability" in text
        assert "results in a loss" in text

    def test_thresholds_inclusive(self):
        text = risk_assessment(Decimal("30"), Decimal("1.3"), Decimal("20"), Decimal("10"))
        assert "is excellent" in text
        assert "strong potential" in text
        assert "are efficient" in text
        assert "good downside protection" in text

    def test_non_finite_roi(self):
        text = risk_assessment(Decimal("NaN"), Decimal("1.3"), Decimal("20"), Decimal("NaN"))
        assert text.startswith("The base ROI cannot be determined")
        assert "results in a loss" in text


class TestExecutiveSummary:
    def test_tiers(self):
        assert "excellent potential" in executive_summary(Decimal("26"), Decimal("1.35"), Decimal("18"))
        assert "good potential" in executive_summary(Decimal("21"), Decimal("1.22"), Decimal("24"))
        assert "fair potential" in executive_summary(Decimal("16"), Decimal("1.16"), Decimal("40"))
        assert "significant challenges" in executive_summary(Decimal("14"), Decimal("1.5"), Decimal("5"))

    def test_nan_roi(self):
        assert "significant challenges" in executive_summary(Decimal("NaN"), Decimal("2"), Decimal("5"))


class TestRatings:
    def test_rate_scenario(self):
        assert rate_scenario(Decimal("20")) == "Good"
        assert rate_scenario(Decimal("10")) == "Fair"
        assert rate_scenario(Decimal("9.99")) == "Poor"
        assert rate_scenario(Decimal("Infinity")) == INSUFFICIENT_DATA

    def test_metric_ratings(self, canonical_deal):
        ratings = metric_ratings(evaluate_flip(canonical_deal))
        assert ratings == {
            "roi": "Good",
            "arv_ratio": "Good",
            "renovation_ratio": "Good",
            "annualized_roi": "Good",
            "net_profit": "Good",
        }

    def test_renovation_ratio_lower_is_better(self, canonical_deal):
        heavy = replace(canonical_deal, expected_selling_price=Decimal("180000"))
        ratings = metric_ratings(evaluate_flip(heavy))
        # 40000 / 180000 = 22.2%
        assert ratings["renovation_ratio"] == "Fair"


class TestSensitivityInsights:
    def test_resilient_deal(self, canonical_deal):
        wide_margin = replace(canonical_deal, expected_selling_price=Decimal("400000"))
        insights = sensitivity_insights(run_scenarios(wide_margin))
        assert len(insights) == 2
        assert "strong resilience" in insights[0]
        assert insights[1].startswith("Even in the extreme scenario")

    def test_fragile_deal(self, canonical_deal):
        # Pessimistic ROI of the worked example is around -17%
        insights = sensitivity_insights(run_scenarios(canonical_deal))
        assert "significant sensitivity" in insights[0]
        assert "becomes unprofitable" in insights[1]


class TestMitigation:
    def test_always_present(self, canonical_deal):
        recs = mitigation_recommendations(evaluate_flip(canonical_deal), Decimal("25"), has_rent=False)
        assert len(recs) == 2
        assert recs[0].startswith("Execution Risk")
        assert recs[1].endswith("Consider analyzing this as a potential rental as a backup plan.")

    def test_rental_backup(self, canonical_deal):
        recs = mitigation_recommendations(evaluate_flip(canonical_deal), Decimal("25"), has_rent=True)
        assert recs[-1].endswith("The rental option provides an alternative exit if needed.")

    def test_risks_flagged(self, canonical_deal):
        risky = replace(canonical_deal, expected_selling_price=Decimal("250000"), holding_period_months=9)
        flip = evaluate_flip(risky)
        recs = mitigation_recommendations(flip, Decimal("-5"), has_rent=False)
        prefixes = [r.split(":")[0] for r in recs]
        assert prefixes == [
            "Timeline Risk",
            "Profit Margin Risk",
            "Market Risk",
            "Valuation Risk",
            "Execution Risk",
            "Exit Strategy Risk",
        ]
