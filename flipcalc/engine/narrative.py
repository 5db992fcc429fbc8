"""Rule-based report text: risk assessment, summary, insights, recommendations.

Thresholds and sentences are fixed; outputs depend only on the numbers given.
"""

from decimal import Decimal, ROUND_HALF_UP

from flipcalc.models.results import FlipResult, ScenarioReport

GOOD = "Good"
FAIR = "Fair"
POOR = "Poor"
INSUFFICIENT_DATA = "Insufficient Data"


def _fixed(value: Decimal, places: int) -> str:
    return str(value.quantize(Decimal(1).scaleb(-places), ROUND_HALF_UP))


def _at_least(value: Decimal, threshold) -> bool:
    return not value.is_nan() and value >= threshold


def _rate(value: Decimal, good, fair, higher_is_better: bool = True) -> str:
    if not value.is_finite():
        return INSUFFICIENT_DATA
    if higher_is_better:
        if value >= good:
            return GOOD
        return FAIR if value >= fair else POOR
    if value <= good:
        return GOOD
    return FAIR if value <= fair else POOR


def rate_scenario(roi: Decimal) -> str:
    """Good at 20% ROI or better, Fair from 10%."""
    return _rate(roi, 20, 10)


def metric_ratings(flip: FlipResult) -> dict[str, str]:
    return {
        "roi": rate_scenario(flip.roi),
        "arv_ratio": _rate(flip.arv_ratio, Decimal("1.3"), Decimal("1.2")),
        "renovation_ratio": _rate(flip.renovation_ratio, 20, 25, higher_is_better=False),
        "annualized_roi": _rate(flip.annualized_roi, 30, 20),
        "net_profit": _rate(flip.net_profit, 30000, 15000),
    }


def risk_assessment(
    roi: Decimal,
    arv_ratio: Decimal,
    renovation_ratio: Decimal,
    pessimistic_roi: Decimal,
) -> str:
    """Four independent sentences: base ROI, ARV ratio, renovation ratio, downside."""
    assessment: list[str] = []

    if not roi.is_finite():
        assessment.append("The base ROI cannot be determined from the inputs provided.")
    elif roi >= 30:
        assessment.append(
            f"The base ROI of {_fixed(roi, 1)}% is excellent, well above the industry standard of 20%."
        )
    elif roi >= 20:
        assessment.append(f"The base ROI of {_fixed(roi, 1)}% meets industry standards.")
    else:
        assessment.append(f"The base ROI of {_fixed(roi, 1)}% is below industry standards.")

    if arv_ratio >= Decimal("1.3"):
        assessment.append(
            f"The ARV to Purchase ratio of {_fixed(arv_ratio, 2)}x indicates strong potential for value creation."
        )
    elif arv_ratio >= Decimal("1.2"):
        assessment.append(
            f"The ARV to Purchase ratio of {_fixed(arv_ratio, 2)}x is within acceptable range."
        )
    else:
        assessment.append(
            f"The ARV to Purchase ratio of {_fixed(arv_ratio, 2)}x suggests limited upside potential."
        )

    if renovation_ratio <= 20:
        assessment.append(f"Renovation costs at {_fixed(renovation_ratio, 1)}% of ARV are efficient.")
    elif renovation_ratio <= 25:
        assessment.append(f"Renovation costs at {_fixed(renovation_ratio, 1)}% of ARV are reasonable.")
    else:
        assessment.append(
            f"Renovation costs at {_fixed(renovation_ratio, 1)}% of ARV are high and may impact profitability."
        )

    if _at_least(pessimistic_roi, 10):
        assessment.append(
            "Even in the pessimistic scenario, the deal maintains a positive ROI, "
            "indicating good downside protection."
        )
    elif _at_least(pessimistic_roi, 0):
        assessment.append(
            "The pessimistic scenario shows minimal profit, suggesting the deal is "
            "sensitive to market conditions."
        )
    else:
        assessment.append(
            "The pessimistic scenario results in a loss, indicating significant risk in the deal."
        )

    return " ".join(assessment)


def executive_summary(roi: Decimal, arv_ratio: Decimal, renovation_ratio: Decimal) -> str:
    if _at_least(roi, 25) and arv_ratio >= Decimal("1.3") and renovation_ratio <= 20:
        return (
            "This property shows excellent potential with strong ROI, favorable ARV to purchase "
            "ratio, and efficient renovation costs. Recommended for investment."
        )
    if _at_least(roi, 20) and arv_ratio >= Decimal("1.2") and renovation_ratio <= 25:
        return (
            "This property shows good potential with solid ROI and acceptable renovation costs "
            "relative to value. Consider moving forward with appropriate risk management."
        )
    if _at_least(roi, 15) and arv_ratio >= Decimal("1.15"):
        return (
            "This property shows fair potential but with tighter margins. Careful management of "
            "renovation costs and timeline will be crucial to profitability."
        )
    return (
        "This property presents significant challenges with limited profit potential. Consider "
        "renegotiating purchase price or seeking a better opportunity."
    )


def sensitivity_insights(scenarios: ScenarioReport) -> list[str]:
    pessimistic = scenarios.pessimistic.roi
    extreme = scenarios.extreme.roi

    if _at_least(pessimistic, 15):
        downside = (
            "The deal maintains good ROI even in the pessimistic scenario, indicating strong "
            "resilience to adverse conditions."
        )
    elif _at_least(pessimistic, 5):
        downside = (
            "The deal maintains positive but reduced ROI in the pessimistic scenario, "
            "suggesting moderate risk."
        )
    else:
        downside = (
            "The deal shows significant sensitivity to adverse conditions, with ROI dropping "
            "substantially in the pessimistic scenario."
        )

    if not extreme.is_finite():
        worst_case = "The extreme scenario ROI cannot be determined from the inputs provided."
    elif extreme >= 0:
        worst_case = (
            f"Even in the extreme scenario, the deal remains profitable with a "
            f"{_fixed(extreme, 1)}% ROI."
        )
    else:
        worst_case = (
            f"In the extreme scenario, the deal becomes unprofitable with a "
            f"{_fixed(extreme, 1)}% ROI. Extra caution is warranted."
        )

    return [downside, worst_case]


def mitigation_recommendations(
    flip: FlipResult,
    pessimistic_roi: Decimal,
    has_rent: bool,
) -> list[str]:
    """Risk-specific steps, followed by the two that always apply."""
    recommendations: list[str] = []

    if flip.renovation_ratio > 20:
        recommendations.append(
            "Renovation Cost Risk: Get multiple contractor bids to reduce renovation costs. "
            "Consider phasing renovations to ensure each dollar spent maximizes value."
        )
    if flip.holding_period_months > 6:
        recommendations.append(
            "Timeline Risk: Develop a detailed timeline with milestones and penalties in "
            "contractor agreements to prevent delays that increase holding costs."
        )
    if flip.net_profit < 20000:
        recommendations.append(
            "Profit Margin Risk: Negotiate purchase price more aggressively or find ways to add "
            "more value through strategic improvements that boost ARV without proportional cost "
            "increases."
        )
    if not _at_least(pessimistic_roi, 10):
        recommendations.append(
            "Market Risk: Build a larger contingency fund (at least 20% of renovation budget) to "
            "cover unexpected costs and maintain profitability even in challenging scenarios."
        )
    if flip.arv_ratio < Decimal("1.3"):
        recommendations.append(
            "Valuation Risk: Verify ARV with multiple comps and possibly get a professional "
            "appraisal. Consider getting a pre-listing inspection to identify any issues early."
        )

    recommendations.append(
        "Execution Risk: Obtain fixed-price contracts for major renovation components to limit "
        "cost overruns."
    )
    backup = (
        "The rental option provides an alternative exit if needed."
        if has_rent
        else "Consider analyzing this as a potential rental as a backup plan."
    )
    recommendations.append(
        "Exit Strategy Risk: Line up multiple exit strategies in case the property doesn't sell "
        f"as quickly as expected. {backup}"
    )
    return recommendations
