"""CLI client for the Flip Analyzer API: posts a deal and prints a plain-text report.

Usage:
    python deal-analyzer/analyze_deal.py --price 200000 --arv 320000 --renovation 40000 --expenses 500
    python deal-analyzer/analyze_deal.py --price 150000 --arv 240000 --estimate-sqft 1400 --condition poor --region OH
"""

import argparse
import asyncio
import sys
from decimal import Decimal, InvalidOperation

import httpx

INSUFFICIENT = "insufficient data"


# ── Helpers ──────────────────────────────────────────────────────────────────

def _finite(v) -> Decimal | None:
    """Decimal for a finite API value; None for Infinity, NaN, null or garbage."""
    if v is None:
        return None
    try:
        d = Decimal(str(v))
    except InvalidOperation:
        return None
    return d if d.is_finite() else None


def _pct(v) -> str:
    """Format a percent value (49.8 means 49.8%)."""
    d = _finite(v)
    return INSUFFICIENT if d is None else f"{float(d):.1f}%"


def _dollar(v) -> str:
    d = _finite(v)
    return INSUFFICIENT if d is None else f"${float(d):,.0f}"


def _ratio(v) -> str:
    d = _finite(v)
    return INSUFFICIENT if d is None else f"{float(d):.2f}x"


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


# ── Report sections ──────────────────────────────────────────────────────────

def print_deal_summary(data: dict, payload: dict) -> None:
    flip = data["flip"]
    _header("Deal Summary")
    print(f"  Purchase Price:      {_dollar(payload['purchase_price'])}")
    print(f"  ARV:                 {_dollar(payload['expected_selling_price'])}")
    print(f"  Renovation Cost:     {_dollar(flip['renovation_cost'])}")
    print(f"  Holding Period:      {payload.get('holding_period_months', 6)} months")
    print(f"  Deal Quality:        {data['quality']}")
    print()
    print(f"  {data['executive_summary']}")


def print_renovation_estimate(data: dict) -> None:
    est = data.get("renovation_estimate")
    if not est:
        return
    _header("Renovation Estimate")
    print(f"  Point Estimate:      {_dollar(est['point_estimate'])}")
    print(f"  Range:               {_dollar(est['range_low'])} - {_dollar(est['range_high'])}")
    print(f"  Regional Multiplier: {float(est['region_multiplier']):.2f}")
    print(f"  DIY Factor:          {float(est['diy_factor']):.2f}")


def print_flip_metrics(data: dict) -> None:
    flip = data["flip"]
    ratings = data.get("metric_ratings", {})
    _header("Flip Metrics")
    print(f"  Down Payment:        {_dollar(flip['down_payment'])}")
    print(f"  Loan Amount:         {_dollar(flip['loan_amount'])}")
    print(f"  Monthly Payment:     {_dollar(flip['monthly_payment'])}")
    print(f"  Holding Costs:       {_dollar(flip['total_holding_costs'])}")
    print(f"  Selling Costs:       {_dollar(flip['selling_costs'])}")
    print(f"  Total Investment:    {_dollar(flip['total_investment'])}")
    print(f"  Net Profit:          {_dollar(flip['net_profit'])}")
    print(f"  Break-Even Price:    {_dollar(flip['break_even_price'])}")
    print()
    print(f"  ROI:                 {_pct(flip['roi']):>18}  [{ratings.get('roi', '-')}]")
    print(f"  Annualized ROI:      {_pct(flip['annualized_roi']):>18}  [{ratings.get('annualized_roi', '-')}]")
    print(f"  ARV / Purchase:      {_ratio(flip['arv_ratio']):>18}  [{ratings.get('arv_ratio', '-')}]")
    print(
        f"  Renovation / ARV:    {_pct(flip['renovation_ratio']):>18}  "
        f"[{ratings.get('renovation_ratio', '-')}]"
    )


def print_financing_table(data: dict) -> None:
    options = data.get("financing", [])
    if not options:
        return
    _header("Financing Options")
    print(f"  {'Option':<20}  {'Cash Out':>11}  {'Interest':>10}  {'Profit':>11}  {'ROI':>7}  {'CoC':>7}")
    print(f"  {'-' * 20}  {'-' * 11}  {'-' * 10}  {'-' * 11}  {'-' * 7}  {'-' * 7}")
    for opt in options:
        print(
            f"  {opt['name']:<20}  {_dollar(opt['initial_cash_outlay']):>11}  "
            f"{_dollar(opt['total_interest']):>10}  {_dollar(opt['net_profit']):>11}  "
            f"{_pct(opt['roi']):>7}  {_pct(opt['cash_on_cash']):>7}"
        )


def print_rental_table(data: dict) -> None:
    rental = data["rental"]
    _header("Rental Projection")
    estimated = " (estimated at 0.8% of ARV)" if rental["rent_is_estimated"] else ""
    print(f"  Monthly Rent:        {_dollar(rental['monthly_rent'])}{estimated}")
    print(f"  Mortgage Payment:    {_dollar(rental['monthly_mortgage_payment'])}/mo")
    print()
    print(f"  {'Yr':>3}  {'Value':>11}  {'Income':>10}  {'Expenses':>10}  {'Cash Flow':>10}  {'Equity':>11}")
    print(f"  {'---':>3}  {'-' * 11}  {'-' * 10}  {'-' * 10}  {'-' * 10}  {'-' * 11}")
    for yr in rental["years"]:
        print(
            f"  {yr['year']:>3}  {_dollar(yr['appreciated_value']):>11}  "
            f"{_dollar(yr['rental_income']):>10}  {_dollar(yr['total_expenses']):>10}  "
            f"{_dollar(yr['cash_flow']):>10}  {_dollar(yr['equity']):>11}"
        )
    print()
    print(f"  Net Sale Proceeds:   {_dollar(rental['net_proceeds_from_sale'])}")
    print(f"  Total Profit:        {_dollar(rental['total_rental_profit'])}")
    print(f"  Rental ROI:          {_pct(rental['rental_roi'])}")
    irr = _finite(rental.get("rental_irr"))
    print(f"  Rental IRR:          {INSUFFICIENT if irr is None else f'{float(irr) * 100:.1f}%'}")
    print(f"  Real Appreciation:   {float(rental['real_appreciation_rate']) * 100:.1f}%/yr")


def print_exit_comparison(data: dict) -> None:
    comparison = data.get("exit_strategies")
    if not comparison:
        return
    _header("Exit Strategy Comparison")
    print(f"  {'Strategy':<18}  {'Profit':>11}  {'Ann. ROI':>9}  {'Timeframe':>10}  {'Risk':>6}  {'Liquidity':>9}")
    for key in ("flip", "rental"):
        s = comparison[key]
        print(
            f"  {s['strategy']:<18}  {_dollar(s['total_profit']):>11}  {_pct(s['annualized_roi']):>9}  "
            f"{s['timeframe']:>10}  {s['risk']:>6}  {s['liquidity']:>9}"
        )
    print()
    for label, amount in comparison.get("rental_breakdown", {}).items():
        print(f"    {label:<20} {_dollar(amount):>11}")
    if comparison.get("negative_rental_cash_flow"):
        print("\n  Warning: rental cash flow is negative over the hold.")


def print_scenarios(data: dict) -> None:
    report = data["scenarios"]
    _header("Scenarios")
    for key in ("base", "optimistic", "pessimistic", "extreme"):
        s = report[key]
        print(f"  {s['name']:<26} ROI {_pct(s['roi']):>18}  Profit {_dollar(s['net_profit']):>11}")
    print()
    for s in report.get("individual", []):
        print(f"    {s['name']:<24} ROI {_pct(s['roi']):>18}")
    for insight in data.get("sensitivity_insights", []):
        print(f"\n  {insight}")


def print_timeline(data: dict) -> None:
    timeline = data["timeline"]
    _header("Project Timeline")
    for phase in timeline["phases"]:
        flag = " *" if phase["adjusted"] else ""
        print(f"  {phase['name']:<20} day {phase['start']:>4} - {phase['end']:>4}  ({phase['duration']} days){flag}")
    print(f"\n  Total: {timeline['total_days']} days (* adjusted for house condition)")


def print_risks(data: dict) -> None:
    _header("Risk Assessment")
    print(f"  {data['risk_assessment']}")
    recommendations = data.get("recommendations", [])
    if recommendations:
        print()
        for rec in recommendations:
            print(f"  - {rec}")


# ── Main ─────────────────────────────────────────────────────────────────────

def build_payload(args: argparse.Namespace) -> dict:
    """Request body; only non-None options are sent so server defaults apply."""
    payload: dict = {
        "purchase_price": str(args.price),
        "expected_selling_price": str(args.arv),
    }

    field_map = {
        "down_payment": "down_payment_percent",
        "rate": "interest_rate_percent",
        "term": "loan_term_years",
        "months": "holding_period_months",
        "expenses": "monthly_expenses",
        "selling_costs": "selling_cost_percent",
        "rent": "expected_monthly_rent",
        "condition": "house_condition",
    }
    for cli_name, api_name in field_map.items():
        val = getattr(args, cli_name)
        if val is not None:
            payload[api_name] = val if not isinstance(val, Decimal) else str(val)

    if args.estimate_sqft is not None:
        renovation = {"source": "estimate", "size_sqft": str(args.estimate_sqft)}
        if args.condition is not None:
            renovation["condition"] = args.condition
        if args.region is not None:
            renovation["region"] = args.region
        if args.diy is not None:
            renovation["diy_level"] = args.diy
        payload["renovation"] = renovation
    elif args.renovation is not None:
        payload["renovation"] = {"source": "manual", "amount": str(args.renovation)}

    return payload


async def main() -> None:
    parser = argparse.ArgumentParser(
        description="Analyze a fix-and-flip deal via the Flip Analyzer API"
    )
    parser.add_argument("--price", type=Decimal, required=True, help="Purchase price")
    parser.add_argument("--arv", type=Decimal, required=True, help="After-repair value")
    parser.add_argument("--down-payment", type=Decimal, help="Down payment percent")
    parser.add_argument("--rate", type=Decimal, help="Annual interest rate percent")
    parser.add_argument("--term", type=int, help="Loan term in years")
    parser.add_argument("--months", type=int, help="Holding period in months")
    parser.add_argument("--expenses", type=Decimal, help="Monthly holding expenses")
    parser.add_argument("--selling-costs", type=Decimal, help="Selling costs percent of ARV")
    parser.add_argument("--rent", type=Decimal, help="Expected monthly rent (enables exit comparison)")
    parser.add_argument("--renovation", type=Decimal, help="Renovation budget")
    parser.add_argument("--estimate-sqft", type=Decimal, help="Estimate renovation from house size instead")
    parser.add_argument(
        "--condition",
        choices=["teardown", "poor", "fair", "good"],
        default=None,
        help="House condition (default: fair)",
    )
    parser.add_argument("--region", help="Two-letter state code for the estimate (default: NJ)")
    parser.add_argument(
        "--diy",
        choices=["significant", "minimal", "gc", "none"],
        default=None,
        help="DIY level for the estimate (default: minimal)",
    )
    parser.add_argument(
        "--api-url",
        default="http://localhost:8000",
        help="API base URL (default: http://localhost:8000)",
    )

    args = parser.parse_args()
    payload = build_payload(args)
    url = f"{args.api_url}/api/v1/analyze"

    async with httpx.AsyncClient(timeout=30) as client:
        try:
            resp = await client.post(url, json=payload)
        except httpx.ConnectError:
            print(f"Error: Could not connect to API at {args.api_url}", file=sys.stderr)
            print("Is the server running? Start with: uvicorn flipcalc.api.app:app --reload", file=sys.stderr)
            sys.exit(1)
        except httpx.TimeoutException:
            print("Error: Request timed out", file=sys.stderr)
            sys.exit(1)

        if resp.status_code != 200:
            print(f"Error: API returned {resp.status_code}", file=sys.stderr)
            try:
                detail = resp.json().get("detail", resp.text)
            except ValueError:
                detail = resp.text
            print(f"  {detail}", file=sys.stderr)
            sys.exit(1)

        data = resp.json()

    # Print report
    print_deal_summary(data, payload)
    print_renovation_estimate(data)
    print_flip_metrics(data)
    print_financing_table(data)
    print_rental_table(data)
    print_exit_comparison(data)
    print_scenarios(data)
    print_timeline(data)
    print_risks(data)
    print()


if __name__ == "__main__":
    asyncio.run(main())
