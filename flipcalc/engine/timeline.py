"""Project schedule: sequential phases from closing to sale, plus cash events.

Pure functions. No I/O. Days are counted from closing start (day 0).
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from flipcalc.engine.renovation import coerce_condition
from flipcalc.models.deal import DealInputs, TimelineEstimates
from flipcalc.models.renovation import HouseCondition
from flipcalc.models.results import CashFlowEvent, Phase, Timeline

CLOSING = "Closing Process"
PERMITTING = "Permitting"
DEMOLITION = "Demolition"
ROUGH_IN = "Rough-In Work"
FINISHING = "Finishing Work"
LISTING = "Listing & Selling"

# Demo, rough-in and finish duration multipliers by condition
CONDITION_MULTIPLIERS: dict[HouseCondition, tuple[Decimal, Decimal, Decimal]] = {
    HouseCondition.TEARDOWN: (Decimal("3.0"), Decimal("2.5"), Decimal("2.0")),
    HouseCondition.POOR: (Decimal("2.0"), Decimal("1.75"), Decimal("1.5")),
    HouseCondition.FAIR: (Decimal("1"), Decimal("1"), Decimal("1")),
    HouseCondition.GOOD: (Decimal("0.5"), Decimal("0.6"), Decimal("0.7")),
}

# Share of the renovation budget paid at the end of permit, rough-in and finish
RENOVATION_DRAWS: tuple[Decimal, Decimal, Decimal] = (Decimal("0.30"), Decimal("0.40"), Decimal("0.30"))

DAYS_PER_MONTH = 30


def _adjust(days: int, multiplier: Decimal) -> int:
    return int((days * multiplier).quantize(Decimal("1"), ROUND_HALF_UP))


def compute_timeline(estimates: TimelineEstimates, condition: Union[HouseCondition, str]) -> Timeline:
    """Lay phases end to end; only construction phases scale with condition."""
    condition = coerce_condition(condition)
    demo_mult, rough_in_mult, finish_mult = CONDITION_MULTIPLIERS[condition]
    adjusted = condition != HouseCondition.FAIR

    durations = [
        (CLOSING, estimates.closing, False),
        (PERMITTING, estimates.permit, False),
        (DEMOLITION, _adjust(estimates.demo, demo_mult), adjusted),
        (ROUGH_IN, _adjust(estimates.rough_in, rough_in_mult), adjusted),
        (FINISHING, _adjust(estimates.finish, finish_mult), adjusted),
        (LISTING, estimates.listing, False),
    ]

    phases: list[Phase] = []
    start = 0
    for name, days, was_adjusted in durations:
        phases.append(Phase(name=name, start=start, end=start + days, adjusted=was_adjusted))
        start += days

    return Timeline(phases=phases, total_days=start)


def cash_flow_events(inputs: DealInputs, timeline: Timeline) -> list[CashFlowEvent]:
    """Cash in and out keyed to phase boundaries, sorted by day."""
    renovation_cost = inputs.renovation_cost
    permit_end = timeline.phase(PERMITTING).end
    rough_in_end = timeline.phase(ROUGH_IN).end
    finish_end = timeline.phase(FINISHING).end

    events = [CashFlowEvent(day=0, label="Down Payment", amount=-inputs.down_payment)]

    for (label, day), share in zip(
        [
            ("Renovation Draw (Permits)", permit_end),
            ("Renovation Draw (Rough-In)", rough_in_end),
            ("Renovation Draw (Finish)", finish_end),
        ],
        RENOVATION_DRAWS,
    ):
        events.append(CashFlowEvent(day=day, label=label, amount=-renovation_cost * share))

    for month in range(1, inputs.holding_period_months + 1):
        events.append(
            CashFlowEvent(
                day=DAYS_PER_MONTH * month,
                label=f"Monthly Expenses (Month {month})",
                amount=-inputs.monthly_expenses,
            )
        )

    events.append(
        CashFlowEvent(
            day=timeline.total_days - 1,
            label="Sale Proceeds",
            amount=inputs.expected_selling_price - inputs.selling_costs,
        )
    )

    return sorted(events, key=lambda e: e.day)
