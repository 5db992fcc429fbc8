"""Analysis routes: the primary API entry point."""

import logging

from fastapi import APIRouter, HTTPException

from flipcalc.api.schemas import (
    AnalysisResponse,
    BreakdownRenovationRequest,
    ClassifyRequest,
    ClassifyResponse,
    DealRequest,
    EstimatedRenovationRequest,
    ExitStrategyResponse,
    FinanceOptionResponse,
    FlipResponse,
    RentalResponse,
    ScenarioReportResponse,
)
from flipcalc.errors import InvalidArgument
from flipcalc.models.deal import DealInputs, TimelineEstimates
from flipcalc.models.renovation import (
    BreakdownRenovation,
    EstimatedRenovation,
    ManualRenovation,
    RenovationSource,
)
from flipcalc.engine.exit_strategy import compare_exit_strategies
from flipcalc.engine.financing import evaluate_financing_options
from flipcalc.engine.flip import evaluate_flip
from flipcalc.engine.proforma import evaluate
from flipcalc.engine.rental import evaluate_rental_projection
from flipcalc.engine.scenarios import classify_deal, run_scenarios

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["analysis"])


def _build_renovation(req: DealRequest) -> RenovationSource:
    renovation = req.renovation
    if isinstance(renovation, BreakdownRenovationRequest):
        return BreakdownRenovation(items=dict(renovation.items))
    if isinstance(renovation, EstimatedRenovationRequest):
        return EstimatedRenovation(
            size_sqft=renovation.size_sqft,
            condition=renovation.condition,
            region=renovation.region,
            diy_level=renovation.diy_level,
        )
    return ManualRenovation(amount=renovation.amount)


def build_deal_inputs(req: DealRequest) -> DealInputs:
    """Validate a request into engine inputs, rejecting out-of-domain values with 422."""
    try:
        return DealInputs(
            purchase_price=req.purchase_price,
            expected_selling_price=req.expected_selling_price,
            down_payment_percent=req.down_payment_percent,
            interest_rate_percent=req.interest_rate_percent,
            loan_term_years=req.loan_term_years,
            renovation=_build_renovation(req),
            holding_period_months=req.holding_period_months,
            monthly_expenses=req.monthly_expenses,
            selling_cost_percent=req.selling_cost_percent,
            expected_monthly_rent=req.expected_monthly_rent,
            house_condition=req.house_condition,
            timeline=TimelineEstimates(**req.timeline.model_dump()),
        )
    except InvalidArgument as e:
        logger.warning("Rejected deal inputs: %s", e)
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/analyze", response_model=AnalysisResponse)
async def analyze(req: DealRequest):
    """Primary endpoint: deal inputs → full analysis and report text."""
    inputs = build_deal_inputs(req)
    return AnalysisResponse.model_validate(evaluate(inputs))


@router.post("/flip", response_model=FlipResponse)
async def flip(req: DealRequest):
    return FlipResponse.model_validate(evaluate_flip(build_deal_inputs(req)))


@router.post("/financing", response_model=list[FinanceOptionResponse])
async def financing(req: DealRequest):
    """Cash, conventional and hard money side by side."""
    results = evaluate_financing_options(build_deal_inputs(req))
    return [FinanceOptionResponse.model_validate(r) for r in results]


@router.post("/rental", response_model=RentalResponse)
async def rental(req: DealRequest):
    return RentalResponse.model_validate(evaluate_rental_projection(build_deal_inputs(req)))


@router.post("/exit-strategies", response_model=ExitStrategyResponse | None)
async def exit_strategies(req: DealRequest):
    """Flip vs rent comparison; null when no expected rent was entered."""
    comparison = compare_exit_strategies(build_deal_inputs(req))
    if comparison is None:
        return None
    return ExitStrategyResponse.model_validate(comparison)


@router.post("/scenarios", response_model=ScenarioReportResponse)
async def scenarios(req: DealRequest):
    return ScenarioReportResponse.model_validate(run_scenarios(build_deal_inputs(req)))


@router.post("/classify", response_model=ClassifyResponse)
async def classify(req: ClassifyRequest):
    return ClassifyResponse(quality=classify_deal(req.roi, req.arv_ratio, req.renovation_ratio))
