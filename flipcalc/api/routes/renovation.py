"""Renovation estimator routes."""

import logging

from fastapi import APIRouter, HTTPException

from flipcalc.api.schemas import RenovationEstimateRequest, RenovationEstimateResponse
from flipcalc.errors import InvalidArgument
from flipcalc.engine.renovation import estimate_renovation

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/renovation", tags=["renovation"])


@router.post("/estimate", response_model=RenovationEstimateResponse)
async def estimate(req: RenovationEstimateRequest):
    """Cost from house size, condition, region and DIY level, with a low/high range."""
    try:
        result = estimate_renovation(req.size_sqft, req.condition, req.region, req.diy_level)
    except InvalidArgument as e:
        logger.warning("Rejected renovation estimate: %s", e)
        raise HTTPException(status_code=422, detail=str(e))
    return RenovationEstimateResponse.model_validate(result)
