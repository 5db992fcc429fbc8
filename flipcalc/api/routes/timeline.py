"""Project schedule routes."""

import logging

from fastapi import APIRouter, HTTPException

from flipcalc.api.schemas import ScheduleRequest, TimelineResponse
from flipcalc.errors import InvalidArgument
from flipcalc.models.deal import TimelineEstimates
from flipcalc.engine.timeline import compute_timeline

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["timeline"])


@router.post("/timeline", response_model=TimelineResponse)
async def timeline(req: ScheduleRequest):
    try:
        estimates = TimelineEstimates(**req.estimates.model_dump())
    except InvalidArgument as e:
        logger.warning("Rejected timeline estimates: %s", e)
        raise HTTPException(status_code=422, detail=str(e))
    return TimelineResponse.model_validate(compute_timeline(estimates, req.house_condition))
