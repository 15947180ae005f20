"""Allocation API endpoints."""

import logging
from fastapi import APIRouter, HTTPException, Query
from typing import Any, Dict, List, Optional, Sequence

from ..config import settings
from ..models import (
    AllocationSummary, ItemSchema, OptimizeRequest, OptimizeResponse,
    SectorScore, SweepPoint, SweepRequest, SweepResponse, WeightedItemSchema
)
from ..sectors import DEFAULT_SECTOR_SCORES
from ..services.allocation import AllocationInputError, AllocationService
from ..services.optimizer import AllocationItem, WeightedItem

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/allocation", tags=["allocation"])


def _to_items(items: List[ItemSchema]) -> List[AllocationItem]:
    return [
        AllocationItem(label=item.label, expected_return=item.expected_return)
        for item in items
    ]


def _to_response(
    alpha: float,
    weighted: Sequence[WeightedItem],
    summary: Dict[str, Any]
) -> OptimizeResponse:
    return OptimizeResponse(
        alpha=alpha,
        allocations=[
            WeightedItemSchema(
                label=w.label,
                expected_return=w.expected_return,
                weight=w.weight,
                weight_percent=round(w.weight * 100, 2)
            ) for w in weighted
        ],
        summary=AllocationSummary(**summary)
    )


@router.post("/optimize", response_model=OptimizeResponse)
def optimize_allocation(request: OptimizeRequest) -> OptimizeResponse:
    """Optimize weights for the submitted items at one alpha."""

    service = AllocationService()
    try:
        weighted, summary = service.optimize(_to_items(request.items), request.alpha)
    except AllocationInputError as e:
        logger.warning(f"Rejected optimize request: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    return _to_response(request.alpha, weighted, summary)


@router.post("/sweep", response_model=SweepResponse)
def sweep_allocation(request: SweepRequest) -> SweepResponse:
    """Recompute weights for the submitted items across an alpha grid."""

    service = AllocationService()
    try:
        points = service.sweep(_to_items(request.items), request.steps)
    except AllocationInputError as e:
        logger.warning(f"Rejected sweep request: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    return SweepResponse(
        labels=[item.label for item in request.items],
        points=[
            SweepPoint(
                alpha=alpha,
                weights=[w.weight for w in weighted],
                summary=AllocationSummary(**summary)
            ) for alpha, weighted, summary in points
        ]
    )


@router.get("/sectors", response_model=List[SectorScore])
def get_sectors() -> List[SectorScore]:
    """Get the default sector performance scores."""
    return [
        SectorScore(sector=sector, performance=performance)
        for sector, performance in DEFAULT_SECTOR_SCORES
    ]


@router.get("/sectors/optimized", response_model=OptimizeResponse)
def get_optimized_sectors(
    alpha: Optional[float] = Query(default=None, ge=0.0, le=1.0)
) -> OptimizeResponse:
    """Optimize the default sector table at the given alpha."""

    if alpha is None:
        alpha = settings.default_alpha

    weighted, summary = AllocationService().optimize_sectors(alpha)
    return _to_response(alpha, weighted, summary)
