"""Pydantic schemas for the allocation API."""

from typing import List

from pydantic import BaseModel, Field

from .config import MAX_SWEEP_STEPS, MIN_SWEEP_STEPS, settings

# Keeps sums over the largest allowed request finite
MAX_ABS_EXPECTED_RETURN = 1e6


class ItemSchema(BaseModel):
    """A candidate allocation submitted for optimization."""
    label: str = Field(min_length=1)
    expected_return: float = Field(
        allow_inf_nan=False, ge=-MAX_ABS_EXPECTED_RETURN, le=MAX_ABS_EXPECTED_RETURN
    )


class WeightedItemSchema(BaseModel):
    """An optimized allocation."""
    label: str
    expected_return: float
    weight: float = Field(ge=0.0, le=1.0)
    weight_percent: float


class AllocationSummary(BaseModel):
    """Portfolio-level statistics for a set of weights."""
    expected_return: float
    concentration: float  # Herfindahl index, sum of squared weights
    effective_positions: float
    max_weight: float
    active_positions: int


class OptimizeRequest(BaseModel):
    """Request schema for a single optimization."""
    items: List[ItemSchema]
    alpha: float = Field(default_factory=lambda: settings.default_alpha, ge=0.0, le=1.0)


class OptimizeResponse(BaseModel):
    """Optimized weights for one alpha."""
    alpha: float
    allocations: List[WeightedItemSchema]
    summary: AllocationSummary


class SweepRequest(BaseModel):
    """Request schema for recomputing weights over an alpha grid."""
    items: List[ItemSchema]
    steps: int = Field(
        default_factory=lambda: settings.sweep_steps, ge=MIN_SWEEP_STEPS, le=MAX_SWEEP_STEPS
    )


class SweepPoint(BaseModel):
    """Weights and statistics at one point of an alpha sweep."""
    alpha: float
    weights: List[float]
    summary: AllocationSummary


class SweepResponse(BaseModel):
    """Alpha sweep results; ``weights`` follow the order of ``labels``."""
    labels: List[str]
    points: List[SweepPoint]


class SectorScore(BaseModel):
    """A sector and its forecast performance score."""
    sector: str
    performance: float
