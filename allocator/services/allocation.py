"""Allocation service: request limits, analytics and alpha sweeps."""

import logging
from typing import Any, Dict, List, Sequence, Tuple

import numpy as np

from ..config import settings
from ..sectors import default_sector_items
from .optimizer import AllocationItem, WeightedItem, optimize_weights

logger = logging.getLogger(__name__)

# Weights at or below this are reported as inactive
ACTIVE_WEIGHT_EPSILON = 1e-12


class AllocationInputError(Exception):
    """Raised when a request falls outside the service limits."""


class AllocationService:
    """Service wrapping the weight optimizer with limits and analytics."""

    def __init__(self):
        self.settings = settings

    def _check_size(self, items: Sequence[AllocationItem]) -> None:
        if len(items) > self.settings.max_items:
            raise AllocationInputError(
                f"Too many items: {len(items)} (limit {self.settings.max_items})"
            )

    def summarize(self, weighted: Sequence[WeightedItem]) -> Dict[str, Any]:
        """Compute portfolio-level statistics for a set of weights."""
        if not weighted:
            return {
                "expected_return": 0.0,
                "concentration": 0.0,
                "effective_positions": 0.0,
                "max_weight": 0.0,
                "active_positions": 0,
            }

        weights = np.array([w.weight for w in weighted], dtype=float)
        returns = np.array([w.expected_return for w in weighted], dtype=float)
        concentration = float(np.dot(weights, weights))

        return {
            "expected_return": float(np.dot(weights, returns)),
            "concentration": concentration,
            "effective_positions": 1.0 / concentration if concentration > 0 else 0.0,
            "max_weight": float(weights.max()),
            "active_positions": int(np.count_nonzero(weights > ACTIVE_WEIGHT_EPSILON)),
        }

    def optimize(
        self,
        items: Sequence[AllocationItem],
        alpha: float
    ) -> Tuple[List[WeightedItem], Dict[str, Any]]:
        """Optimize weights for one alpha and summarize the result."""
        self._check_size(items)

        weighted = optimize_weights(items, alpha)
        summary = self.summarize(weighted)

        logger.info(
            f"Optimized {len(items)} items at alpha={alpha:.2f}: "
            f"{summary['active_positions']} active positions"
        )
        return weighted, summary

    def sweep(
        self,
        items: Sequence[AllocationItem],
        steps: int
    ) -> List[Tuple[float, List[WeightedItem], Dict[str, Any]]]:
        """Recompute weights over an evenly spaced alpha grid from 0 to 1."""
        self._check_size(items)

        points = []
        for alpha in np.linspace(0.0, 1.0, steps):
            alpha = float(alpha)
            weighted = optimize_weights(items, alpha)
            points.append((alpha, weighted, self.summarize(weighted)))

        logger.info(f"Swept {len(items)} items over {steps} alpha values")
        return points

    def optimize_sectors(self, alpha: float) -> Tuple[List[WeightedItem], Dict[str, Any]]:
        """Optimize the default sector table."""
        return self.optimize(default_sector_items(), alpha)
