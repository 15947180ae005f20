"""
Diversity-aware weight optimizer.

Distributes capital across candidate allocations by solving

    maximize   alpha * sum(r_i * w_i) - (1 - alpha) * sum(w_i ** 2)
    subject to sum(w_i) = 1, w_i >= 0

with an active-set iteration. ``alpha == 1`` puts everything on the best
performer; ``alpha == 0`` spreads weight evenly.
"""

from dataclasses import dataclass
from typing import List, Sequence


@dataclass(frozen=True)
class AllocationItem:
    """A candidate allocation and its expected-return score."""
    label: str
    expected_return: float


@dataclass(frozen=True)
class WeightedItem:
    """A candidate allocation with its optimized weight."""
    label: str
    expected_return: float
    weight: float


def clamp_alpha(alpha: float) -> float:
    """Clamp a free-form alpha into [0, 1]."""
    return min(max(float(alpha), 0.0), 1.0)


def _best_performer_weights(returns: List[float]) -> List[float]:
    # First occurrence wins on ties
    best_idx = 0
    best_return = returns[0]
    for i in range(1, len(returns)):
        if returns[i] > best_return:
            best_return = returns[i]
            best_idx = i
    return [1.0 if i == best_idx else 0.0 for i in range(len(returns))]


def _active_set_weights(returns: List[float], alpha: float) -> List[float]:
    n = len(returns)
    weights = [0.0] * n
    active = list(range(n))
    penalty = 2 * (1 - alpha)

    while active:
        free_count = len(active)
        sum_r = sum(returns[i] for i in active)
        # Lagrange multiplier for the sum-to-one constraint
        lam = (alpha * sum_r - penalty) / free_count

        for i in active:
            weights[i] = (alpha * returns[i] - lam) / penalty

        if all(weights[i] >= 0 for i in active):
            sum_w = sum(weights[i] for i in active)
            if sum_w <= 0:
                for i in active:
                    weights[i] = 1.0 / free_count
            else:
                for i in active:
                    weights[i] /= sum_w
            break

        # Pin negative weights to the boundary and re-solve on the rest.
        # Exact zeros stay active; they are already feasible.
        still_active = []
        for i in active:
            if weights[i] < 0:
                weights[i] = 0.0
            else:
                still_active.append(i)
        if len(still_active) == free_count:
            break
        active = still_active

    return weights


def optimize_weights(items: Sequence[AllocationItem], alpha: float) -> List[WeightedItem]:
    """Compute diversity-aware weights for ``items``.

    Returns one ``WeightedItem`` per input item, in input order. Weights are
    non-negative and sum to 1 for any non-empty input with alpha in [0, 1].
    Alpha is not validated; callers accepting free-form input should pass it
    through ``clamp_alpha`` first.
    """
    if not items:
        return []

    returns = [item.expected_return for item in items]
    if alpha == 1:
        weights = _best_performer_weights(returns)
    else:
        weights = _active_set_weights(returns, alpha)

    return [
        WeightedItem(
            label=item.label,
            expected_return=item.expected_return,
            weight=weights[i],
        )
        for i, item in enumerate(items)
    ]


class WeightOptimizer:
    """Reusable optimizer bound to a single alpha."""

    def __init__(self, alpha: float):
        self.alpha = alpha

    def __call__(self, items: Sequence[AllocationItem]) -> List[WeightedItem]:
        return optimize_weights(items, self.alpha)

    def __repr__(self) -> str:
        return f"WeightOptimizer(alpha={self.alpha!r})"
