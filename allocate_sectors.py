#!/usr/bin/env python3
"""Print the optimized sector allocation table for a given alpha."""

import math
import sys
from typing import List, Optional

from allocator.config import settings
from allocator.services.allocation import AllocationService
from allocator.services.optimizer import WeightedItem, clamp_alpha


def format_allocation_table(weighted: List[WeightedItem]) -> str:
    """Render sector, performance and weight % columns."""
    width = max([len("Sector")] + [len(w.label) for w in weighted])
    lines = [
        f"{'Sector':<{width}}  {'Performance':>11}  {'Weight %':>8}",
        "-" * (width + 23),
    ]
    for w in weighted:
        lines.append(
            f"{w.label:<{width}}  {w.expected_return:>11.4f}  {w.weight * 100:>7.2f}%"
        )
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Optimize the default sectors and print the result."""
    args = sys.argv[1:] if argv is None else argv

    if args:
        try:
            requested = float(args[0])
        except ValueError:
            requested = math.nan
        if not math.isfinite(requested):
            print(f"❌ Invalid alpha: {args[0]!r}")
            return 1
        alpha = clamp_alpha(requested)
        if alpha != requested:
            print(f"ℹ️  Alpha {requested} clamped to {alpha:.2f}")
    else:
        alpha = settings.default_alpha

    weighted, summary = AllocationService().optimize_sectors(alpha)

    print(f"📊 Sector Allocation (alpha = {alpha:.2f})")
    print("=" * 50)
    print(format_allocation_table(weighted))
    print()
    print(f"Expected return:     {summary['expected_return']:.4f}")
    print(f"Effective positions: {summary['effective_positions']:.2f}")
    print(f"Active positions:    {summary['active_positions']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
