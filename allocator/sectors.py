"""Default sector performance scores used when no candidates are supplied."""

from typing import List

from .services.optimizer import AllocationItem

# Forecast scores per sector, in display order
DEFAULT_SECTOR_SCORES = [
    ("Tech", 0.15),
    ("Healthcare", 0.10),
    ("Energy", 0.05),
    ("Utilities", 0.03),
    ("Financials", 0.09),
    ("Consumer Discretionary", 0.12),
    ("Industrials", 0.06),
    ("Materials", 0.04),
    ("Real Estate", 0.02),
    ("Communication", 0.13),
    ("Automotive", 0.07),
]


def default_sector_items() -> List[AllocationItem]:
    return [
        AllocationItem(label=sector, expected_return=performance)
        for sector, performance in DEFAULT_SECTOR_SCORES
    ]
