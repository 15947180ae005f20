"""
Sector Allocation API - a small FastAPI service that spreads capital across
candidate sectors by blending expected return against diversification.
"""

__version__ = "1.0.0"
