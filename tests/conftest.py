"""
Pytest configuration and fixtures for the allocation API tests.
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from allocator.main import app
from allocator.services.optimizer import AllocationItem


@pytest_asyncio.fixture
async def client():
    """Create an async test client bound to the app."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as test_client:
        yield test_client


@pytest.fixture
def three_items():
    """Three candidates with distinct expected returns."""
    return [
        AllocationItem("A", 0.05),
        AllocationItem("B", 0.20),
        AllocationItem("C", 0.10),
    ]


@pytest.fixture
def items_with_loser():
    """Several positive candidates and one strongly negative one."""
    return [
        AllocationItem("A", 0.10),
        AllocationItem("B", 0.12),
        AllocationItem("C", 0.08),
        AllocationItem("D", -1.0),
    ]
