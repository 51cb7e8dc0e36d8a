"""
pytest configuration and fixtures for the Sales API test suite
Each test gets its own freshly seeded store; the API client talks to the app in-process.
"""

import httpx
import pytest
import pytest_asyncio

from app import app
from database.memory import get_order_store
from database.seed import seed_store
from services.sales_store import OrderAggregateStore


@pytest.fixture
def store() -> OrderAggregateStore:
    """Store loaded with the sample data"""
    return seed_store(OrderAggregateStore())


@pytest.fixture
def empty_store() -> OrderAggregateStore:
    return OrderAggregateStore()


@pytest_asyncio.fixture
async def api_client(store):
    """HTTP client bound to the app, with the store dependency pointed at the test store"""
    app.dependency_overrides[get_order_store] = lambda: store
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()
