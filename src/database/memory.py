"""
Process-wide order store lifecycle
"""

import logging
from services.sales_store import OrderAggregateStore
from database.seed import seed_store
from config.settings import SEED_SAMPLE_DATA

logger = logging.getLogger(__name__)

# Global store instance
order_store = None

async def init_store():
    """Create the in-memory store and load the sample data"""
    global order_store
    order_store = OrderAggregateStore()

    if SEED_SAMPLE_DATA:
        seed_store(order_store)

    logger.info(f"Order store initialized: {order_store.counts()}")


async def close_store():
    """Drop the in-memory store"""
    global order_store
    if order_store:
        order_store.clear()
    order_store = None
    logger.info("Order store released")

def get_order_store() -> OrderAggregateStore:
    """Get the order store instance (FastAPI dependency)"""
    if order_store is None:
        raise RuntimeError("Order store has not been initialized")
    return order_store
