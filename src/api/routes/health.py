"""
Health check API route
"""

from datetime import datetime, timezone
from fastapi import APIRouter, Depends

from database.memory import get_order_store
from services.sales_store import OrderAggregateStore

router = APIRouter()

@router.get("/")
async def health_check(store: OrderAggregateStore = Depends(get_order_store)):
    """Health check with the current collection sizes"""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "store": store.counts()
    }
