"""
Order item API routes
Every change here adjusts the parent order's total amount.
"""

import logging
from typing import List
from fastapi import APIRouter, Depends, Request, Response

from database.memory import get_order_store
from models.order_item import (
    OrderItem,
    OrderItemCreateRequest,
    OrderItemResponse,
    OrderItemUpdateRequest
)
from services.sales_store import OrderAggregateStore
from utils.error_handling import raise_for_service_error

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("", response_model=List[OrderItemResponse])
async def list_order_items(store: OrderAggregateStore = Depends(get_order_store)):
    """List all order items with their product"""
    return store.list_order_items().data

@router.get("/order/{order_id}", response_model=List[OrderItemResponse])
async def list_order_items_by_order(order_id: int, store: OrderAggregateStore = Depends(get_order_store)):
    """List the items of one order"""
    result = store.list_order_items_by_order(order_id)
    raise_for_service_error(result)
    return result.data

@router.get("/{item_id}", response_model=OrderItemResponse)
async def get_order_item(item_id: int, store: OrderAggregateStore = Depends(get_order_store)):
    """Get an order item with its product"""
    result = store.get_order_item(item_id)
    raise_for_service_error(result)
    return result.data

@router.post("", response_model=OrderItem, status_code=201)
async def create_order_item(
    request: OrderItemCreateRequest,
    http_request: Request,
    response: Response,
    store: OrderAggregateStore = Depends(get_order_store)
):
    """Add an item to an order at the product's current price"""
    result = store.create_order_item(
        order_id=request.order_id,
        product_id=request.product_id,
        quantity=request.quantity
    )
    raise_for_service_error(result)

    item = result.data
    response.headers["Location"] = str(http_request.url_for("get_order_item", item_id=item.id))
    return item

@router.put("/{item_id}", status_code=204)
async def update_order_item(
    item_id: int,
    request: OrderItemUpdateRequest,
    store: OrderAggregateStore = Depends(get_order_store)
):
    """Change an item's product or quantity"""
    result = store.update_order_item(
        item_id,
        body_id=request.id,
        product_id=request.product_id,
        quantity=request.quantity
    )
    raise_for_service_error(result)
    return Response(status_code=204)

@router.delete("/{item_id}", status_code=204)
async def delete_order_item(item_id: int, store: OrderAggregateStore = Depends(get_order_store)):
    """Remove an item from its order"""
    result = store.delete_order_item(item_id)
    raise_for_service_error(result)
    return Response(status_code=204)
