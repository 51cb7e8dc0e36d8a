"""
Order API routes
Item-level changes go through the order items routes, which keep the order total in step.
"""

import logging
from typing import List
from fastapi import APIRouter, Depends, Request, Response

from database.memory import get_order_store
from models.order import (
    Order,
    OrderCreateRequest,
    OrderResponse,
    OrderUpdateRequest,
    OrderWithCustomerResponse
)
from services.sales_store import OrderAggregateStore
from utils.error_handling import raise_for_service_error

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("", response_model=List[OrderWithCustomerResponse])
async def list_orders(store: OrderAggregateStore = Depends(get_order_store)):
    """List all orders with their customer"""
    return store.list_orders().data

@router.get("/customer/{customer_id}", response_model=List[Order])
async def list_orders_by_customer(customer_id: int, store: OrderAggregateStore = Depends(get_order_store)):
    """List the orders placed by one customer"""
    result = store.list_orders_by_customer(customer_id)
    raise_for_service_error(result)
    return result.data

@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: int, store: OrderAggregateStore = Depends(get_order_store)):
    """Get an order with its customer and items"""
    result = store.get_order(order_id)
    raise_for_service_error(result)
    return result.data

@router.post("", response_model=OrderResponse, status_code=201)
async def create_order(
    request: OrderCreateRequest,
    http_request: Request,
    response: Response,
    store: OrderAggregateStore = Depends(get_order_store)
):
    """
    Create an order and its items.

    Unit prices are taken from the current product prices and the order
    date is set by the server. The order is rejected as a whole if the
    customer or any product does not exist.
    """
    result = store.create_order(request.customer_id, request.order_items)
    raise_for_service_error(result)

    order = result.data
    response.headers["Location"] = str(http_request.url_for("get_order", order_id=order.id))
    return order

@router.put("/{order_id}", status_code=204)
async def update_order(
    order_id: int,
    request: OrderUpdateRequest,
    store: OrderAggregateStore = Depends(get_order_store)
):
    """Overwrite customer, order date and total amount as sent by the client"""
    result = store.update_order(
        order_id,
        body_id=request.id,
        customer_id=request.customer_id,
        order_date=request.order_date,
        total_amount=request.total_amount
    )
    raise_for_service_error(result)
    return Response(status_code=204)

@router.delete("/{order_id}", status_code=204)
async def delete_order(order_id: int, store: OrderAggregateStore = Depends(get_order_store)):
    """Delete an order and all of its items"""
    result = store.delete_order(order_id)
    raise_for_service_error(result)
    return Response(status_code=204)
