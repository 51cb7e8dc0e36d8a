"""
Customer API routes
"""

import logging
from typing import List
from fastapi import APIRouter, Depends, Request, Response

from database.memory import get_order_store
from models.customer import Customer, CustomerCreateRequest, CustomerUpdateRequest
from services.sales_store import OrderAggregateStore
from utils.error_handling import raise_for_service_error

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("", response_model=List[Customer])
async def list_customers(store: OrderAggregateStore = Depends(get_order_store)):
    """List all customers"""
    return store.list_customers().data

@router.get("/{customer_id}", response_model=Customer)
async def get_customer(customer_id: int, store: OrderAggregateStore = Depends(get_order_store)):
    """Get a customer by ID"""
    result = store.get_customer(customer_id)
    raise_for_service_error(result)
    return result.data

@router.post("", response_model=Customer, status_code=201)
async def create_customer(
    request: CustomerCreateRequest,
    http_request: Request,
    response: Response,
    store: OrderAggregateStore = Depends(get_order_store)
):
    """Create a customer; the id is assigned by the store"""
    result = store.create_customer(
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email
    )
    raise_for_service_error(result)

    customer = result.data
    response.headers["Location"] = str(http_request.url_for("get_customer", customer_id=customer.id))
    return customer

@router.put("/{customer_id}", status_code=204)
async def update_customer(
    customer_id: int,
    request: CustomerUpdateRequest,
    store: OrderAggregateStore = Depends(get_order_store)
):
    """Replace a customer's fields"""
    result = store.update_customer(
        customer_id,
        body_id=request.id,
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email
    )
    raise_for_service_error(result)
    return Response(status_code=204)

@router.delete("/{customer_id}", status_code=204)
async def delete_customer(customer_id: int, store: OrderAggregateStore = Depends(get_order_store)):
    """Delete a customer. Their orders are kept."""
    result = store.delete_customer(customer_id)
    raise_for_service_error(result)
    return Response(status_code=204)
