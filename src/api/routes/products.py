"""
Product catalog API routes
"""

import logging
from decimal import Decimal
from typing import List
from fastapi import APIRouter, Depends, Request, Response

from database.memory import get_order_store
from models.product import Product, ProductCreateRequest, ProductUpdateRequest
from services.sales_store import OrderAggregateStore
from utils.error_handling import raise_for_service_error

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("", response_model=List[Product])
async def list_products(store: OrderAggregateStore = Depends(get_order_store)):
    """List all products"""
    return store.list_products().data

@router.get("/price/{max_price}", response_model=List[Product])
async def list_products_by_price(max_price: Decimal, store: OrderAggregateStore = Depends(get_order_store)):
    """List products priced at or below max_price"""
    return store.list_products_by_max_price(max_price).data

@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: int, store: OrderAggregateStore = Depends(get_order_store)):
    """Get a product by ID"""
    result = store.get_product(product_id)
    raise_for_service_error(result)
    return result.data

@router.post("", response_model=Product, status_code=201)
async def create_product(
    request: ProductCreateRequest,
    http_request: Request,
    response: Response,
    store: OrderAggregateStore = Depends(get_order_store)
):
    """Create a product"""
    result = store.create_product(
        name=request.name,
        description=request.description,
        price=request.price
    )
    raise_for_service_error(result)

    product = result.data
    response.headers["Location"] = str(http_request.url_for("get_product", product_id=product.id))
    return product

@router.put("/{product_id}", status_code=204)
async def update_product(
    product_id: int,
    request: ProductUpdateRequest,
    store: OrderAggregateStore = Depends(get_order_store)
):
    """Replace a product's fields; prices already captured on order items do not change"""
    result = store.update_product(
        product_id,
        body_id=request.id,
        name=request.name,
        description=request.description,
        price=request.price
    )
    raise_for_service_error(result)
    return Response(status_code=204)

@router.delete("/{product_id}", status_code=204)
async def delete_product(product_id: int, store: OrderAggregateStore = Depends(get_order_store)):
    """Delete a product"""
    result = store.delete_product(product_id)
    raise_for_service_error(result)
    return Response(status_code=204)
