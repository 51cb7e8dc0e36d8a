"""
Order-related Pydantic models
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from models.common import Money
from models.customer import Customer
from models.order_item import OrderItem


class Order(BaseModel):
    id: int
    customer_id: int
    order_date: datetime
    total_amount: Money


class OrderLineRequest(BaseModel):
    """One requested line of a new order"""
    product_id: int
    quantity: int = Field(..., gt=0)


class OrderCreateRequest(BaseModel):
    customer_id: int
    order_items: List[OrderLineRequest] = Field(default_factory=list)


class OrderUpdateRequest(BaseModel):
    id: int
    customer_id: int
    order_date: datetime
    total_amount: Money


class OrderWithCustomerResponse(Order):
    customer: Optional[Customer] = None


class OrderResponse(OrderWithCustomerResponse):
    order_items: Optional[List[OrderItem]] = None
