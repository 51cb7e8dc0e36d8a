"""
Order item Pydantic models

Items carry a unit price snapshot taken from the product when the item is
created or moved to a different product.
"""

from typing import Optional
from pydantic import BaseModel, Field

from models.common import Money
from models.product import Product


class OrderItem(BaseModel):
    id: int
    order_id: int
    product_id: int
    quantity: int
    unit_price: Money

    @property
    def line_total(self):
        return self.unit_price * self.quantity


class OrderItemCreateRequest(BaseModel):
    order_id: int
    product_id: int
    quantity: int = Field(..., gt=0)


class OrderItemUpdateRequest(BaseModel):
    """Replacement values for an item; any unit_price sent by the client is ignored"""
    id: int
    product_id: int
    quantity: int = Field(..., gt=0)


class OrderItemResponse(OrderItem):
    product: Optional[Product] = None
