"""
Product-related Pydantic models
"""

from typing import Optional
from pydantic import BaseModel, Field

from models.common import Money


class Product(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: Money


class ProductCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    price: Money = Field(..., ge=0)


class ProductUpdateRequest(BaseModel):
    id: int
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    price: Money = Field(..., ge=0)
