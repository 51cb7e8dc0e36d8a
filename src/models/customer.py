"""
Customer-related Pydantic models
"""

from pydantic import BaseModel, EmailStr, Field


class Customer(BaseModel):
    id: int
    first_name: str
    last_name: str
    email: str


class CustomerCreateRequest(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr


class CustomerUpdateRequest(BaseModel):
    id: int
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
